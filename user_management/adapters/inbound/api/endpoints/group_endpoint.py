# user_management/adapters/inbound/api/endpoints/group_endpoint.py

from typing import List
from fastapi import APIRouter, Depends

from user_management.adapters.inbound.api.deps import get_group_service
from user_management.application.use_cases.group_use_cases import AsyncGroupService
from user_management.application.dtos.group_dto import GroupDetailOutput

router = APIRouter()


@router.get(
    "",
    response_model=List[GroupDetailOutput],
    summary="List Groups - List all groups",
    description="Returns every group with the permissions it grants.",
)
async def get_all_groups(service: AsyncGroupService = Depends(get_group_service)):
    return await service.list_groups()
