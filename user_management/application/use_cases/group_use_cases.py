# user_management/application/use_cases/group_use_cases.py

import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from user_management.adapters.outbound.persistence.repositories.group_repository import group_repository
from user_management.application.dtos.group_dto import GroupDetailOutput
from user_management.application.ports.inbound import IGroupUseCase

logger = logging.getLogger(__name__)


class AsyncGroupService(IGroupUseCase):
    """Read access to the static groups and their permissions."""

    def __init__(self, db_session: AsyncSession, repository=group_repository):
        self.db = db_session
        self.repository = repository

    async def list_groups(self) -> List[GroupDetailOutput]:
        groups = await self.repository.get_all(self.db)
        return [GroupDetailOutput.model_validate(group) for group in groups]
