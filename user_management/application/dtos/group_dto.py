# user_management/application/dtos/group_dto.py

from typing import List
from pydantic import Field
from user_management.application.dtos.base_dto import CustomBaseModel


class GroupOutput(CustomBaseModel):
    """Group as embedded in a user."""
    id: int
    name: str
    description: str = ""


class PermissionOutput(CustomBaseModel):
    id: int
    name: str
    description: str = ""


class GroupDetailOutput(GroupOutput):
    """Group with the permissions it grants."""
    permissions: List[PermissionOutput] = Field(default_factory=list)
