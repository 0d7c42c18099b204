# user_management/adapters/outbound/persistence/repositories/group_repository.py

from user_management.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from user_management.adapters.outbound.persistence.models import Group
from user_management.application.ports.outbound import IGroupRepository


class AsyncGroupCRUD(AsyncCRUDBase[Group], IGroupRepository):
    """Read-only repository for groups; permissions load with each group."""


group_repository = AsyncGroupCRUD(Group)
