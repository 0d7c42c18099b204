# user_management/adapters/outbound/persistence/repositories/__init__.py

"""
Repositories module.

Exports the repository classes and their singleton instances.
"""

from user_management.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from user_management.adapters.outbound.persistence.repositories.user_repository import (
    AsyncUserCRUD,
    user_repository,
)
from user_management.adapters.outbound.persistence.repositories.group_repository import (
    AsyncGroupCRUD,
    group_repository,
)

__all__ = [
    "AsyncCRUDBase",
    "AsyncUserCRUD",
    "AsyncGroupCRUD",
    "user_repository",
    "group_repository",
]
