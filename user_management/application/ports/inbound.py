# user_management/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List, Optional

from user_management.application.dtos.user_dto import (
    UserCreate,
    UserOutput,
    UserUpdate,
    UserCountByGroupOutput,
)
from user_management.application.dtos.group_dto import GroupDetailOutput


class IUserUseCase(ABC):
    """Interface for user-related use cases."""

    @abstractmethod
    async def list_users(self) -> List[UserOutput]:
        """List every user."""
        pass

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[UserOutput]:
        """Get a user by ID, or None when absent."""
        pass

    @abstractmethod
    async def create_user(self, data: UserCreate) -> UserOutput:
        """Create a user."""
        pass

    @abstractmethod
    async def update_user(self, user_id: int, data: UserUpdate) -> UserOutput:
        """Update a user, replacing its groups."""
        pass

    @abstractmethod
    async def delete_user(self, user_id: int) -> bool:
        """Delete a user."""
        pass

    @abstractmethod
    async def count_users(self) -> int:
        """Total number of users."""
        pass

    @abstractmethod
    async def count_users_by_group(self) -> List[UserCountByGroupOutput]:
        """Number of users in each group."""
        pass


class IGroupUseCase(ABC):
    """Interface for group-related use cases."""

    @abstractmethod
    async def list_groups(self) -> List[GroupDetailOutput]:
        """List every group with its permissions."""
        pass
