# user_management/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from user_management.adapters.outbound.persistence.models import User, Group


class IUserRepository(ABC):
    """User repository interface."""

    @abstractmethod
    async def get_all(self, db: AsyncSession) -> List[User]:
        """List every user with its groups."""
        pass

    @abstractmethod
    async def get_by_id(self, db: AsyncSession, id: Any) -> Optional[User]:
        """Get a user with its groups, or None."""
        pass

    @abstractmethod
    async def hydrate(self, db: AsyncSession, id: Any) -> Optional[User]:
        """Re-read a user after a write so its relationships are populated."""
        pass

    @abstractmethod
    async def create(self, db: AsyncSession, *, obj_in: User) -> User:
        """Insert a user together with its group memberships."""
        pass

    @abstractmethod
    async def update(self, db: AsyncSession, *, db_obj: User, group_ids: Sequence[int]) -> User:
        """Persist scalar changes and replace the group memberships."""
        pass

    @abstractmethod
    async def delete(self, db: AsyncSession, *, id: Any) -> bool:
        """Delete a user by ID, returning whether a row existed."""
        pass

    @abstractmethod
    async def count(self, db: AsyncSession) -> int:
        """Count every user."""
        pass

    @abstractmethod
    async def count_by_group(self, db: AsyncSession) -> List[Tuple[int, str, int]]:
        """Count users per group, including empty groups."""
        pass

    @abstractmethod
    async def exists(self, db: AsyncSession, id: Any) -> bool:
        """Check whether a user exists."""
        pass


class IGroupRepository(ABC):
    """Group repository interface."""

    @abstractmethod
    async def get_all(self, db: AsyncSession) -> List[Group]:
        """List every group with its permissions."""
        pass
