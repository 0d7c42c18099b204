# user_management/application/use_cases/user_use_cases.py

"""
Service for user management.

This module implements the use cases for users: listing, lookup,
creation, update, deletion and counts. It is the only layer that
converts between persisted entities and transfer objects.
"""

import logging
from typing import Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from user_management.adapters.outbound.persistence.models import User, UserGroup
from user_management.adapters.outbound.persistence.repositories.user_repository import user_repository
from user_management.application.dtos.group_dto import GroupOutput
from user_management.application.dtos.user_dto import (
    UserCreate,
    UserUpdate,
    UserOutput,
    UserCountByGroupOutput,
)
from user_management.application.ports.inbound import IUserUseCase
from user_management.domain.exceptions import ResourceNotFoundException

# Configure logger
logger = logging.getLogger(__name__)


def _unique_ids(ids: Iterable[int]) -> List[int]:
    """Drop repeated IDs, keeping the first occurrence order."""
    return list(dict.fromkeys(ids))


def to_user_output(user: User) -> UserOutput:
    """
    Map a persisted user to its transfer object.

    Args:
        user: User with memberships and their groups loaded

    Returns:
        UserOutput
    """
    return UserOutput(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
        groups=[
            GroupOutput(id=group.id, name=group.name, description=group.description or "")
            for group in user.groups
        ],
    )


class AsyncUserService(IUserUseCase):
    """
    Service for user management.

    Wraps the user repository. Writes are followed by an explicit
    hydrate step, because the write path does not load the groups
    needed by the response.
    """

    def __init__(self, db_session: AsyncSession, repository=user_repository):
        """
        Initialize the service with a database session.

        Args:
            db_session: Active AsyncSession
            repository: User repository implementation
        """
        self.db = db_session
        self.repository = repository

    async def _hydrate(self, user_id: int) -> UserOutput:
        user = await self.repository.hydrate(self.db, user_id)
        if user is None:
            raise ResourceNotFoundException(
                detail=f"User with ID {user_id} not found.",
                resource_id=user_id
            )
        return to_user_output(user)

    async def list_users(self) -> List[UserOutput]:
        """
        List every user with its groups.

        Returns:
            List of users
        """
        users = await self.repository.get_all(self.db)
        return [to_user_output(user) for user in users]

    async def get_user(self, user_id: int) -> Optional[UserOutput]:
        """
        Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            The user, or None when it doesn't exist
        """
        user = await self.repository.get_by_id(self.db, user_id)
        if user is None:
            logger.info(f"User not found: ID {user_id}")
            return None
        return to_user_output(user)

    async def create_user(self, data: UserCreate) -> UserOutput:
        """
        Create a user with its group memberships.

        Args:
            data: Validated creation data

        Returns:
            Created user, groups populated

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
            DatabaseOperationException: If there's an error in the process
        """
        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            user_groups=[UserGroup(group_id=group_id) for group_id in _unique_ids(data.group_ids)],
        )

        created = await self.repository.create(self.db, obj_in=user)
        logger.info(f"User created: {created.email} (ID {created.id})")

        # Reload so the response carries the group names
        return await self._hydrate(created.id)

    async def update_user(self, user_id: int, data: UserUpdate) -> UserOutput:
        """
        Update a user. Groups are fully replaced, not merged.

        Args:
            user_id: User ID
            data: Validated update data

        Returns:
            Updated user, groups populated

        Raises:
            ResourceNotFoundException: If the user is not found
            ResourceAlreadyExistsException: If the new email is already in use
            DatabaseOperationException: If there's an error in the process
        """
        user = await self.repository.get_by_id(self.db, user_id)
        if user is None:
            logger.warning(f"Attempt to update non-existent user: {user_id}")
            raise ResourceNotFoundException(
                detail=f"User with ID {user_id} not found.",
                resource_id=user_id
            )

        user.first_name = data.first_name
        user.last_name = data.last_name
        user.email = data.email

        await self.repository.update(self.db, db_obj=user, group_ids=_unique_ids(data.group_ids))
        logger.info(f"User updated: ID {user_id}")

        return await self._hydrate(user_id)

    async def delete_user(self, user_id: int) -> bool:
        """
        Delete a user.

        Args:
            user_id: User ID

        Returns:
            True if the user existed and was deleted, False otherwise
        """
        deleted = await self.repository.delete(self.db, id=user_id)
        if deleted:
            logger.info(f"User deleted: ID {user_id}")
        return deleted

    async def count_users(self) -> int:
        return await self.repository.count(self.db)

    async def count_users_by_group(self) -> List[UserCountByGroupOutput]:
        rows = await self.repository.count_by_group(self.db)
        return [
            UserCountByGroupOutput(group_id=group_id, group_name=group_name, user_count=user_count)
            for group_id, group_name, user_count in rows
        ]
