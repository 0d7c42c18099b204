# user_management/adapters/outbound/persistence/repositories/user_repository.py

"""
Repository for user operations.

This module implements the repository that performs database operations
related to users, implementing the IUserRepository interface.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, Tuple
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from user_management.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from user_management.adapters.outbound.persistence.models import User, UserGroup, Group
from user_management.application.ports.outbound import IUserRepository
from user_management.domain.exceptions import DatabaseOperationException


class AsyncUserCRUD(AsyncCRUDBase[User], IUserRepository):
    """
    Async implementation of the repository for the User entity.

    Group memberships are loaded together with the user (see the
    ``lazy`` settings on the model), so every read returns users with
    their groups attached.
    """

    async def get_by_id(self, db: AsyncSession, id: Any) -> Optional[User]:
        """
        Find a user with its groups.

        Args:
            db: Async database session
            id: User ID

        Returns:
            User found or None if it doesn't exist
        """
        return await self.get(db, id)

    async def hydrate(self, db: AsyncSession, id: Any) -> Optional[User]:
        """
        Re-read a user after a write.

        Memberships inserted by ``create``/``update`` only carry the group
        ID; this reload overwrites the objects already held by the session
        so every ``UserGroup.group`` is populated.

        Args:
            db: Async database session
            id: User ID

        Returns:
            Fully loaded User or None if it doesn't exist
        """
        try:
            query = (
                select(User)
                .where(User.id == id)
                .execution_options(populate_existing=True)
            )
            result = await db.execute(query)
            return result.unique().scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error reloading user {id}: {e}")
            raise DatabaseOperationException(
                detail="Error reloading user",
                original_error=e
            )

    async def create(self, db: AsyncSession, *, obj_in: User) -> User:
        """
        Insert a new user together with its group memberships.

        Args:
            db: Async database session
            obj_in: Transient User, memberships already attached

        Returns:
            The persisted User, with its generated ID

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
            DatabaseOperationException: In case of database error
        """
        obj_in.created_at = datetime.now(timezone.utc)
        db.add(obj_in)
        await self._commit(db, "creating")

        self.logger.info(f"User created with ID {obj_in.id}: {obj_in.email}")
        return obj_in

    async def update(self, db: AsyncSession, *, db_obj: User, group_ids: Sequence[int]) -> User:
        """
        Persist a user's scalar changes and replace its group memberships.

        Every existing membership is deleted and the new ones inserted,
        within the same transaction as the scalar update.

        Args:
            db: Async database session
            db_obj: Loaded User whose scalars were already overwritten
            group_ids: Complete new list of group IDs

        Returns:
            Updated User

        Raises:
            ResourceAlreadyExistsException: If the new email is already in use
            DatabaseOperationException: In case of database error
        """
        user_id = db_obj.id
        db_obj.updated_at = datetime.now(timezone.utc)

        # Old memberships must be deleted before rows with the same key are inserted
        db_obj.user_groups.clear()
        await self._flush(db, "updating")

        db_obj.user_groups.extend(UserGroup(group_id=group_id) for group_id in group_ids)
        await self._commit(db, "updating")

        self.logger.info(f"User {user_id} updated with groups {list(group_ids)}")
        return db_obj

    async def count_by_group(self, db: AsyncSession) -> List[Tuple[int, str, int]]:
        """
        Count users per group.

        Groups without members are included with a count of zero.

        Args:
            db: Async database session

        Returns:
            List of (group_id, group_name, user_count), ordered by group ID
        """
        try:
            query = (
                select(Group.id, Group.name, func.count(UserGroup.user_id))
                .outerjoin(UserGroup, UserGroup.group_id == Group.id)
                .group_by(Group.id, Group.name)
                .order_by(Group.id)
            )
            result = await db.execute(query)
            return [(group_id, name, count) for group_id, name, count in result.all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error counting users by group: {e}")
            raise DatabaseOperationException(
                detail="Error counting users by group",
                original_error=e
            )


# Singleton instance of the repository
user_repository = AsyncUserCRUD(User)
