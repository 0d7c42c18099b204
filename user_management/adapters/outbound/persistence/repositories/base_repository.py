# user_management/adapters/outbound/persistence/repositories/base_repository.py

from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.future import select
import logging

from user_management.adapters.outbound.persistence.database import Base
from user_management.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType]):
    """
    Generic async repository keyed by an integer ``id`` column.

    Reads return ORM objects with whatever the model loads eagerly.
    Writes commit their own transaction; store errors are rolled back
    and re-raised as domain exceptions.

    Attributes:
        model: SQLAlchemy model class
        logger: Logger named after the repository module and the model
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    def _failure(self, action: str, error: SQLAlchemyError) -> DatabaseOperationException:
        self.logger.error(f"Error {action} {self.model.__name__}: {error}")
        return DatabaseOperationException(detail=f"Error {action} {self.model.__name__}", original_error=error)

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Fetch one row by primary key.

        Returns:
            The entity, or None when no row has this ID
        """
        try:
            result = await db.execute(select(self.model).where(self.model.id == id))
            return result.unique().scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._failure("fetching", e)

    async def get_all(self, db: AsyncSession) -> List[ModelType]:
        """Every row, ordered by ID."""
        try:
            result = await db.execute(select(self.model).order_by(self.model.id))
            return list(result.unique().scalars().all())
        except SQLAlchemyError as e:
            raise self._failure("listing", e)

    async def exists(self, db: AsyncSession, id: Any) -> bool:
        try:
            query = select(self.model.id).where(self.model.id == id)
            result = await db.execute(select(query.exists()))
            return bool(result.scalar())
        except SQLAlchemyError as e:
            raise self._failure("checking", e)

    async def count(self, db: AsyncSession) -> int:
        try:
            result = await db.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()
        except SQLAlchemyError as e:
            raise self._failure("counting", e)

    async def delete(self, db: AsyncSession, *, id: Any) -> bool:
        """
        Remove a row by ID.

        Rows referencing it through cascading relationships go with it.

        Returns:
            True if a row was removed, False if none had this ID
        """
        obj = await self.get(db, id)
        if obj is None:
            self.logger.info(f"{self.model.__name__} {id} not found, nothing to remove")
            return False

        try:
            await db.delete(obj)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise self._failure("removing", e)

        self.logger.info(f"{self.model.__name__} {id} removed")
        return True

    async def _store_error(self, db: AsyncSession, action: str, error: SQLAlchemyError) -> Exception:
        """
        Roll back and translate a store error into a domain exception.

        Nothing is read from ORM objects here: the rollback expires them.
        """
        await db.rollback()
        if isinstance(error, IntegrityError):
            message = str(error.orig if error.orig is not None else error)
            if "unique" in message.lower() or "duplicate" in message.lower():
                self.logger.warning(f"Uniqueness violation {action} {self.model.__name__}: {message}")
                return ResourceAlreadyExistsException(
                    detail=f"{self.model.__name__} with these data already exists ({message})"
                )
        return self._failure(action, error)

    async def _flush(self, db: AsyncSession, action: str) -> None:
        """
        Send the pending changes without committing.

        Raises:
            ResourceAlreadyExistsException: On a uniqueness violation
            DatabaseOperationException: On any other store error
        """
        try:
            await db.flush()
        except SQLAlchemyError as e:
            raise await self._store_error(db, action, e)

    async def _commit(self, db: AsyncSession, action: str) -> None:
        """
        Commit the pending changes.

        Args:
            db: Async database session
            action: Verb used in log and error messages ("creating", "updating")

        Raises:
            ResourceAlreadyExistsException: On a uniqueness violation
            DatabaseOperationException: On any other store error
        """
        try:
            await db.commit()
        except SQLAlchemyError as e:
            raise await self._store_error(db, action, e)
