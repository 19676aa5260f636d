"""
Base repository - generic async data access shared by the concrete repositories.
SQLAlchemy failures leave this layer as StorageError; cancellation passes through untouched.
"""

from typing import Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.exceptions import StorageError
from marketplace.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity and assign its id. Caller commits session."""
        try:
            self.session.add(entity)
            await self.session.flush()  # Get ID without committing
            await self.session.refresh(entity)
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to store {self.model.__name__}") from exc
        return entity
