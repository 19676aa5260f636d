"""
User repository - user lookup and creation.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from marketplace.core.exceptions import DuplicateLogin, StorageError
from marketplace.db.models.user import User
from marketplace.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Unique-login violations surface as DuplicateLogin."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_login(self, login: str) -> User | None:
        """Find user by login - used for authentication."""
        try:
            result = await self.session.execute(select(User).where(User.login == login))
        except SQLAlchemyError as exc:
            raise StorageError("failed to load user") from exc
        return result.scalar_one_or_none()

    async def add(self, entity: User) -> User:
        try:
            self.session.add(entity)
            await self.session.flush()
        except IntegrityError as exc:
            # users.login is the only unique constraint on the table
            await self.session.rollback()
            raise DuplicateLogin(entity.login) from exc
        except SQLAlchemyError as exc:
            raise StorageError("failed to store user") from exc
        await self.session.refresh(entity)
        return entity
