"""
Auth service - registration and login.
Composes the password hasher and token issuer over the user repository.
"""

import logging

from marketplace.config import get_settings
from marketplace.core.exceptions import (
    DuplicateLogin,
    InvalidCredential,
    ReservedLogin,
    UserNotFound,
    ValidationError,
)
from marketplace.core.security import (
    create_access_token,
    dummy_verify_password,
    hash_password,
    verify_password,
)
from marketplace.db.models.user import User
from marketplace.db.repositories.user_repository import UserRepository
from marketplace.schemas.user import UserResponse

logger = logging.getLogger(__name__)
settings = get_settings()

MIN_LOGIN_LENGTH = 4
MIN_PASSWORD_LENGTH = 6


class AuthService:
    """Handles account use cases. Store errors and cancellation propagate unchanged."""

    def __init__(self, user_repo: UserRepository, secret: str | None = None):
        self.user_repo = user_repo
        self.secret = secret if secret is not None else settings.secret_key
        self.reserved_logins = {name.lower() for name in settings.reserved_logins}

    async def register(self, login: str, password: str) -> UserResponse:
        """Create a user with a hashed password. Returns the new id and login."""
        if len(login) < MIN_LOGIN_LENGTH:
            raise ValidationError(f"login must be at least {MIN_LOGIN_LENGTH} characters")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
        if login.lower() in self.reserved_logins:
            raise ReservedLogin(login)

        if await self.user_repo.get_by_login(login) is not None:
            raise DuplicateLogin(login)

        user = User(login=login, password_hash=hash_password(password))
        user = await self.user_repo.add(user)
        logger.info("Registered user id=%s login=%s", user.id, user.login)
        return UserResponse(id=user.id, login=user.login)

    async def login(self, login: str, password: str) -> str:
        """Check credentials and issue a token. Both failure modes look the same to the client."""
        user = await self.user_repo.get_by_login(login)
        if user is None:
            dummy_verify_password()
            logger.info("Login rejected for login=%s", login)
            raise UserNotFound()
        if not verify_password(password, user.password_hash):
            logger.info("Login rejected for login=%s", login)
            raise InvalidCredential()
        return create_access_token(user.id, self.secret)
