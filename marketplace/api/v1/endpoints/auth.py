"""
Auth endpoints - registration and login.
"""

from fastapi import APIRouter, status

from marketplace.db.session import DbSession
from marketplace.db.repositories.user_repository import UserRepository
from marketplace.schemas.user import LoginRequest, TokenResponse, UserCreate, UserResponse
from marketplace.services.auth_service import AuthService

router = APIRouter()


def _get_auth_service(session: DbSession) -> AuthService:
    return AuthService(UserRepository(session))


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: UserCreate):
    """Create new user. Returns id and login, never the password."""
    return await _get_auth_service(session).register(data.login, data.password)


@router.post("/login", response_model=TokenResponse)
async def login(session: DbSession, data: LoginRequest):
    """Authenticate and return a bearer token."""
    token = await _get_auth_service(session).login(data.login, data.password)
    return TokenResponse(token=token)
