"""
Security: password hashing and identity tokens.
Hashing is one-way and salted (bcrypt); tokens are HS256 JWTs carrying {sub: int, exp}.
"""

from datetime import datetime, timezone, timedelta
from typing import Any

from jose import JWTError, jwt
from jose.exceptions import JOSEError
from passlib.context import CryptContext

from marketplace.config import get_settings
from marketplace.core.exceptions import InvalidClaim, TokenIssueError, Unauthenticated

settings = get_settings()
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

TOKEN_TTL = timedelta(minutes=settings.jwt_expire_minutes)


def hash_password(password: str) -> str:
    """One-way hash for storage. Never store plain passwords."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison for login."""
    return pwd_context.verify(plain, hashed)


def dummy_verify_password() -> None:
    """Burn the same time as a real verify, used when the login does not exist."""
    pwd_context.dummy_verify()


def create_access_token(
    subject_id: int,
    secret: str | None = None,
    *,
    expires_delta: timedelta | None = None,
    algorithm: str | None = None,
) -> str:
    """Issue a signed token for subject_id, valid for 24h unless expires_delta says otherwise."""
    expire = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else TOKEN_TTL)
    to_encode: dict[str, Any] = {"sub": subject_id, "exp": expire}
    try:
        return jwt.encode(
            to_encode,
            secret if secret is not None else settings.secret_key,
            algorithm=algorithm or settings.jwt_algorithm,
        )
    except JOSEError as exc:
        raise TokenIssueError("failed to generate token") from exc


def decode_access_token(token: str | None, secret: str | None = None) -> int:
    """
    Verify token and return its subject id.

    Raises Unauthenticated for a missing, malformed, badly signed or expired token
    and InvalidClaim when `sub` is not a non-negative integer.
    """
    if not token:
        raise Unauthenticated("Missing token")
    try:
        payload = jwt.decode(
            token,
            secret if secret is not None else settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            # sub is an integer here, jose only accepts strings
            options={"verify_sub": False, "require_exp": True},
        )
    except JWTError as exc:
        raise Unauthenticated(f"Invalid token: {exc}") from exc

    subject = payload.get("sub")
    if isinstance(subject, bool) or not isinstance(subject, int) or subject < 0:
        raise InvalidClaim()
    return subject
