"""
FastAPI dependencies - bearer-token authentication.
The caller's identity is returned as a typed Caller value and passed down explicitly.
"""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from marketplace.core.exceptions import Unauthenticated
from marketplace.core.security import decode_access_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Caller:
    """Who is making the request. Anonymous callers have user_id 0."""

    user_id: int


ANONYMOUS = Caller(user_id=0)


async def get_current_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Caller:
    """Mandatory auth: resolve the bearer token or reject with 401."""
    if not credentials:
        raise Unauthenticated("Missing token")
    return Caller(user_id=decode_access_token(credentials.credentials))


async def get_optional_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Caller:
    """
    Optional auth for read routes: a missing, malformed or expired token
    degrades to the anonymous caller instead of failing the request.
    """
    if not credentials:
        return ANONYMOUS
    try:
        return Caller(user_id=decode_access_token(credentials.credentials))
    except Unauthenticated as exc:
        logger.debug("Ignoring bearer token on optional-auth route: %s", exc.message)
        return ANONYMOUS


CurrentCaller = Annotated[Caller, Depends(get_current_caller)]
OptionalCaller = Annotated[Caller, Depends(get_optional_caller)]
