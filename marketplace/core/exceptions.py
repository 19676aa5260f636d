"""
Error taxonomy for the marketplace API.

Every domain error carries the HTTP status and a machine-readable code, so the
boundary that detects it only has to raise; `marketplace.main` turns it into a
JSON response. Storage errors travel unchanged up to that layer.
"""

import asyncio
import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Caller abandoned the request. Never caught or converted by this package.
Cancelled = asyncio.CancelledError

GENERIC_CREDENTIALS_MESSAGE = "invalid login or password"


class MarketplaceError(Exception):
    """Base exception. Subclasses fix code and status."""

    code = "MARKETPLACE_ERROR"
    status_code = 500

    def __init__(self, message: str, headers: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        self.headers = headers

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message, "code": self.code}


class ValidationError(MarketplaceError):
    """Malformed or out-of-range input. Client fixable."""

    code = "VALIDATION_ERROR"
    status_code = 400


class Unauthenticated(MarketplaceError):
    """Missing, malformed, expired or badly signed credential."""

    code = "UNAUTHENTICATED"
    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class InvalidClaim(Unauthenticated):
    """Token is genuine but its subject is not a non-negative integer."""

    code = "INVALID_CLAIM"

    def __init__(self, message: str = "Invalid user id in token"):
        super().__init__(message)


class DuplicateLogin(MarketplaceError):
    code = "DUPLICATE_LOGIN"
    status_code = 409

    def __init__(self, login: str):
        super().__init__("User with this login already exists")
        self.login = login


class ReservedLogin(MarketplaceError):
    code = "RESERVED_LOGIN"
    status_code = 400

    def __init__(self, login: str):
        super().__init__("Reserved login")
        self.login = login


class InvalidCredential(MarketplaceError):
    """Wrong password. Surfaced with the same message as an unknown login."""

    code = "INVALID_CREDENTIALS"
    status_code = 401

    def __init__(self):
        super().__init__(GENERIC_CREDENTIALS_MESSAGE, headers={"WWW-Authenticate": "Bearer"})


class UserNotFound(InvalidCredential):
    """No user with this login. Indistinguishable from a wrong password on the wire."""


class StorageError(MarketplaceError):
    """The persistent store failed. Not retried."""

    code = "STORAGE_ERROR"
    status_code = 500


class TokenIssueError(MarketplaceError):
    """Signing a token failed. Internal."""

    code = "TOKEN_ISSUE_ERROR"
    status_code = 500


async def marketplace_exception_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    """Convert a MarketplaceError to its JSON response."""
    body = exc.to_dict()
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        # Internals stay in the log, the client gets a generic message
        body["detail"] = "Internal server error"
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request-shape failures are client errors (400), reported with the first offending field."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Validation failed: {field}: {first.get('msg')}"
    else:
        message = "Validation failed"
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"detail": message, "code": ValidationError.code},
    )
