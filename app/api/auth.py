"""Auth gate: bearer-token dependency that protects account and order routes."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends, Header

from app.core.config import Settings, get_settings
from app.core.errors import ForbiddenError, UnauthenticatedError
from app.core.security import TokenError, decode_access_token
from app.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = "Access denied. No token."
INVALID_TOKEN_MESSAGE = "Invalid token"


def authenticate(
    authorization: str | None,
    *,
    secret: str,
    algorithm: str,
    now: datetime,
) -> TokenClaims:
    """
    Decide whether an Authorization header value identifies a user.

    No header -> UnauthenticatedError (401). A header that is not
    "Bearer <token>" or whose token fails verification -> ForbiddenError (403).
    """
    if not authorization:
        raise UnauthenticatedError(NO_TOKEN_MESSAGE)

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        logger.debug("Rejected Authorization header without a bearer token")
        raise ForbiddenError(INVALID_TOKEN_MESSAGE)

    try:
        return decode_access_token(token, secret=secret, algorithm=algorithm, now=now)
    except TokenError as e:
        logger.debug("Rejected bearer token", extra={"reason": e.kind})
        raise ForbiddenError(INVALID_TOKEN_MESSAGE) from e


def get_current_user(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Dependency: require a valid bearer token and return its claims."""
    return authenticate(
        authorization,
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        now=datetime.now(UTC),
    )
