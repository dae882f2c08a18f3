"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.schemas.auth import TokenClaims

# Bcrypt cost (rounds) used when the caller does not pass one explicitly.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


class TokenError(Exception):
    """Base class for token verification failures."""

    kind = "invalid"


class TokenMalformedError(TokenError):
    """Token cannot be parsed or lacks the required claims."""

    kind = "malformed"


class TokenSignatureError(TokenError):
    """Token signature does not match the server secret."""

    kind = "invalid_signature"


class TokenExpiredError(TokenError):
    """Token expiry is at or before the verification time."""

    kind = "expired"


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    subject_id: int,
    username: str,
    *,
    secret: str,
    algorithm: str,
    expire_minutes: int,
    now: datetime | None = None,
) -> str:
    """Create a JWT access token carrying sub (user id), username, exp and iat."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=expire_minutes)
    payload: dict[str, Any] = {
        "sub": str(subject_id),
        "username": username,
        "exp": expire,
        "iat": issued_at,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(
    token: str,
    *,
    secret: str,
    algorithm: str,
    now: datetime | None = None,
) -> TokenClaims:
    """
    Verify signature and expiry of a token and return its claims.

    Expiry is checked against `now` (defaults to the current UTC time) rather than
    PyJWT's own clock so callers can decide at a fixed instant.
    Raises TokenMalformedError, TokenSignatureError or TokenExpiredError.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={
                "require": ["sub", "exp"],
                "verify_exp": False,
                "verify_iat": False,
            },
        )
    except jwt.InvalidSignatureError as e:
        raise TokenSignatureError(str(e)) from e
    except jwt.PyJWTError as e:
        raise TokenMalformedError(str(e)) from e

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        raise TokenMalformedError("exp claim must be a number")
    check_at = now or datetime.now(UTC)
    if exp <= check_at.timestamp():
        raise TokenExpiredError("Signature has expired")

    try:
        subject_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise TokenMalformedError("sub claim must be a user id") from e
    username = payload.get("username")
    if not isinstance(username, str):
        raise TokenMalformedError("username claim must be a string")

    return TokenClaims(
        subject_id=subject_id,
        username=username,
        expires_at=datetime.fromtimestamp(exp, UTC),
    )
