"""Account service: register, login, and profile updates for authenticated users."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, ConflictError, InvalidCredentialsError
from app.core.security import create_access_token, hash_password, verify_password
from app.models import User

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


def register(db: Session, username: str | None, password: str | None, *, rounds: int) -> User:
    """
    Create a user with a bcrypt hash of the password.

    There is no existence check before the insert: the unique index on
    users.username decides, and its violation becomes ConflictError.
    """
    if not username or not password:
        raise BadRequestError("Username and password required")

    user = User(username=username, password_hash=hash_password(password, rounds=rounds))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("User already exists") from e
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user


def login(
    db: Session,
    username: str | None,
    password: str | None,
    *,
    settings: "Settings",
    now: datetime | None = None,
) -> str:
    """
    Check credentials and return a signed access token.

    Unknown usernames and wrong passwords raise the same InvalidCredentialsError.
    """
    if not username or not password:
        raise BadRequestError("Username and password required")

    user = db.query(User).filter(User.username == username).first()
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    return create_access_token(
        user.id,
        user.username,
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
        now=now,
    )


def update_username(db: Session, user_id: int, new_username: str | None) -> None:
    """Rename the user. Outstanding tokens keep the old username claim until they expire."""
    if not new_username:
        raise BadRequestError("Username required")

    # The UPDATE is emitted immediately, so a taken name fails here rather than at commit.
    try:
        db.query(User).filter(User.id == user_id).update({User.username: new_username})
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("User already exists") from e
    logger.info("Username updated", extra={"user_id": user_id})


def update_password(db: Session, user_id: int, new_password: str | None, *, rounds: int) -> None:
    """Replace the user's password hash."""
    if not new_password:
        raise BadRequestError("Password required")

    password_hash = hash_password(new_password, rounds=rounds)
    db.query(User).filter(User.id == user_id).update({User.password_hash: password_hash})
    db.commit()
    logger.info("Password updated", extra={"user_id": user_id})
