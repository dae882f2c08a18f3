"""Account endpoints: register, login, update username and password."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.schemas.auth import (
    CredentialsRequest,
    LoginResponse,
    TokenClaims,
    UpdatePasswordRequest,
    UpdateUsernameRequest,
)
from app.schemas.common import MessageResponse
from app.services import accounts

router = APIRouter()


@router.post("/register", response_model=MessageResponse)
def register(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Create an account. Returns 409 if the username is taken."""
    accounts.register(db, body.username, body.password, rounds=settings.BCRYPT_ROUNDS)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = accounts.login(db, body.username, body.password, settings=settings)
    return LoginResponse(message="Login successful", token=token)


@router.post("/update-username", response_model=MessageResponse)
def update_username(
    body: UpdateUsernameRequest,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[TokenClaims, Depends(get_current_user)],
) -> MessageResponse:
    accounts.update_username(db, user.subject_id, body.username)
    return MessageResponse(message="Username updated successfully")


@router.post("/update-password", response_model=MessageResponse)
def update_password(
    body: UpdatePasswordRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    user: Annotated[TokenClaims, Depends(get_current_user)],
) -> MessageResponse:
    accounts.update_password(db, user.subject_id, body.password, rounds=settings.BCRYPT_ROUNDS)
    return MessageResponse(message="Password updated successfully")
