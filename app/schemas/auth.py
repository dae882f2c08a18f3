"""Request/response schemas for account endpoints and decoded token claims."""

from datetime import datetime

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Username and password for register and login. Presence is checked by the service."""

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class UpdateUsernameRequest(BaseModel):
    """New username for the authenticated user."""

    username: str | None = Field(default=None, description="New username")


class UpdatePasswordRequest(BaseModel):
    """New password for the authenticated user."""

    password: str | None = Field(default=None, description="New password")


class LoginResponse(BaseModel):
    """JWT returned after successful login."""

    message: str = Field(..., description="Human-readable result")
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")


class TokenClaims(BaseModel):
    """Identity decoded from a verified access token."""

    subject_id: int
    username: str
    expires_at: datetime
