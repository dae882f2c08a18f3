"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CredentialsRequest,
    LoginResponse,
    TokenClaims,
    UpdatePasswordRequest,
    UpdateUsernameRequest,
)
from app.schemas.common import HealthResponse, MessageResponse
from app.schemas.orders import CreateOrderRequest, OrderItem, OrderResponse

__all__ = [
    "CreateOrderRequest",
    "CredentialsRequest",
    "HealthResponse",
    "LoginResponse",
    "MessageResponse",
    "OrderItem",
    "OrderResponse",
    "TokenClaims",
    "UpdatePasswordRequest",
    "UpdateUsernameRequest",
]
