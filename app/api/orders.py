"""Order endpoints for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import TokenClaims
from app.schemas.common import MessageResponse
from app.schemas.orders import CreateOrderRequest, OrderResponse
from app.services import orders

router = APIRouter()


@router.post("/create-order", response_model=MessageResponse)
def create_order(
    body: CreateOrderRequest,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[TokenClaims, Depends(get_current_user)],
) -> MessageResponse:
    """Place an order for the caller. The created order is not echoed back."""
    orders.create_order(db, user.subject_id, body.items)
    return MessageResponse(message="Order placed successfully")


@router.get("/my-orders", response_model=list[OrderResponse])
def list_my_orders(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[TokenClaims, Depends(get_current_user)],
) -> list[OrderResponse]:
    """The caller's orders, newest first. An empty list is a normal result."""
    return [
        OrderResponse.model_validate(order)
        for order in orders.list_orders_for_owner(db, user.subject_id)
    ]
