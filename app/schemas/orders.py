"""Request/response schemas for order endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Exact in Python and in the store, a plain JSON number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class OrderItem(BaseModel):
    """One line of an order."""

    name: str = Field(..., description="Item name")
    price: Money = Field(..., description="Unit price")
    quantity: int = Field(..., description="Number of units")


class CreateOrderRequest(BaseModel):
    """Items to order. Presence and non-emptiness are checked by the service."""

    items: list[OrderItem] | None = Field(default=None, description="Order lines")


class OrderResponse(BaseModel):
    """A persisted order as returned by GET /my-orders (camelCase keys)."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    owner_id: int
    items: list[OrderItem]
    total_amount: Money
    status: str
    created_at: datetime
