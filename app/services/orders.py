"""Order service: create orders and list a user's orders newest first."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.errors import BadRequestError
from app.models import Order
from app.models.order import ORDER_STATUS_PENDING
from app.schemas.orders import OrderItem

logger = logging.getLogger(__name__)


def order_total(items: Iterable[OrderItem]) -> Decimal:
    """Sum of price * quantity over all items, in exact decimal arithmetic."""
    return sum((item.price * item.quantity for item in items), Decimal("0"))


def create_order(
    db: Session,
    owner_id: int,
    items: list[OrderItem] | None,
    *,
    now: datetime | None = None,
) -> Order:
    """Persist a Pending order owned by owner_id. Raises BadRequestError when items is absent or empty."""
    if not items:
        raise BadRequestError("No items provided")

    order = Order(
        owner_id=owner_id,
        items=[item.model_dump(mode="json") for item in items],
        total_amount=order_total(items),
        status=ORDER_STATUS_PENDING,
        created_at=now or datetime.now(UTC),
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info(
        "Order created",
        extra={"order_id": order.id, "owner_id": owner_id, "item_count": len(items)},
    )
    return order


def list_orders_for_owner(db: Session, owner_id: int) -> list[Order]:
    """Return the owner's orders, newest first (ties broken by id, newest first)."""
    return (
        db.query(Order)
        .filter(Order.owner_id == owner_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )
