"""ORM model for customer orders."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Numeric, String, func

from app.models.base import Base

ORDER_STATUS_PENDING = "Pending"


class Order(Base):
    """
    An order placed by one user. Line items are kept as a JSON document.

    total_amount is computed once at creation from the items and never updated.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    items = Column(JSON, nullable=False)
    total_amount = Column(Numeric(18, 4), nullable=False)
    status = Column(String(32), nullable=False, default=ORDER_STATUS_PENDING)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
