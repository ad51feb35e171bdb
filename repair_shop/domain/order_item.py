"""Order Item Domain Entity

Billable line of a service order.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, Integer, String
from repair_shop.domain.base import BaseModel, generate_uuid, utc_now


class OrderItem(BaseModel, table=True):
    """
    Order Item - line item of an order

    Domain Rules:
    - unit_price >= 0; 0 means "price to be determined"
    - quantity >= 1
    - subtotal = unit_price * quantity
    """

    __tablename__ = "order_items"
    __table_args__ = (
        CheckConstraint('unit_price >= 0', name='unit_price_non_negative'),
        CheckConstraint('quantity >= 1', name='quantity_positive'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
    )

    order_id: str = Field(
        sa_column=Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True),
        description="Foreign key to Order"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Item description (e.g., 'Cambio de pantalla')"
    )

    unit_price: int = Field(
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Price per unit in whole currency units (0 = to be defined)"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False, default=1),
        description="Quantity (>= 1)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    @property
    def subtotal(self) -> int:
        return self.unit_price * self.quantity
