"""Payment Domain Entity

Abono: partial payment against an order's balance.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, String
from repair_shop.domain.base import BaseModel, generate_uuid, utc_now


class Payment(BaseModel, table=True):
    """
    Payment - abono registered against an order

    Domain Rules:
    - amount > 0
    - Immutable once created; may be deleted individually
    - Must not exceed the order balance at registration (checked by RegisterPayment)
    """

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint('amount > 0', name='amount_positive'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
    )

    order_id: str = Field(
        sa_column=Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True),
        description="Foreign key to Order"
    )

    amount: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Amount paid in whole currency units"
    )

    paid_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Payment timestamp (immutable)"
    )
