"""Order Domain Entity

A service order tracks one equipment repair job.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, DateTime, ForeignKey, String, Text
from repair_shop.domain.base import BaseModel, generate_uuid, utc_now


class OrderStatus(str, Enum):
    """Service order status types"""
    RECEIVED = "recibido"
    IN_PROGRESS = "en_proceso"
    READY = "listo"
    DELIVERED = "entregado"

    @property
    def label(self) -> str:
        return ORDER_STATUS_LABELS[self]


ORDER_STATUS_LABELS = {
    OrderStatus.RECEIVED: "Recibido",
    OrderStatus.IN_PROGRESS: "En Proceso",
    OrderStatus.READY: "Listo",
    OrderStatus.DELIVERED: "Entregado",
}


class Order(BaseModel, table=True):
    """
    Order - Equipment repair job

    Domain Rules:
    - order_number is unique and sequential (max + 1)
    - New orders start as recibido
    - Status may be set to any value directly (recibido -> en_proceso -> listo -> entregado
      is the usual path, but the shop may jump or step back)
    - Totals are never stored; see order_ledger.calculate_ledger
    """

    __tablename__ = "orders"
    __table_args__ = (
        Index('ix_orders_status', 'status'),
        Index('ix_orders_created_at', 'created_at'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Order identifier (uuid)"
    )

    order_number: int = Field(
        sa_column=Column(BigInteger, nullable=False, unique=True),
        description="Human-facing sequential order number"
    )

    client_id: str = Field(
        sa_column=Column(String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True),
        description="Foreign key to Client"
    )

    equipment_description: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Equipment received (brand, model, serial)"
    )

    visit_reason: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Problem reported by the client"
    )

    work_to_do: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Work agreed with the client"
    )

    observations: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Condition of the equipment on arrival"
    )

    status: OrderStatus = Field(
        default=OrderStatus.RECEIVED,
        description="Order status (recibido, en_proceso, listo, entregado)"
    )

    received_by: Optional[str] = Field(default=None, description="Staff member who received the equipment")

    assigned_technician: Optional[str] = Field(default=None, description="Technician assigned to the job")

    conditions_accepted: bool = Field(
        default=False,
        description="Client accepted the service conditions"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Order creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    def change_status(self, status: OrderStatus) -> None:
        self.status = status
        self.updated_at = utc_now()
