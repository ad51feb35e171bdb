"""Client Domain Entity

Customer of the shop; owner of one or more service orders.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String
from repair_shop.domain.base import BaseModel, generate_uuid, utc_now


class Client(BaseModel, table=True):
    """
    Client - Shop customer

    Domain Rules:
    - name and phone are required
    - document type/number are optional (walk-in customers)
    """

    __tablename__ = "clients"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Client identifier (uuid)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False, index=True),
        description="Full name"
    )

    document_type: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="Identity document type (e.g., CC, NIT, CE)"
    )

    document_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Identity document number"
    )

    phone: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Contact phone"
    )

    email: Optional[str] = Field(default=None, description="Contact email")

    address: Optional[str] = Field(default=None, description="Postal address")

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Registration timestamp"
    )
