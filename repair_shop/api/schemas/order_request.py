"""Request schemas for Orders API

Pydantic models for validating incoming HTTP requests.
Money is accepted as typed in the form ("$15.000", "15.000,50")
and parsed by the use cases.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from repair_shop.domain.order import OrderStatus


class OrderItemRequestSchema(BaseModel):
    description: str = Field(..., min_length=1, description="Item description")
    unit_price: str = Field(default="", description="Unit price as typed; empty means to be defined")
    quantity: int = Field(default=1, ge=1, description="Quantity (>= 1)")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Description must not be blank")
        return v


class CreateOrderRequestSchema(BaseModel):
    """
    Request schema for opening a service order

    Used for POST /orders endpoint.
    """

    client_id: str = Field(..., min_length=1, description="Client identifier")
    equipment_description: str = Field(..., min_length=1, description="Equipment received")
    visit_reason: str = Field(..., min_length=1, description="Problem reported by the client")
    work_to_do: str = Field(..., min_length=1, description="Work agreed with the client")
    observations: Optional[str] = Field(default=None, description="Condition on arrival")
    received_by: Optional[str] = Field(default=None)
    assigned_technician: Optional[str] = Field(default=None)
    conditions_accepted: bool = Field(default=False)
    items: List[OrderItemRequestSchema] = Field(default_factory=list)
    initial_payment: Optional[str] = Field(default=None, description="Optional first abono as typed")

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "6f1c2a9e-2b0e-4c1b-9a51-1d3f0e7b9c10",
                "equipment_description": "Portátil Lenovo IdeaPad 3",
                "visit_reason": "No enciende",
                "work_to_do": "Diagnóstico y cambio de cargador",
                "conditions_accepted": True,
                "items": [
                    {"description": "Diagnóstico", "unit_price": "20.000", "quantity": 1},
                    {"description": "Cargador", "unit_price": "", "quantity": 1}
                ],
                "initial_payment": "$10.000"
            }
        }


class RegisterPaymentRequestSchema(BaseModel):
    """
    Request schema for registering an abono

    Used for POST /orders/{order_id}/payments endpoint.
    """

    amount: str = Field(..., min_length=1, description="Amount as typed (e.g. '$15.000')")

    class Config:
        json_schema_extra = {"example": {"amount": "$15.000"}}


class ReplaceOrderItemsRequestSchema(BaseModel):
    items: List[OrderItemRequestSchema] = Field(default_factory=list)


class UpdateOrderStatusRequestSchema(BaseModel):
    status: OrderStatus = Field(..., description="recibido, en_proceso, listo or entregado")
