"""Data Transfer Objects for Order Use Cases

Pydantic models for command inputs and response outputs.
Money fields coming from forms are free text and parsed with
``parse_currency``; money fields going out are whole amounts plus a
display string.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from repair_shop.domain.money import format_currency, format_price
from repair_shop.domain.order import Order, OrderStatus
from repair_shop.domain.order_item import OrderItem
from repair_shop.domain.order_ledger import OrderLedger
from repair_shop.domain.payment import Payment


class PaymentStateFilter(str, Enum):
    """Orders listing filter by payment completion"""
    COMPLETE = "completo"
    INCOMPLETE = "incompleto"


class OrderSearchField(str, Enum):
    """Field matched by the orders listing search box"""
    ORDER_NUMBER = "numero_orden"
    CLIENT_NAME = "cliente_nombre"
    CLIENT_PHONE = "cliente_telefono"
    CLIENT_DOCUMENT = "cliente_documento"


class ListOrdersQueryDTO(BaseModel):
    """Filters for the orders listing; every filter is optional"""

    status: Optional[OrderStatus] = None
    client_id: Optional[str] = None
    payment_state: Optional[PaymentStateFilter] = None
    assigned_technician: Optional[str] = None
    search: Optional[str] = Field(default=None, description="Text matched against search_type")
    search_type: OrderSearchField = Field(
        default=OrderSearchField.ORDER_NUMBER,
        description="Which field the search text is matched against"
    )


class OrderItemInputDTO(BaseModel):
    """Line item as typed in the billing form"""

    description: str = Field(
        ...,
        min_length=1,
        description="Item description"
    )

    unit_price: str = Field(
        default="",
        description="Unit price as typed (e.g. '25.000'); empty or unreadable means to be defined"
    )

    quantity: int = Field(
        default=1,
        ge=1,
        description="Quantity (>= 1)"
    )


class CreateOrderCommandDTO(BaseModel):
    """
    Command DTO for creating a service order

    Used as input to CreateOrder use case.
    """

    client_id: str = Field(..., description="Owner of the equipment")
    equipment_description: str = Field(..., min_length=1, description="Equipment received")
    visit_reason: str = Field(..., min_length=1, description="Problem reported by the client")
    work_to_do: str = Field(..., min_length=1, description="Work agreed with the client")
    observations: Optional[str] = Field(default=None, description="Condition on arrival")
    received_by: Optional[str] = Field(default=None, description="Staff member receiving the equipment")
    assigned_technician: Optional[str] = Field(default=None, description="Technician assigned")
    conditions_accepted: bool = Field(default=False, description="Client accepted service conditions")
    items: List[OrderItemInputDTO] = Field(default_factory=list, description="Initial line items")
    initial_payment: Optional[str] = Field(
        default=None,
        description="Optional first abono as typed; must not exceed the order total"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "6f1c2a9e-2b0e-4c1b-9a51-1d3f0e7b9c10",
                "equipment_description": "Portátil Lenovo IdeaPad 3",
                "visit_reason": "No enciende",
                "work_to_do": "Diagnóstico y cambio de cargador",
                "observations": "Rayones en la tapa",
                "conditions_accepted": True,
                "items": [{"description": "Diagnóstico", "unit_price": "20.000", "quantity": 1}],
                "initial_payment": "10.000"
            }
        }


class RegisterPaymentCommandDTO(BaseModel):
    """
    Command DTO for registering an abono

    Used as input to RegisterPayment use case.
    """

    order_id: str = Field(..., description="Order receiving the payment")
    amount: str = Field(..., description="Amount as typed (e.g. '$15.000')")


class ReplaceOrderItemsCommandDTO(BaseModel):
    order_id: str
    items: List[OrderItemInputDTO] = Field(default_factory=list)


class UpdateOrderStatusCommandDTO(BaseModel):
    order_id: str
    status: OrderStatus


class OrderItemDTO(BaseModel):
    """Line item in responses"""

    id: str
    description: str
    unit_price: int
    quantity: int
    subtotal: int
    unit_price_display: str = Field(..., description="'$25.000' or 'Por definir'")

    @classmethod
    def from_entity(cls, item: OrderItem) -> "OrderItemDTO":
        return cls(
            id=item.id,
            description=item.description,
            unit_price=item.unit_price,
            quantity=item.quantity,
            subtotal=item.subtotal,
            unit_price_display=format_price(item.unit_price),
        )


class PaymentDTO(BaseModel):
    """Abono in responses"""

    id: str
    order_id: str
    amount: int
    amount_display: str
    paid_at: datetime

    @classmethod
    def from_entity(cls, payment: Payment) -> "PaymentDTO":
        return cls(
            id=payment.id,
            order_id=payment.order_id,
            amount=payment.amount,
            amount_display=format_currency(payment.amount),
            paid_at=payment.paid_at,
        )


class OrderLedgerDTO(BaseModel):
    """
    Response DTO for the order ledger

    balance is the raw signed difference; outstanding is clamped at 0.
    """

    order_id: str
    order_number: int
    total: int
    paid: int
    balance: int
    outstanding: int
    is_complete: bool
    has_undefined_pricing: bool
    total_display: str
    paid_display: str
    balance_display: str

    @classmethod
    def from_ledger(cls, order: Order, ledger: OrderLedger) -> "OrderLedgerDTO":
        return cls(
            order_id=order.id,
            order_number=order.order_number,
            total=ledger.total,
            paid=ledger.paid,
            balance=ledger.balance,
            outstanding=ledger.outstanding,
            is_complete=ledger.is_complete,
            has_undefined_pricing=ledger.has_undefined_pricing,
            total_display=ledger.display_total(),
            paid_display=format_currency(ledger.paid),
            balance_display=format_currency(ledger.outstanding),
        )

    class Config:
        json_schema_extra = {
            "example": {
                "order_id": "0d5e5f0e-6a43-4d0b-8d0a-4f0f4f1a2b3c",
                "order_number": 152,
                "total": 2000,
                "paid": 500,
                "balance": 1500,
                "outstanding": 1500,
                "is_complete": False,
                "has_undefined_pricing": True,
                "total_display": "$2.000+",
                "paid_display": "$500",
                "balance_display": "$1.500"
            }
        }


class OrderResponseDTO(BaseModel):
    """Full service order with items, payments and ledger"""

    order_id: str
    order_number: int
    client_id: str
    status: str
    status_label: str
    equipment_description: str
    visit_reason: str
    work_to_do: str
    observations: Optional[str] = None
    received_by: Optional[str] = None
    assigned_technician: Optional[str] = None
    conditions_accepted: bool
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemDTO]
    payments: List[PaymentDTO]
    ledger: OrderLedgerDTO

    @classmethod
    def build(
        cls,
        order: Order,
        items: List[OrderItem],
        payments: List[Payment],
        ledger: OrderLedger,
    ) -> "OrderResponseDTO":
        return cls(
            order_id=order.id,
            order_number=order.order_number,
            client_id=order.client_id,
            status=order.status.value,
            status_label=order.status.label,
            equipment_description=order.equipment_description,
            visit_reason=order.visit_reason,
            work_to_do=order.work_to_do,
            observations=order.observations,
            received_by=order.received_by,
            assigned_technician=order.assigned_technician,
            conditions_accepted=order.conditions_accepted,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[OrderItemDTO.from_entity(item) for item in items],
            payments=[PaymentDTO.from_entity(payment) for payment in payments],
            ledger=OrderLedgerDTO.from_ledger(order, ledger),
        )


class PaymentResponseDTO(BaseModel):
    """Registered or deleted abono together with the recomputed ledger"""

    payment: PaymentDTO
    ledger: OrderLedgerDTO


class DeleteOrderResponseDTO(BaseModel):
    order_id: str
    order_number: int
    deleted_items: int
    deleted_payments: int


class OrderPdfResponseDTO(BaseModel):
    """Response DTO for service order PDF generation"""

    order_id: str = Field(..., description="Order ID")
    order_number: int = Field(..., description="Order number printed on the document")
    pdf_base64: str = Field(..., description="PDF document, base64 encoded")
    generated_at: datetime = Field(..., description="Generation timestamp")


class OrderSummaryDTO(BaseModel):
    """Row of the orders listing"""

    order_id: str
    order_number: int
    client_id: str
    client_name: str = ""
    status: str
    status_label: str
    equipment_description: str
    assigned_technician: Optional[str] = None
    created_at: datetime
    ledger: OrderLedgerDTO


class ListOrdersResponseDTO(BaseModel):
    orders: List[OrderSummaryDTO]
    count: int


class PaymentActionResponseDTO(BaseModel):
    """
    Result of a quick payment action (settle balance / undo latest abono)

    payment is None when there was nothing to do (no balance left to
    settle, or no abono to remove).
    """

    payment: Optional[PaymentDTO] = None
    ledger: OrderLedgerDTO
