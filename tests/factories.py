"""Entity builders shared by unit and integration tests"""

from datetime import datetime, timezone
from typing import Optional

from repair_shop.domain.client import Client
from repair_shop.domain.order import Order, OrderStatus
from repair_shop.domain.order_item import OrderItem
from repair_shop.domain.payment import Payment


def make_item(
    unit_price: int,
    quantity: int = 1,
    order_id: str = "order-1",
    description: str = "Servicio",
) -> OrderItem:
    return OrderItem(
        order_id=order_id,
        description=description,
        unit_price=unit_price,
        quantity=quantity,
    )


def make_payment(amount: int, order_id: str = "order-1", payment_id: Optional[str] = None) -> Payment:
    payment = Payment(order_id=order_id, amount=amount, paid_at=datetime(2024, 3, 11, 12, 0, tzinfo=timezone.utc))
    if payment_id:
        payment.id = payment_id
    return payment


def make_order(
    order_id: str = "order-1",
    order_number: int = 1,
    client_id: str = "client-1",
    status: OrderStatus = OrderStatus.RECEIVED,
    created_at: Optional[datetime] = None,
) -> Order:
    created_at = created_at or datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc)
    return Order(
        id=order_id,
        order_number=order_number,
        client_id=client_id,
        equipment_description="Portátil",
        visit_reason="No enciende",
        work_to_do="Diagnóstico",
        status=status,
        created_at=created_at,
        updated_at=created_at,
    )


def make_client(client_id: str = "client-1", name: str = "José Martínez", phone: str = "3001234567", document_number: Optional[str] = None) -> Client:
    return Client(id=client_id, name=name, phone=phone, document_number=document_number)
