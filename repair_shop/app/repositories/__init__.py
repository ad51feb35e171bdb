from .client_repository import ClientRepository
from .order_repository import OrderRepository
from .order_item_repository import OrderItemRepository
from .payment_repository import PaymentRepository

__all__ = [
    "ClientRepository",
    "OrderRepository",
    "OrderItemRepository",
    "PaymentRepository",
]
