from .client_repository import SqlAlchemyClientRepository
from .order_repository import SqlAlchemyOrderRepository
from .order_item_repository import SqlAlchemyOrderItemRepository
from .payment_repository import SqlAlchemyPaymentRepository

__all__ = [
    "SqlAlchemyClientRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyOrderItemRepository",
    "SqlAlchemyPaymentRepository",
]
