from .base import BaseModel, generate_uuid
from .client import Client
from .order import Order, OrderStatus, ORDER_STATUS_LABELS
from .order_item import OrderItem
from .payment import Payment
from .order_ledger import OrderLedger, calculate_ledger
from .money import parse_currency, format_currency, format_price

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Client",
    "Order",
    "OrderStatus",
    "ORDER_STATUS_LABELS",
    "OrderItem",
    "Payment",
    "OrderLedger",
    "calculate_ledger",
    "parse_currency",
    "format_currency",
    "format_price",
]
