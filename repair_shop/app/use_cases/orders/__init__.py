"""Service order use cases"""
from .create_order import CreateOrder
from .get_order import GetOrder
from .list_orders import ListOrders
from .get_order_ledger import GetOrderLedger
from .register_payment import RegisterPayment
from .delete_payment import DeletePayment
from .replace_order_items import ReplaceOrderItems
from .update_order_status import UpdateOrderStatus
from .delete_order import DeleteOrder
from .generate_order_pdf import GenerateOrderPdf
from .settle_order_balance import SettleOrderBalance
from .remove_latest_payment import RemoveLatestPayment
from .dtos import (
    OrderItemInputDTO,
    CreateOrderCommandDTO,
    RegisterPaymentCommandDTO,
    ReplaceOrderItemsCommandDTO,
    UpdateOrderStatusCommandDTO,
    ListOrdersQueryDTO,
    PaymentStateFilter,
    OrderSearchField,
    OrderItemDTO,
    PaymentDTO,
    OrderLedgerDTO,
    OrderResponseDTO,
    OrderSummaryDTO,
    ListOrdersResponseDTO,
    PaymentResponseDTO,
    DeleteOrderResponseDTO,
    OrderPdfResponseDTO,
    PaymentActionResponseDTO,
)

__all__ = [
    "CreateOrder",
    "GetOrder",
    "ListOrders",
    "GetOrderLedger",
    "RegisterPayment",
    "DeletePayment",
    "ReplaceOrderItems",
    "UpdateOrderStatus",
    "DeleteOrder",
    "GenerateOrderPdf",
    "SettleOrderBalance",
    "RemoveLatestPayment",
    "OrderItemInputDTO",
    "CreateOrderCommandDTO",
    "RegisterPaymentCommandDTO",
    "ReplaceOrderItemsCommandDTO",
    "UpdateOrderStatusCommandDTO",
    "ListOrdersQueryDTO",
    "PaymentStateFilter",
    "OrderSearchField",
    "OrderItemDTO",
    "PaymentDTO",
    "OrderLedgerDTO",
    "OrderResponseDTO",
    "OrderSummaryDTO",
    "ListOrdersResponseDTO",
    "PaymentResponseDTO",
    "DeleteOrderResponseDTO",
    "OrderPdfResponseDTO",
    "PaymentActionResponseDTO",
]
