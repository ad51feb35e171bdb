"""GetOrder Use Case

Retrieves a service order with its items, payments and ledger.
"""

from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.order_ledger import calculate_ledger
from .dtos import OrderResponseDTO


class GetOrder:
    """Read-only: order detail screen"""

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
        payment_repo: PaymentRepository,
    ):
        self.order_repo = order_repo
        self.item_repo = item_repo
        self.payment_repo = payment_repo

    async def execute(self, order_id: str) -> Result[OrderResponseDTO]:
        order = await self.order_repo.get_by_id(order_id)
        if not order:
            return Return.err(
                Error(
                    code="ORDER_NOT_FOUND",
                    message=f"Order {order_id} not found",
                )
            )

        items = await self.item_repo.get_by_order_id(order.id)
        payments = await self.payment_repo.get_by_order_id(order.id)

        return Return.ok(
            OrderResponseDTO.build(order, items, payments, calculate_ledger(items, payments))
        )
