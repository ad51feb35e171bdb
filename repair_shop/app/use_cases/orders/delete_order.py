"""DeleteOrder Use Case

Deletes a service order together with its payments and items.
"""

import logging
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from .dtos import DeleteOrderResponseDTO

logger = logging.getLogger(__name__)


class DeleteOrder:
    """
    Use Case: Delete an order

    Flow:
    1. Retrieve order
    2. Delete payments, then items, then the order
    3. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.order_repo = order_repo
        self.item_repo = item_repo
        self.payment_repo = payment_repo

    async def execute(self, order_id: str) -> Result[DeleteOrderResponseDTO]:
        try:
            order = await self.order_repo.get_by_id(order_id, for_update=True)
            if not order:
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {order_id} not found",
                    )
                )

            deleted_payments = await self.payment_repo.delete_by_order_id(order.id)
            deleted_items = await self.item_repo.delete_by_order_id(order.id)
            order_number = order.order_number
            await self.order_repo.delete(order)

            await self.uow.commit()

            logger.warning(
                f"Deleted order #{order_number} "
                f"({deleted_items} items, {deleted_payments} payments)"
            )

            return Return.ok(
                DeleteOrderResponseDTO(
                    order_id=order_id,
                    order_number=order_number,
                    deleted_items=deleted_items,
                    deleted_payments=deleted_payments,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete order {order_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_ORDER_FAILED",
                    message="Failed to delete order",
                    reason=str(e),
                )
            )
