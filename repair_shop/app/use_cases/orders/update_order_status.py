"""UpdateOrderStatus Use Case

Moves a service order to another status.
"""

import logging
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.order_ledger import calculate_ledger
from .dtos import UpdateOrderStatusCommandDTO, OrderResponseDTO

logger = logging.getLogger(__name__)


class UpdateOrderStatus:
    """
    Use Case: Change order status

    Any of the four statuses may be set; setting the current status is a
    no-op that still succeeds. updated_at is bumped on change.
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

    async def execute(self, command: UpdateOrderStatusCommandDTO) -> Result[OrderResponseDTO]:
        try:
            order = await self.order_repo.get_by_id(command.order_id, for_update=True)
            if not order:
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {command.order_id} not found",
                    )
                )

            previous = order.status
            if previous != command.status:
                order.change_status(command.status)
                order = await self.order_repo.update(order)
                await self.uow.commit()
                logger.info(
                    f"Order #{order.order_number} status {previous.value} -> {command.status.value}"
                )

            items = await self.item_repo.get_by_order_id(order.id)
            payments = await self.payment_repo.get_by_order_id(order.id)

            return Return.ok(
                OrderResponseDTO.build(order, items, payments, calculate_ledger(items, payments))
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update status of order {command.order_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_STATUS_FAILED",
                    message="Failed to update order status",
                    reason=str(e),
                )
            )
