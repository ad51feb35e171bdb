"""RemoveLatestPayment Use Case

Quick action from the orders listing: mark an order as not fully paid
by removing its most recent abono.
"""

import logging
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.order_ledger import calculate_ledger
from .dtos import PaymentActionResponseDTO, PaymentDTO, OrderLedgerDTO

logger = logging.getLogger(__name__)


class RemoveLatestPayment:
    """
    Use Case: Undo the latest abono of an order

    Business Rules:
    1. Latest means the newest paid_at
    2. An order without abonos is left unchanged
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

    async def execute(self, order_id: str) -> Result[PaymentActionResponseDTO]:
        try:
            order = await self.order_repo.get_by_id(order_id, for_update=True)
            if not order:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {order_id} not found",
                    )
                )

            items = await self.item_repo.get_by_order_id(order.id)
            # newest first
            payments = await self.payment_repo.get_by_order_id(order.id)

            if not payments:
                await self.uow.rollback()
                return Return.ok(
                    PaymentActionResponseDTO(
                        ledger=OrderLedgerDTO.from_ledger(order, calculate_ledger(items, []))
                    )
                )

            latest = payments[0]
            removed = PaymentDTO.from_entity(latest)
            await self.payment_repo.delete(latest)
            await self.uow.commit()

            ledger = calculate_ledger(items, payments[1:])
            logger.info(
                f"Removed latest payment {removed.id} of {removed.amount} from order #{order.order_number} "
                f"(balance now {ledger.balance})"
            )

            return Return.ok(
                PaymentActionResponseDTO(
                    payment=removed,
                    ledger=OrderLedgerDTO.from_ledger(order, ledger),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to remove latest payment of order {order_id}: {e}")
            return Return.err(
                Error(
                    code="REMOVE_PAYMENT_FAILED",
                    message="Failed to remove latest payment",
                    reason=str(e),
                )
            )
