"""DeletePayment Use Case

Removes a single abono from an order.
"""

import logging
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.order_ledger import calculate_ledger
from .dtos import PaymentResponseDTO, PaymentDTO, OrderLedgerDTO

logger = logging.getLogger(__name__)


class DeletePayment:
    """
    Use Case: Delete an abono

    Business Rules:
    1. Order must exist
    2. Payment must exist and belong to the order
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

    async def execute(self, order_id: str, payment_id: str) -> Result[PaymentResponseDTO]:
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

            payment = await self.payment_repo.get_by_id(payment_id)
            if not payment or payment.order_id != order.id:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="PAYMENT_NOT_FOUND",
                        message=f"Payment {payment_id} not found for order {order_id}",
                    )
                )

            deleted = PaymentDTO.from_entity(payment)
            await self.payment_repo.delete(payment)

            items = await self.item_repo.get_by_order_id(order.id)
            payments = [p for p in await self.payment_repo.get_by_order_id(order.id) if p.id != payment_id]

            await self.uow.commit()

            ledger = calculate_ledger(items, payments)
            logger.info(
                f"Deleted payment {payment_id} of {deleted.amount} from order #{order.order_number} "
                f"(balance now {ledger.balance})"
            )

            return Return.ok(
                PaymentResponseDTO(
                    payment=deleted,
                    ledger=OrderLedgerDTO.from_ledger(order, ledger),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete payment {payment_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_PAYMENT_FAILED",
                    message="Failed to delete payment",
                    reason=str(e),
                )
            )
