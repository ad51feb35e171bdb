"""SettleOrderBalance Use Case

Quick action from the orders listing: mark an order as fully paid by
registering one abono for the whole remaining balance.
"""

import logging
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.order_ledger import calculate_ledger
from repair_shop.domain.payment import Payment
from .dtos import PaymentActionResponseDTO, PaymentDTO, OrderLedgerDTO

logger = logging.getLogger(__name__)


class SettleOrderBalance:
    """
    Use Case: Mark an order as fully paid

    Business Rules:
    1. The order row is locked while the balance is read
    2. Balance > 0: one abono equal to the balance is registered
    3. Balance <= 0 (already paid, or no priced items): nothing changes

    Flow:
    1. Get order with lock (SELECT FOR UPDATE)
    2. Recompute ledger
    3. Create payment for the balance, if any
    4. Commit transaction
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
            # Step 1: Get order with pessimistic lock
            order = await self.order_repo.get_by_id(order_id, for_update=True)
            if not order:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {order_id} not found",
                    )
                )

            # Step 2: Current ledger
            items = await self.item_repo.get_by_order_id(order.id)
            payments = await self.payment_repo.get_by_order_id(order.id)
            ledger = calculate_ledger(items, payments)

            if ledger.balance <= 0:
                await self.uow.rollback()
                return Return.ok(
                    PaymentActionResponseDTO(ledger=OrderLedgerDTO.from_ledger(order, ledger))
                )

            # Step 3: Pay the whole balance
            payment = await self.payment_repo.create(Payment(order_id=order.id, amount=ledger.balance))

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(f"Settled order #{order.order_number} with payment {payment.id} of {ledger.balance}")

            return Return.ok(
                PaymentActionResponseDTO(
                    payment=PaymentDTO.from_entity(payment),
                    ledger=OrderLedgerDTO.from_ledger(order, calculate_ledger(items, payments + [payment])),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to settle order {order_id}: {e}")
            return Return.err(
                Error(
                    code="SETTLE_ORDER_FAILED",
                    message="Failed to settle order balance",
                    reason=str(e),
                )
            )
