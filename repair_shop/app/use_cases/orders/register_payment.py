"""RegisterPayment Use Case

Registers an abono (partial payment) against a service order.
"""

import logging
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.money import format_currency, parse_currency
from repair_shop.domain.order_ledger import calculate_ledger
from repair_shop.domain.payment import Payment
from .dtos import RegisterPaymentCommandDTO, PaymentResponseDTO, PaymentDTO, OrderLedgerDTO

logger = logging.getLogger(__name__)


class RegisterPayment:
    """
    Use Case: Register an abono against an order

    Business Rules:
    1. Amount is typed by the user and parsed with parse_currency
    2. Amount must be > 0 (unreadable input is rejected, not stored as 0)
    3. Amount must not exceed the current balance (saldo)
    4. Pessimistic locking: the order row is locked while the balance is
       checked so two abonos cannot both pass the check
    5. Early exits release the lock (rollback) before returning

    Flow:
    1. Parse and validate amount
    2. Get order with lock (SELECT FOR UPDATE)
    3. Recompute ledger from current items and payments
    4. Validate amount <= balance
    5. Create payment
    6. Commit transaction
    7. Return payment with updated ledger
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

    async def execute(self, command: RegisterPaymentCommandDTO) -> Result[PaymentResponseDTO]:
        """
        Execute payment registration

        Args:
            command: RegisterPaymentCommandDTO with order_id and typed amount

        Returns:
            Result[PaymentResponseDTO]: Success with payment and ledger or error
        """
        # Step 1: Parse amount
        amount = parse_currency(command.amount)
        if amount <= 0:
            return Return.err(
                Error(
                    code="INVALID_AMOUNT",
                    message=f"Invalid amount: '{command.amount}'",
                    reason="Amount must be a positive whole value",
                )
            )

        try:
            # Step 2: Get order with pessimistic lock
            order = await self.order_repo.get_by_id(command.order_id, for_update=True)
            if not order:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {command.order_id} not found",
                    )
                )

            # Step 3: Current ledger
            items = await self.item_repo.get_by_order_id(order.id)
            payments = await self.payment_repo.get_by_order_id(order.id)
            ledger = calculate_ledger(items, payments)

            # Step 4: Validate against balance
            if amount > ledger.balance:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="PAYMENT_EXCEEDS_BALANCE",
                        message=f"Payment cannot exceed the balance ({format_currency(ledger.outstanding)})",
                        reason=f"amount={amount}, balance={ledger.balance}",
                    )
                )

            # Step 5: Create payment
            payment = await self.payment_repo.create(Payment(order_id=order.id, amount=amount))

            # Step 6: Commit transaction
            await self.uow.commit()

            updated = calculate_ledger(items, payments + [payment])
            logger.info(
                f"Registered payment {payment.id} of {amount} on order #{order.order_number} "
                f"(balance {ledger.balance} -> {updated.balance})"
            )

            return Return.ok(
                PaymentResponseDTO(
                    payment=PaymentDTO.from_entity(payment),
                    ledger=OrderLedgerDTO.from_ledger(order, updated),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to register payment on order {command.order_id}: {e}")
            return Return.err(
                Error(
                    code="REGISTER_PAYMENT_FAILED",
                    message="Failed to register payment",
                    reason=str(e),
                )
            )
