"""CreateOrder Use Case

Registers a new service order when equipment is received, optionally
with its first line items and an initial abono.
"""

import logging
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.client_repository import ClientRepository
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.money import format_currency, is_rejected_input, parse_currency
from repair_shop.domain.order import Order, OrderStatus
from repair_shop.domain.order_ledger import calculate_ledger
from repair_shop.domain.payment import Payment
from .dtos import CreateOrderCommandDTO, OrderResponseDTO
from .replace_order_items import build_order_items

logger = logging.getLogger(__name__)


class CreateOrder:
    """
    Use Case: Create a service order

    Business Rules:
    1. Client must exist
    2. Order number is sequential (highest + 1)
    3. Order starts with status=recibido
    4. Initial abono, when given, must be a valid amount and must not
       exceed the total of the submitted items

    Flow:
    1. Validate client
    2. Validate initial abono against item total
    3. Create order with next order number
    4. Create items and initial payment
    5. Commit transaction
    6. Return order with ledger
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.order_repo = order_repo
        self.item_repo = item_repo
        self.payment_repo = payment_repo

    async def execute(self, command: CreateOrderCommandDTO) -> Result[OrderResponseDTO]:
        try:
            # Step 1: Validate client
            client = await self.client_repo.get_by_id(command.client_id)
            if not client:
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                    )
                )

            # Step 2: Validate initial abono
            if is_rejected_input(command.initial_payment):
                return Return.err(
                    Error(
                        code="INVALID_AMOUNT",
                        message=f"Invalid amount: '{command.initial_payment}'",
                        reason="Amount could not be parsed",
                    )
                )
            initial_amount = parse_currency(command.initial_payment)

            preview_items = build_order_items("", command.items)
            preview = calculate_ledger(preview_items, [])
            if initial_amount > preview.total:
                return Return.err(
                    Error(
                        code="PAYMENT_EXCEEDS_TOTAL",
                        message=f"Initial payment cannot exceed the total ({format_currency(preview.total)})",
                        reason=f"amount={initial_amount}, total={preview.total}",
                    )
                )

            # Step 3: Create order
            order_number = await self.order_repo.next_order_number()
            order = await self.order_repo.create(
                Order(
                    order_number=order_number,
                    client_id=client.id,
                    equipment_description=command.equipment_description,
                    visit_reason=command.visit_reason,
                    work_to_do=command.work_to_do,
                    observations=command.observations,
                    status=OrderStatus.RECEIVED,
                    received_by=command.received_by,
                    assigned_technician=command.assigned_technician,
                    conditions_accepted=command.conditions_accepted,
                )
            )

            # Step 4: Items and initial payment
            items = []
            for item in build_order_items(order.id, command.items):
                items.append(await self.item_repo.create(item))

            payments = []
            if initial_amount > 0:
                payments.append(
                    await self.payment_repo.create(Payment(order_id=order.id, amount=initial_amount))
                )

            # Step 5: Commit transaction
            await self.uow.commit()

            ledger = calculate_ledger(items, payments)
            logger.info(
                f"Created order #{order.order_number} for client {client.id} "
                f"(items={len(items)}, total={ledger.total}, paid={ledger.paid})"
            )

            return Return.ok(OrderResponseDTO.build(order, items, payments, ledger))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create order for client {command.client_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_ORDER_FAILED",
                    message="Failed to create order",
                    reason=str(e),
                )
            )
