"""ReplaceOrderItems Use Case

Saves the billing section of an order: the submitted list replaces
every existing line item.
"""

import logging
from typing import List
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.money import parse_currency
from repair_shop.domain.order_item import OrderItem
from repair_shop.domain.order_ledger import calculate_ledger
from .dtos import OrderItemInputDTO, ReplaceOrderItemsCommandDTO, OrderResponseDTO

logger = logging.getLogger(__name__)


def build_order_items(order_id: str, inputs: List[OrderItemInputDTO]) -> List[OrderItem]:
    """Unreadable or empty prices become 0 (to be defined)"""
    return [
        OrderItem(
            order_id=order_id,
            description=item.description.strip(),
            unit_price=parse_currency(item.unit_price),
            quantity=item.quantity,
        )
        for item in inputs
    ]


class ReplaceOrderItems:
    """
    Use Case: Replace the line items of an order

    Business Rules:
    1. Order must exist
    2. Previous items are deleted, submitted items inserted
    3. Prices are parsed from free text; invalid text means "Por definir"
    4. Payments are untouched; the balance may become negative if the
       total drops below what was already paid

    Flow:
    1. Retrieve order
    2. Delete existing items
    3. Insert new items
    4. Commit transaction
    5. Return order with recomputed ledger
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

    async def execute(self, command: ReplaceOrderItemsCommandDTO) -> Result[OrderResponseDTO]:
        try:
            order = await self.order_repo.get_by_id(command.order_id, for_update=True)
            if not order:
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {command.order_id} not found",
                    )
                )

            removed = await self.item_repo.delete_by_order_id(order.id)

            items = []
            for item in build_order_items(order.id, command.items):
                items.append(await self.item_repo.create(item))

            payments = await self.payment_repo.get_by_order_id(order.id)
            ledger = calculate_ledger(items, payments)

            await self.uow.commit()

            logger.info(
                f"Order #{order.order_number}: replaced {removed} items with {len(items)}, "
                f"total={ledger.total}"
            )

            return Return.ok(OrderResponseDTO.build(order, items, payments, ledger))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to replace items of order {command.order_id}: {e}")
            return Return.err(
                Error(
                    code="REPLACE_ITEMS_FAILED",
                    message="Failed to save order items",
                    reason=str(e),
                )
            )
