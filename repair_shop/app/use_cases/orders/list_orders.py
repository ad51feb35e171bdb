"""ListOrders Use Case

Orders listing with per-order ledger, newest first.
"""

from collections import defaultdict
from typing import Optional
from repair_shop.libs.result import Result, Return
from repair_shop.app.repositories.client_repository import ClientRepository
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.client import Client
from repair_shop.domain.order import Order
from repair_shop.domain.order_ledger import calculate_ledger
from repair_shop.domain.text import normalize_text
from .dtos import (
    ListOrdersQueryDTO,
    ListOrdersResponseDTO,
    OrderLedgerDTO,
    OrderSearchField,
    OrderSummaryDTO,
    PaymentStateFilter,
)


def matches_search(order: Order, client: Optional[Client], text: str, field: OrderSearchField) -> bool:
    """
    Substring match of the search box against one field

    - order number: digits of the number
    - client name: accent and case insensitive
    - client phone: raw substring
    - client document: case insensitive
    """
    lowered = text.lower()
    if field == OrderSearchField.ORDER_NUMBER:
        return lowered in str(order.order_number)
    if client is None:
        return False
    if field == OrderSearchField.CLIENT_NAME:
        return normalize_text(text) in normalize_text(client.name or "")
    if field == OrderSearchField.CLIENT_PHONE:
        return lowered in (client.phone or "")
    return lowered in (client.document_number or "").lower()


class ListOrders:
    """
    Use Case: Orders listing

    Business Rules:
    1. Status, client and assigned technician filter at the repository
    2. Payment state uses the ledger: complete iff total > 0 and paid >= total
    3. Search text is trimmed; blank search matches every order
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: OrderItemRepository,
        payment_repo: PaymentRepository,
        client_repo: ClientRepository,
    ):
        self.order_repo = order_repo
        self.item_repo = item_repo
        self.payment_repo = payment_repo
        self.client_repo = client_repo

    async def execute(self, query: Optional[ListOrdersQueryDTO] = None) -> Result[ListOrdersResponseDTO]:
        query = query or ListOrdersQueryDTO()

        orders = await self.order_repo.list_all(
            status=query.status,
            client_id=query.client_id,
            assigned_technician=query.assigned_technician,
        )
        order_ids = [order.id for order in orders]

        items_by_order = defaultdict(list)
        for item in await self.item_repo.get_by_order_ids(order_ids):
            items_by_order[item.order_id].append(item)

        payments_by_order = defaultdict(list)
        for payment in await self.payment_repo.get_by_order_ids(order_ids):
            payments_by_order[payment.order_id].append(payment)

        clients = {
            client.id: client
            for client in await self.client_repo.get_by_ids(
                list({order.client_id for order in orders})
            )
        }

        search = (query.search or "").strip()
        summaries = []
        for order in orders:
            ledger = calculate_ledger(items_by_order[order.id], payments_by_order[order.id])
            client = clients.get(order.client_id)

            if query.payment_state == PaymentStateFilter.COMPLETE and not ledger.is_complete:
                continue
            if query.payment_state == PaymentStateFilter.INCOMPLETE and ledger.is_complete:
                continue
            if search and not matches_search(order, client, search, query.search_type):
                continue

            summaries.append(
                OrderSummaryDTO(
                    order_id=order.id,
                    order_number=order.order_number,
                    client_id=order.client_id,
                    client_name=client.name if client else "",
                    status=order.status.value,
                    status_label=order.status.label,
                    equipment_description=order.equipment_description,
                    assigned_technician=order.assigned_technician,
                    created_at=order.created_at,
                    ledger=OrderLedgerDTO.from_ledger(order, ledger),
                )
            )

        return Return.ok(ListOrdersResponseDTO(orders=summaries, count=len(summaries)))
