"""GetSalesStatistics Use Case

Business summary: sales for a period, order status distribution,
payment completion, best clients and orders with money still owed.
"""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Optional, Tuple
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.repositories.client_repository import ClientRepository
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.base import as_utc, utc_now
from repair_shop.domain.money import format_currency
from repair_shop.domain.order import OrderStatus
from repair_shop.domain.order_ledger import calculate_ledger
from .dtos import (
    StatisticsPeriod,
    SalesSummaryDTO,
    StatusBreakdownDTO,
    PaymentStatusDTO,
    TopClientDTO,
    OutstandingOrderDTO,
    SalesStatisticsResponseDTO,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_CLIENTS = 10


def period_bounds(period: StatisticsPeriod, now: datetime) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Half-open [start, end) range for a period; None means unbounded.
    Bounds are UTC; a naive `now` is read as UTC.

    Examples (now = 2024-03-15):
        THIS_MONTH  -> [2024-03-01, None)
        LAST_MONTH  -> [2024-02-01, 2024-03-01)
        THIS_YEAR   -> [2024-01-01, None)
    """
    now = as_utc(now)
    month_start = datetime(now.year, now.month, 1, tzinfo=timezone.utc)
    if period == StatisticsPeriod.THIS_MONTH:
        return month_start, None
    if period == StatisticsPeriod.LAST_MONTH:
        if now.month == 1:
            return datetime(now.year - 1, 12, 1, tzinfo=timezone.utc), month_start
        return datetime(now.year, now.month - 1, 1, tzinfo=timezone.utc), month_start
    if period == StatisticsPeriod.THIS_YEAR:
        return datetime(now.year, 1, 1, tzinfo=timezone.utc), None
    return None, None


def _percentage(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 1)


class GetSalesStatistics:
    """
    Use Case: Sales statistics

    Business Rules:
    1. Period filter applies to the sales summary only (by order creation date)
    2. Status breakdown, payment state, top clients and outstanding orders
       reflect the current state of all orders
    3. An order is fully paid iff total > 0 and paid >= total
    4. Top clients are ranked by total invoiced, descending
    5. Outstanding orders are those with balance > 0, largest first
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        client_repo: ClientRepository,
        item_repo: OrderItemRepository,
        payment_repo: PaymentRepository,
        top_clients_limit: int = DEFAULT_TOP_CLIENTS,
    ):
        self.order_repo = order_repo
        self.client_repo = client_repo
        self.item_repo = item_repo
        self.payment_repo = payment_repo
        self.top_clients_limit = top_clients_limit

    async def execute(
        self,
        period: StatisticsPeriod = StatisticsPeriod.THIS_MONTH,
        now: Optional[datetime] = None,
    ) -> Result[SalesStatisticsResponseDTO]:
        """
        Execute statistics calculation

        Args:
            period: Period for the sales summary
            now: Reference time (defaults to current UTC time)

        Returns:
            Result[SalesStatisticsResponseDTO]
        """
        now = as_utc(now) if now else utc_now()

        try:
            orders = await self.order_repo.list_all()
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

            ledgers = {
                order.id: calculate_ledger(items_by_order[order.id], payments_by_order[order.id])
                for order in orders
            }

            # Sales summary (period only)
            start, end = period_bounds(period, now)
            in_period = [
                order for order in orders
                if (start is None or as_utc(order.created_at) >= start)
                and (end is None or as_utc(order.created_at) < end)
            ]
            invoiced = sum(ledgers[order.id].total for order in in_period)
            collected = sum(ledgers[order.id].paid for order in in_period)
            sales = SalesSummaryDTO(
                period=period,
                orders_count=len(in_period),
                invoiced=invoiced,
                collected=collected,
                invoiced_display=format_currency(invoiced),
                collected_display=format_currency(collected),
            )

            # Status breakdown (all orders)
            total_orders = len(orders)
            status_counts = defaultdict(int)
            for order in orders:
                status_counts[order.status] += 1
            statuses = [
                StatusBreakdownDTO(
                    status=status.value,
                    label=status.label,
                    count=status_counts[status],
                    percentage=_percentage(status_counts[status], total_orders),
                )
                for status in OrderStatus
            ]

            # Payment state (all orders)
            complete = sum(1 for ledger in ledgers.values() if ledger.is_complete)
            invoiced_total = sum(ledger.total for ledger in ledgers.values())
            collected_total = sum(ledger.paid for ledger in ledgers.values())
            payments = PaymentStatusDTO(
                complete=complete,
                incomplete=total_orders - complete,
                invoiced_total=invoiced_total,
                collected_total=collected_total,
                collection_percentage=_percentage(collected_total, invoiced_total),
            )

            # Top clients (all orders)
            per_client = {}
            for order in orders:
                client = clients.get(order.client_id)
                if client is None:
                    continue
                entry = per_client.setdefault(
                    client.id,
                    TopClientDTO(client_id=client.id, name=client.name, orders=0, total_invoiced=0, total_paid=0),
                )
                entry.orders += 1
                entry.total_invoiced += ledgers[order.id].total
                entry.total_paid += ledgers[order.id].paid
            top_clients = sorted(
                per_client.values(), key=lambda c: c.total_invoiced, reverse=True
            )[:self.top_clients_limit]

            # Orders still owing money (all orders)
            outstanding_orders = sorted(
                (
                    OutstandingOrderDTO(
                        order_id=order.id,
                        order_number=order.order_number,
                        client_id=order.client_id,
                        client_name=clients[order.client_id].name if order.client_id in clients else "",
                        status=order.status.value,
                        total=ledgers[order.id].total,
                        paid=ledgers[order.id].paid,
                        outstanding=ledgers[order.id].balance,
                        outstanding_display=format_currency(ledgers[order.id].balance),
                    )
                    for order in orders
                    if ledgers[order.id].balance > 0
                ),
                key=lambda o: o.outstanding,
                reverse=True,
            )

            return Return.ok(
                SalesStatisticsResponseDTO(
                    generated_at=now,
                    total_orders=total_orders,
                    sales=sales,
                    statuses=statuses,
                    payments=payments,
                    top_clients=top_clients,
                    outstanding_orders=outstanding_orders,
                )
            )

        except Exception as e:
            logger.error(f"Failed to compute statistics: {e}")
            return Return.err(
                Error(
                    code="STATISTICS_FAILED",
                    message="Failed to compute statistics",
                    reason=str(e),
                )
            )
