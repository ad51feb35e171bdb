"""Data Transfer Objects for Statistics Use Cases"""

from datetime import datetime
from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class StatisticsPeriod(str, Enum):
    """Period filter for the sales summary"""
    THIS_MONTH = "este_mes"
    LAST_MONTH = "mes_anterior"
    THIS_YEAR = "este_ano"
    ALL = "todo"


class SalesSummaryDTO(BaseModel):
    """Sales of orders created within the selected period"""

    period: StatisticsPeriod
    orders_count: int
    invoiced: int = Field(..., description="Sum of order totals")
    collected: int = Field(..., description="Sum of payments on those orders")
    invoiced_display: str
    collected_display: str


class StatusBreakdownDTO(BaseModel):
    status: str
    label: str
    count: int
    percentage: float = Field(..., description="Share of all orders, one decimal")


class PaymentStatusDTO(BaseModel):
    """Current payment state over all orders"""

    complete: int
    incomplete: int
    invoiced_total: int
    collected_total: int
    collection_percentage: float


class TopClientDTO(BaseModel):
    client_id: str
    name: str
    orders: int
    total_invoiced: int
    total_paid: int


class OutstandingOrderDTO(BaseModel):
    order_id: str
    order_number: int
    client_id: str
    client_name: str
    status: str
    total: int
    paid: int
    outstanding: int
    outstanding_display: str


class SalesStatisticsResponseDTO(BaseModel):
    """
    Response DTO for the statistics screen

    Only `sales` depends on the period; everything else covers all orders.
    """

    generated_at: datetime
    total_orders: int
    sales: SalesSummaryDTO
    statuses: List[StatusBreakdownDTO]
    payments: PaymentStatusDTO
    top_clients: List[TopClientDTO]
    outstanding_orders: List[OutstandingOrderDTO]
