"""Statistics use cases"""
from .get_sales_statistics import GetSalesStatistics, period_bounds
from .dtos import (
    StatisticsPeriod,
    SalesSummaryDTO,
    StatusBreakdownDTO,
    PaymentStatusDTO,
    TopClientDTO,
    OutstandingOrderDTO,
    SalesStatisticsResponseDTO,
)

__all__ = [
    "GetSalesStatistics",
    "period_bounds",
    "StatisticsPeriod",
    "SalesSummaryDTO",
    "StatusBreakdownDTO",
    "PaymentStatusDTO",
    "TopClientDTO",
    "OutstandingOrderDTO",
    "SalesStatisticsResponseDTO",
]
