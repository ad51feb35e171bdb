"""Statistics API Routes"""

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from repair_shop.api.error import raise_for_error
from repair_shop.app.use_cases.statistics import (
    GetSalesStatistics,
    StatisticsPeriod,
    SalesStatisticsResponseDTO,
)
from repair_shop.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyOrderItemRepository,
    SqlAlchemyPaymentRepository,
)
from repair_shop.depends import get_session

router = APIRouter(prefix="/statistics", tags=["Statistics"])


@router.get("", response_model=SalesStatisticsResponseDTO)
async def get_statistics(
    period: StatisticsPeriod = Query(default=StatisticsPeriod.THIS_MONTH),
    session: AsyncSession = Depends(get_session),
):
    """
    Sales summary for the selected period plus the current state of all orders.

    **Query parameters:**
    - `period`: este_mes (default), mes_anterior, este_ano or todo
    """
    use_case = GetSalesStatistics(
        SqlAlchemyOrderRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyOrderItemRepository(session),
        SqlAlchemyPaymentRepository(session),
        top_clients_limit=ApplicationConfig.TOP_CLIENTS_LIMIT,
    )
    result = await use_case.execute(period=period)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
