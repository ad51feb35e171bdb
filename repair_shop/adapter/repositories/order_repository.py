"""SQLAlchemy Order Repository Implementation

Implements service order persistence using SQLAlchemy async session.
"""

from typing import List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.domain.base import utc_now
from repair_shop.domain.order import Order, OrderStatus


class SqlAlchemyOrderRepository(OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, order: Order) -> Order:
        """
        Create a new order

        Args:
            order: Order entity to persist

        Returns:
            Created Order
        """
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def get_by_id(self, order_id: str, for_update: bool = False) -> Optional[Order]:
        """
        Retrieve order by ID

        Args:
            order_id: Order ID
            for_update: If True, locks the row (SELECT FOR UPDATE); ignored by SQLite

        Returns:
            Order if found, None otherwise
        """
        statement = select(Order).where(Order.id == order_id)
        if for_update:
            statement = statement.with_for_update()
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_all(
        self,
        status: Optional[OrderStatus] = None,
        client_id: Optional[str] = None,
        assigned_technician: Optional[str] = None,
    ) -> List[Order]:
        statement = select(Order)

        if status:
            statement = statement.where(Order.status == status)
        if client_id:
            statement = statement.where(Order.client_id == client_id)
        if assigned_technician:
            statement = statement.where(Order.assigned_technician == assigned_technician)

        statement = statement.order_by(Order.created_at.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def next_order_number(self) -> int:
        """
        Next sequential order number

        Returns:
            Highest order_number + 1, or 1 when there are no orders
        """
        statement = select(func.max(Order.order_number))
        result = await self.session.execute(statement)
        highest = result.scalar()
        return (highest or 0) + 1

    async def update(self, order: Order) -> Order:
        order.updated_at = utc_now()
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def delete(self, order: Order) -> None:
        await self.session.delete(order)
        await self.session.flush()
