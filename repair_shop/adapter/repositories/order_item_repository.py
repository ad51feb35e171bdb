"""SQLAlchemy Order Item Repository Implementation"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.domain.order_item import OrderItem


class SqlAlchemyOrderItemRepository(OrderItemRepository):
    """
    SQLAlchemy implementation of OrderItemRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_order_id(self, order_id: str) -> List[OrderItem]:
        """
        Retrieve all line items for an order

        Args:
            order_id: Order ID

        Returns:
            List of OrderItem in creation order
        """
        statement = (
            select(OrderItem)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.created_at)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_order_ids(self, order_ids: List[str]) -> List[OrderItem]:
        if not order_ids:
            return []
        statement = select(OrderItem).where(OrderItem.order_id.in_(order_ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create(self, item: OrderItem) -> OrderItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete_by_order_id(self, order_id: str) -> int:
        statement = delete(OrderItem).where(OrderItem.order_id == order_id)
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount or 0
