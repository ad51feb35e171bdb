"""SQLAlchemy Payment Repository Implementation

Implements abono persistence using SQLAlchemy async session.
"""

from typing import List, Optional
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.domain.payment import Payment


class SqlAlchemyPaymentRepository(PaymentRepository):
    """
    SQLAlchemy implementation of PaymentRepository

    Payments are never updated; they are created or deleted.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, payment_id: str) -> Optional[Payment]:
        statement = select(Payment).where(Payment.id == payment_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_order_id(self, order_id: str) -> List[Payment]:
        """
        Retrieve all payments for an order, newest first

        Args:
            order_id: Order ID

        Returns:
            List of Payment
        """
        statement = (
            select(Payment)
            .where(Payment.order_id == order_id)
            .order_by(Payment.paid_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_order_ids(self, order_ids: List[str]) -> List[Payment]:
        if not order_ids:
            return []
        statement = select(Payment).where(Payment.order_id.in_(order_ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def delete(self, payment: Payment) -> None:
        await self.session.delete(payment)
        await self.session.flush()

    async def delete_by_order_id(self, order_id: str) -> int:
        statement = delete(Payment).where(Payment.order_id == order_id)
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount or 0
