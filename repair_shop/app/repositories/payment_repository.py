"""Payment Repository Interface

Defines the contract for abono persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from repair_shop.domain.payment import Payment


class PaymentRepository(ABC):
    """Repository interface for Payment persistence"""

    @abstractmethod
    async def get_by_id(self, payment_id: str) -> Optional[Payment]:
        pass

    @abstractmethod
    async def get_by_order_id(self, order_id: str) -> List[Payment]:
        """
        Retrieve all payments for an order, newest first

        Args:
            order_id: Order ID

        Returns:
            List of Payment
        """
        pass

    @abstractmethod
    async def get_by_order_ids(self, order_ids: List[str]) -> List[Payment]:
        pass

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def delete(self, payment: Payment) -> None:
        pass

    @abstractmethod
    async def delete_by_order_id(self, order_id: str) -> int:
        pass
