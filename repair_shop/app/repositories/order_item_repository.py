"""Order Item Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from repair_shop.domain.order_item import OrderItem


class OrderItemRepository(ABC):
    """Repository interface for OrderItem persistence"""

    @abstractmethod
    async def get_by_order_id(self, order_id: str) -> List[OrderItem]:
        """
        Retrieve all line items for an order

        Args:
            order_id: Order ID

        Returns:
            List of OrderItem in creation order
        """
        pass

    @abstractmethod
    async def get_by_order_ids(self, order_ids: List[str]) -> List[OrderItem]:
        pass

    @abstractmethod
    async def create(self, item: OrderItem) -> OrderItem:
        pass

    @abstractmethod
    async def delete_by_order_id(self, order_id: str) -> int:
        """
        Delete all line items of an order

        Returns:
            Number of deleted items
        """
        pass
