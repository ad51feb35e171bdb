"""Order Repository Interface

Defines the contract for service order persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from repair_shop.domain.order import Order, OrderStatus


class OrderRepository(ABC):
    """
    Repository interface for Order persistence

    Provides access to service orders for ledger, payment and
    statistics operations.
    """

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """
        Create a new order

        Args:
            order: Order entity to persist

        Returns:
            Created Order
        """
        pass

    @abstractmethod
    async def get_by_id(self, order_id: str, for_update: bool = False) -> Optional[Order]:
        """
        Retrieve order by ID

        Args:
            order_id: Order ID
            for_update: Lock the row (SELECT FOR UPDATE) for the current transaction

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(
        self,
        status: Optional[OrderStatus] = None,
        client_id: Optional[str] = None,
        assigned_technician: Optional[str] = None,
    ) -> List[Order]:
        """
        List orders, newest first

        Args:
            status: Optional filter by status
            client_id: Optional filter by client
            assigned_technician: Optional filter by assigned technician (exact match)
        """
        pass

    @abstractmethod
    async def next_order_number(self) -> int:
        """Next sequential order number (highest existing + 1, or 1)"""
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def delete(self, order: Order) -> None:
        pass
