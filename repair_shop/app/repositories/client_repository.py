"""Client Repository Interface

Defines the contract for client persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from repair_shop.domain.client import Client


class ClientRepository(ABC):
    """Repository interface for Client persistence"""

    @abstractmethod
    async def create(self, client: Client) -> Client:
        pass

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Optional[Client]:
        pass

    @abstractmethod
    async def get_by_ids(self, client_ids: List[str]) -> List[Client]:
        """
        Retrieve several clients at once

        Args:
            client_ids: Client IDs (unknown IDs are ignored)

        Returns:
            List of found clients, in no particular order
        """
        pass

    @abstractmethod
    async def list_all(self, ascending: bool = True) -> List[Client]:
        """List every client ordered by name"""
        pass
