"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from typing import List
from repair_shop.domain.client import Client
from repair_shop.domain.order import Order
from repair_shop.domain.order_item import OrderItem
from repair_shop.domain.order_ledger import OrderLedger
from repair_shop.domain.payment import Payment


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides the printable service order handed to the client.
    """

    @abstractmethod
    def generate_service_order(
        self,
        order: Order,
        client: Client,
        items: List[OrderItem],
        payments: List[Payment],
        ledger: OrderLedger,
    ) -> bytes:
        """
        Generate a service order PDF

        Args:
            order: Order with equipment and job details
            client: Owner of the order
            items: Line items of the order
            payments: Abonos registered against the order
            ledger: Totals computed from items and payments

        Returns:
            PDF document as bytes
        """
        pass
