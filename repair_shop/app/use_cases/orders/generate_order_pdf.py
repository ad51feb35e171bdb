"""GenerateOrderPdf Use Case

Generates the printable service order handed to the client.
"""

import base64
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.repositories.client_repository import ClientRepository
from repair_shop.app.repositories.order_repository import OrderRepository
from repair_shop.app.repositories.order_item_repository import OrderItemRepository
from repair_shop.app.repositories.payment_repository import PaymentRepository
from repair_shop.app.services.pdf_service import PdfService
from repair_shop.domain.base import utc_now
from repair_shop.domain.order_ledger import calculate_ledger
from .dtos import OrderPdfResponseDTO


class GenerateOrderPdf:
    """
    Use Case: Generate service order PDF

    Business Rules:
    1. Order and its client must exist
    2. Items without price are printed as "Por definir"
    3. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve order and client
    2. Retrieve items and payments
    3. Compute ledger
    4. Generate PDF using PDF service
    5. Return response with PDF as base64
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        client_repo: ClientRepository,
        item_repo: OrderItemRepository,
        payment_repo: PaymentRepository,
        pdf_service: PdfService,
    ):
        self.order_repo = order_repo
        self.client_repo = client_repo
        self.item_repo = item_repo
        self.payment_repo = payment_repo
        self.pdf_service = pdf_service

    async def execute(self, order_id: str) -> Result[OrderPdfResponseDTO]:
        try:
            # Step 1: Order and client
            order = await self.order_repo.get_by_id(order_id)
            if not order:
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {order_id} not found",
                    )
                )

            client = await self.client_repo.get_by_id(order.client_id)
            if not client:
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {order.client_id} of order #{order.order_number} not found",
                    )
                )

            # Step 2-3: Items, payments, ledger
            items = await self.item_repo.get_by_order_id(order.id)
            payments = await self.payment_repo.get_by_order_id(order.id)
            ledger = calculate_ledger(items, payments)

            # Step 4: Generate PDF
            pdf_bytes = self.pdf_service.generate_service_order(
                order=order,
                client=client,
                items=items,
                payments=payments,
                ledger=ledger,
            )

            # Step 5: Build response
            return Return.ok(
                OrderPdfResponseDTO(
                    order_id=order.id,
                    order_number=order.order_number,
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=utc_now(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_PDF_FAILED",
                    message="Failed to generate service order PDF",
                    reason=str(e),
                )
            )
