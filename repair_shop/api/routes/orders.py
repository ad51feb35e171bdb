"""Orders API Routes

FastAPI routes for service orders, their line items and abonos.
"""

import base64
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from repair_shop.api.error import raise_for_error
from repair_shop.api.schemas.order_request import (
    CreateOrderRequestSchema,
    RegisterPaymentRequestSchema,
    ReplaceOrderItemsRequestSchema,
    UpdateOrderStatusRequestSchema,
)
from repair_shop.app.use_cases.orders import (
    CreateOrder,
    GetOrder,
    ListOrders,
    GetOrderLedger,
    RegisterPayment,
    DeletePayment,
    ReplaceOrderItems,
    UpdateOrderStatus,
    DeleteOrder,
    GenerateOrderPdf,
    SettleOrderBalance,
    RemoveLatestPayment,
    OrderItemInputDTO,
    CreateOrderCommandDTO,
    RegisterPaymentCommandDTO,
    ReplaceOrderItemsCommandDTO,
    UpdateOrderStatusCommandDTO,
    ListOrdersQueryDTO,
    PaymentStateFilter,
    OrderSearchField,
    OrderResponseDTO,
    OrderLedgerDTO,
    ListOrdersResponseDTO,
    PaymentResponseDTO,
    DeleteOrderResponseDTO,
    OrderPdfResponseDTO,
    PaymentActionResponseDTO,
)
from repair_shop.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyOrderItemRepository,
    SqlAlchemyPaymentRepository,
)
from repair_shop.adapter.services import ReportLabPdfService, SqlAlchemyUnitOfWork
from repair_shop.depends import get_session, get_pdf_service
from repair_shop.domain.order import OrderStatus

router = APIRouter(prefix="/orders", tags=["Orders"])

_ERROR_RESPONSES = {
    404: {
        "description": "Order not found",
        "content": {
            "application/json": {
                "example": {"error": {"code": "ORDER_NOT_FOUND", "message": "Order 123 not found"}}
            }
        },
    },
    400: {
        "description": "Business rule violated",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "PAYMENT_EXCEEDS_BALANCE",
                        "message": "Payment $20.000 exceeds pending balance $15.000",
                    }
                }
            }
        },
    },
}


def _order_repos(session: AsyncSession):
    return (
        SqlAlchemyOrderRepository(session),
        SqlAlchemyOrderItemRepository(session),
        SqlAlchemyPaymentRepository(session),
    )


@router.post(
    "",
    response_model=OrderResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_order(
    request: CreateOrderRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Open a service order for a registered client.

    Items with an empty or unreadable price are stored as "Por definir".
    The optional `initial_payment` must not exceed the order total.

    **Returns:**
    - 201: Order created with its ledger
    - 404: Client not found
    - 400: Invalid initial payment
    """
    uow = SqlAlchemyUnitOfWork(session)
    order_repo, item_repo, payment_repo = _order_repos(session)
    client_repo = SqlAlchemyClientRepository(session)

    command = CreateOrderCommandDTO(
        client_id=request.client_id,
        equipment_description=request.equipment_description,
        visit_reason=request.visit_reason,
        work_to_do=request.work_to_do,
        observations=request.observations,
        received_by=request.received_by,
        assigned_technician=request.assigned_technician,
        conditions_accepted=request.conditions_accepted,
        items=[OrderItemInputDTO(**item.model_dump()) for item in request.items],
        initial_payment=request.initial_payment,
    )

    use_case = CreateOrder(uow, client_repo, order_repo, item_repo, payment_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=ListOrdersResponseDTO, status_code=status.HTTP_200_OK)
async def list_orders(
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status"),
    client_id: Optional[str] = Query(default=None),
    payment_state: Optional[PaymentStateFilter] = Query(default=None, alias="pago"),
    assigned_technician: Optional[str] = Query(default=None, alias="tecnico"),
    search: Optional[str] = Query(default=None, alias="q"),
    search_type: OrderSearchField = Query(default=OrderSearchField.ORDER_NUMBER),
    session: AsyncSession = Depends(get_session),
):
    """
    List orders, newest first.

    **Query parameters (all optional):**
    - `status`: recibido, en_proceso, listo or entregado
    - `client_id`: orders of one client
    - `pago`: completo or incompleto
    - `tecnico`: assigned technician
    - `q` + `search_type`: search by numero_orden, cliente_nombre,
      cliente_telefono or cliente_documento
    """
    order_repo, item_repo, payment_repo = _order_repos(session)
    use_case = ListOrders(order_repo, item_repo, payment_repo, SqlAlchemyClientRepository(session))
    result = await use_case.execute(
        ListOrdersQueryDTO(
            status=status_filter,
            client_id=client_id,
            payment_state=payment_state,
            assigned_technician=assigned_technician,
            search=search,
            search_type=search_type,
        )
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{order_id}", response_model=OrderResponseDTO, responses=_ERROR_RESPONSES)
async def get_order(order_id: str, session: AsyncSession = Depends(get_session)):
    use_case = GetOrder(*_order_repos(session))
    result = await use_case.execute(order_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{order_id}", response_model=DeleteOrderResponseDTO, responses=_ERROR_RESPONSES)
async def delete_order(order_id: str, session: AsyncSession = Depends(get_session)):
    """Delete an order together with its items and abonos."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteOrder(uow, *_order_repos(session))
    result = await use_case.execute(order_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{order_id}/ledger", response_model=OrderLedgerDTO, responses=_ERROR_RESPONSES)
async def get_order_ledger(order_id: str, session: AsyncSession = Depends(get_session)):
    """
    Total, paid and pending balance of an order.

    **Example response:**
    ```json
    {
      "total": 2000,
      "paid": 500,
      "balance": 1500,
      "is_complete": false,
      "has_undefined_pricing": true,
      "total_display": "$2.000+",
      "balance_display": "$1.500"
    }
    ```
    """
    use_case = GetOrderLedger(*_order_repos(session))
    result = await use_case.execute(order_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{order_id}/items", response_model=OrderResponseDTO, responses=_ERROR_RESPONSES)
async def replace_order_items(
    order_id: str,
    request: ReplaceOrderItemsRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """Replace every line item of an order with the submitted list."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = ReplaceOrderItems(uow, *_order_repos(session))
    command = ReplaceOrderItemsCommandDTO(
        order_id=order_id,
        items=[OrderItemInputDTO(**item.model_dump()) for item in request.items],
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{order_id}/status", response_model=OrderResponseDTO, responses=_ERROR_RESPONSES)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateOrderStatus(uow, *_order_repos(session))
    result = await use_case.execute(
        UpdateOrderStatusCommandDTO(order_id=order_id, status=request.status)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{order_id}/payments",
    response_model=PaymentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def register_payment(
    order_id: str,
    request: RegisterPaymentRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Register an abono against an order.

    **Request body:**
    - `amount` (required): Amount as typed, e.g. "$15.000" or "15000"

    **Returns:**
    - 201: Payment registered with the recomputed ledger
    - 400: Invalid amount or amount above the pending balance
    - 404: Order not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RegisterPayment(uow, *_order_repos(session))
    result = await use_case.execute(
        RegisterPaymentCommandDTO(order_id=order_id, amount=request.amount)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{order_id}/payments/settle",
    response_model=PaymentActionResponseDTO,
    responses=_ERROR_RESPONSES,
)
async def settle_order_balance(order_id: str, session: AsyncSession = Depends(get_session)):
    """
    Mark an order as fully paid.

    Registers one abono for the whole pending balance. When nothing is
    pending, `payment` is null and the order is unchanged.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = SettleOrderBalance(uow, *_order_repos(session))
    result = await use_case.execute(order_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{order_id}/payments/latest",
    response_model=PaymentActionResponseDTO,
    responses=_ERROR_RESPONSES,
)
async def remove_latest_payment(order_id: str, session: AsyncSession = Depends(get_session)):
    """
    Mark an order as not fully paid by removing its latest abono.

    When the order has no abonos, `payment` is null and the order is unchanged.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RemoveLatestPayment(uow, *_order_repos(session))
    result = await use_case.execute(order_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{order_id}/payments/{payment_id}",
    response_model=PaymentResponseDTO,
    responses=_ERROR_RESPONSES,
)
async def delete_payment(
    order_id: str,
    payment_id: str,
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeletePayment(uow, *_order_repos(session))
    result = await use_case.execute(order_id, payment_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


async def _generate_pdf(order_id: str, session: AsyncSession, pdf_service: ReportLabPdfService):
    order_repo, item_repo, payment_repo = _order_repos(session)
    use_case = GenerateOrderPdf(
        order_repo,
        SqlAlchemyClientRepository(session),
        item_repo,
        payment_repo,
        pdf_service,
    )
    result = await use_case.execute(order_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{order_id}/pdf", response_model=OrderPdfResponseDTO, responses=_ERROR_RESPONSES)
async def generate_order_pdf(
    order_id: str,
    session: AsyncSession = Depends(get_session),
    pdf_service: ReportLabPdfService = Depends(get_pdf_service),
):
    """Generate the service order document as base64 encoded PDF."""
    return await _generate_pdf(order_id, session, pdf_service)


@router.get(
    "/{order_id}/pdf",
    responses={
        200: {"content": {"application/pdf": {}}, "description": "PDF document"},
        404: _ERROR_RESPONSES[404],
    },
)
async def download_order_pdf(
    order_id: str,
    session: AsyncSession = Depends(get_session),
    pdf_service: ReportLabPdfService = Depends(get_pdf_service),
):
    """Download the service order document as a PDF file."""
    document = await _generate_pdf(order_id, session, pdf_service)
    pdf_bytes = base64.b64decode(document.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=orden_{document.order_number}.pdf"
        },
    )
