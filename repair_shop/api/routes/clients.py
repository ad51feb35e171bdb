"""Clients API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from repair_shop.api.error import raise_for_error
from repair_shop.api.schemas.client_request import CreateClientRequestSchema
from repair_shop.app.use_cases.clients import (
    CreateClient,
    SearchClients,
    CreateClientCommandDTO,
    ClientDTO,
    SearchClientsResponseDTO,
)
from repair_shop.adapter.repositories import SqlAlchemyClientRepository
from repair_shop.adapter.services import SqlAlchemyUnitOfWork
from repair_shop.depends import get_session

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post("", response_model=ClientDTO, status_code=status.HTTP_201_CREATED)
async def create_client(
    request: CreateClientRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    client_repo = SqlAlchemyClientRepository(session)

    use_case = CreateClient(uow, client_repo)
    result = await use_case.execute(CreateClientCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=SearchClientsResponseDTO)
async def search_clients(
    q: str = Query(default="", description="Name, phone or document number"),
    limit: int = Query(default=ApplicationConfig.CLIENT_SEARCH_LIMIT, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
):
    """
    Search clients while typing.

    Name matching ignores accents and case ("jose" finds "José").
    An empty query lists clients alphabetically.
    """
    use_case = SearchClients(SqlAlchemyClientRepository(session))
    result = await use_case.execute(q, limit=limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
