"""CreateClient Use Case"""

import logging
from typing import Optional
from repair_shop.libs.result import Result, Return, Error
from repair_shop.app.services.unit_of_work import UnitOfWork
from repair_shop.app.repositories.client_repository import ClientRepository
from repair_shop.domain.client import Client
from .dtos import CreateClientCommandDTO, ClientDTO

logger = logging.getLogger(__name__)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CreateClient:
    """
    Use Case: Register a client

    Optional fields left blank in the form are stored as NULL.
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, command: CreateClientCommandDTO) -> Result[ClientDTO]:
        try:
            client = await self.client_repo.create(
                Client(
                    name=command.name.strip(),
                    phone=command.phone.strip(),
                    document_type=_blank_to_none(command.document_type),
                    document_number=_blank_to_none(command.document_number),
                    email=_blank_to_none(command.email),
                    address=_blank_to_none(command.address),
                )
            )
            await self.uow.commit()

            logger.info(f"Registered client {client.id}")
            return Return.ok(ClientDTO.from_entity(client))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to register client: {e}")
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Failed to register client",
                    reason=str(e),
                )
            )
