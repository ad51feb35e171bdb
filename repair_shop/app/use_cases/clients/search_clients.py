"""SearchClients Use Case

Client lookup used when opening a new order.
"""

from repair_shop.libs.result import Result, Return
from repair_shop.app.repositories.client_repository import ClientRepository
from repair_shop.domain.client import Client
from repair_shop.domain.text import normalize_text
from .dtos import ClientDTO, SearchClientsResponseDTO

DEFAULT_SEARCH_LIMIT = 5


def matches(client: Client, query: str) -> bool:
    """
    Accent-insensitive name match, raw phone substring, or
    case-insensitive document number substring
    """
    if normalize_text(query) in normalize_text(client.name or ""):
        return True
    if query in (client.phone or ""):
        return True
    return query.lower() in (client.document_number or "").lower()


class SearchClients:
    """
    Search Clients Use Case

    An empty query returns every client (ordered by name) up to the limit.
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> Result[SearchClientsResponseDTO]:
        query = query.strip()
        clients = await self.client_repo.list_all()

        if query:
            clients = [client for client in clients if matches(client, query)]

        found = [ClientDTO.from_entity(client) for client in clients[:limit]]
        return Return.ok(SearchClientsResponseDTO(query=query, clients=found, count=len(found)))
