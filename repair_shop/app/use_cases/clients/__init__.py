"""Client use cases"""
from .create_client import CreateClient
from .search_clients import SearchClients
from .dtos import CreateClientCommandDTO, ClientDTO, SearchClientsResponseDTO

__all__ = [
    "CreateClient",
    "SearchClients",
    "CreateClientCommandDTO",
    "ClientDTO",
    "SearchClientsResponseDTO",
]
