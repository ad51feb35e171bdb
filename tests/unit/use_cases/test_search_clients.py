"""Unit tests for client use cases"""

import pytest
from unittest.mock import AsyncMock

from repair_shop.app.use_cases.clients import CreateClient, CreateClientCommandDTO, SearchClients
from repair_shop.app.use_cases.clients.search_clients import matches
from tests.factories import make_client


@pytest.fixture
def clients():
    return [
        make_client("c1", "Ana Gómez", "3105550000", "CE-778899"),
        make_client("c2", "José Martínez", "3001234567", "1020304050"),
        make_client("c3", "Jorge Peña", "3209876543"),
    ]


class TestMatches:
    def test_name_ignores_accents_and_case(self, clients):
        assert matches(clients[1], "jose")
        assert matches(clients[1], "MARTÍNEZ")

    def test_phone_substring(self, clients):
        assert matches(clients[2], "98765")

    def test_document_ignores_case(self, clients):
        assert matches(clients[0], "ce-778")

    def test_no_match(self, clients):
        assert not matches(clients[2], "ana")


@pytest.mark.asyncio
class TestSearchClients:
    async def test_search_by_name(self, clients, mock_client_repo):
        mock_client_repo.list_all = AsyncMock(return_value=clients)

        result = await SearchClients(mock_client_repo).execute("pena")

        assert result.is_ok()
        assert [c.id for c in result.value.clients] == ["c3"]
        assert result.value.count == 1

    async def test_empty_query_lists_clients(self, clients, mock_client_repo):
        mock_client_repo.list_all = AsyncMock(return_value=clients)

        result = await SearchClients(mock_client_repo).execute("   ", limit=2)

        assert result.value.query == ""
        assert [c.id for c in result.value.clients] == ["c1", "c2"]

    async def test_default_limit_is_five(self, mock_client_repo):
        mock_client_repo.list_all = AsyncMock(
            return_value=[make_client(f"c{i}", f"Cliente {i}") for i in range(8)]
        )

        result = await SearchClients(mock_client_repo).execute("cliente")

        assert result.value.count == 5


@pytest.mark.asyncio
class TestCreateClient:
    async def test_create_client(self, mock_uow, mock_client_repo):
        # Arrange
        mock_client_repo.create = AsyncMock(side_effect=lambda client: client)
        command = CreateClientCommandDTO(
            name="  Ana Gómez ",
            phone="3105550000",
            document_number="",
            email="ana@example.com",
        )

        # Act
        result = await CreateClient(mock_uow, mock_client_repo).execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.name == "Ana Gómez"
        assert result.value.document_number is None
        assert result.value.email == "ana@example.com"
        mock_uow.commit.assert_called_once()

    async def test_storage_failure(self, mock_uow, mock_client_repo):
        mock_client_repo.create = AsyncMock(side_effect=Exception("disk full"))

        result = await CreateClient(mock_uow, mock_client_repo).execute(
            CreateClientCommandDTO(name="Ana", phone="1")
        )

        assert result.is_err()
        assert result.error.code == "CREATE_CLIENT_FAILED"
        mock_uow.rollback.assert_called_once()
