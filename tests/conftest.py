import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from repair_shop.domain.client import Client
from repair_shop.domain.order import Order, OrderStatus


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_client_repo():
    return MagicMock()


@pytest.fixture
def mock_order_repo():
    return MagicMock()


@pytest.fixture
def mock_item_repo():
    return MagicMock()


@pytest.fixture
def mock_payment_repo():
    return MagicMock()


@pytest.fixture
def sample_client():
    return Client(
        id="client-1",
        name="José Martínez",
        phone="3001234567",
        document_type="CC",
        document_number="1020304050",
        created_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_order():
    return Order(
        id="order-1",
        order_number=152,
        client_id="client-1",
        equipment_description="Portátil Lenovo IdeaPad 3",
        visit_reason="No enciende",
        work_to_do="Cambio de cargador",
        status=OrderStatus.RECEIVED,
        conditions_accepted=True,
        created_at=datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc),
        updated_at=datetime(2024, 3, 10, 10, 0, tzinfo=timezone.utc),
    )
