"""Unit tests for RegisterPayment use case

Tests cover:
- Abono within the pending balance
- Unreadable or zero amounts
- Amounts above the pending balance
- Missing order and storage failures
"""

import pytest
from unittest.mock import AsyncMock

from repair_shop.app.use_cases.orders.register_payment import RegisterPayment
from repair_shop.app.use_cases.orders.dtos import RegisterPaymentCommandDTO
from tests.factories import make_item, make_payment


@pytest.fixture
def register_use_case(mock_uow, mock_order_repo, mock_item_repo, mock_payment_repo):
    """RegisterPayment use case instance with mocked dependencies"""
    return RegisterPayment(
        uow=mock_uow,
        order_repo=mock_order_repo,
        item_repo=mock_item_repo,
        payment_repo=mock_payment_repo,
    )


@pytest.fixture
def order_with_balance(sample_order, mock_order_repo, mock_item_repo, mock_payment_repo):
    """Order total 30.000 with 10.000 already paid"""
    mock_order_repo.get_by_id = AsyncMock(return_value=sample_order)
    mock_item_repo.get_by_order_id = AsyncMock(return_value=[make_item(30000)])
    mock_payment_repo.get_by_order_id = AsyncMock(return_value=[make_payment(10000)])
    mock_payment_repo.create = AsyncMock(side_effect=lambda payment: payment)
    return sample_order


@pytest.mark.asyncio
class TestRegisterPaymentSuccess:
    async def test_payment_within_balance(
        self, register_use_case, order_with_balance, mock_order_repo, mock_payment_repo, mock_uow
    ):
        """
        Given: Order with pending balance 20.000
        When: An abono of "$15.000" is registered
        Then: Payment stored, ledger shows 5.000 pending
        """
        # Act
        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="order-1", amount="$15.000")
        )

        # Assert
        assert result.is_ok()
        assert result.value.payment.amount == 15000
        assert result.value.payment.amount_display == "$15.000"
        assert result.value.ledger.paid == 25000
        assert result.value.ledger.balance == 5000
        assert result.value.ledger.balance_display == "$5.000"
        assert result.value.ledger.is_complete is False

        mock_order_repo.get_by_id.assert_called_once_with("order-1", for_update=True)
        mock_payment_repo.create.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_payment_equal_to_balance_completes_order(self, register_use_case, order_with_balance):
        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="order-1", amount="20.000")
        )

        assert result.is_ok()
        assert result.value.ledger.balance == 0
        assert result.value.ledger.is_complete is True

    async def test_decimal_tail_is_dropped(self, register_use_case, order_with_balance):
        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="order-1", amount="1.234,56")
        )

        assert result.is_ok()
        assert result.value.payment.amount == 1234


@pytest.mark.asyncio
class TestRegisterPaymentRejected:
    @pytest.mark.parametrize("amount", ["abc", "0", "$", "20.021554555"])
    async def test_invalid_amount(self, register_use_case, mock_order_repo, mock_uow, amount):
        mock_order_repo.get_by_id = AsyncMock()

        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="order-1", amount=amount)
        )

        assert result.is_err()
        assert result.error.code == "INVALID_AMOUNT"
        mock_order_repo.get_by_id.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_amount_above_balance(self, register_use_case, order_with_balance, mock_payment_repo, mock_uow):
        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="order-1", amount="25.000")
        )

        assert result.is_err()
        assert result.error.code == "PAYMENT_EXCEEDS_BALANCE"
        assert "$20.000" in result.error.message
        mock_payment_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_called_once()

    async def test_order_without_prices_accepts_no_payment(
        self, register_use_case, sample_order, mock_order_repo, mock_item_repo, mock_payment_repo
    ):
        mock_order_repo.get_by_id = AsyncMock(return_value=sample_order)
        mock_item_repo.get_by_order_id = AsyncMock(return_value=[make_item(0)])
        mock_payment_repo.get_by_order_id = AsyncMock(return_value=[])
        mock_payment_repo.create = AsyncMock()

        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="order-1", amount="1.000")
        )

        assert result.is_err()
        assert result.error.code == "PAYMENT_EXCEEDS_BALANCE"
        mock_payment_repo.create.assert_not_called()

    async def test_order_not_found_releases_lock(self, register_use_case, mock_order_repo, mock_uow):
        mock_order_repo.get_by_id = AsyncMock(return_value=None)

        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="missing", amount="1.000")
        )

        assert result.is_err()
        assert result.error.code == "ORDER_NOT_FOUND"
        mock_uow.rollback.assert_called_once()

    async def test_storage_failure_rolls_back(
        self, register_use_case, order_with_balance, mock_payment_repo, mock_uow
    ):
        mock_payment_repo.create = AsyncMock(side_effect=Exception("Database error"))

        result = await register_use_case.execute(
            RegisterPaymentCommandDTO(order_id="order-1", amount="1.000")
        )

        assert result.is_err()
        assert result.error.code == "REGISTER_PAYMENT_FAILED"
        assert result.error.reason == "Database error"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
