"""Integration tests for order use cases on a real database"""

import pytest

from repair_shop.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyOrderItemRepository,
    SqlAlchemyPaymentRepository,
)
from repair_shop.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from repair_shop.app.use_cases.clients import CreateClient, CreateClientCommandDTO, SearchClients
from repair_shop.app.use_cases.orders import (
    CreateOrder,
    CreateOrderCommandDTO,
    DeleteOrder,
    DeletePayment,
    GetOrderLedger,
    ListOrders,
    ListOrdersQueryDTO,
    OrderItemInputDTO,
    OrderSearchField,
    PaymentStateFilter,
    RegisterPayment,
    RegisterPaymentCommandDTO,
    RemoveLatestPayment,
    ReplaceOrderItems,
    ReplaceOrderItemsCommandDTO,
    SettleOrderBalance,
)
from repair_shop.app.use_cases.statistics import GetSalesStatistics, StatisticsPeriod
from repair_shop.domain.order import OrderStatus


def order_repos(session):
    return (
        SqlAlchemyOrderRepository(session),
        SqlAlchemyOrderItemRepository(session),
        SqlAlchemyPaymentRepository(session),
    )


async def create_client(session, name="José Martínez", phone="3001234567"):
    result = await CreateClient(
        SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session)
    ).execute(CreateClientCommandDTO(name=name, phone=phone))
    assert result.is_ok()
    return result.value


async def create_order(session, client_id, items, initial_payment=None):
    result = await CreateOrder(
        SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session), *order_repos(session)
    ).execute(
        CreateOrderCommandDTO(
            client_id=client_id,
            equipment_description="Portátil HP",
            visit_reason="Pantalla azul",
            work_to_do="Reinstalar sistema",
            items=[OrderItemInputDTO(description=d, unit_price=p) for d, p in items],
            initial_payment=initial_payment,
        )
    )
    assert result.is_ok(), result.error
    return result.value


class TestOrderFlowIntegration:
    @pytest.mark.asyncio
    async def test_order_numbers_are_sequential(self, db_session):
        client = await create_client(db_session)

        first = await create_order(db_session, client.id, [("Diagnóstico", "20.000")])
        second = await create_order(db_session, client.id, [])

        assert first.order_number == 1
        assert second.order_number == 2

    @pytest.mark.asyncio
    async def test_payments_update_ledger(self, db_session):
        # Arrange
        client = await create_client(db_session)
        order = await create_order(
            db_session, client.id, [("Diagnóstico", "20.000"), ("Cargador", "")], initial_payment="5.000"
        )
        register = RegisterPayment(SqlAlchemyUnitOfWork(db_session), *order_repos(db_session))

        # Act
        paid = await register.execute(RegisterPaymentCommandDTO(order_id=order.order_id, amount="$15.000"))
        rejected = await register.execute(RegisterPaymentCommandDTO(order_id=order.order_id, amount="1"))
        ledger = await GetOrderLedger(*order_repos(db_session)).execute(order.order_id)

        # Assert
        assert paid.is_ok()
        assert paid.value.ledger.is_complete is True
        assert rejected.error.code == "PAYMENT_EXCEEDS_BALANCE"
        assert ledger.value.total == 20000
        assert ledger.value.paid == 20000
        assert ledger.value.total_display == "$20.000+"

    @pytest.mark.asyncio
    async def test_delete_payment_and_replace_items(self, db_session):
        client = await create_client(db_session)
        order = await create_order(db_session, client.id, [("Formateo", "40.000")], initial_payment="30.000")
        payment_id = order.payments[0].id

        deleted = await DeletePayment(SqlAlchemyUnitOfWork(db_session), *order_repos(db_session)).execute(
            order.order_id, payment_id
        )
        replaced = await ReplaceOrderItems(SqlAlchemyUnitOfWork(db_session), *order_repos(db_session)).execute(
            ReplaceOrderItemsCommandDTO(
                order_id=order.order_id,
                items=[
                    OrderItemInputDTO(description="Formateo", unit_price="35.000"),
                    OrderItemInputDTO(description="Memoria RAM", unit_price="90.000", quantity=2),
                ],
            )
        )

        assert deleted.is_ok()
        assert deleted.value.ledger.paid == 0
        assert replaced.is_ok()
        assert replaced.value.ledger.total == 215000
        assert len(await SqlAlchemyOrderItemRepository(db_session).get_by_order_id(order.order_id)) == 2

    @pytest.mark.asyncio
    async def test_delete_order_removes_children(self, db_session):
        client = await create_client(db_session)
        order = await create_order(db_session, client.id, [("A", "1.000"), ("B", "2.000")], initial_payment="500")

        result = await DeleteOrder(SqlAlchemyUnitOfWork(db_session), *order_repos(db_session)).execute(order.order_id)

        assert result.is_ok()
        assert result.value.deleted_items == 2
        assert result.value.deleted_payments == 1
        assert await SqlAlchemyOrderRepository(db_session).get_by_id(order.order_id) is None
        assert await SqlAlchemyPaymentRepository(db_session).get_by_order_id(order.order_id) == []

    @pytest.mark.asyncio
    async def test_list_orders_and_statistics(self, db_session):
        ana = await create_client(db_session, name="Ana Gómez", phone="3105550000")
        jose = await create_client(db_session)
        await create_order(db_session, ana.id, [("Pantalla", "300.000")], initial_payment="100.000")
        await create_order(db_session, jose.id, [("Teclado", "50.000")], initial_payment="50.000")

        list_orders = ListOrders(*order_repos(db_session), SqlAlchemyClientRepository(db_session))
        listed = await list_orders.execute(ListOrdersQueryDTO(client_id=ana.id))
        received = await list_orders.execute(ListOrdersQueryDTO(status=OrderStatus.RECEIVED))
        unpaid = await list_orders.execute(ListOrdersQueryDTO(payment_state=PaymentStateFilter.INCOMPLETE))
        by_name = await list_orders.execute(
            ListOrdersQueryDTO(search="gomez", search_type=OrderSearchField.CLIENT_NAME)
        )
        stats = await GetSalesStatistics(
            SqlAlchemyOrderRepository(db_session),
            SqlAlchemyClientRepository(db_session),
            SqlAlchemyOrderItemRepository(db_session),
            SqlAlchemyPaymentRepository(db_session),
        ).execute(period=StatisticsPeriod.ALL)
        this_month = await GetSalesStatistics(
            SqlAlchemyOrderRepository(db_session),
            SqlAlchemyClientRepository(db_session),
            SqlAlchemyOrderItemRepository(db_session),
            SqlAlchemyPaymentRepository(db_session),
        ).execute(period=StatisticsPeriod.THIS_MONTH)

        assert listed.value.count == 1
        assert received.value.count == 2
        assert [o.client_name for o in unpaid.value.orders] == ["Ana Gómez"]
        assert [o.client_name for o in by_name.value.orders] == ["Ana Gómez"]
        assert stats.value.sales.invoiced == 350000
        assert stats.value.sales.collected == 150000
        assert this_month.value.sales.orders_count == 2
        assert stats.value.payments.complete == 1
        assert stats.value.top_clients[0].name == "Ana Gómez"
        assert stats.value.outstanding_orders[0].outstanding == 200000

    @pytest.mark.asyncio
    async def test_search_clients_ignores_accents(self, db_session):
        await create_client(db_session, name="Ana Gómez", phone="3105550000")
        await create_client(db_session, name="José Martínez")

        result = await SearchClients(SqlAlchemyClientRepository(db_session)).execute("gomez")

        assert [c.name for c in result.value.clients] == ["Ana Gómez"]

    @pytest.mark.asyncio
    async def test_settle_then_remove_latest_payment(self, db_session):
        client = await create_client(db_session)
        order = await create_order(db_session, client.id, [("Pantalla", "300.000")], initial_payment="100.000")

        settled = await SettleOrderBalance(SqlAlchemyUnitOfWork(db_session), *order_repos(db_session)).execute(
            order.order_id
        )
        removed = await RemoveLatestPayment(SqlAlchemyUnitOfWork(db_session), *order_repos(db_session)).execute(
            order.order_id
        )

        assert settled.value.payment.amount == 200000
        assert settled.value.ledger.is_complete is True
        assert removed.value.payment.id == settled.value.payment.id
        assert removed.value.ledger.paid == 100000
        remaining = await SqlAlchemyPaymentRepository(db_session).get_by_order_id(order.order_id)
        assert [p.amount for p in remaining] == [100000]

    @pytest.mark.asyncio
    async def test_timestamps_are_stored(self, db_session):
        client = await create_client(db_session)
        order = await create_order(db_session, client.id, [("Diagnóstico", "20.000")], initial_payment="5.000")

        assert client.created_at is not None
        assert order.created_at is not None
        assert order.payments[0].paid_at is not None
