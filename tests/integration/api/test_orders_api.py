"""Integration tests for the HTTP API"""

import pytest
from httpx import AsyncClient


async def post_client(client: AsyncClient, name="José Martínez", phone="3001234567") -> dict:
    response = await client.post("/clients", json={"name": name, "phone": phone, "document_number": "1020304050"})
    assert response.status_code == 201
    return response.json()


async def post_order(client: AsyncClient, client_id: str, **overrides) -> dict:
    payload = {
        "client_id": client_id,
        "equipment_description": "Portátil Lenovo IdeaPad 3",
        "visit_reason": "No enciende",
        "work_to_do": "Diagnóstico y cambio de cargador",
        "conditions_accepted": True,
        "items": [
            {"description": "Diagnóstico", "unit_price": "20.000", "quantity": 1},
            {"description": "Cargador", "unit_price": "", "quantity": 1},
        ],
        "initial_payment": "$5.000",
    }
    payload.update(overrides)
    return await client.post("/orders", json=payload)


class TestOrdersAPIIntegration:
    """Integration test suite for the orders API"""

    @pytest.mark.asyncio
    async def test_create_order(self, client: AsyncClient):
        # Arrange
        owner = await post_client(client)

        # Act
        response = await post_order(client, owner["id"])

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["order_number"] == 1
        assert data["status"] == "recibido"
        assert data["ledger"]["total_display"] == "$20.000+"
        assert data["ledger"]["balance_display"] == "$15.000"
        assert data["items"][1]["unit_price_display"] == "Por definir"

    @pytest.mark.asyncio
    async def test_create_order_unknown_client(self, client: AsyncClient):
        response = await post_order(client, "missing")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CLIENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_create_order_initial_payment_above_total(self, client: AsyncClient):
        owner = await post_client(client)

        response = await post_order(client, owner["id"], initial_payment="25.000")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "PAYMENT_EXCEEDS_TOTAL"

    @pytest.mark.asyncio
    async def test_register_payments(self, client: AsyncClient):
        owner = await post_client(client)
        order = (await post_order(client, owner["id"])).json()
        order_id = order["order_id"]

        ok = await client.post(f"/orders/{order_id}/payments", json={"amount": "10.000"})
        too_much = await client.post(f"/orders/{order_id}/payments", json={"amount": "10.000"})
        invalid = await client.post(f"/orders/{order_id}/payments", json={"amount": "diez"})
        ledger = await client.get(f"/orders/{order_id}/ledger")

        assert ok.status_code == 201
        assert ok.json()["ledger"]["balance"] == 5000
        assert too_much.status_code == 400
        assert too_much.json()["error"]["code"] == "PAYMENT_EXCEEDS_BALANCE"
        assert invalid.status_code == 400
        assert invalid.json()["error"]["code"] == "INVALID_AMOUNT"
        assert ledger.json()["paid"] == 15000
        assert ledger.json()["paid_display"] == "$15.000"

    @pytest.mark.asyncio
    async def test_delete_payment(self, client: AsyncClient):
        owner = await post_client(client)
        order = (await post_order(client, owner["id"])).json()
        payment_id = order["payments"][0]["id"]

        response = await client.delete(f"/orders/{order['order_id']}/payments/{payment_id}")
        again = await client.delete(f"/orders/{order['order_id']}/payments/{payment_id}")

        assert response.status_code == 200
        assert response.json()["ledger"]["paid"] == 0
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_replace_items_and_change_status(self, client: AsyncClient):
        owner = await post_client(client)
        order_id = (await post_order(client, owner["id"])).json()["order_id"]

        items = await client.put(
            f"/orders/{order_id}/items",
            json={"items": [{"description": "Cargador original", "unit_price": "85.000", "quantity": 1}]},
        )
        status = await client.patch(f"/orders/{order_id}/status", json={"status": "listo"})
        bad_status = await client.patch(f"/orders/{order_id}/status", json={"status": "perdido"})

        assert items.status_code == 200
        assert items.json()["ledger"]["total_display"] == "$85.000"
        assert status.status_code == 200
        assert status.json()["status_label"] == "Listo"
        assert bad_status.status_code == 422

    @pytest.mark.asyncio
    async def test_list_and_get_orders(self, client: AsyncClient):
        owner = await post_client(client)
        order_id = (await post_order(client, owner["id"])).json()["order_id"]

        listed = await client.get("/orders", params={"status": "recibido"})
        detail = await client.get(f"/orders/{order_id}")
        missing = await client.get("/orders/does-not-exist")

        assert listed.status_code == 200
        assert listed.json()["count"] == 1
        assert detail.json()["order_id"] == order_id
        assert missing.status_code == 404
        assert missing.json()["error"]["code"] == "ORDER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_download_pdf(self, client: AsyncClient):
        owner = await post_client(client)
        order = (await post_order(client, owner["id"])).json()

        response = await client.get(f"/orders/{order['order_id']}/pdf")
        encoded = await client.post(f"/orders/{order['order_id']}/pdf")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "orden_1.pdf" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")
        assert encoded.json()["order_number"] == 1

    @pytest.mark.asyncio
    async def test_delete_order(self, client: AsyncClient):
        owner = await post_client(client)
        order_id = (await post_order(client, owner["id"])).json()["order_id"]

        response = await client.delete(f"/orders/{order_id}")
        after = await client.get(f"/orders/{order_id}")

        assert response.status_code == 200
        assert response.json()["deleted_items"] == 2
        assert after.status_code == 404

    @pytest.mark.asyncio
    async def test_list_orders_filters(self, client: AsyncClient):
        jose = await post_client(client)
        ana = await post_client(client, name="Ana Gómez", phone="3105550000")
        await post_order(client, jose["id"], assigned_technician="Carlos")
        await post_order(
            client,
            ana["id"],
            items=[{"description": "Formateo", "unit_price": "40.000"}],
            initial_payment="40.000",
        )

        paid = await client.get("/orders", params={"pago": "completo"})
        by_technician = await client.get("/orders", params={"tecnico": "Carlos"})
        by_name = await client.get("/orders", params={"q": "gomez", "search_type": "cliente_nombre"})
        by_number = await client.get("/orders", params={"q": "2"})
        invalid = await client.get("/orders", params={"pago": "a medias"})

        assert [o["client_name"] for o in paid.json()["orders"]] == ["Ana Gómez"]
        assert [o["client_name"] for o in by_technician.json()["orders"]] == ["José Martínez"]
        assert [o["client_name"] for o in by_name.json()["orders"]] == ["Ana Gómez"]
        assert [o["order_number"] for o in by_number.json()["orders"]] == [2]
        assert invalid.status_code == 422

    @pytest.mark.asyncio
    async def test_quick_payment_actions(self, client: AsyncClient):
        owner = await post_client(client)
        order_id = (await post_order(client, owner["id"])).json()["order_id"]

        settled = await client.post(f"/orders/{order_id}/payments/settle")
        settled_again = await client.post(f"/orders/{order_id}/payments/settle")
        removed = await client.delete(f"/orders/{order_id}/payments/latest")
        missing = await client.post("/orders/missing/payments/settle")

        assert settled.status_code == 200
        assert settled.json()["payment"]["amount"] == 15000
        assert settled.json()["ledger"]["is_complete"] is True
        assert settled_again.json()["payment"] is None
        assert removed.status_code == 200
        assert removed.json()["payment"]["amount"] == 15000
        assert removed.json()["ledger"]["balance"] == 15000
        assert missing.status_code == 404


class TestClientsAndStatisticsAPIIntegration:
    @pytest.mark.asyncio
    async def test_search_clients(self, client: AsyncClient):
        await post_client(client)
        await post_client(client, name="Ana Gómez", phone="3105550000")

        response = await client.get("/clients", params={"q": "jose"})

        assert response.status_code == 200
        assert [c["name"] for c in response.json()["clients"]] == ["José Martínez"]

    @pytest.mark.asyncio
    async def test_create_client_validation_error(self, client: AsyncClient):
        response = await client.post("/clients", json={"name": "", "phone": "1"})

        assert response.status_code == 422  # Pydantic validation error

    @pytest.mark.asyncio
    async def test_statistics(self, client: AsyncClient):
        owner = await post_client(client)
        await post_order(client, owner["id"])

        response = await client.get("/statistics", params={"period": "este_mes"})
        invalid = await client.get("/statistics", params={"period": "siempre"})

        assert response.status_code == 200
        data = response.json()
        assert data["total_orders"] == 1
        assert data["sales"]["invoiced"] == 20000
        assert data["sales"]["collected"] == 5000
        assert data["outstanding_orders"][0]["outstanding_display"] == "$15.000"
        assert invalid.status_code == 422

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.json() == {"status": "ok"}
