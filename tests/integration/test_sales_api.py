"""Integration tests for /api/sales: server-side balance and references."""

from decimal import Decimal


class TestCreateSale:

    async def test_partial_payment_balance(self, client, auth_headers, make_client, make_artist):
        customer = await make_client()
        artist = await make_artist()

        response = await client.post(
            "/api/sales",
            json={
                "clientId": customer["id"],
                "artistId": artist["id"],
                "totalAmount": "500.00",
                "deposit": "150.00",
                "paymentMethod": "card",
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert Decimal(body["remainingBalance"]) == Decimal("350.00")
        assert body["paymentStatus"] == "partial"
        assert body["saleDate"] is not None

    async def test_full_deposit_is_completed(self, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()

        sale = await make_sale(customer["id"], artist["id"], totalAmount="200.00", deposit="200.00")

        assert Decimal(sale["remainingBalance"]) == Decimal("0")
        assert sale["paymentStatus"] == "completed"

    async def test_client_supplied_balance_is_ignored(self, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()

        sale = await make_sale(
            customer["id"],
            artist["id"],
            totalAmount="300.00",
            remainingBalance="0.00",
            paymentStatus="completed",
        )

        assert Decimal(sale["remainingBalance"]) == Decimal("300.00")
        assert sale["paymentStatus"] == "pending"

    async def test_unknown_client_returns_404_and_writes_nothing(self, client, auth_headers, make_artist):
        artist = await make_artist()

        response = await client.post(
            "/api/sales",
            json={"clientId": "does-not-exist", "artistId": artist["id"], "totalAmount": "50.00"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        listing = await client.get("/api/sales", headers=auth_headers)
        assert listing.json() == []

    async def test_unknown_appointment_returns_404(self, client, auth_headers, make_client, make_artist):
        customer = await make_client()
        artist = await make_artist()

        response = await client.post(
            "/api/sales",
            json={
                "clientId": customer["id"],
                "artistId": artist["id"],
                "appointmentId": "missing",
                "totalAmount": "50.00",
            },
            headers=auth_headers,
        )

        assert response.status_code == 404

    async def test_negative_total_is_field_error(self, client, auth_headers, make_client, make_artist):
        customer = await make_client()
        artist = await make_artist()

        response = await client.post(
            "/api/sales",
            json={"clientId": customer["id"], "artistId": artist["id"], "totalAmount": "-5"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "totalAmount" in response.json()["errors"]


class TestUpdateSale:

    async def test_deposit_only_update_recomputes_balance(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        sale = await make_sale(customer["id"], artist["id"], totalAmount="500.00", deposit="150.00")

        response = await client.patch(f"/api/sales/{sale['id']}", json={"deposit": "500.00"}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert Decimal(body["totalAmount"]) == Decimal("500.00")
        assert Decimal(body["remainingBalance"]) == Decimal("0")
        assert body["paymentStatus"] == "completed"

    async def test_total_only_update_uses_stored_deposit(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        sale = await make_sale(customer["id"], artist["id"], totalAmount="200.00", deposit="200.00")

        response = await client.patch(f"/api/sales/{sale['id']}", json={"totalAmount": "260.00"}, headers=auth_headers)

        body = response.json()
        assert Decimal(body["remainingBalance"]) == Decimal("60.00")
        assert body["paymentStatus"] == "partial"

    async def test_null_client_rejected(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        sale = await make_sale(customer["id"], artist["id"])

        response = await client.patch(f"/api/sales/{sale['id']}", json={"clientId": None}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == {"clientId": "Field cannot be null"}

    async def test_unknown_sale(self, client, auth_headers):
        response = await client.patch("/api/sales/missing", json={"deposit": "1.00"}, headers=auth_headers)
        assert response.status_code == 404


class TestReadSales:

    async def test_enriched_read(self, client, auth_headers, make_client, make_artist, make_appointment, make_sale):
        customer = await make_client(firstName="Marta")
        artist = await make_artist(name="Kai")
        appointment = await make_appointment(customer["id"], artist["id"])
        sale = await make_sale(customer["id"], artist["id"], appointmentId=appointment["id"])

        response = await client.get(f"/api/sales/{sale['id']}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["client"]["firstName"] == "Marta"
        assert body["artist"]["name"] == "Kai"
        assert body["appointment"]["id"] == appointment["id"]

    async def test_sale_without_appointment(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        sale = await make_sale(customer["id"], artist["id"])

        response = await client.get(f"/api/sales/{sale['id']}", headers=auth_headers)

        assert response.json()["appointment"] is None

    async def test_date_range_is_inclusive(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        await make_sale(customer["id"], artist["id"], saleDate="2024-05-01T09:00:00+02:00")
        await make_sale(customer["id"], artist["id"], saleDate="2024-05-15T23:30:00+02:00")
        await make_sale(customer["id"], artist["id"], saleDate="2024-05-16T00:30:00+02:00")

        response = await client.get(
            "/api/sales",
            params={"startDate": "2024-05-01", "endDate": "2024-05-15"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert len(response.json()) == 2

    async def test_newest_first(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        older = await make_sale(customer["id"], artist["id"], saleDate="2024-03-01T10:00:00Z")
        newer = await make_sale(customer["id"], artist["id"], saleDate="2024-04-01T10:00:00Z")

        response = await client.get("/api/sales", headers=auth_headers)

        assert [s["id"] for s in response.json()] == [newer["id"], older["id"]]

    async def test_delete(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        sale = await make_sale(customer["id"], artist["id"])

        response = await client.delete(f"/api/sales/{sale['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert (await client.get(f"/api/sales/{sale['id']}", headers=auth_headers)).status_code == 404


class TestSalesDateRangeParameters:

    async def test_start_date_alone_rejected(self, client, auth_headers):
        response = await client.get("/api/sales", params={"startDate": "2024-05-01"}, headers=auth_headers)

        assert response.status_code == 400
        assert "endDate" in response.json()["errors"]

    async def test_end_date_alone_rejected(self, client, auth_headers):
        response = await client.get("/api/sales", params={"endDate": "2024-05-31"}, headers=auth_headers)

        assert response.status_code == 400
        assert "startDate" in response.json()["errors"]

    async def test_inverted_range_rejected(self, client, auth_headers):
        response = await client.get(
            "/api/sales", params={"startDate": "2024-05-31", "endDate": "2024-05-01"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert "startDate" in response.json()["errors"]

    async def test_range_is_paginated(self, client, auth_headers, make_client, make_artist, make_sale):
        customer = await make_client()
        artist = await make_artist()
        first = await make_sale(customer["id"], artist["id"], saleDate="2024-05-03T10:00:00Z")
        second = await make_sale(customer["id"], artist["id"], saleDate="2024-05-04T10:00:00Z")
        third = await make_sale(customer["id"], artist["id"], saleDate="2024-05-05T10:00:00Z")

        params = {"startDate": "2024-05-01", "endDate": "2024-05-31", "limit": 2}
        page_one = await client.get("/api/sales", params=params, headers=auth_headers)
        page_two = await client.get("/api/sales", params={**params, "skip": 2}, headers=auth_headers)

        assert [s["id"] for s in page_one.json()] == [third["id"], second["id"]]
        assert [s["id"] for s in page_two.json()] == [first["id"]]
