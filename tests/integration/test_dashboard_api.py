"""Integration tests for /api/dashboard/stats."""

from decimal import Decimal


class TestDashboardStats:

    async def test_empty_studio(self, client, auth_headers):
        response = await client.get("/api/dashboard/stats", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "todayAppointments": 0,
            "monthlyRevenue": 0.0,
            "activeArtists": 0,
            "lowStockItems": 0,
        }

    async def test_aggregates(self, client, auth_headers, make_client, make_artist, make_appointment, make_sale):
        customer = await make_client()
        artist = await make_artist()
        await make_artist(name="Retired", isActive=False)

        await make_appointment(customer["id"], artist["id"], scheduledDate="2024-05-15T10:00:00+02:00")
        await make_appointment(customer["id"], artist["id"], scheduledDate="2024-05-16T10:00:00+02:00")

        await make_sale(customer["id"], artist["id"], totalAmount="100.00", saleDate="2024-05-03T12:00:00Z")
        await make_sale(customer["id"], artist["id"], totalAmount="250.50", saleDate="2024-05-28T12:00:00Z")
        await make_sale(customer["id"], artist["id"], totalAmount="75.00", saleDate="2024-04-28T12:00:00Z")

        for name, current, minimum in (("Needles", 3, 5), ("Gloves", 0, 5), ("Ink", 20, 5)):
            await client.post(
                "/api/inventory",
                json={"name": name, "category": "supplies", "currentStock": current, "minLevel": minimum, "unitPrice": "1.00"},
                headers=auth_headers,
            )

        response = await client.get(
            "/api/dashboard/stats", params={"asOf": "2024-05-15T12:00:00Z"}, headers=auth_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["todayAppointments"] == 1
        assert Decimal(str(body["monthlyRevenue"])) == Decimal("350.50")
        assert body["activeArtists"] == 1
        assert body["lowStockItems"] == 2

    async def test_requires_token(self, client):
        response = await client.get("/api/dashboard/stats")
        assert response.status_code == 401
