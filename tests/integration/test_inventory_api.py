"""Integration tests for /api/inventory and stock classification."""


async def create_item(client, headers, **overrides):
    payload = {"name": "Black ink", "category": "ink", "currentStock": 10, "minLevel": 5, "unitPrice": "12.50"}
    payload.update(overrides)
    response = await client.post("/api/inventory", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestInventory:

    async def test_stock_status_on_create(self, client, auth_headers):
        low = await create_item(client, auth_headers, name="Needles 3RL", category="needles", currentStock=3, minLevel=5)
        empty = await create_item(client, auth_headers, name="Gloves", category="supplies", currentStock=0, minLevel=5)
        full = await create_item(client, auth_headers, name="Red ink", currentStock=20, minLevel=5)

        assert low["stockStatus"] == "low_stock"
        assert empty["stockStatus"] == "out_of_stock"
        assert full["stockStatus"] == "in_stock"

    async def test_low_stock_filter_includes_out_of_stock(self, client, auth_headers):
        await create_item(client, auth_headers, name="A", currentStock=3, minLevel=5)
        await create_item(client, auth_headers, name="B", currentStock=0, minLevel=5)
        await create_item(client, auth_headers, name="C", currentStock=20, minLevel=5)

        response = await client.get("/api/inventory", params={"lowStock": "true"}, headers=auth_headers)

        assert sorted(i["name"] for i in response.json()) == ["A", "B"]

    async def test_stock_status_filter(self, client, auth_headers):
        await create_item(client, auth_headers, name="A", currentStock=3, minLevel=5)
        await create_item(client, auth_headers, name="B", currentStock=0, minLevel=5)

        response = await client.get("/api/inventory", params={"stockStatus": "out_of_stock"}, headers=auth_headers)

        assert [i["name"] for i in response.json()] == ["B"]

    async def test_update_recomputes_status(self, client, auth_headers):
        item = await create_item(client, auth_headers, currentStock=10, minLevel=5)

        response = await client.patch(f"/api/inventory/{item['id']}", json={"currentStock": 2}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["stockStatus"] == "low_stock"

    async def test_negative_stock_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/inventory",
            json={"name": "Ink", "category": "ink", "currentStock": -1, "unitPrice": "1.00"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "currentStock" in response.json()["errors"]

    async def test_unknown_category_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/inventory",
            json={"name": "Ink", "category": "food", "unitPrice": "1.00"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "category" in response.json()["errors"]

    async def test_delete(self, client, auth_headers):
        item = await create_item(client, auth_headers)

        response = await client.delete(f"/api/inventory/{item['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert (await client.get(f"/api/inventory/{item['id']}", headers=auth_headers)).status_code == 404


class TestInventoryFiltersWithPagination:
    """Stock filters are applied before skip/limit."""

    async def test_stock_status_match_beyond_first_page(self, client, auth_headers):
        await create_item(client, auth_headers, name="A ink", currentStock=10, minLevel=2)
        await create_item(client, auth_headers, name="B ink", currentStock=10, minLevel=2)
        await create_item(client, auth_headers, name="C ink", currentStock=0, minLevel=2)

        response = await client.get(
            "/api/inventory", params={"stockStatus": "out_of_stock", "limit": 2}, headers=auth_headers
        )

        assert [i["name"] for i in response.json()] == ["C ink"]

    async def test_low_stock_honours_category_and_limit(self, client, auth_headers):
        await create_item(client, auth_headers, name="Gloves", category="supplies", currentStock=0, minLevel=5)
        await create_item(client, auth_headers, name="Ink", category="ink", currentStock=1, minLevel=5)
        await create_item(client, auth_headers, name="Ink refill", category="ink", currentStock=2, minLevel=5)

        response = await client.get(
            "/api/inventory", params={"lowStock": "true", "category": "ink", "limit": 1}, headers=auth_headers
        )

        assert [i["name"] for i in response.json()] == ["Ink"]

    async def test_low_stock_skip(self, client, auth_headers):
        await create_item(client, auth_headers, name="A", currentStock=1, minLevel=5)
        await create_item(client, auth_headers, name="B", currentStock=0, minLevel=5)
        await create_item(client, auth_headers, name="C", currentStock=50, minLevel=5)

        response = await client.get("/api/inventory", params={"lowStock": "true", "skip": 1}, headers=auth_headers)

        body = response.json()
        assert [i["name"] for i in body] == ["B"]
        assert body[0]["stockStatus"] == "out_of_stock"

    async def test_in_stock_filter(self, client, auth_headers):
        await create_item(client, auth_headers, name="A", currentStock=5, minLevel=5)
        await create_item(client, auth_headers, name="B", currentStock=6, minLevel=5)

        response = await client.get("/api/inventory", params={"stockStatus": "in_stock"}, headers=auth_headers)

        assert [i["name"] for i in response.json()] == ["B"]
