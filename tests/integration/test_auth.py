"""Integration tests for bearer-token authentication and /api/auth/user."""

import pytest


class TestAuthentication:

    @pytest.mark.parametrize("path", ["/api/clients", "/api/artists", "/api/appointments", "/api/inventory", "/api/sales"])
    async def test_missing_token_is_401(self, client, path):
        response = await client.get(path)

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_wrong_token_is_401(self, client):
        response = await client.get("/api/clients", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    async def test_missing_token_writes_nothing(self, client, auth_headers):
        response = await client.post("/api/clients", json={"firstName": "A", "lastName": "B"})

        assert response.status_code == 401
        assert (await client.get("/api/clients", headers=auth_headers)).json() == []


class TestCurrentUser:

    async def test_admin_token(self, client, auth_headers):
        response = await client.get("/api/auth/user", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == "admin"
        assert response.json()["role"] == "admin"

    async def test_configured_token_maps_to_user_and_role(self, client):
        headers = {"Authorization": "Bearer artist-token"}

        first = await client.get("/api/auth/user", headers=headers)
        second = await client.get("/api/auth/user", headers=headers)

        assert first.json()["id"] == "artist-user-1"
        assert first.json()["role"] == "artist"
        assert second.json()["createdAt"] == first.json()["createdAt"]

    async def test_requires_token(self, client):
        response = await client.get("/api/auth/user")
        assert response.status_code == 401
