from unittest.mock import AsyncMock

import pytest

from models.user import UserModel
from services.auth_service import hash_password, require_sign_in
from main import app


@pytest.fixture
def users(monkeypatch):
    find_one = AsyncMock(return_value=None)
    save = AsyncMock(return_value={"_id": 1, "name": "Ann", "email": "ann@example.com", "role": 0})
    monkeypatch.setattr(UserModel, "find_one", find_one)
    monkeypatch.setattr(UserModel, "save", save)
    return find_one, save


class TestAuthRoutes:

    async def test_register(self, app_client, users):
        find_one, save = users

        response = await app_client.post("/api/v1/auth/register", json={
            "name": "Ann",
            "email": "ann@example.com",
            "password": "rightPass",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["extensions"]["data"] == {"_id": 1, "email": "ann@example.com"}
        find_one.assert_awaited_once_with({"email": "ann@example.com"})
        save.assert_awaited_once()

    async def test_register_duplicate_email(self, app_client, users):
        find_one, save = users
        find_one.return_value = {"_id": 1, "email": "ann@example.com"}

        response = await app_client.post("/api/v1/auth/register", json={
            "name": "Ann",
            "email": "ann@example.com",
            "password": "rightPass",
        })

        assert response.status_code == 400
        assert response.json()["extensions"]["code"] == "USER_EXISTS"
        save.assert_not_called()

    async def test_login_success_sets_cookie(self, app_client, users):
        find_one, _ = users
        find_one.return_value = {
            "_id": 1,
            "email": "ann@example.com",
            "password": hash_password("rightPass"),
            "role": 0,
        }

        response = await app_client.post("/api/v1/auth/login", json={
            "email": "ann@example.com",
            "password": "rightPass",
        })

        assert response.status_code == 200
        assert response.json()["extensions"]["data"]["access_token"]
        assert "access_token=" in response.headers.get("set-cookie", "")

    async def test_login_wrong_password(self, app_client, users):
        find_one, _ = users
        find_one.return_value = {
            "_id": 1,
            "email": "ann@example.com",
            "password": hash_password("rightPass"),
        }

        response = await app_client.post("/api/v1/auth/login", json={
            "email": "ann@example.com",
            "password": "wrongPass",
        })

        assert response.status_code == 401
        assert response.json()["extensions"]["code"] == "INVALID_CREDENTIALS"

    async def test_me_is_wrapped_in_envelope(self, app_client):
        app.dependency_overrides[require_sign_in] = lambda: {"_id": 1, "email": "ann@example.com"}

        response = await app_client.get("/api/v1/auth/me")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["extensions"]["data"] == {"user": {"_id": 1, "email": "ann@example.com"}}

    async def test_logout_without_token(self, app_client):
        response = await app_client.post("/api/v1/auth/logout")

        assert response.status_code == 401
        assert response.json()["message"] == "Not authenticated"
