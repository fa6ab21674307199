import logging
import os

# phải set trước khi import config
os.environ.setdefault("HASH_KEY", "test-hash-key-for-password-helpers")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-with-at-least-32-bytes")

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from controllers.category_controller import get_category_model
from logger import get_logger
from main import app
from services.auth_service import require_admin
from utils.slug import get_slugify

ADMIN_USER = {"_id": 1, "name": "admin", "email": "admin@example.com", "role": 1}


@pytest.fixture
def category_model():
    """Thay cho CategoryModel: gọi được như constructor, có các hàm truy vấn async"""
    model = MagicMock(name="CategoryModel")
    model.find_one = AsyncMock(return_value=None)
    model.find = AsyncMock(return_value=[])
    model.find_by_id_and_update = AsyncMock(return_value=None)
    model.find_by_id_and_delete = AsyncMock(return_value=None)
    model.return_value.save = AsyncMock(return_value=None)
    return model


@pytest.fixture
def fake_slugify():
    return MagicMock(side_effect=lambda s: f"slug-{s}")


@pytest.fixture
def logger():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def make_client(category_model, fake_slugify, logger):
    def _make(admin: bool = True) -> AsyncClient:
        app.dependency_overrides[get_category_model] = lambda: category_model
        app.dependency_overrides[get_slugify] = lambda: fake_slugify
        app.dependency_overrides[get_logger] = lambda: logger
        if admin:
            app.dependency_overrides[require_admin] = lambda: ADMIN_USER
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
async def app_client(make_client):
    client = make_client()
    async with client:
        yield client
