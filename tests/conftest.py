import os
import uuid
from typing import AsyncGenerator
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

patch.dict(
    os.environ,
    {"MONGO_URI": "mongodb://localhost:27017", "SITE_URL": "https://blog.example.com"},
).start()  # noqa

from core import db  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
def database():
    client = AsyncMongoMockClient()
    return client[f"blog_test_{uuid.uuid4().hex[:8]}"]


@pytest_asyncio.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[db.get_database] = lambda: database

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http_client:
        yield http_client

    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client: AsyncClient):
    async def _register(name: str, email: str, password: str = "s3cret-pass", **extra) -> dict:
        response = await client.post(
            "/api/register",
            json={"name": name, "email": email, "password": password, **extra},
        )
        assert response.status_code == 201, response.text
        return response.json()["user"]

    return _register
