import asyncio
import os
import tempfile

import pytest

_workdir = tempfile.mkdtemp(prefix="top-catalog-tests-")

# Settings are read when src is first imported
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_workdir, 'test.db')}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["UPLOAD_DIR"] = os.path.join(_workdir, "uploads")
os.environ["DOMAIN"] = "https://catalog.test"

from bson import ObjectId  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src import app  # noqa: E402
from src.db.main import drop_db  # noqa: E402

TEST_USER = {"email": "token@mail.ru", "password": "givetoken"}


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client

    asyncio.run(drop_db())


@pytest.fixture()
def token(client):
    client.post("/auth/register", json=TEST_USER)
    response = client.post("/auth/login", json=TEST_USER)
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest.fixture()
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def product_id():
    return str(ObjectId())


@pytest.fixture()
def review_payload(product_id):
    return {
        "authorName": "name author",
        "description": "description review",
        "rating": 5,
        "title": "title review",
        "productId": product_id,
    }
