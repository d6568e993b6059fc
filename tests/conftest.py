import random
import uuid

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from quiz_app.auth.permissions import UserContext
from quiz_app.database import create_indexes, get_db
from quiz_app.main import app
from quiz_app.players.question_service import get_rng
from quiz_app.users import user_service
from quiz_app.users.user_models import Role


def _new_db():
    return AsyncMongoMockClient()[f"quiz_test_{uuid.uuid4().hex[:8]}"]


@pytest.fixture
async def db():
    database = _new_db()
    await create_indexes(database)
    return database


@pytest.fixture
def api_db():
    return _new_db()


@pytest.fixture
def client(api_db):
    app.dependency_overrides[get_db] = lambda: api_db
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client, username, role, password="secret123"):
    """Returns (user_id, auth headers)"""
    resp = client.post("/api/auth/register", json={"username": username, "password": password, "role": role})
    assert resp.status_code == 201, resp.text
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}


async def make_user(db, username, role: Role) -> UserContext:
    user = await user_service.register_user(db, username, "secret123", role)
    return UserContext(user["user_id"], role)
