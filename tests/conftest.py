from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from todo_api.core.config import Settings
from todo_api.dao import Database, TodoDAO, UserDAO
from todo_api.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def client(settings):
    # Entering the context runs the lifespan, which creates the store
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def db():
    return Database()


@pytest.fixture
def users(db):
    return UserDAO(db)


@pytest.fixture
def todos(db):
    return TodoDAO(db)


@pytest.fixture
def deadline():
    return datetime(2025, 1, 1)


@pytest.fixture
def create_user(client):
    def _create(username="a", name="A"):
        resp = client.post("/users", json={"name": name, "username": username})
        assert resp.status_code == 201
        return resp.json()

    return _create


@pytest.fixture
def create_todo(client):
    def _create(username="a", title="t", deadline="2025-01-01"):
        return client.post(
            "/todos",
            json={"title": title, "deadline": deadline},
            headers={"username": username},
        )

    return _create
