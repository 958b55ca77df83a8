import os

# Settings are read at import time by taskboard.main
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", ENV="test", AUTO_CREATE_TABLES=True, LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client, app):
    session = app.state.db.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_board(client):
    def _make_board(name="Test Board", **fields):
        res = client.post("/boards", json={"name": name, **fields})
        assert res.status_code == 201, res.text
        return res.json()

    return _make_board


@pytest.fixture
def make_status(client):
    def _make_status(board_id, name="To Do", position=0, **fields):
        res = client.post(f"/boards/{board_id}/statuses", json={"name": name, "position": position, **fields})
        assert res.status_code == 201, res.text
        return res.json()

    return _make_status


@pytest.fixture
def make_task(client):
    def _make_task(status_id, title="Task", position=0, **fields):
        res = client.post("/tasks", json={"boardStatusId": status_id, "title": title, "position": position, **fields})
        assert res.status_code == 201, res.text
        return res.json()

    return _make_task


@pytest.fixture
def make_subtask(client):
    def _make_subtask(task_id, description="Subtask", **fields):
        res = client.post("/subtasks", json={"taskId": task_id, "description": description, **fields})
        assert res.status_code == 201, res.text
        return res.json()

    return _make_subtask
