from __future__ import annotations

import json
from pathlib import Path

from fastapi.testclient import TestClient

from taskboard.adapters.task_repository_memory import MemoryTaskRepository
from taskboard.app.config import get_settings
from taskboard.app.store import TaskStore
from taskboard.main import create_app


def _client(store: TaskStore | None = None) -> TestClient:
    if store is None:
        store = TaskStore(MemoryTaskRepository())
    return TestClient(create_app(store))


def test_add_toggle_delete_flow() -> None:
    client = _client()

    r = client.get("/add", params={"task": "buy milk"})
    assert r.status_code == 200
    assert r.content == b""
    assert client.post("/add", params={"task": "walk dog"}).status_code == 200
    assert client.post("/toggle", params={"id": "1"}).status_code == 200

    r = client.get("/list")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == [
        {"ID": 1, "Task": "buy milk", "Done": True},
        {"ID": 2, "Task": "walk dog", "Done": False},
    ]

    assert client.get("/delete", params={"id": "1"}).status_code == 200
    assert client.get("/list").json() == [{"ID": 2, "Task": "walk dog", "Done": False}]


def test_list_empty_store_is_empty_array() -> None:
    r = _client().get("/list")
    assert r.status_code == 200
    assert r.json() == []


def test_add_without_task_is_400() -> None:
    client = _client()
    assert client.get("/add").status_code == 400
    r = client.post("/add", params={"task": "   "})
    assert r.status_code == 400
    assert "empty" in r.json()["detail"]
    assert client.get("/list").json() == []


def test_delete_and_toggle_reject_non_integer_ids() -> None:
    client = _client()
    client.get("/add", params={"task": "x"})
    for path in ("/delete", "/toggle"):
        assert client.get(path, params={"id": "abc"}).status_code == 400
        assert client.post(path).status_code == 400
    assert client.get("/list").json() == [{"ID": 1, "Task": "x", "Done": False}]


def test_unknown_id_is_silent_success() -> None:
    repo = MemoryTaskRepository()
    client = _client(TaskStore(repo))
    client.get("/add", params={"task": "x"})
    assert client.get("/delete", params={"id": "99"}).status_code == 200
    assert client.get("/toggle", params={"id": "99"}).status_code == 200
    assert repo.saves == 1


def test_list_rejects_post() -> None:
    assert _client().post("/list").status_code == 405


def test_healthz_reports_counter() -> None:
    client = _client()
    client.get("/add", params={"task": "a"})
    client.get("/add", params={"task": "b"})
    client.get("/delete", params={"id": "2"})
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "tasks": 1, "next_id": 3}


def test_startup_loads_store_from_configured_file(monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([{"ID": 4, "Task": "carry over", "Done": True}]), encoding="utf-8")

    monkeypatch.setenv("TASKS_FILE", str(path))
    monkeypatch.setenv("TASK_REPO_BACKEND", "file")
    get_settings.cache_clear()
    try:
        with TestClient(create_app()) as client:
            assert client.get("/list").json() == [{"ID": 4, "Task": "carry over", "Done": True}]
            client.get("/add", params={"task": "next"})
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved[-1] == {"ID": 5, "Task": "next", "Done": False}
    finally:
        get_settings.cache_clear()


def test_memory_backend_selected_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("TASK_REPO_BACKEND", "memory")
    get_settings.cache_clear()
    try:
        app = create_app()
        with TestClient(app) as client:
            client.get("/add", params={"task": "ephemeral"})
            assert client.get("/list").json()[0]["Task"] == "ephemeral"
        assert isinstance(app.state.task_store, TaskStore)
    finally:
        get_settings.cache_clear()
