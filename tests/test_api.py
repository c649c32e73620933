# tests/test_api.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.security import ACCESS_TOKEN_EXPIRE_MINUTES, create_access_token


def test_health_is_public(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_register_returns_id_and_username_only(client: TestClient) -> None:
    r = client.post("/register", json={"username": "alice", "password": "pw1"})
    assert r.status_code == 201
    assert r.headers["content-type"].startswith("application/json")
    body = r.json()
    assert set(body) == {"id", "username"}
    assert body["username"] == "alice"


def test_register_duplicate(client: TestClient) -> None:
    assert client.post("/register", json={"username": "alice", "password": "pw1"}).status_code == 201

    r = client.post("/register", json={"username": "alice", "password": "pw2"})
    assert r.status_code == 409
    assert r.json()["detail"] == "Username already exists"


def test_register_malformed(client: TestClient) -> None:
    r = client.post("/register", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400

    assert client.post("/register", json={"username": "alice"}).status_code == 400
    assert client.post("/register", json={"username": "   ", "password": "pw"}).status_code == 400
    assert client.post("/register", json={"username": "bob", "password": "x" * 73}).status_code == 400


def test_login(client: TestClient) -> None:
    client.post("/register", json={"username": "alice", "password": "pw1"})

    r = client.post("/login", json={"username": "alice", "password": "pw1"})
    assert r.status_code == 200
    assert isinstance(r.json()["token"], str)

    r = client.post("/login", json={"username": "alice", "password": "wrong"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"

    assert client.post("/login", json={"username": "nobody", "password": "pw1"}).status_code == 401
    assert client.post("/login", json={}).status_code == 400


def test_tasks_require_token(client: TestClient, auth_headers: dict[str, str]) -> None:
    r = client.get("/tasks", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == []

    r = client.get("/tasks")
    assert r.status_code == 401
    assert r.json()["detail"] == "Missing token"

    r = client.post("/tasks", json={"description": "sneaky"})
    assert r.status_code == 401

    r = client.get("/tasks", headers={"Authorization": "garbage"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid token"


def test_bearer_prefix_accepted(client: TestClient, auth_headers: dict[str, str]) -> None:
    headers = {"Authorization": "Bearer " + auth_headers["Authorization"]}
    assert client.get("/tasks", headers=headers).status_code == 200


def test_expired_token_rejected(client: TestClient, settings: Settings) -> None:
    issued = datetime.now(timezone.utc) - timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES, seconds=30)
    token = create_access_token("alice", settings, now=issued)

    r = client.get("/tasks", headers={"Authorization": token})
    assert r.status_code == 401


def test_gate_runs_before_validation(client: TestClient) -> None:
    # no token: rejected before the id is validated or any store is touched
    assert client.get("/tasks/abc").status_code == 401
    assert client.delete("/tasks/0").status_code == 401


def test_task_crud_flow(client: TestClient, auth_headers: dict[str, str]) -> None:
    r = client.post("/tasks", json={"description": "buy milk"}, headers=auth_headers)
    assert r.status_code == 201
    task = r.json()
    assert task["description"] == "buy milk"
    assert task["completed"] is False
    assert "created_at" in task
    task_id = task["id"]

    r = client.get(f"/tasks/{task_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == task

    r = client.put(
        f"/tasks/{task_id}",
        json={"description": "buy milk", "completed": True},
        headers=auth_headers,
    )
    assert r.status_code == 200
    updated = r.json()
    assert updated["completed"] is True
    assert updated["id"] == task_id
    assert updated["created_at"] == task["created_at"]

    r = client.get("/tasks", headers=auth_headers)
    assert [t["id"] for t in r.json()] == [task_id]

    r = client.delete(f"/tasks/{task_id}", headers=auth_headers)
    assert r.status_code == 204
    assert r.content == b""

    r = client.delete(f"/tasks/{task_id}", headers=auth_headers)
    assert r.status_code == 404
    assert client.get(f"/tasks/{task_id}", headers=auth_headers).status_code == 404


def test_unknown_task(client: TestClient, auth_headers: dict[str, str]) -> None:
    r = client.get("/tasks/999", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Task not found"

    r = client.put("/tasks/999", json={"description": "x", "completed": True}, headers=auth_headers)
    assert r.status_code == 404


def test_bad_task_ids(client: TestClient, auth_headers: dict[str, str]) -> None:
    for bad in ("abc", "0", "-1", "1.5"):
        r = client.get(f"/tasks/{bad}", headers=auth_headers)
        assert r.status_code == 400, bad


def test_bad_task_bodies(client: TestClient, auth_headers: dict[str, str]) -> None:
    assert client.post("/tasks", json={}, headers=auth_headers).status_code == 400

    created = client.post("/tasks", json={"description": "a"}, headers=auth_headers).json()
    r = client.put(f"/tasks/{created['id']}", json={"completed": True}, headers=auth_headers)
    assert r.status_code == 400


def test_method_not_allowed(client: TestClient, auth_headers: dict[str, str]) -> None:
    assert client.patch("/tasks/1", json={}, headers=auth_headers).status_code == 405
    assert client.delete("/tasks", headers=auth_headers).status_code == 405
    assert client.get("/login").status_code == 405


def test_created_at_carries_utc_offset(client: TestClient, auth_headers: dict[str, str]) -> None:
    created = client.post("/tasks", json={"description": "a"}, headers=auth_headers).json()
    fetched = client.get(f"/tasks/{created['id']}", headers=auth_headers).json()

    for body in (created, fetched):
        ts = datetime.fromisoformat(body["created_at"].replace("Z", "+00:00"))
        assert ts.tzinfo is not None
        assert ts.utcoffset() == timedelta(0)


def test_missing_task_id_is_not_found(client: TestClient, auth_headers: dict[str, str]) -> None:
    for method in ("GET", "PUT", "DELETE"):
        r = client.request(method, "/tasks/", headers=auth_headers, follow_redirects=False)
        assert r.status_code == 404, method
        assert r.json()["detail"] == "Task id missing"

    # still gated
    assert client.get("/tasks/", follow_redirects=False).status_code == 401


def test_validation_detail_names_the_field(client: TestClient, auth_headers: dict[str, str]) -> None:
    r = client.post("/tasks", json={}, headers=auth_headers)
    assert r.status_code == 400
    assert "description" in r.json()["detail"]
