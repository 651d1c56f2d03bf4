# tests/test_api.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from todokit.domain.todo import Todo
from todokit.interfaces.api import create_app

from .conftest import ID_A, ID_B, ID_C, UNKNOWN_ID
from .fakes import FailingTodoRepository, RecordingTodoRepository


@pytest.fixture()
def client(repo: RecordingTodoRepository) -> TestClient:
    return TestClient(create_app(repo))


def test_list_todos(client: TestClient) -> None:
    response = client.get("/todos")
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [ID_C, ID_B, ID_A]


def test_list_todos_with_filter_and_sort(client: TestClient) -> None:
    response = client.get("/todos", params={"filter": "active", "sortBy": "priority", "sortOrder": "desc"})
    assert response.status_code == 200
    assert [item["title"] for item in response.json()] == ["Call mom", "Water plants"]


def test_list_todos_rejects_unknown_sort(client: TestClient) -> None:
    response = client.get("/todos", params={"sortBy": "title"})
    assert response.status_code == 400
    assert response.json()["code"] == "BAD_REQUEST"


def test_get_todo_uses_camel_case(client: TestClient) -> None:
    body = client.get(f"/todos/{ID_B}").json()
    assert body["title"] == "File taxes"
    assert body["completed"] is True
    assert body["createdAt"].startswith("2026-03-13")
    assert body["dueDate"] is None


def test_get_unknown_todo_is_404(client: TestClient) -> None:
    response = client.get(f"/todos/{UNKNOWN_ID}")
    assert response.status_code == 404
    assert response.json() == {"code": "TODO_NOT_FOUND", "message": f"Todo with ID {UNKNOWN_ID} not found"}


def test_create_todo(client: TestClient, repo: RecordingTodoRepository) -> None:
    response = client.post("/todos", json={"title": "Buy milk", "priority": "high"})

    assert response.status_code == 201
    body = response.json()
    assert body["priority"] == "high"
    assert body["completed"] is False
    assert repo.get_by_id(body["id"]).title_value == "Buy milk"


def test_create_invalid_todo_lists_field_errors(client: TestClient, repo: RecordingTodoRepository) -> None:
    response = client.post("/todos", json={"title": "a", "priority": "urgent"})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "Validation failed for CreateTodoValidationService"
    assert set(body["errors"]) == {"title", "priority"}
    assert repo.writes == []


def test_update_todo(client: TestClient, repo: RecordingTodoRepository) -> None:
    response = client.put(f"/todos/{ID_A}", json={"title": "Water the plants", "completed": True})

    assert response.status_code == 200
    assert response.json()["title"] == "Water the plants"
    stored = repo.get_by_id(ID_A)
    assert stored.completed is True
    assert stored.priority_level.value == "low"


def test_update_unknown_todo_is_404(client: TestClient, repo: RecordingTodoRepository) -> None:
    response = client.put(f"/todos/{UNKNOWN_ID}", json={"title": "Nope"})
    assert response.status_code == 404
    assert repo.writes == []


def test_toggle_todo(client: TestClient) -> None:
    assert client.patch(f"/todos/{ID_B}/toggle").json()["completed"] is False
    assert client.patch(f"/todos/{ID_B}/toggle").json()["completed"] is True


def test_complete_twice_is_409(client: TestClient) -> None:
    assert client.patch(f"/todos/{ID_A}/complete").status_code == 200

    response = client.patch(f"/todos/{ID_A}/complete")
    assert response.status_code == 409
    assert response.json()["code"] == "TODO_ALREADY_COMPLETED"


def test_delete_todo(client: TestClient, repo: RecordingTodoRepository) -> None:
    response = client.delete(f"/todos/{ID_C}")
    assert response.status_code == 204
    assert repo.get_by_id(ID_C) is None
    assert client.delete(f"/todos/{ID_C}").status_code == 404


def test_stats(client: TestClient, repo: RecordingTodoRepository) -> None:
    repo.create(Todo(title="Fresh high", priority="high"))

    body = client.get("/todos/stats").json()
    assert body["total"] == 4
    assert body["active"] == 3
    assert body["completed"] == 1
    assert body["highPriority"] == 2
    assert body["completionPercent"] == 25.0


def test_repository_failure_is_500() -> None:
    client = TestClient(create_app(FailingTodoRepository()))
    response = client.get("/todos")
    assert response.status_code == 500
    assert response.json() == {"code": "REPOSITORY_ERROR", "message": "connection refused"}
