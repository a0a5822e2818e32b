import uuid

import pytest

from todoapp.models import Priority
from todoapp.server.records import (
    AuthResponse,
    CreateTodo,
    LoginUser,
    RegisterUser,
    TodoRecord,
    UpdateTodo,
)


def _row(**over):
    row = {
        "id": str(uuid.uuid4()),
        "user_id": str(uuid.uuid4()),
        "title": "t",
        "description": None,
        "completed": 1,
        "priority": "high",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    row.update(over)
    return row


def test_from_row_converts_types():
    rec = TodoRecord.from_row(_row())
    assert rec.priority is Priority.HIGH
    assert rec.completed is True


def test_to_dict_uses_capitalised_priority():
    row = _row(priority="low")
    data = TodoRecord.from_row(row).to_dict()
    assert data["priority"] == "Low"
    assert data["id"] == row["id"]


def test_create_todo_parsing():
    ct = CreateTodo.from_dict({"title": "a", "priority": "Medium"})
    assert ct.priority is Priority.MEDIUM
    assert ct.description is None


@pytest.mark.parametrize(
    "data",
    [{"priority": "Low"}, {"title": "a"}, {"title": "a", "priority": "urgent"}, [1]],
)
def test_create_todo_rejects(data):
    with pytest.raises(ValueError):
        CreateTodo.from_dict(data)


def test_update_todo_all_optional():
    assert UpdateTodo.from_dict({}) == UpdateTodo()
    assert UpdateTodo.from_dict({"completed": True}).completed is True


def test_update_todo_rejects_bad_completed():
    with pytest.raises(ValueError):
        UpdateTodo.from_dict({"completed": "yes"})


def test_user_payloads():
    assert RegisterUser.from_dict({"username": "u", "password": "password"}).username == "u"
    with pytest.raises(ValueError):
        LoginUser.from_dict({"username": "u"})
    assert AuthResponse("token").to_dict() == {"token": "token"}