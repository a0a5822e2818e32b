import uuid

import pytest

from todoapp.models import (
    AuthState,
    AuthStatus,
    Credentials,
    Priority,
    Todo,
    TodoForm,
    User,
)


def test_priority_display():
    todo = Todo.new(uuid.uuid4(), "title", None, Priority.HIGH)
    assert str(todo.priority) == "High"
    assert [str(p) for p in Priority] == ["Low", "Medium", "High"]


def test_new_todo_defaults():
    uid = uuid.uuid4()
    todo = Todo.new(uid, "title", None, Priority.LOW)
    assert todo.user_id == uid
    assert todo.completed is False
    assert todo.created_at == todo.updated_at


def test_toggle_completed():
    todo = Todo.new(uuid.uuid4(), "t", "d", Priority.HIGH)
    before = todo.updated_at
    todo.toggle_completed()
    assert todo.completed is True
    assert todo.updated_at >= before
    todo.toggle_completed()
    assert todo.completed is False


def test_todo_round_trip():
    todo = Todo.new(uuid.uuid4(), "write", "desc", Priority.MEDIUM)
    assert Todo.from_dict(todo.to_dict()) == todo


def test_todo_from_dict_accepts_z_suffix():
    data = Todo.new(uuid.uuid4(), "x", None, Priority.LOW).to_dict()
    data["created_at"] = "2024-01-02T03:04:05Z"
    assert Todo.from_dict(data).created_at.year == 2024


def test_todo_from_dict_missing_field():
    with pytest.raises(ValueError):
        Todo.from_dict({"id": str(uuid.uuid4())})


def test_user_round_trip():
    todo = Todo.new(uuid.uuid4(), "x", None, Priority.LOW)
    user = User(uuid.uuid4(), "alice", "alice@example.com", todo.created_at)
    assert User.from_dict(user.to_dict()) == user


def test_auth_state_rules():
    assert AuthState().status is AuthStatus.UNKNOWN
    with pytest.raises(ValueError):
        AuthState(AuthStatus.AUTHENTICATED)


def test_forms_defaults():
    assert TodoForm().priority is Priority.MEDIUM
    password = "password"
    creds = Credentials(username="bob", password=password)
    assert creds.to_dict() == {"username": "bob", "password": "password"}