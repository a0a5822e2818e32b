import uuid
from datetime import datetime, timezone

import pytest
import requests
import responses

from todoapp.client.utils import (
    USER_STORAGE_KEY,
    TODOS_STORAGE_KEY,
    LocalStorage,
    authenticate_user,
    clear_todos,
    clear_user,
    load_todos,
    load_user,
    login_user,
    save_todos,
    save_user,
    validate_email,
    validate_todo_title,
)
from todoapp.models import Credentials, Priority, Todo, User

BASE = "http://api.test/api"


@pytest.fixture
def user():
    return User(
        id=uuid.uuid4(),
        username="alice",
        email="alice@example.com",
        created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


@pytest.fixture
def todos():
    owner = uuid.uuid4()
    first = Todo.new(owner, "Buy milk", None, Priority.LOW)
    second = Todo.new(owner, "Write report", "quarterly", Priority.HIGH)
    return [first, second]


def test_storage_set_get_roundtrip():
    storage = LocalStorage()
    storage.set("k", {"a": [1, 2]})
    assert storage.get("k") == {"a": [1, 2]}
    assert "k" in storage


def test_storage_missing_key_raises():
    with pytest.raises(KeyError):
        LocalStorage().get("absent")


def test_storage_rejects_unserializable():
    with pytest.raises(ValueError):
        LocalStorage().set("k", object())


def test_storage_delete():
    storage = LocalStorage()
    storage.set("k", 1)
    storage.delete("k")
    storage.delete("k")
    assert "k" not in storage


def test_storage_persists_to_file(tmp_path):
    path = tmp_path / "store.json"
    LocalStorage(path).set("k", ["x"])
    assert LocalStorage(path).get("k") == ["x"]


def test_save_and_clear_todos(todos):
    storage = LocalStorage()
    save_todos(storage, todos)
    stored = [Todo.from_dict(d) for d in storage.get(TODOS_STORAGE_KEY)]
    assert stored == todos
    clear_todos(storage)
    assert TODOS_STORAGE_KEY not in storage


def test_user_roundtrip_and_clear(user):
    storage = LocalStorage()
    save_user(storage, user)
    assert load_user(storage) == user
    clear_user(storage)
    assert load_user(storage) is None


def test_load_user_ignores_bad_data():
    storage = LocalStorage()
    storage.set(USER_STORAGE_KEY, {"bad": 1})
    assert load_user(storage) is None


def test_authenticate_user_success():
    storage = LocalStorage()
    password = "password"
    result = authenticate_user(storage, "alice", password)
    assert result.username == "alice"
    assert result.email == "alice@example.com"
    assert load_user(storage) == result


@pytest.mark.parametrize("username", ["ab", ""])
def test_authenticate_user_short_username(username):
    storage = LocalStorage()
    password = "password"
    with pytest.raises(ValueError, match="Invalid credentials"):
        authenticate_user(storage, username, password)
    assert load_user(storage) is None


def test_authenticate_user_short_password():
    password = "token"
    with pytest.raises(ValueError, match="Invalid credentials"):
        authenticate_user(LocalStorage(), "alice", password)


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_validate_title_empty(title):
    with pytest.raises(ValueError, match="Title cannot be empty"):
        validate_todo_title(title)


def test_validate_title_length():
    assert validate_todo_title("x" * 100) is None
    with pytest.raises(ValueError, match="longer than 100"):
        validate_todo_title("x" * 101)
    with pytest.raises(ValueError, match="longer than 100"):
        validate_todo_title("é" * 51)


@pytest.mark.parametrize(
    "email, expected",
    [("alice@example.com", True), ("alice.example.com", False), ("alice@example", False)],
)
def test_validate_email(email, expected):
    assert validate_email(email) is expected


def test_load_todos(todos):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/todos", json=[t.to_dict() for t in todos])
        assert load_todos(BASE) == todos


def test_load_todos_bad_body():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/todos", body="not json", status=500)
        with pytest.raises(ValueError):
            load_todos(BASE)


def test_login_user_success(user):
    storage = LocalStorage()
    password = "password"
    creds = Credentials(username="alice", password=password)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.POST,
            f"{BASE}/login",
            json=user.to_dict(),
            match=[responses.matchers.json_params_matcher(creds.to_dict())],
        )
        assert login_user(storage, creds, BASE) == user
    assert load_user(storage) == user


def test_login_user_failure():
    storage = LocalStorage()
    password = "password"
    creds = Credentials(username="alice", password=password)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{BASE}/login", body="Invalid Credentials", status=401)
        with pytest.raises(requests.HTTPError, match="Invalid Credentials"):
            login_user(storage, creds, BASE)
    assert load_user(storage) is None