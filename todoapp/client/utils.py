"""Client helpers: key/value storage, API calls, login and validation."""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

import requests

from todoapp.models import Credentials, Todo, User

API_URL = "http://localhost:3000/api"

TODOS_STORAGE_KEY = "todoapp_todos"
USER_STORAGE_KEY = "todoapp_user"

_TITLE_MAX_BYTES = 100


class LocalStorage:
    """A JSON key/value store, kept in memory and optionally mirrored to a file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._items: dict[str, str] = {}
        if self._path is not None and self._path.exists():
            self._items = json.loads(self._path.read_text(encoding="utf-8"))

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def _flush(self) -> None:
        if self._path is not None:
            self._path.write_text(json.dumps(self._items), encoding="utf-8")

    def get(self, key: str) -> Any:
        """Return the decoded value under ``key``; raise KeyError if absent."""
        try:
            raw = self._items[key]
        except KeyError:
            raise KeyError(key) from None
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` as JSON; raise ValueError if it cannot be encoded."""
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"cannot serialize value for {key!r}: {exc}") from exc
        self._items[key] = raw
        self._flush()

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        if self._items.pop(key, None) is not None:
            self._flush()


def save_todos(storage: LocalStorage, todos: Iterable[Todo]) -> None:
    try:
        storage.set(TODOS_STORAGE_KEY, [todo.to_dict() for todo in todos])
    except ValueError as exc:
        raise ValueError(f"Failed to save todos: {exc}") from exc


def load_todos(api_url: str = API_URL) -> list[Todo]:
    """Fetch all todos from the server."""
    response = requests.get(f"{api_url}/todos", timeout=30)
    return [Todo.from_dict(item) for item in response.json()]


def clear_todos(storage: LocalStorage) -> None:
    storage.delete(TODOS_STORAGE_KEY)


def save_user(storage: LocalStorage, user: User) -> None:
    try:
        storage.set(USER_STORAGE_KEY, user.to_dict())
    except ValueError as exc:
        raise ValueError(f"Failed to save user: {exc}") from exc


def load_user(storage: LocalStorage) -> User | None:
    """Return the stored user, or None if there is none or it is unreadable."""
    try:
        return User.from_dict(storage.get(USER_STORAGE_KEY))
    except (KeyError, ValueError):
        return None


def clear_user(storage: LocalStorage) -> None:
    storage.delete(USER_STORAGE_KEY)


def authenticate_user(storage: LocalStorage, username: str, password: str) -> User:
    """Accept any username of 3+ bytes and password of 6+ bytes, and store the user."""
    if len(username.encode("utf-8")) >= 3 and len(password.encode("utf-8")) >= 6:
        user = User(
            id=uuid.uuid4(),
            username=username,
            email=f"{username}@example.com",
            created_at=datetime.now(timezone.utc),
        )
        save_user(storage, user)
        return user
    raise ValueError(
        "Invalid credentials. Username must be at least 3 characters "
        "and password at least 6 characters."
    )


def validate_todo_title(title: str) -> None:
    """Raise ValueError if the title is blank or longer than 100 bytes."""
    if not title.strip():
        raise ValueError("Title cannot be empty")
    if len(title.encode("utf-8")) > _TITLE_MAX_BYTES:
        raise ValueError("Title cannot be longer than 100 characters")


def validate_email(email: str) -> bool:
    return "@" in email and "." in email


def login_user(storage: LocalStorage, creds: Credentials, api_url: str = API_URL) -> User:
    """Log in through the server and store the returned user."""
    response = requests.post(f"{api_url}/login", json=creds.to_dict(), timeout=30)
    if not 200 <= response.status_code < 300:
        raise requests.HTTPError(response.text, response=response)
    user = User.from_dict(response.json())
    save_user(storage, user)
    return user