"""Server-side records and request/response payloads."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from todoapp.models import Priority


def _parse_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _priority_from_db(value: str) -> Priority:
    return Priority(value.capitalize())


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    return data


def _field(data: Mapping[str, Any], name: str, kind: type, optional: bool = False) -> Any:
    if name not in data or data[name] is None:
        if optional:
            return None
        raise ValueError(f"missing field `{name}`")
    value = data[name]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise ValueError(f"invalid type for field `{name}`")
    return value


def _priority_field(data: Mapping[str, Any], optional: bool = False) -> Priority | None:
    raw = _field(data, "priority", str, optional)
    if raw is None:
        return None
    try:
        return Priority(raw)
    except ValueError as exc:
        raise ValueError(f"unknown priority `{raw}`") from exc


@dataclass
class UserRecord:
    id: uuid.UUID
    username: str
    password_hash: str
    created_at: datetime


@dataclass
class TodoRecord:
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str | None
    completed: bool
    priority: Priority
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> TodoRecord:
        """Build a record from a database row keyed by column name."""
        return cls(
            id=uuid.UUID(row["id"]),
            user_id=uuid.UUID(row["user_id"]),
            title=row["title"],
            description=row["description"],
            completed=bool(row["completed"]),
            priority=_priority_from_db(row["priority"]),
            created_at=_parse_time(row["created_at"]),
            updated_at=_parse_time(row["updated_at"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "priority": self.priority.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class CreateTodo:
    title: str
    description: str | None
    priority: Priority

    @classmethod
    def from_dict(cls, data: Any) -> CreateTodo:
        data = _mapping(data)
        return cls(
            title=_field(data, "title", str),
            description=_field(data, "description", str, optional=True),
            priority=_priority_field(data),
        )


@dataclass
class UpdateTodo:
    title: str | None = None
    description: str | None = None
    completed: bool | None = None
    priority: Priority | None = None

    @classmethod
    def from_dict(cls, data: Any) -> UpdateTodo:
        data = _mapping(data)
        return cls(
            title=_field(data, "title", str, optional=True),
            description=_field(data, "description", str, optional=True),
            completed=_field(data, "completed", bool, optional=True),
            priority=_priority_field(data, optional=True),
        )


@dataclass
class RegisterUser:
    username: str
    password: str

    @classmethod
    def from_dict(cls, data: Any) -> RegisterUser:
        data = _mapping(data)
        return cls(_field(data, "username", str), _field(data, "password", str))


@dataclass
class LoginUser:
    username: str
    password: str

    @classmethod
    def from_dict(cls, data: Any) -> LoginUser:
        data = _mapping(data)
        return cls(_field(data, "username", str), _field(data, "password", str))


@dataclass
class AuthResponse:
    token: str

    def to_dict(self) -> dict[str, str]:
        return {"token": self.token}