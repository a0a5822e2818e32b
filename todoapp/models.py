"""Client-side data models: todos, users, authentication state and forms."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_time(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


class Priority(enum.Enum):
    """Importance of a todo item."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value


@dataclass
class Todo:
    """A todo item as seen by the client."""

    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str | None
    completed: bool
    created_at: datetime
    updated_at: datetime
    priority: Priority

    @classmethod
    def new(
        cls,
        user_id: uuid.UUID,
        title: str,
        description: str | None,
        priority: Priority,
    ) -> Todo:
        """Create a fresh, uncompleted todo with a random id."""
        now = _now()
        return cls(
            id=uuid.uuid4(),
            user_id=user_id,
            title=title,
            description=description,
            completed=False,
            created_at=now,
            updated_at=now,
            priority=priority,
        )

    def toggle_completed(self) -> None:
        """Flip the completion flag and touch the update time."""
        self.completed = not self.completed
        self.updated_at = _now()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Todo:
        try:
            return cls(
                id=uuid.UUID(data["id"]),
                user_id=uuid.UUID(data["user_id"]),
                title=str(data["title"]),
                description=data.get("description"),
                completed=bool(data["completed"]),
                created_at=_parse_time(data["created_at"]),
                updated_at=_parse_time(data["updated_at"]),
                priority=Priority(data["priority"]),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"invalid todo data: {exc}") from exc


@dataclass
class User:
    """An authenticated user."""

    id: uuid.UUID
    username: str
    email: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        try:
            return cls(
                id=uuid.UUID(data["id"]),
                username=str(data["username"]),
                email=str(data["email"]),
                created_at=_parse_time(data["created_at"]),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"invalid user data: {exc}") from exc


class AuthStatus(enum.Enum):
    UNKNOWN = "Unknown"
    AUTHENTICATED = "Authenticated"
    GUEST = "Guest"
    FAILED = "Failed"


@dataclass(frozen=True)
class AuthState:
    """Authentication state; carries a user only when authenticated."""

    status: AuthStatus = AuthStatus.UNKNOWN
    user: User | None = None

    def __post_init__(self) -> None:
        if (self.status is AuthStatus.AUTHENTICATED) != (self.user is not None):
            raise ValueError("a user is present exactly when authenticated")


@dataclass
class LoginForm:
    username: str = ""
    password: str = ""


@dataclass
class Credentials:
    username: str = ""
    password: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"username": self.username, "password": self.password}


@dataclass
class TodoForm:
    id: uuid.UUID | None = None
    title: str = ""
    description: str = ""
    priority: Priority = field(default=Priority.MEDIUM)