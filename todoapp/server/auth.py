"""Registration, login and logout handlers."""

from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime, timezone
from http import HTTPStatus

from todoapp.server.errors import DatabaseError, InvalidCredentials, UserNotFound
from todoapp.server.records import AuthResponse, LoginUser, RegisterUser, UserRecord

_TOKEN = "dummy-token"


def register(db: sqlite3.Connection, payload: RegisterUser) -> tuple[int, AuthResponse]:
    """Store a new user; the password is kept as given."""
    try:
        with db:
            db.execute(
                "INSERT INTO users (id, username, password_hash, created_at) VALUES (?, ?, ?, ?)",
                (
                    str(uuid.uuid4()),
                    payload.username,
                    payload.password,
                    datetime.now(timezone.utc).isoformat(),
                ),
            )
    except sqlite3.Error as exc:
        raise DatabaseError(exc) from exc
    return int(HTTPStatus.CREATED), AuthResponse(_TOKEN)


def login(db: sqlite3.Connection, payload: LoginUser) -> AuthResponse:
    try:
        row = db.execute(
            "SELECT id, username, password_hash, created_at FROM users WHERE username = ?",
            (payload.username,),
        ).fetchone()
    except sqlite3.Error as exc:
        raise DatabaseError(exc) from exc
    if row is None:
        raise UserNotFound()
    user = UserRecord(
        id=uuid.UUID(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )
    if user.password_hash != payload.password:
        raise InvalidCredentials()
    return AuthResponse(_TOKEN)


def logout() -> int:
    return int(HTTPStatus.OK)