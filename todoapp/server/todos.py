"""Todo CRUD handlers, all scoped to a single fixed user."""

from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime, timezone
from http import HTTPStatus

from todoapp.server.errors import DatabaseError, NotFound
from todoapp.server.records import CreateTodo, TodoRecord, UpdateTodo

DUMMY_USER_ID = "a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11"

_COLUMNS = "id, user_id, title, description, completed, priority, created_at, updated_at"


def _query(db: sqlite3.Connection, sql: str, params: tuple) -> list[sqlite3.Row]:
    try:
        return db.execute(sql, params).fetchall()
    except sqlite3.Error as exc:
        raise DatabaseError(exc) from exc


def _fetch_owned(db: sqlite3.Connection, id_str: str) -> TodoRecord:
    rows = _query(
        db,
        f"SELECT {_COLUMNS} FROM todos WHERE id = ? AND user_id = ?",
        (id_str, DUMMY_USER_ID),
    )
    if not rows:
        raise NotFound()
    return TodoRecord.from_row(rows[0])


def _fetch_by_id(db: sqlite3.Connection, id_str: str) -> TodoRecord:
    rows = _query(db, f"SELECT {_COLUMNS} FROM todos WHERE id = ?", (id_str,))
    if not rows:
        raise DatabaseError(sqlite3.DatabaseError("no rows returned"))
    return TodoRecord.from_row(rows[0])


def _write(db: sqlite3.Connection, sql: str, params: tuple) -> int:
    try:
        with db:
            return db.execute(sql, params).rowcount
    except sqlite3.Error as exc:
        raise DatabaseError(exc) from exc


def all_todos(db: sqlite3.Connection) -> list[TodoRecord]:
    rows = _query(db, f"SELECT {_COLUMNS} FROM todos WHERE user_id = ?", (DUMMY_USER_ID,))
    return [TodoRecord.from_row(row) for row in rows]


def get_todo(db: sqlite3.Connection, todo_id: uuid.UUID) -> TodoRecord:
    return _fetch_owned(db, str(todo_id))


def create_todo(db: sqlite3.Connection, payload: CreateTodo) -> tuple[int, TodoRecord]:
    id_str = str(uuid.uuid4())
    now = datetime.now(timezone.utc).isoformat()
    _write(
        db,
        "INSERT INTO todos (id, user_id, title, description, priority, created_at, updated_at)"
        " VALUES (?, ?, ?, ?, ?, ?, ?)",
        (
            id_str,
            DUMMY_USER_ID,
            payload.title,
            payload.description,
            payload.priority.value.lower(),
            now,
            now,
        ),
    )
    return int(HTTPStatus.CREATED), _fetch_by_id(db, id_str)


def update_todo(db: sqlite3.Connection, todo_id: uuid.UUID, payload: UpdateTodo) -> TodoRecord:
    id_str = str(todo_id)
    todo = _fetch_owned(db, id_str)
    title = payload.title if payload.title is not None else todo.title
    description = payload.description if payload.description is not None else todo.description
    completed = payload.completed if payload.completed is not None else todo.completed
    priority = payload.priority if payload.priority is not None else todo.priority
    _write(
        db,
        "UPDATE todos SET title = ?, description = ?, completed = ?, priority = ?,"
        " updated_at = ? WHERE id = ?",
        (
            title,
            description,
            completed,
            priority.value.lower(),
            datetime.now(timezone.utc).isoformat(),
            id_str,
        ),
    )
    return _fetch_by_id(db, id_str)


def delete_todo(db: sqlite3.Connection, todo_id: uuid.UUID) -> int:
    affected = _write(
        db,
        "DELETE FROM todos WHERE id = ? AND user_id = ?",
        (str(todo_id), DUMMY_USER_ID),
    )
    if affected == 0:
        raise NotFound()
    return int(HTTPStatus.NO_CONTENT)