"""SQLite connection setup and schema."""

from __future__ import annotations

import logging
import os
import sqlite3

from dotenv import load_dotenv

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY NOT NULL,
    username TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS todos (
    id TEXT PRIMARY KEY NOT NULL,
    user_id TEXT NOT NULL,
    title TEXT NOT NULL,
    description TEXT,
    completed BOOLEAN NOT NULL DEFAULT 0,
    priority TEXT NOT NULL DEFAULT 'medium'
        CHECK (priority IN ('low', 'medium', 'high')),
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def _database_path(database_url: str) -> str:
    for prefix in ("sqlite://", "sqlite:"):
        if database_url.startswith(prefix):
            rest = database_url[len(prefix):]
            return rest.split("?", 1)[0] or ":memory:"
    return database_url


def connect(database_url: str) -> sqlite3.Connection:
    """Open the database and make sure the schema exists."""
    path = _database_path(database_url)
    log.info("Connecting to database: %s", database_url)
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    log.info("Running migrations")
    conn.executescript(_SCHEMA)
    conn.commit()
    log.info("Migrations complete")
    return conn


def init_db(database_url: str | None = None) -> sqlite3.Connection:
    """Connect using the given URL, or DATABASE_URL from the environment."""
    if database_url is None:
        load_dotenv("server/.env")
        database_url = os.environ.get("DATABASE_URL")
        if not database_url:
            raise RuntimeError("DATABASE_URL must be set")
    return connect(database_url)