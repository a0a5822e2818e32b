"""HTTP application wiring the auth and todo handlers."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import uuid
from typing import Any, Callable

from flask import Flask, Response, jsonify, request

from todoapp.server import auth, todos
from todoapp.server.db import init_db
from todoapp.server.errors import AppError
from todoapp.server.records import CreateTodo, LoginUser, RegisterUser, UpdateTodo

log = logging.getLogger(__name__)


class _BadRequest(Exception):
    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def _payload(parse: Callable[[Any], Any]) -> Any:
    data = request.get_json(silent=True)
    if data is None:
        raise _BadRequest("Failed to parse the request body as JSON", 400)
    try:
        return parse(data)
    except ValueError as exc:
        raise _BadRequest(f"Failed to deserialize the JSON body: {exc}", 422) from exc


def _todo_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError as exc:
        raise _BadRequest(f"Invalid URL: {exc}", 400) from exc


def create_app(db: sqlite3.Connection) -> Flask:
    """Build the application around an open database connection."""
    app = Flask(__name__)

    @app.errorhandler(AppError)
    def _app_error(err: AppError) -> Response:
        body, status = err.to_response()
        return Response(body, status=status, mimetype="text/plain")

    @app.errorhandler(_BadRequest)
    def _bad_request(err: _BadRequest) -> Response:
        return Response(err.message, status=err.status, mimetype="text/plain")

    @app.after_request
    def _cors(resp: Response) -> Response:
        origin = request.headers.get("Origin")
        resp.headers["Access-Control-Allow-Origin"] = origin or "*"
        resp.headers["Access-Control-Allow-Credentials"] = "true"
        resp.headers["Access-Control-Allow-Methods"] = request.headers.get(
            "Access-Control-Request-Method", "GET, POST, PUT, DELETE, OPTIONS"
        )
        resp.headers["Access-Control-Allow-Headers"] = request.headers.get(
            "Access-Control-Request-Headers", "*"
        )
        resp.headers["Access-Control-Expose-Headers"] = "*"
        return resp

    @app.post("/api/auth/login")
    def _login():
        return jsonify(auth.login(db, _payload(LoginUser.from_dict)).to_dict())

    @app.post("/api/auth/register")
    def _register():
        status, resp = auth.register(db, _payload(RegisterUser.from_dict))
        return jsonify(resp.to_dict()), status

    @app.post("/api/auth/logout")
    def _logout():
        return Response(status=auth.logout())

    @app.get("/api/todos")
    def _all_todos():
        return jsonify([t.to_dict() for t in todos.all_todos(db)])

    @app.post("/api/todos")
    def _create_todo():
        status, todo = todos.create_todo(db, _payload(CreateTodo.from_dict))
        return jsonify(todo.to_dict()), status

    @app.get("/api/todos/<todo_id>")
    def _get_todo(todo_id: str):
        return jsonify(todos.get_todo(db, _todo_id(todo_id)).to_dict())

    @app.put("/api/todos/<todo_id>")
    def _update_todo(todo_id: str):
        tid = _todo_id(todo_id)
        return jsonify(todos.update_todo(db, tid, _payload(UpdateTodo.from_dict)).to_dict())

    @app.delete("/api/todos/<todo_id>")
    def _delete_todo(todo_id: str):
        return Response(status=todos.delete_todo(db, _todo_id(todo_id)))

    return app


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the todo API server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    parser.add_argument("--database-url", default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    db = init_db(args.database_url)
    app = create_app(db)
    log.info("listening on %s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, threaded=False)