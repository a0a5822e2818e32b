"""Todo list page logic: filtering, form handling and API calls."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from typing import Any, Iterable

import requests

from todoapp.client.utils import API_URL
from todoapp.models import Priority, Todo, TodoForm

_TIMEOUT = 30

_PRIORITY_COLORS = {
    Priority.HIGH: "text-red-500",
    Priority.MEDIUM: "text-yellow-500",
    Priority.LOW: "text-green-500",
}


class FilterState(enum.Enum):
    """Which todos the list shows."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def accepts(self, todo: Todo) -> bool:
        if self is FilterState.ACTIVE:
            return not todo.completed
        if self is FilterState.COMPLETED:
            return todo.completed
        return True


class ViewKind(enum.Enum):
    LIST = "List"
    ADD_FORM = "AddForm"
    EDIT_FORM = "EditForm"


@dataclass(frozen=True)
class ViewState:
    """What the page shows; an edit view names the todo being edited."""

    kind: ViewKind = ViewKind.LIST
    todo_id: uuid.UUID | None = None

    def __post_init__(self) -> None:
        if (self.kind is ViewKind.EDIT_FORM) != (self.todo_id is not None):
            raise ValueError("a todo id is present exactly when editing")


def filter_todos(todos: Iterable[Todo], filter_state: FilterState) -> list[Todo]:
    """Return the todos the filter lets through, in their original order."""
    return [todo for todo in todos if filter_state.accepts(todo)]


def parse_priority(value: str) -> Priority:
    """Map a form value to a priority; anything unknown means medium."""
    try:
        return Priority(value)
    except ValueError:
        return Priority.MEDIUM


def priority_color(priority: Priority) -> str:
    """CSS class used to colour a priority label."""
    return _PRIORITY_COLORS[priority]


def validate_form(form: TodoForm) -> None:
    """Raise ValueError if the form cannot be submitted."""
    if not form.title:
        raise ValueError("Title is required")


def form_payload(form: TodoForm) -> dict[str, Any]:
    """JSON body sent to create or update a todo from a form."""
    return {
        "title": form.title,
        "priority": form.priority.value,
        "description": form.description or None,
    }


def form_from_todo(todo: Todo) -> TodoForm:
    """Pre-fill a form for editing an existing todo."""
    return TodoForm(
        id=todo.id,
        title=todo.title,
        description=todo.description or "",
        priority=todo.priority,
    )


class TodoApi:
    """Calls to the todo endpoints of the server."""

    def __init__(self, api_url: str = API_URL, session: requests.Session | None = None) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

    def _todo_url(self, todo_id: uuid.UUID) -> str:
        return f"{self.api_url}/todos/{todo_id}"

    def fetch(self) -> list[Todo]:
        """Fetch every todo."""
        response = self.session.get(f"{self.api_url}/todos", timeout=_TIMEOUT)
        return [Todo.from_dict(item) for item in response.json()]

    def add(self, form: TodoForm) -> None:
        self.session.post(f"{self.api_url}/todos", json=form_payload(form), timeout=_TIMEOUT)

    def update(self, todo_id: uuid.UUID, form: TodoForm) -> None:
        self.session.put(self._todo_url(todo_id), json=form_payload(form), timeout=_TIMEOUT)

    def delete(self, todo_id: uuid.UUID) -> None:
        self.session.delete(self._todo_url(todo_id), timeout=_TIMEOUT)

    def toggle(self, todos: Iterable[Todo], todo_id: uuid.UUID) -> bool | None:
        """Flip a todo's completion on the server.

        Returns the new completion flag, or None when the id is not among
        ``todos`` and nothing was sent.
        """
        todo = next((t for t in todos if t.id == todo_id), None)
        if todo is None:
            return None
        completed = not todo.completed
        self.session.put(
            self._todo_url(todo_id), json={"completed": completed}, timeout=_TIMEOUT
        )
        return completed