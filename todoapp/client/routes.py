"""Client routes: matching paths to pages and back."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class RouteKind(enum.Enum):
    HOME = "Home"
    LOGIN_PAGE = "LoginPage"
    TODO_LIST = "TodoList"
    PAGE_NOT_FOUND = "PageNotFound"


_FIXED_PATHS = {
    RouteKind.HOME: (),
    RouteKind.LOGIN_PAGE: ("login",),
    RouteKind.TODO_LIST: ("todos",),
}


@dataclass(frozen=True)
class Route:
    """A matched route; unmatched paths keep their segments."""

    kind: RouteKind
    segments: tuple[str, ...] = field(default=())

    def path(self) -> str:
        """The path this route is reached at."""
        parts = _FIXED_PATHS.get(self.kind, self.segments)
        return "/" + "/".join(parts)


def _split(path: str) -> tuple[str, ...]:
    path = path.split("#", 1)[0].split("?", 1)[0]
    return tuple(part for part in path.split("/") if part)


def match_route(path: str) -> Route:
    """Find the route for a path; anything unknown is a not-found route."""
    segments = _split(path)
    for kind, fixed in _FIXED_PATHS.items():
        if segments == fixed:
            return Route(kind)
    return Route(RouteKind.PAGE_NOT_FOUND, segments)


def not_found_message(segments: list[str] | tuple[str, ...]) -> str:
    """Line shown on the not-found page naming the requested route."""
    return f"Route: /{'/'.join(segments)}"