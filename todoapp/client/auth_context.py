"""Shared authentication state backed by client storage."""

from __future__ import annotations

from todoapp.client.utils import LocalStorage, clear_user, load_user, save_user
from todoapp.models import AuthState, AuthStatus, User


class AuthContext:
    """Tracks who is logged in and keeps storage in step with it."""

    def __init__(self, storage: LocalStorage) -> None:
        self.storage = storage
        user = load_user(storage)
        self.state = (
            AuthState(AuthStatus.AUTHENTICATED, user) if user is not None else AuthState()
        )

    def login(self, user: User) -> None:
        save_user(self.storage, user)
        self.state = AuthState(AuthStatus.AUTHENTICATED, user)

    def logout(self) -> None:
        clear_user(self.storage)
        self.state = AuthState()

    def is_authenticated(self) -> bool:
        return self.state.status is AuthStatus.AUTHENTICATED

    def current_user(self) -> User | None:
        return self.state.user if self.is_authenticated() else None

    def resolve(self, guest_if_absent: bool = False) -> AuthState:
        """Settle an unknown state from storage.

        A stored user makes the state authenticated; otherwise it becomes
        guest when ``guest_if_absent`` is true and stays unknown when not.
        Any state other than unknown is left as it is.
        """
        if self.state.status is AuthStatus.UNKNOWN:
            user = load_user(self.storage)
            if user is not None:
                self.state = AuthState(AuthStatus.AUTHENTICATED, user)
            elif guest_if_absent:
                self.state = AuthState(AuthStatus.GUEST)
        return self.state

    def greeting(self) -> str | None:
        """Return the welcome line for a logged-in user, else None."""
        user = self.current_user()
        return f"Welcome, {user.username}" if user is not None else None