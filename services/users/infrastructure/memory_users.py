"""User repository implementation kept in process memory."""

from __future__ import annotations

import threading

from services.users.domain.user import User


class InMemoryUserRepository:
    """In-memory implementation of UserRepository.

    Records live for the lifetime of the process. Every access goes through
    one lock so the repository can be shared between worker threads.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._lock = threading.Lock()

    def list(self) -> list[User]:
        """All users in insertion order."""
        with self._lock:
            return list(self._users.values())

    def get(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def add(self, user: User) -> User:
        """Store a new user. The id must not be taken."""
        with self._lock:
            if user.user_id in self._users:
                raise ValueError(f"User {user.user_id} already exists")
            self._users[user.user_id] = user
        return user

    def replace(self, user: User) -> User | None:
        """Swap the stored record; None when the id is unknown."""
        with self._lock:
            if user.user_id not in self._users:
                return None
            # Plain assignment keeps the key's original position.
            self._users[user.user_id] = user
        return user

    def remove(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None
