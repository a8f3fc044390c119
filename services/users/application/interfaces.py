from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from services.users.domain.user import User


class IdProvider(Protocol):
    def generate(self) -> int: ...


class UserRepository(Protocol):
    def list(self) -> list["User"]: ...

    def get(self, user_id: int) -> "User" | None: ...

    def add(self, user: "User") -> "User": ...

    def replace(self, user: "User") -> "User" | None: ...

    def remove(self, user_id: int) -> bool: ...
