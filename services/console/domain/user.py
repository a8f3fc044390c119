"""Client-side view of the users service's JSON payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "User":
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            email=str(payload["email"]),
        )


@dataclass(frozen=True)
class UserDto:
    """Body of create and update requests; the server assigns the id."""

    name: str
    email: str

    def to_json(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email}
