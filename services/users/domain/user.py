"""User domain model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """User entity. ``user_id`` is assigned by the store and never changes."""

    user_id: int
    name: str
    email: str
