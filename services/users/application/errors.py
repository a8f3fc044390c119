"""Failures raised by the user use cases."""

from __future__ import annotations

from typing import Mapping


class UserStoreError(Exception):
    """Base class for failures the HTTP layer maps to a status code."""


class UserValidationError(UserStoreError):
    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid user fields: {fields}")


class UserNotFoundError(UserStoreError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
