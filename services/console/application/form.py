from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping

from services.console.domain.user import User, UserDto
from showcase.validation import validate_user_fields


@dataclass(frozen=True)
class UserForm:
    """Field values and per-field errors of the create/edit form."""

    name: str = ""
    email: str = ""
    errors: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def for_user(cls, user: User) -> "UserForm":
        return cls(name=user.name, email=user.email)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def validate(self) -> "UserForm":
        return replace(self, errors=validate_user_fields(self.name, self.email))

    def payload(self) -> UserDto:
        return UserDto(name=self.name.strip(), email=self.email.strip())
