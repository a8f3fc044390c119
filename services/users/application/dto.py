from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserCommand:
    name: str
    email: str


@dataclass(frozen=True)
class UpdateUserCommand:
    user_id: int
    name: str
    email: str
