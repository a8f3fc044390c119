from __future__ import annotations

from services.users.application.interfaces import UserRepository
from services.users.domain.user import User


class ListUsersUseCase:
    def __init__(self, *, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self) -> list[User]:
        return self._repository.list()
