from __future__ import annotations

from services.users.application.errors import UserNotFoundError
from services.users.application.interfaces import UserRepository
from services.users.domain.user import User


class GetUserUseCase:
    def __init__(self, *, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, user_id: int) -> User:
        user = self._repository.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
