from __future__ import annotations

import logging

from services.users.application.errors import UserNotFoundError
from services.users.application.interfaces import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Removes a user. Deleting an id that is already gone is an error."""

    def __init__(self, *, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, user_id: int) -> None:
        if not self._repository.remove(user_id):
            raise UserNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)
