from __future__ import annotations

import logging

from services.users.application.dto import UpdateUserCommand
from services.users.application.errors import UserNotFoundError, UserValidationError
from services.users.application.interfaces import UserRepository
from services.users.domain.user import User
from showcase.validation import validate_user_fields

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Replaces name and email of an existing user; the id stays the same."""

    def __init__(self, *, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, command: UpdateUserCommand) -> User:
        # A missing id wins over invalid fields so the caller sees 404.
        if self._repository.get(command.user_id) is None:
            raise UserNotFoundError(command.user_id)

        errors = validate_user_fields(command.name, command.email)
        if errors:
            logger.warning(
                "Rejected update of user %s: %s", command.user_id, errors
            )
            raise UserValidationError(errors)

        updated = self._repository.replace(
            User(
                user_id=command.user_id,
                name=command.name.strip(),
                email=command.email.strip(),
            )
        )
        # Removed between the lookup and the write.
        if updated is None:
            raise UserNotFoundError(command.user_id)
        logger.info("Updated user %s", command.user_id)
        return updated
