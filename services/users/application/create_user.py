"""Create user use case."""

from __future__ import annotations

import logging

from services.users.application.dto import CreateUserCommand
from services.users.application.errors import UserValidationError
from services.users.application.interfaces import IdProvider, UserRepository
from services.users.domain.user import User
from showcase.validation import validate_user_fields

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Validates the submitted fields and stores a new user under a fresh id."""

    def __init__(
        self,
        *,
        repository: UserRepository,
        id_provider: IdProvider,
    ) -> None:
        self._repository = repository
        self._id_provider = id_provider

    def execute(self, command: CreateUserCommand) -> User:
        """
        Create a user.

        Args:
            command: Submitted name and email, untrimmed

        Returns:
            The stored User with its assigned id

        Raises:
            UserValidationError: If name or email is empty or malformed
        """
        errors = validate_user_fields(command.name, command.email)
        if errors:
            logger.warning("Rejected user creation: %s", errors)
            raise UserValidationError(errors)

        user = User(
            user_id=self._id_provider.generate(),
            name=command.name.strip(),
            email=command.email.strip(),
        )
        self._repository.add(user)
        logger.info("Created user %s", user.user_id)
        return user
