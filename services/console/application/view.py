"""Presentation state for the user management screen.

The view owns a single immutable :class:`ViewState`. It is only ever
replaced by the transition methods below, each of which notifies the
``on_change`` callback so a renderer can redraw.

Transitions:
        mount / refresh   loading -> users or error
        submit            validate -> create (no selection) or update
        request_delete    arm the confirmation gate
        confirm_delete    delete the armed id
        cancel_delete     disarm
        select            edit mode, form prefilled
        cancel_edit       back to create mode
        dismiss_error     hide the banner

Failed calls only set ``error``; the last good ``users`` are kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Tuple

from services.console.application.form import UserForm
from services.console.application.interfaces import UserService
from services.console.application.result import ApiError, ClientError
from services.console.domain.user import User

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred"


@dataclass(frozen=True)
class ViewState:
    users: Tuple[User, ...] = ()
    loading: bool = True
    error: Optional[str] = None
    selected_user: Optional[User] = None
    pending_delete_id: Optional[int] = None
    form: UserForm = field(default_factory=UserForm)

    @property
    def editing(self) -> bool:
        return self.selected_user is not None


def describe_error(error: ClientError | None, action: str) -> str:
    if isinstance(error, ApiError):
        return f"Failed to {action}: {error.message}"
    return UNEXPECTED_ERROR


class UserManagementView:
    def __init__(
        self,
        client: UserService,
        on_change: Callable[[ViewState], None] | None = None,
    ) -> None:
        self._client = client
        self._on_change = on_change
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def _set(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        if self._on_change is not None:
            self._on_change(self._state)

    async def mount(self) -> None:
        await self.refresh()

    async def refresh(self) -> None:
        self._set(loading=True, error=None)
        result = await self._client.get_users()
        if result.ok:
            self._set(users=tuple(result.value), loading=False)
        else:
            self._set(error=describe_error(result.error, "load users"), loading=False)

    async def submit(self, name: str, email: str) -> bool:
        """Validate, then create or update depending on the selection.

        Returns True when the server accepted the change. Invalid fields skip
        the network call and are reported on ``state.form.errors``.
        """
        form = UserForm(name=name, email=email).validate()
        if not form.is_valid:
            self._set(form=form)
            return False

        selected = self._state.selected_user
        self._set(form=form, error=None)

        if selected is None:
            result = await self._client.create_user(form.payload())
            if not result.ok:
                self._set(error=describe_error(result.error, "create user"))
                return False
            users = self._state.users + (result.value,)
        else:
            result = await self._client.update_user(selected.id, form.payload())
            if not result.ok:
                self._set(error=describe_error(result.error, "update user"))
                return False
            updated = result.value
            users = tuple(
                updated if user.id == updated.id else user for user in self._state.users
            )

        self._set(users=users, error=None, selected_user=None, form=UserForm())
        return True

    def request_delete(self, user_id: int) -> None:
        self._set(pending_delete_id=user_id)

    def cancel_delete(self) -> None:
        self._set(pending_delete_id=None)

    async def confirm_delete(self) -> bool:
        user_id = self._state.pending_delete_id
        if user_id is None:
            return False

        self._set(pending_delete_id=None, error=None)
        result = await self._client.delete_user(user_id)
        if not result.ok:
            self._set(error=describe_error(result.error, "delete user"))
            return False

        changes = {
            "users": tuple(user for user in self._state.users if user.id != user_id)
        }
        selected = self._state.selected_user
        if selected is not None and selected.id == user_id:
            changes.update(selected_user=None, form=UserForm())
        self._set(**changes)
        logger.debug("Removed user %s from view", user_id)
        return True

    def select(self, user: User) -> None:
        self._set(selected_user=user, form=UserForm.for_user(user))

    def cancel_edit(self) -> None:
        self._set(selected_user=None, form=UserForm())

    def dismiss_error(self) -> None:
        self._set(error=None)
