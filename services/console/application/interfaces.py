from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from services.console.application.result import ApiResult
    from services.console.domain.user import User, UserDto


class UserService(Protocol):
    async def get_users(self) -> "ApiResult[list[User]]": ...

    async def get_user(self, user_id: int) -> "ApiResult[User]": ...

    async def create_user(self, dto: "UserDto") -> "ApiResult[User]": ...

    async def update_user(self, user_id: int, dto: "UserDto") -> "ApiResult[User]": ...

    async def delete_user(self, user_id: int) -> "ApiResult[None]": ...
