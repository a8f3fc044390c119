"""HTTP client for the users service."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import httpx

from services.console.application.result import ApiError, ApiResult, UnexpectedError
from services.console.domain.user import User, UserDto

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserApiClient:
    """Async client for ``/users``. Each call is sent once; nothing is retried.

    ``base_url`` already includes the API prefix, e.g.
    ``http://localhost:5000/api``. ``timeout=None`` waits indefinitely.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "UserApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_users(self) -> ApiResult[list[User]]:
        result = await self._send("GET", "users")
        return self._decode(
            result, lambda payload: [User.from_json(item) for item in payload]
        )

    async def get_user(self, user_id: int) -> ApiResult[User]:
        result = await self._send("GET", f"users/{user_id}")
        return self._decode(result, User.from_json)

    async def create_user(self, dto: UserDto) -> ApiResult[User]:
        result = await self._send("POST", "users", json=dto.to_json())
        return self._decode(result, User.from_json)

    async def update_user(self, user_id: int, dto: UserDto) -> ApiResult[User]:
        result = await self._send("PUT", f"users/{user_id}", json=dto.to_json())
        return self._decode(result, User.from_json)

    async def delete_user(self, user_id: int) -> ApiResult[None]:
        result = await self._send("DELETE", f"users/{user_id}")
        if not result.ok:
            return ApiResult.failure(result.error)
        return ApiResult.success(None)

    async def _send(
        self, method: str, path: str, *, json: dict[str, Any] | None = None
    ) -> ApiResult[httpx.Response]:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            return ApiResult.failure(UnexpectedError(str(exc) or type(exc).__name__))

        if not response.is_success:
            message = response.text or response.reason_phrase
            logger.warning(
                "%s %s returned %s: %s", method, path, response.status_code, message
            )
            return ApiResult.failure(ApiError(response.status_code, message))
        return ApiResult.success(response)

    @staticmethod
    def _decode(
        result: ApiResult[httpx.Response], parse: Callable[[Any], T]
    ) -> ApiResult[T]:
        if not result.ok:
            return ApiResult.failure(result.error)
        try:
            return ApiResult.success(parse(result.value.json()))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(
                "Could not decode response from %s: %s", result.value.url, exc
            )
            return ApiResult.failure(UnexpectedError(f"Malformed response: {exc}"))
