import asyncio
import json

import httpx
import pytest

from services.console.application.result import ApiError, UnexpectedError
from services.console.domain.user import User, UserDto
from services.console.infrastructure.api_client import UserApiClient

BASE_URL = "http://users.test/api"


def _client(handler):
    return UserApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def test_get_users_decodes_list():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        return httpx.Response(
            200,
            json=[
                {"id": 1, "name": "Ada", "email": "ada@example.com"},
                {"id": 2, "name": "Alan", "email": "alan@example.com"},
            ],
        )

    async def call():
        async with _client(handler) as client:
            return await client.get_users()

    result = asyncio.run(call())

    assert result.ok
    assert result.value == [
        User(id=1, name="Ada", email="ada@example.com"),
        User(id=2, name="Alan", email="alan@example.com"),
    ]
    assert seen == {"method": "GET", "url": "http://users.test/api/users"}


def test_create_user_posts_json_body():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 7, **seen["body"]})

    async def call():
        async with _client(handler) as client:
            return await client.create_user(UserDto(name="Ada", email="ada@example.com"))

    result = asyncio.run(call())

    assert result.unwrap() == User(id=7, name="Ada", email="ada@example.com")
    assert seen["url"] == "http://users.test/api/users"
    assert seen["body"] == {"name": "Ada", "email": "ada@example.com"}


def test_update_user_not_found_is_api_error():
    def handler(request):
        assert request.method == "PUT"
        assert request.url.path == "/api/users/9"
        return httpx.Response(404, text='{"detail":"User 9 not found"}')

    async def call():
        async with _client(handler) as client:
            return await client.update_user(9, UserDto(name="Ada", email="ada@example.com"))

    result = asyncio.run(call())

    assert not result.ok
    assert isinstance(result.error, ApiError)
    assert result.error.status == 404
    assert "User 9 not found" in result.error.message


def test_empty_error_body_falls_back_to_reason_phrase():
    def handler(request):
        return httpx.Response(500)

    async def call():
        async with _client(handler) as client:
            return await client.get_users()

    result = asyncio.run(call())

    assert result.error.status == 500
    assert result.error.message == "Internal Server Error"


def test_delete_user_returns_none_on_204():
    def handler(request):
        assert request.method == "DELETE"
        return httpx.Response(204)

    async def call():
        async with _client(handler) as client:
            return await client.delete_user(3)

    result = asyncio.run(call())

    assert result.ok
    assert result.value is None


def test_get_user_by_id():
    def handler(request):
        assert request.url.path == "/api/users/4"
        return httpx.Response(200, json={"id": 4, "name": "Ada", "email": "ada@example.com"})

    async def call():
        async with _client(handler) as client:
            return await client.get_user(4)

    assert asyncio.run(call()).value.id == 4


def test_transport_failure_is_unexpected_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def call():
        async with _client(handler) as client:
            return await client.get_users()

    result = asyncio.run(call())

    assert isinstance(result.error, UnexpectedError)
    assert "connection refused" in result.error.message


def test_malformed_body_is_unexpected_error():
    def handler(request):
        return httpx.Response(200, json=[{"name": "no id"}])

    async def call():
        async with _client(handler) as client:
            return await client.get_users()

    result = asyncio.run(call())

    assert isinstance(result.error, UnexpectedError)


def test_unwrap_raises_carried_error():
    def handler(request):
        return httpx.Response(400, text="bad")

    async def call():
        async with _client(handler) as client:
            return await client.create_user(UserDto(name="", email=""))

    result = asyncio.run(call())

    with pytest.raises(ApiError) as excinfo:
        result.unwrap()

    assert excinfo.value.status == 400
    assert excinfo.value.message == "bad"
