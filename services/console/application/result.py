"""Explicit success/failure values returned by the API client.

Callers branch on ``result.ok`` instead of catching exceptions raised from
network calls. ``unwrap()`` is there for code that prefers raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ApiError(Exception):
    """Non-2xx response. ``message`` is the body text or the reason phrase."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, message={self.message!r})"


class UnexpectedError(Exception):
    """Anything that is not an HTTP error status: unreachable host, bad JSON."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


ClientError = Union[ApiError, UnexpectedError]


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    value: T | None = None
    error: ClientError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ClientError) -> "ApiResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
