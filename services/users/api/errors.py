"""Maps use case failures onto HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.users.application.errors import UserNotFoundError, UserValidationError

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"


def _validation_response(errors: dict[str, str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": VALIDATION_FAILED, "errors": errors},
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UserValidationError)
    async def user_validation_handler(request: Request, exc: UserValidationError):
        return _validation_response(exc.errors)

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    # Malformed bodies and non-integer ids are reported as 400 rather than 422.
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ):
        errors: dict[str, str] = {}
        for error in exc.errors():
            location = error.get("loc") or ("body",)
            field = str(location[-1])
            errors.setdefault(field, error.get("msg", "Invalid value"))
        logger.warning(
            "Rejected %s %s: %s", request.method, request.url.path, errors
        )
        return _validation_response(errors)
