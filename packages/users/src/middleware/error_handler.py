"""Global error hierarchy and FastAPI exception handlers.

All users-API errors extend UsersApiError. The FastAPI exception handlers
catch these errors (plus request validation errors, Starlette HTTP errors and
unhandled exceptions) and return a consistent JSON body:
{ statusCode, message, error, details? }.
"""

from __future__ import annotations

import logging
import traceback
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.models.responses import ApiResponseCustomMessage

logger = logging.getLogger(__name__)

PATH_PARAM_VALIDATION_MESSAGE = "Validation failed (numeric string is expected)"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class UsersApiError(Exception):
    """Base error for all users-API errors."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class NotFoundError(UsersApiError):
    """Requested resource is absent or could not be retrieved."""

    status_code = 404
    message = "Not found"


class UserNotFoundError(NotFoundError):
    """No user could be produced for the given id."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"{ApiResponseCustomMessage.USERS_NOT_FOUND.value} {user_id}"
        )


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _error_body(
    status_code: int,
    message: str,
    details: object | None = None,
) -> JSONResponse:
    """Build a JSON error response."""
    content: dict = {
        "statusCode": status_code,
        "message": message,
        "error": _reason(status_code),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def _users_error_handler(request: Request, exc: UsersApiError) -> JSONResponse:
    """Handle UsersApiError subclasses."""
    logger.info(
        "%s %s -> %d %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
        extra={"status_code": exc.status_code},
    )
    return _error_body(exc.status_code, exc.message, exc.details or None)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (400)."""
    errors = exc.errors()
    field_errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in errors
    ]
    on_path = any(err["loc"] and err["loc"][0] == "path" for err in errors)
    message = PATH_PARAM_VALIDATION_MESSAGE if on_path else "Validation failed"
    return _error_body(400, message, details=field_errors)


async def _http_error_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing-level HTTP errors (unknown path, wrong method)."""
    message = exc.detail if isinstance(exc.detail, str) else _reason(exc.status_code)
    response = _error_body(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions — log traceback, return generic 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
        extra={"error_reason": type(exc).__name__},
    )
    return _error_body(500, "Internal server error")


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(UsersApiError, _users_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)  # type: ignore[arg-type]
