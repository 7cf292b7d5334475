"""Middleware package — error hierarchy and request ID."""

from src.middleware.error_handler import (
    NotFoundError,
    UserNotFoundError,
    UsersApiError,
    register_error_handlers,
)
from src.middleware.request_id import RequestIdMiddleware

__all__ = [
    "NotFoundError",
    "RequestIdMiddleware",
    "UserNotFoundError",
    "UsersApiError",
    "register_error_handlers",
]
