"""Public models for the users API."""

from src.models.responses import ApiResponse, ApiResponseCustomMessage
from src.models.users import CreateUserDto, UpdateUserDto, UserEntity

__all__ = [
    "ApiResponse",
    "ApiResponseCustomMessage",
    "CreateUserDto",
    "UpdateUserDto",
    "UserEntity",
]
