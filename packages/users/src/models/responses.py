"""Generic API response envelope model.

Success bodies are wrapped in this envelope for consistency:
{ statusCode: int, message: str, data?: T }

``data`` is left out of the serialized body when it is None.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponseCustomMessage(str, Enum):
    """Message prefixes used by the users endpoints."""

    USERS_NOT_FOUND = "User not found"
    USERS_UPDATE = "User updated"
    USERS_DELETE = "User deleted"


class ApiResponse(BaseModel, Generic[T]):
    """Immutable JSON envelope for API responses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    message: str
    data: T | None = None

    def to_body(self) -> dict[str, Any]:
        """Serialize with wire field names, omitting ``data`` when it is None."""
        body = self.model_dump(by_alias=True)
        if body["data"] is None:
            del body["data"]
        return body
