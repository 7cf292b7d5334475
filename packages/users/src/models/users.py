"""Pass-through user payload models.

The shape of a user is owned by the users service; these models only pin the
integer ``id`` and let every other field through untouched.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserEntity(BaseModel):
    """A stored user as returned by the users service."""

    model_config = ConfigDict(extra="allow")

    id: int


class CreateUserDto(BaseModel):
    """Request body for POST /users."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "Ada", "email": "ada@example.com"}},
    )


class UpdateUserDto(BaseModel):
    """Request body for PATCH /users/{id}. Only supplied fields are applied."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "A"}},
    )
