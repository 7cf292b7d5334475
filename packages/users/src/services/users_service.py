"""Users service interface and in-memory implementation.

``UsersService`` is the capability the controller consumes. Any object with
these five coroutines can be injected; ``InMemoryUsersService`` is the default
one wired by ``create_app`` and keeps all records in process memory, so
everything is lost on restart.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Protocol

from src.models.users import CreateUserDto, UpdateUserDto

logger = logging.getLogger(__name__)

User = dict[str, Any]


class UsersService(Protocol):
    """Persistence capability for users."""

    async def create(self, dto: CreateUserDto) -> Any: ...

    async def find_all(self) -> list[Any]: ...

    async def find_one(self, user_id: int) -> Any | None: ...

    async def update(self, user_id: int, dto: UpdateUserDto) -> Any | None: ...

    async def remove(self, user_id: int) -> Any | None: ...


class InMemoryUsersService:
    """Dict-backed users store with auto-incrementing integer ids.

    No operation awaits between reading and writing the store, so each call
    is atomic within a single event loop.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1

    async def create(self, dto: CreateUserDto) -> User:
        user_id = self._next_id
        self._next_id += 1
        fields = dto.model_dump()
        fields.pop("id", None)
        user = {"id": user_id, **fields}
        self._users[user_id] = user
        logger.debug("Created user", extra={"user_id": user_id})
        return copy.deepcopy(user)

    async def find_all(self) -> list[User]:
        return [copy.deepcopy(self._users[k]) for k in sorted(self._users)]

    async def find_one(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user is not None else None

    async def update(self, user_id: int, dto: UpdateUserDto) -> User | None:
        user = self._users.get(user_id)
        if user is None:
            return None
        changes = dto.model_dump()
        changes.pop("id", None)
        user.update(changes)
        logger.debug("Updated user", extra={"user_id": user_id})
        return copy.deepcopy(user)

    async def remove(self, user_id: int) -> User | None:
        user = self._users.pop(user_id, None)
        if user is not None:
            logger.debug("Removed user", extra={"user_id": user_id})
        return user
