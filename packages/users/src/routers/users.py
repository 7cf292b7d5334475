"""Users CRUD endpoints.

- POST   /users      — create a user (raw service value, 201)
- GET    /users      — list users
- GET    /users/{id} — get one user
- PATCH  /users/{id} — update a user
- DELETE /users/{id} — delete a user

Routes are declared in ``USERS_ROUTES`` and registered on an ``APIRouter`` by
``create_users_router``; the response models there feed the OpenAPI document
only, handlers return plain dicts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, status

from src.middleware.error_handler import UserNotFoundError
from src.models.responses import ApiResponse, ApiResponseCustomMessage
from src.models.users import CreateUserDto, UpdateUserDto, UserEntity
from src.services.lookup import Absent, lookup
from src.services.users_service import UsersService

logger = logging.getLogger(__name__)


class UsersController:
    """Maps the users endpoints onto an injected ``UsersService``.

    Holds no state besides the service reference, so a single instance is
    shared by all requests.
    """

    def __init__(self, users_service: UsersService) -> None:
        self._users_service = users_service

    async def create(self, create_user_dto: CreateUserDto) -> Any:
        """Create a user. The service's value is returned without an envelope."""
        return await self._users_service.create(create_user_dto)

    async def find_all(self) -> dict:
        """List all users.

        A failing service call is reported inside a 200 response whose body
        carries statusCode 500 and the error message.
        """
        try:
            data = await self._users_service.find_all()
        except Exception as exc:
            logger.error(
                "Listing users failed: %s",
                exc,
                extra={"error_reason": type(exc).__name__},
            )
            return ApiResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=str(exc),
            ).to_body()
        return ApiResponse(
            status_code=status.HTTP_200_OK, message="success", data=data
        ).to_body()

    async def find_one(self, id: int) -> dict:  # noqa: A002
        """Get a user by id."""
        result = await lookup(self._users_service.find_one(id), user_id=id)
        if isinstance(result, Absent):
            raise UserNotFoundError(id)
        return ApiResponse(
            status_code=status.HTTP_200_OK, message="success", data=result.record
        ).to_body()

    async def update(self, id: int, update_user_dto: UpdateUserDto) -> dict:  # noqa: A002
        """Apply a partial update to a user."""
        result = await lookup(
            self._users_service.update(id, update_user_dto), user_id=id
        )
        if isinstance(result, Absent):
            raise UserNotFoundError(id)
        return ApiResponse(
            status_code=status.HTTP_200_OK,
            message=f"{ApiResponseCustomMessage.USERS_UPDATE.value} {id}",
            data=result.record,
        ).to_body()

    async def remove(self, id: int) -> dict:  # noqa: A002
        """Delete a user. The body carries no data."""
        result = await lookup(self._users_service.remove(id), user_id=id)
        if isinstance(result, Absent):
            raise UserNotFoundError(id)
        return ApiResponse(
            status_code=status.HTTP_200_OK,
            message=f"{ApiResponseCustomMessage.USERS_DELETE.value} {id}",
        ).to_body()


@dataclass(frozen=True)
class RouteSpec:
    """One row of a router's route table."""

    method: str
    path: str
    endpoint: str  # controller attribute name
    summary: str
    description: str
    response_model: Any
    status_code: int = status.HTTP_200_OK


USERS_ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec(
        "POST", "", "create",
        summary="Post users",
        description="Post new user",
        response_model=UserEntity,
        status_code=status.HTTP_201_CREATED,
    ),
    RouteSpec(
        "GET", "", "find_all",
        summary="Get all users",
        description="Return all users",
        response_model=ApiResponse[list[UserEntity]],
    ),
    RouteSpec(
        "GET", "/{id}", "find_one",
        summary="Get an user by ID",
        description="Return a specific user by ID",
        response_model=ApiResponse[UserEntity],
    ),
    RouteSpec(
        "PATCH", "/{id}", "update",
        summary="Patch an user by ID",
        description="Return update user by ID",
        response_model=ApiResponse[UserEntity],
    ),
    RouteSpec(
        "DELETE", "/{id}", "remove",
        summary="Delete an user by ID",
        description="Return delete user by ID",
        response_model=ApiResponse[UserEntity],
    ),
)


def create_users_router(
    controller: UsersController,
    routes: tuple[RouteSpec, ...] = USERS_ROUTES,
) -> APIRouter:
    """Factory that registers every route of ``routes`` against ``controller``."""

    users_router = APIRouter(prefix="/users", tags=["users"])

    for route in routes:
        users_router.add_api_route(
            route.path,
            getattr(controller, route.endpoint),
            methods=[route.method],
            status_code=route.status_code,
            summary=route.summary,
            description=route.description,
            response_model=None,
            responses={route.status_code: {"model": route.response_model}},
            name=route.endpoint,
        )

    return users_router
