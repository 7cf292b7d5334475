"""FastAPI application entry point with lifespan management.

Startup: configure logging. The users controller is built once in
``create_app`` from an explicitly passed service and shared by all requests.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.config.settings import UsersSettings
from src.logging_config import configure_logging
from src.middleware.error_handler import register_error_handlers
from src.middleware.request_id import RequestIdMiddleware
from src.routers.health import create_health_router
from src.routers.users import UsersController, create_users_router
from src.services.users_service import InMemoryUsersService, UsersService

logger = logging.getLogger(__name__)


def _make_lifespan(settings: UsersSettings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: startup and shutdown logging."""
        configure_logging(settings.log_level)
        logger.info("Starting users API on port %d", settings.port)

        yield

        logger.info("Users API shut down")

    return lifespan


def create_app(
    settings: UsersSettings | None = None,
    users_service: UsersService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings:
        Configuration; read from ``USERS_*`` environment variables when omitted.
    users_service:
        Persistence capability; defaults to a fresh ``InMemoryUsersService``.
    """
    settings = settings or UsersSettings()
    users_service = users_service if users_service is not None else InMemoryUsersService()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        contact={
            "name": settings.contact_name,
            "url": settings.contact_url,
            "email": settings.contact_email,
        },
        docs_url=settings.docs_path,
        openapi_url=settings.openapi_path,
        redoc_url=None,
        swagger_ui_parameters={"displayRequestDuration": True, "filter": True},
        lifespan=_make_lifespan(settings),
    )

    register_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router())
    app.include_router(create_users_router(UsersController(users_service)))

    return app


app = create_app()
