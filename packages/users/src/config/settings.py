"""Pydantic Settings for the users API.

All environment variables use the USERS_ prefix.
Example: USERS_PORT=3000, USERS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class UsersSettings(BaseSettings):
    """Users API configuration validated from environment variables."""

    # Service
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"

    # API documentation
    docs_path: str = "/api/docs"
    openapi_path: str = "/api/docs-json"
    api_title: str = "Median"
    api_description: str = "The Median API description"
    api_version: str = "0.1"

    # Documentation contact block
    contact_name: str = "Romi Julianto"
    contact_url: str = "https://www.linkedin.com/in/romijulianto/"
    contact_email: str = "romyjulians@gmail.com"

    model_config = {"env_prefix": "USERS_"}
