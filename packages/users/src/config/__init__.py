"""Configuration module — settings."""

from src.config.settings import UsersSettings

__all__ = [
    "UsersSettings",
]
