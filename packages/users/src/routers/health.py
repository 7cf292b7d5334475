"""Health endpoint.

- GET /health — liveness probe wrapped in the standard envelope
"""

from __future__ import annotations

from fastapi import APIRouter, status

from src.models.responses import ApiResponse


def create_health_router() -> APIRouter:
    """Factory that creates the health router."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> dict:
        """Service liveness check."""
        return ApiResponse(
            status_code=status.HTTP_200_OK,
            message="success",
            data={"status": "healthy"},
        ).to_body()

    return health_router
