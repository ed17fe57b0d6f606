"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
"""

import logging
from fastapi import APIRouter, Depends, status

from user_registry.api.dependencies import get_user_repository
from user_registry.infrastructure.user_repository import InMemoryUserRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(
    repository: InMemoryUserRepository = Depends(get_user_repository),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "user-registry",
        "users": repository.count(),
    }
