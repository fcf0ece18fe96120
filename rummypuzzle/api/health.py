"""
Health check endpoints.

Provides liveness and readiness probes. Readiness requires the puzzle
dataset to be loadable.
"""

import logging

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from rummypuzzle.api.dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    puzzles: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(response: Response) -> HealthResponse:
    """
    Readiness probe.

    Returns ready with the number of puzzles loaded. Returns 503 if the
    puzzle dataset cannot be loaded.
    """
    try:
        store = get_store()
    except (OSError, ValueError) as e:
        logger.error("Puzzle data unavailable: %s", e)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready")
    return HealthResponse(status="ready", puzzles=len(store))
