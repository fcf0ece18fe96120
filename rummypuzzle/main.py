import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rummypuzzle.api import health_router, play_router, puzzles_router
from rummypuzzle.config import settings
from rummypuzzle.services.puzzle_store import get_puzzle_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    try:
        get_puzzle_store()
    except (OSError, ValueError) as e:
        # /ready reports the failure; lookups retry on demand
        logger.error("Could not load puzzles at startup: %s", e)
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("rummy-puzzle"),
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(play_router)
app.include_router(puzzles_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
