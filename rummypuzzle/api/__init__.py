from rummypuzzle.api.health import router as health_router
from rummypuzzle.api.play import router as play_router
from rummypuzzle.api.puzzles import router as puzzles_router

__all__ = [
    "health_router",
    "play_router",
    "puzzles_router",
]
