from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Rummy Puzzle"
    debug: bool = False

    # None means the puzzles bundled with the package
    puzzles_path: Path | None = None

    # Puzzles roll over at midnight in this zone
    timezone: str = "America/New_York"

    # Years whose future puzzles may be opened early (used while testing)
    preview_years: list[int] = []

    # Strict submission mode: every card must be on the board
    require_empty_hand: bool = False


settings = Settings()


# =============================================================================
# GAME RULES
# =============================================================================

WILDCARD = "*"

SUITS = ("R", "B", "G", "Y")

MIN_RANK = 1
MAX_RANK = 13

MIN_MELD_SIZE = 3

# Points for a newly claimed card count
VALID_POINTS = 2
OPTIMAL_POINTS = 5

# Bonus on top of 2 points per achievable count
MAX_SCORE_BONUS = 3
