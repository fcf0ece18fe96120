"""
Share text for finished (or abandoned) puzzles.
"""

from datetime import date, timedelta


def format_elapsed(ms: int) -> str:
    """Format milliseconds as M:SS."""
    seconds = max(ms, 0) // 1000
    minutes, remaining_seconds = divmod(seconds, 60)
    return f"{minutes}:{remaining_seconds:02d}"


def format_puzzle_date(date_key: str) -> str:
    """Format a YYYY-MM-DD key as e.g. "January 1, 2025"."""
    day = date.fromisoformat(date_key)
    return f"{day:%B} {day.day}, {day.year}"


def share_text(score: int, max_score: int, date_key: str, elapsed: timedelta) -> str:
    """Build the text copied to the clipboard by the share button."""
    time_text = format_elapsed(int(elapsed.total_seconds() * 1000))
    return (
        f"I scored {score}/{max_score} on the {format_puzzle_date(date_key)} "
        f"Rummy Puzzle in {time_text}!!! 🎮"
    )
