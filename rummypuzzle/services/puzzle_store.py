"""
Puzzle store service.

Loads the static puzzle dataset once and answers lookups by date.
"""

import json
import logging
from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter

from rummypuzzle.config import settings
from rummypuzzle.models.puzzle import Puzzle, PuzzleRecord
from rummypuzzle.parsers.solutions import puzzle_from_record

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_PUZZLES_PATH = DATA_DIR / "puzzles.json"

_records_adapter = TypeAdapter(list[PuzzleRecord])


class PuzzleStore:
    """
    In-memory index of puzzles by date.

    Records are kept as authored for the API; the parsed Puzzle for each
    date is built up front so solution strings are parsed only once.
    """

    def __init__(self, records: list[PuzzleRecord]):
        self._records: dict[str, PuzzleRecord] = {}
        self._puzzles: dict[str, Puzzle] = {}

        for record in records:
            try:
                date.fromisoformat(record.date)
            except ValueError as e:
                raise ValueError(f"Invalid puzzle date: {record.date!r}") from e
            if record.date in self._records:
                raise ValueError(f"Duplicate puzzle date: {record.date}")
            self._records[record.date] = record
            self._puzzles[record.date] = puzzle_from_record(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, date_key: str) -> bool:
        return date_key in self._records

    def get_record(self, date_key: str) -> PuzzleRecord | None:
        return self._records.get(date_key)

    def get_puzzle(self, date_key: str) -> Puzzle | None:
        return self._puzzles.get(date_key)

    def dates(self) -> list[str]:
        """All puzzle dates, newest first."""
        return sorted(self._records, key=date.fromisoformat, reverse=True)


def load_puzzles(path: Path | None = None) -> list[PuzzleRecord]:
    """
    Load puzzle records from a JSON file.

    Args:
        path: Path to a JSON array of puzzles. Defaults to the bundled data.

    Returns:
        Validated puzzle records in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If a record is malformed
    """
    if path is None:
        path = DEFAULT_PUZZLES_PATH

    if not path.exists():
        raise FileNotFoundError(f"Puzzle data not found at {path}.")

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    return _records_adapter.validate_python(raw)


def load_puzzle_store(path: Path | None = None) -> PuzzleStore:
    """Load puzzles from disk and index them."""
    store = PuzzleStore(load_puzzles(path))
    logger.info("Loaded %d puzzles from %s", len(store), path or DEFAULT_PUZZLES_PATH)
    return store


@lru_cache(maxsize=1)
def get_puzzle_store() -> PuzzleStore:
    """
    Get the cached puzzle store.

    Reads settings.puzzles_path on first use.
    """
    return load_puzzle_store(settings.puzzles_path)
