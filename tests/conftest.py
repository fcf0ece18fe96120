from datetime import date

import pytest

from rummypuzzle.models.puzzle import Puzzle, PuzzleRecord
from rummypuzzle.parsers.solutions import puzzle_from_record
from rummypuzzle.services.puzzle_store import PuzzleStore, load_puzzle_store


@pytest.fixture
def sample_record() -> PuzzleRecord:
    """Puzzle with a run, a group and one wildcard."""
    return PuzzleRecord(
        date="2025-01-01",
        initial_cards=["R1", "R2", "R3", "R4", "B4", "G4", "Y7", "*"],
        possible_card_counts={
            "3": True,
            "4": True,
            "5": True,
            "6": True,
            "7": True,
            "8": False,
        },
        optimal_solutions=["S1:R1,R2,R3,*|S2:R4,B4,G4"],
        optimal_solution_cards=["R1,R2,R3,*,R4,B4,G4"],
        include_wildcards=True,
        score={"max_cards_used": 7, "num_optimal_solutions": 1},
    )


@pytest.fixture
def sample_puzzle(sample_record: PuzzleRecord) -> Puzzle:
    return puzzle_from_record(sample_record)


@pytest.fixture
def store() -> PuzzleStore:
    """Store loaded from the bundled dataset (2025-01-01 to 2025-01-04)."""
    return load_puzzle_store()


@pytest.fixture
def today() -> date:
    """A fixed 'today' with one bundled puzzle still in the future."""
    return date(2025, 1, 3)
