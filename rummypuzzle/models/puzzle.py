"""
Puzzle records and their parsed form.

PuzzleRecord mirrors one entry of the puzzle dataset as authored.
Puzzle is the domain value built from it once at load time, with optimal
solutions parsed into melds of cards.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


class ScoreParameters(BaseModel):
    """Scoring parameters derived by the puzzle author."""

    max_cards_used: int = Field(ge=0)
    num_optimal_solutions: int = Field(ge=0)


class PuzzleRecord(BaseModel):
    """One puzzle as stored in the dataset and returned by the API."""

    date: str
    initial_cards: list[str]
    possible_card_counts: dict[str, bool] = Field(default_factory=dict)
    optimal_solutions: list[str] = Field(default_factory=list)
    optimal_solution_cards: list[str] = Field(default_factory=list)
    include_wildcards: bool = False
    score: ScoreParameters


@dataclass(frozen=True)
class SolutionMeld:
    """A single meld of a recorded solution (e.g., "S1:R1,R2,R3")."""

    label: str
    cards: tuple[str, ...]


@dataclass(frozen=True)
class OptimalSolution:
    """A recorded reference solution."""

    melds: tuple[SolutionMeld, ...]

    @property
    def total_cards(self) -> int:
        return sum(len(meld.cards) for meld in self.melds)

    def as_board(self) -> list[list[str]]:
        return [list(meld.cards) for meld in self.melds]


@dataclass(frozen=True)
class Puzzle:
    """
    A puzzle ready for play.

    Attributes:
        date: Calendar date key (YYYY-MM-DD)
        initial_cards: Hand dealt at the start
        achievable_counts: Card counts the author flagged as reachable
        optimal_solutions: Parsed reference solutions
        include_wildcards: Whether the hand was dealt with wildcards
        max_cards_used: Most cards any valid board can use
        num_optimal_solutions: Number of recorded optimal solutions
    """

    date: str
    initial_cards: tuple[str, ...]
    achievable_counts: frozenset[int] = field(default_factory=frozenset)
    optimal_solutions: tuple[OptimalSolution, ...] = field(default_factory=tuple)
    include_wildcards: bool = False
    max_cards_used: int = 0
    num_optimal_solutions: int = 0

    @property
    def optimal_counts(self) -> frozenset[int]:
        """Card totals of the recorded optimal solutions."""
        return frozenset(solution.total_cards for solution in self.optimal_solutions)
