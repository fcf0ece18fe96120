from rummypuzzle.parsers.cards import parse_card, parse_cards, validate_tokens
from rummypuzzle.parsers.solutions import (
    SolutionFormatError,
    achievable_counts,
    parse_solution,
    puzzle_from_record,
)

__all__ = [
    "SolutionFormatError",
    "achievable_counts",
    "parse_card",
    "parse_cards",
    "parse_solution",
    "puzzle_from_record",
    "validate_tokens",
]
