"""
Parser for recorded optimal solutions.

Solution format:
    <label>:<card>,<card>,...|<label>:<card>,<card>,...

Example:
    S1:R1,R2,R3,*|S2:R4,B4,G4

Solutions are parsed once when the dataset is loaded.
"""

from rummypuzzle.models.puzzle import OptimalSolution, Puzzle, PuzzleRecord, SolutionMeld


class SolutionFormatError(ValueError):
    """Raised when a solution string cannot be parsed."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid solution '{text}': {reason}")


def parse_solution(text: str) -> OptimalSolution:
    """
    Parse one solution string into melds.

    Raises:
        SolutionFormatError: If a meld chunk has no ':' separator or no cards
    """
    melds: list[SolutionMeld] = []

    for chunk in text.split("|"):
        chunk = chunk.strip()
        if ":" not in chunk:
            raise SolutionFormatError(text, f"meld '{chunk}' has no ':' separator")

        label, card_list = chunk.split(":", 1)
        cards = tuple(card.strip() for card in card_list.split(","))
        if not any(cards):
            raise SolutionFormatError(text, f"meld '{label.strip()}' has no cards")

        melds.append(SolutionMeld(label=label.strip(), cards=cards))

    return OptimalSolution(melds=tuple(melds))


def achievable_counts(possible_card_counts: dict[str, bool]) -> frozenset[int]:
    """Card counts flagged true in the dataset's count map."""
    return frozenset(int(count) for count, possible in possible_card_counts.items() if possible)


def puzzle_from_record(record: PuzzleRecord) -> Puzzle:
    """Build the playable Puzzle for a dataset record."""
    return Puzzle(
        date=record.date,
        initial_cards=tuple(record.initial_cards),
        achievable_counts=achievable_counts(record.possible_card_counts),
        optimal_solutions=tuple(parse_solution(text) for text in record.optimal_solutions),
        include_wildcards=record.include_wildcards,
        max_cards_used=record.score.max_cards_used,
        num_optimal_solutions=record.score.num_optimal_solutions,
    )
