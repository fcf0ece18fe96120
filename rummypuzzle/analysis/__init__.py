from rummypuzzle.analysis.melds import (
    check_card_conservation,
    count_cards,
    validate_board,
    validate_group,
    validate_meld,
    validate_run,
)
from rummypuzzle.analysis.scoring import is_optimal_count, max_score, score_submission

__all__ = [
    "check_card_conservation",
    "count_cards",
    "is_optimal_count",
    "max_score",
    "score_submission",
    "validate_board",
    "validate_group",
    "validate_meld",
    "validate_run",
]
