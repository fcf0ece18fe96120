from rummypuzzle.models.card import (
    Card,
    InvalidCardError,
    card_rank,
    card_suit,
    is_wildcard,
)
from rummypuzzle.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    PuzzleNotFoundError,
    RefusalError,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)
from rummypuzzle.models.puzzle import (
    OptimalSolution,
    Puzzle,
    PuzzleRecord,
    ScoreParameters,
    SolutionMeld,
)
from rummypuzzle.models.scoring import FEEDBACK, RejectionReason, ScoreOutcome
from rummypuzzle.models.session import PuzzleSession

__all__ = [
    "ApiResponse",
    "Card",
    "FEEDBACK",
    "FailureDetail",
    "FailureKind",
    "InvalidCardError",
    "KnownError",
    "OptimalSolution",
    "OutcomeType",
    "Puzzle",
    "PuzzleNotFoundError",
    "PuzzleRecord",
    "PuzzleSession",
    "RefusalError",
    "RejectionReason",
    "ScoreOutcome",
    "ScoreParameters",
    "SolutionMeld",
    "card_rank",
    "card_suit",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
    "is_finalized",
    "is_wildcard",
]
