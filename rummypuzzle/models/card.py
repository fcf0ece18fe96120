from dataclasses import dataclass

from rummypuzzle.config import WILDCARD
from rummypuzzle.models.failure import FailureKind, KnownError


@dataclass(frozen=True, slots=True)
class Card:
    """
    A parsed card token.

    Attributes:
        token: Token exactly as dealt (e.g., "R7", "*")
        suit: Suit code (R, B, G, Y), None for a wildcard
        rank: Numeric rank, None for a wildcard
    """

    token: str
    suit: str | None = None
    rank: int | None = None

    @property
    def is_wildcard(self) -> bool:
        return self.suit is None

    def __str__(self) -> str:
        return self.token


class InvalidCardError(KnownError):
    """Raised when a token is not a card this game can deal."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"'{token}' is not a valid card",
            detail=reason,
            suggestion="Cards look like R7, B12 or *.",
        )


def is_wildcard(token: str) -> bool:
    return token == WILDCARD


def card_suit(token: str) -> str:
    """Suit code of a non-wildcard token."""
    return token[0]


def card_rank(token: str) -> int:
    """Numeric rank of a non-wildcard token."""
    return int(token[1:])
