"""
Parser for card tokens.

Token format:
    <suit><rank>  e.g. R7, B12, G1
    *             wildcard

Suits are R, B, G and Y. Ranks run from 1 to 13.
"""

import re

from rummypuzzle.config import MAX_RANK, MIN_RANK, SUITS, WILDCARD
from rummypuzzle.models.card import Card, InvalidCardError

# Groups: (suit, rank); ranks carry no leading zero
CARD_PATTERN = re.compile(r"([A-Z])([1-9]\d?)", re.ASCII)


def parse_card(token: str) -> Card:
    """
    Parse and validate a single card token.

    Raises:
        InvalidCardError: If the token is malformed, uses an unknown suit,
            or has a rank outside the deck
    """
    if token == WILDCARD:
        return Card(token=token)

    match = CARD_PATTERN.fullmatch(token)
    if not match:
        raise InvalidCardError(token, "expected a suit letter followed by a rank")

    suit, rank_text = match.groups()
    if suit not in SUITS:
        raise InvalidCardError(token, f"unknown suit '{suit}', expected one of {', '.join(SUITS)}")

    rank = int(rank_text)
    if not MIN_RANK <= rank <= MAX_RANK:
        raise InvalidCardError(token, f"rank {rank} outside {MIN_RANK}-{MAX_RANK}")

    return Card(token=token, suit=suit, rank=rank)


def parse_cards(tokens: list[str]) -> list[Card]:
    """Parse a list of tokens, failing on the first invalid one."""
    return [parse_card(token) for token in tokens]


def validate_tokens(melds: list[list[str]]) -> None:
    """
    Check every token on a board.

    Raises:
        InvalidCardError: On the first malformed token
    """
    for meld in melds:
        parse_cards(meld)
