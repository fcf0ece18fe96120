"""
Meld validation.

A meld is valid when it forms a run (same suit, consecutive ranks) or a
group (same rank, distinct suits). Wildcards stand in for any card.

Tokens are assumed well-formed; see rummypuzzle.parsers.cards for the
validating parser used at the API boundary.
"""

from collections import Counter
from collections.abc import Sequence

from rummypuzzle.config import MIN_MELD_SIZE
from rummypuzzle.models.card import card_rank, card_suit, is_wildcard


def validate_run(cards: Sequence[str]) -> bool:
    """
    Check whether cards form a run.

    Wildcards may fill gaps between real ranks or extend either end. The
    total gap between sorted real ranks must not exceed the number of
    wildcards, and duplicate ranks are never allowed.

    Args:
        cards: Card tokens in any order

    Returns:
        True if the cards form a valid run
    """
    if len(cards) < MIN_MELD_SIZE:
        return False

    real = [card for card in cards if not is_wildcard(card)]
    if not real:
        return False

    anchor_suit = card_suit(real[0])
    if any(card_suit(card) != anchor_suit for card in real):
        return False

    # Wildcards sort after every real rank
    ranks: list[int | None] = [None if is_wildcard(card) else card_rank(card) for card in cards]
    ranks.sort(key=lambda rank: (rank is None, rank or 0))

    # Trailing wildcards only extend the top of the run
    while ranks and ranks[-1] is None:
        ranks.pop()

    wildcards_available = len(cards) - len(real)
    last_rank = ranks[0]

    for rank in ranks[1:]:
        # Both wildcard branches are unreachable after the pop above, so
        # wildcards past rank 13 go unchecked; see
        # test_wildcard_after_highest_rank_is_not_checked
        if rank is None:
            wildcards_available -= 1
            continue
        if last_rank is None:
            last_rank = rank
            continue

        gap = rank - last_rank - 1
        if gap < 0:
            return False
        if gap > wildcards_available:
            return False

        wildcards_available -= gap
        last_rank = rank

    return True


def validate_group(cards: Sequence[str]) -> bool:
    """
    Check whether cards form a group.

    Every real card must share one rank and no suit may repeat among the
    real cards. Wildcards take the place of the missing suits.
    """
    if len(cards) < MIN_MELD_SIZE:
        return False

    real = [card for card in cards if not is_wildcard(card)]
    if not real:
        return False

    anchor_rank = card_rank(real[0])
    if any(card_rank(card) != anchor_rank for card in real):
        return False

    suits = {card_suit(card) for card in real}
    return len(suits) == len(real)


def validate_meld(cards: Sequence[str]) -> bool:
    """Check whether cards form a run or a group."""
    return validate_run(cards) or validate_group(cards)


def validate_board(melds: Sequence[Sequence[str]]) -> frozenset[int]:
    """
    Find the melds on a board that are not valid.

    Returns:
        Indices of invalid melds. Empty when the whole board is valid.
    """
    return frozenset(index for index, meld in enumerate(melds) if not validate_meld(meld))


def count_cards(melds: Sequence[Sequence[str]]) -> int:
    """Total cards laid out across all melds."""
    return sum(len(meld) for meld in melds)


def check_card_conservation(
    initial_cards: Sequence[str],
    melds: Sequence[Sequence[str]],
    hand: Sequence[str] | None = None,
) -> tuple[list[str], list[str]]:
    """
    Compare the cards in play against the cards dealt.

    Board plus hand must equal the dealt multiset. When hand is None only
    the board is checked, and it must be drawn from the dealt cards.

    Args:
        initial_cards: Cards dealt for the puzzle
        melds: Melds on the board
        hand: Cards still in hand, if known

    Returns:
        (introduced, missing): cards in play that were never dealt, and
        dealt cards that are unaccounted for (always empty when hand is None)
    """
    dealt = Counter(initial_cards)
    in_play: Counter[str] = Counter()
    for meld in melds:
        in_play.update(meld)
    if hand is not None:
        in_play.update(hand)

    introduced = sorted((in_play - dealt).elements())
    missing = sorted((dealt - in_play).elements()) if hand is not None else []
    return introduced, missing
