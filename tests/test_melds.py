"""Tests for meld validation."""

import pytest

from rummypuzzle.analysis.melds import (
    check_card_conservation,
    count_cards,
    validate_board,
    validate_group,
    validate_meld,
    validate_run,
)


class TestValidateRun:
    def test_consecutive_same_suit(self) -> None:
        assert validate_run(["R1", "R2", "R3"])

    def test_order_does_not_matter(self) -> None:
        assert validate_run(["R3", "R1", "R2"])

    def test_gap_without_wildcards(self) -> None:
        assert not validate_run(["R1", "R3", "R5"])

    def test_wildcard_fills_gap(self) -> None:
        assert validate_run(["R1", "*", "R3"])

    def test_two_wildcards_fill_two_rank_gap(self) -> None:
        assert validate_run(["R2", "*", "*", "R5"])

    def test_gap_larger_than_wildcards(self) -> None:
        """R1 to R5 needs three wildcards."""
        assert not validate_run(["R1", "*", "*", "R5"])

    def test_wildcards_split_across_gaps(self) -> None:
        assert validate_run(["B1", "*", "B3", "*", "B5"])

    def test_trailing_wildcard_extends_run(self) -> None:
        assert validate_run(["R1", "R2", "*"])

    def test_wildcard_after_highest_rank_is_not_checked(self) -> None:
        """Extending past rank 13 is not rejected."""
        assert validate_run(["Y12", "Y13", "*"])

    def test_mixed_suits(self) -> None:
        assert not validate_run(["R1", "R2", "B3"])

    def test_duplicate_rank(self) -> None:
        assert not validate_run(["R1", "R1", "R2"])

    def test_all_wildcards(self) -> None:
        assert not validate_run(["*", "*", "*"])

    def test_single_real_card_with_wildcards(self) -> None:
        assert validate_run(["G7", "*", "*"])

    def test_multi_digit_ranks(self) -> None:
        assert validate_run(["R9", "R10", "R11"])
        assert not validate_run(["R1", "R10", "R11"])

    def test_too_short(self) -> None:
        assert not validate_run(["R1", "R2"])
        assert not validate_run([])


class TestValidateGroup:
    def test_same_rank_distinct_suits(self) -> None:
        assert validate_group(["R5", "G5", "Y5"])

    def test_all_four_suits(self) -> None:
        assert validate_group(["R5", "G5", "Y5", "B5"])

    def test_duplicate_suit(self) -> None:
        assert not validate_group(["R5", "G5", "R5"])

    def test_different_ranks(self) -> None:
        assert not validate_group(["R5", "G5", "Y6"])

    def test_wildcard_completes_group(self) -> None:
        assert validate_group(["R5", "G5", "*"])

    def test_wildcards_do_not_count_toward_suits(self) -> None:
        assert validate_group(["R5", "*", "*"])

    def test_all_wildcards(self) -> None:
        assert not validate_group(["*", "*", "*"])

    def test_too_short(self) -> None:
        assert not validate_group(["R5", "G5"])


class TestValidateMeld:
    @pytest.mark.parametrize(
        "cards",
        [
            ["R1", "R2", "R3"],
            ["R5", "G5", "Y5"],
            ["R1", "*", "R3"],
            ["R1", "R2", "B3"],
            ["R5", "G5", "R5"],
            ["*", "*", "*"],
            ["R1"],
            ["B7", "*", "B9", "B10"],
        ],
    )
    def test_is_run_or_group(self, cards: list[str]) -> None:
        assert validate_meld(cards) == (validate_run(cards) or validate_group(cards))

    @pytest.mark.parametrize("cards", [[], ["R1"], ["R1", "R2"], ["*", "*"]])
    def test_short_melds_never_valid(self, cards: list[str]) -> None:
        assert not validate_meld(cards)

    def test_run_accepted(self) -> None:
        assert validate_meld(["Y3", "Y4", "Y5"])

    def test_group_accepted(self) -> None:
        assert validate_meld(["B8", "G8", "Y8"])


class TestValidateBoard:
    def test_valid_board(self) -> None:
        board = [["R1", "R2", "R3"], ["B4", "G4", "Y4"]]
        assert validate_board(board) == frozenset()

    def test_reports_invalid_indices(self) -> None:
        board = [["R1", "R2", "R3"], ["R1", "R3", "R5"], ["B4", "G4", "Y4"], ["G1", "G2"]]
        assert validate_board(board) == frozenset({1, 3})

    def test_empty_board_is_valid(self) -> None:
        assert validate_board([]) == frozenset()

    def test_repeatable(self) -> None:
        board = [["R1", "*", "R3"], ["R5", "G5", "R5"]]
        assert validate_board(board) == validate_board(board)


class TestCountCards:
    def test_sums_meld_lengths(self) -> None:
        assert count_cards([["R1", "R2", "R3"], ["B4", "G4", "Y4", "*"]]) == 7

    def test_empty(self) -> None:
        assert count_cards([]) == 0


class TestCardConservation:
    def test_board_and_hand_match_deal(self) -> None:
        introduced, missing = check_card_conservation(
            ["R1", "R2", "R3", "B4"], [["R3", "R1", "R2"]], ["B4"]
        )
        assert introduced == []
        assert missing == []

    def test_card_not_dealt(self) -> None:
        introduced, missing = check_card_conservation(
            ["R1", "R2", "R3"], [["R1", "R2", "R3", "R4"]], []
        )
        assert introduced == ["R4"]
        assert missing == []

    def test_card_missing(self) -> None:
        introduced, missing = check_card_conservation(
            ["R1", "R2", "R3", "*"], [["R1", "R2", "R3"]], []
        )
        assert introduced == []
        assert missing == ["*"]

    def test_duplicate_wildcard(self) -> None:
        """A single dealt wildcard cannot be played twice."""
        introduced, _ = check_card_conservation(["R1", "R3", "*"], [["R1", "*", "R3"], ["*"]])
        assert introduced == ["*"]

    def test_hand_omitted_only_checks_board(self) -> None:
        introduced, missing = check_card_conservation(
            ["R1", "R2", "R3", "B9"], [["R1", "R2", "R3"]]
        )
        assert introduced == []
        assert missing == []
