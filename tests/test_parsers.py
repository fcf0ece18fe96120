"""Tests for card token and solution parsers."""

import pytest

from rummypuzzle.models.card import Card, InvalidCardError
from rummypuzzle.models.failure import FailureKind
from rummypuzzle.models.puzzle import PuzzleRecord
from rummypuzzle.parsers.cards import parse_card, parse_cards, validate_tokens
from rummypuzzle.parsers.solutions import (
    SolutionFormatError,
    achievable_counts,
    parse_solution,
    puzzle_from_record,
)


class TestParseCard:
    def test_suited_card(self) -> None:
        card = parse_card("R7")

        assert card == Card(token="R7", suit="R", rank=7)
        assert not card.is_wildcard

    def test_two_digit_rank(self) -> None:
        assert parse_card("B13").rank == 13

    def test_wildcard(self) -> None:
        card = parse_card("*")

        assert card.is_wildcard
        assert card.suit is None
        assert card.rank is None
        assert str(card) == "*"

    @pytest.mark.parametrize("token", ["", "R", "7", "r7", "RR7", "R7x", " R7"])
    def test_malformed(self, token: str) -> None:
        with pytest.raises(InvalidCardError):
            parse_card(token)

    def test_unknown_suit(self) -> None:
        with pytest.raises(InvalidCardError) as exc_info:
            parse_card("X5")

        assert "unknown suit" in exc_info.value.reason

    @pytest.mark.parametrize("token", ["R0", "G14", "Y99"])
    def test_rank_out_of_range(self, token: str) -> None:
        with pytest.raises(InvalidCardError):
            parse_card(token)

    @pytest.mark.parametrize("token", ["R07", "B013", "R٣", "G７"])
    def test_one_spelling_per_card(self, token: str) -> None:
        """Leading zeros and non-ASCII digits are not ranks."""
        with pytest.raises(InvalidCardError) as exc_info:
            parse_card(token)

        assert "expected a suit letter" in exc_info.value.reason

    def test_error_is_known_failure(self) -> None:
        with pytest.raises(InvalidCardError) as exc_info:
            parse_card("Q1")

        assert exc_info.value.kind == FailureKind.INVALID_INPUT
        assert exc_info.value.token == "Q1"


class TestParseCards:
    def test_parses_all(self) -> None:
        cards = parse_cards(["R1", "*", "Y13"])
        assert [c.token for c in cards] == ["R1", "*", "Y13"]

    def test_fails_on_first_bad_token(self) -> None:
        with pytest.raises(InvalidCardError) as exc_info:
            parse_cards(["R1", "Z2", "Q3"])
        assert exc_info.value.token == "Z2"

    def test_validate_tokens_on_board(self) -> None:
        validate_tokens([["R1", "R2", "R3"], ["*"]])

        with pytest.raises(InvalidCardError):
            validate_tokens([["R1"], ["R2", "B0"]])


class TestParseSolution:
    def test_two_melds(self) -> None:
        solution = parse_solution("S1:R1,R2,R3,*|S2:R4,B4,G4")

        assert len(solution.melds) == 2
        assert solution.melds[0].label == "S1"
        assert solution.melds[0].cards == ("R1", "R2", "R3", "*")
        assert solution.melds[1].cards == ("R4", "B4", "G4")
        assert solution.total_cards == 7

    def test_whitespace_is_stripped(self) -> None:
        solution = parse_solution(" S1: R1, R2 ,R3 | S2:B5,G5,Y5 ")

        assert solution.melds[0].label == "S1"
        assert solution.melds[0].cards == ("R1", "R2", "R3")
        assert solution.melds[1].cards == ("B5", "G5", "Y5")

    def test_as_board(self) -> None:
        solution = parse_solution("S1:R1,R2,R3")
        assert solution.as_board() == [["R1", "R2", "R3"]]

    def test_missing_separator(self) -> None:
        with pytest.raises(SolutionFormatError):
            parse_solution("S1:R1,R2,R3|R4,B4,G4")

    def test_empty_meld(self) -> None:
        with pytest.raises(SolutionFormatError):
            parse_solution("S1:")


class TestPuzzleFromRecord:
    def test_achievable_counts(self) -> None:
        counts = achievable_counts({"3": True, "4": False, "7": True})
        assert counts == frozenset({3, 7})

    def test_builds_puzzle(self, sample_record: PuzzleRecord) -> None:
        puzzle = puzzle_from_record(sample_record)

        assert puzzle.date == "2025-01-01"
        assert puzzle.initial_cards == ("R1", "R2", "R3", "R4", "B4", "G4", "Y7", "*")
        assert puzzle.achievable_counts == frozenset({3, 4, 5, 6, 7})
        assert puzzle.optimal_counts == frozenset({7})
        assert puzzle.max_cards_used == 7
        assert puzzle.num_optimal_solutions == 1
        assert puzzle.include_wildcards
