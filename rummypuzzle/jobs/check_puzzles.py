"""
Check the puzzle dataset for consistency.

Run this job after authoring new puzzles. Every recorded optimal solution
must be a valid board built from the dealt hand, and the scoring
parameters must agree with the solutions.
"""

import argparse
import logging
import sys
from pathlib import Path

from rummypuzzle.analysis.melds import check_card_conservation, validate_board
from rummypuzzle.models.card import InvalidCardError
from rummypuzzle.models.puzzle import PuzzleRecord
from rummypuzzle.parsers.cards import parse_cards
from rummypuzzle.parsers.solutions import SolutionFormatError, puzzle_from_record
from rummypuzzle.services.puzzle_store import load_puzzles

logger = logging.getLogger(__name__)


def check_puzzle(record: PuzzleRecord) -> list[str]:
    """
    Find problems with a single puzzle record.

    Returns:
        Human-readable problems. Empty if the record is consistent.
    """
    try:
        parse_cards(record.initial_cards)
        puzzle = puzzle_from_record(record)
    except (InvalidCardError, SolutionFormatError) as e:
        return [str(e)]

    problems: list[str] = []

    for index, solution in enumerate(puzzle.optimal_solutions):
        board = solution.as_board()

        invalid = validate_board(board)
        if invalid:
            labels = [solution.melds[i].label for i in sorted(invalid)]
            problems.append(f"solution {index}: invalid melds {labels}")

        introduced, _ = check_card_conservation(puzzle.initial_cards, board)
        if introduced:
            problems.append(f"solution {index}: cards not dealt {introduced}")

        if solution.total_cards != puzzle.max_cards_used:
            problems.append(
                f"solution {index}: uses {solution.total_cards} cards, "
                f"max_cards_used is {puzzle.max_cards_used}"
            )

        if solution.total_cards not in puzzle.achievable_counts:
            problems.append(f"solution {index}: count {solution.total_cards} not achievable")

    if len(puzzle.optimal_solutions) != puzzle.num_optimal_solutions:
        problems.append(
            f"num_optimal_solutions is {puzzle.num_optimal_solutions}, "
            f"found {len(puzzle.optimal_solutions)}"
        )

    if puzzle.achievable_counts and max(puzzle.achievable_counts) != puzzle.max_cards_used:
        problems.append(
            f"largest achievable count {max(puzzle.achievable_counts)} "
            f"differs from max_cards_used {puzzle.max_cards_used}"
        )

    return problems


def run_check(path: Path | None = None) -> dict[str, list[str]]:
    """
    Check every puzzle in a dataset.

    Returns:
        Dict mapping puzzle date to its problems, for puzzles with problems
    """
    records = load_puzzles(path)
    results: dict[str, list[str]] = {}

    for record in records:
        problems = check_puzzle(record)
        if problems:
            results[record.date] = problems
            for problem in problems:
                logger.warning("%s: %s", record.date, problem)

    logger.info("Checked %d puzzles, %d with problems", len(records), len(results))
    return results


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Check a puzzle dataset")
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        help="Path to puzzles JSON (default: bundled puzzles)",
    )
    args = parser.parse_args(argv)

    try:
        results = run_check(args.path)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 2

    return 1 if results else 0


if __name__ == "__main__":
    sys.exit(main())
