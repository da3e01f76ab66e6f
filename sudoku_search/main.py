import argparse
import logging
from typing import List, Optional

from sudoku_search.board import Board
from sudoku_search.models import MalformedPuzzleError
from sudoku_search.puzzles import PUZZLES
from sudoku_search.solver import Solver


def normalize_81(s: str) -> str:
    # puzzles pasted over several lines
    return "".join(s.split())


def play(n: int, puzzle: str, show_candidates: bool = False, show_stats: bool = False) -> bool:
    board = Board.from_string(normalize_81(puzzle))

    print(f"Puzzle #{n}:")
    print(board.render_grid())

    check = board.validate_rules()
    if not check.is_valid:
        r, c = check.conflict_cells[0]
        print(
            f"Clue conflict: digit {check.digit} repeated in {check.conflict_type.value} "
            f"(first at r{r + 1}, c{c + 1})."
        )

    result = Solver(board.clone()).solve()
    if result.is_solvable:
        print("Solution:")
        print(result.board.render_grid())
        if show_candidates:
            print(result.board.render_line())
            print()
    else:
        print("Invalid puzzle or no solution found.")

    if show_stats:
        print(f"Branches: {result.branch_count} | Boards explored: {result.boards_explored}")
    print("=" * 23)
    return result.is_solvable


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve 9x9 sudoku puzzles by elimination and backtracking.")
    p.add_argument("--puzzle", action="append", help="81-char puzzle (digits + . or *); repeatable")
    p.add_argument("--candidates", action="store_true", help="Also print the solved board as candidate lists")
    p.add_argument("--stats", action="store_true", help="Print branch and explored-board counts")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    puzzles = args.puzzle or PUZZLES
    unsolved = 0
    for n, puzzle in enumerate(puzzles, start=1):
        try:
            ok = play(n, puzzle, args.candidates, args.stats)
        except MalformedPuzzleError as e:
            p.error(f"puzzle #{n}: {e}")
        if not ok:
            unsolved += 1
    return 1 if unsolved else 0


if __name__ == "__main__":
    raise SystemExit(main())
