from __future__ import annotations

import logging
from typing import List, Optional

from sudoku_search.board import Board
from sudoku_search.models import SolutionResult, SolverState

log = logging.getLogger(__name__)


class Solver:
    """
    Eliminate > guess > eliminate > guess ... over an explicit stack of boards.

    Every board on the frontier is an independent clone, so a branch that
    runs into a contradiction is dropped without touching its siblings.
    """

    def __init__(self, board: Board):
        self.curr: Board = board
        self.frontier: List[Board] = []
        self.state = SolverState.PROPAGATING
        self.branch_count = 0
        self.boards_explored = 0
        self._result: Optional[SolutionResult] = None

    @staticmethod
    def from_string(puzzle_81: str) -> "Solver":
        return Solver(Board.from_string(puzzle_81))

    # ------------------ search loop ------------------
    def solve(self) -> SolutionResult:
        if self._result is not None:
            return self._result

        log.info("solve start")
        while True:
            self.state = SolverState.PROPAGATING
            self.boards_explored += 1
            if self.propagate(self.curr):
                if self.curr.is_solved():
                    self.state = SolverState.SOLVED
                    break
                self.state = SolverState.BRANCHING
                self.branch(self.curr)
            else:
                log.debug("contradiction, dropping board (%d pending)", len(self.frontier))

            if not self.frontier:
                self.state = SolverState.EXHAUSTED
                break
            self.curr = self.frontier.pop()

        log.info(
            "solve end: %s after %d branches, %d boards explored",
            self.state.value, self.branch_count, self.boards_explored,
        )
        solved = self.state is SolverState.SOLVED
        self._result = SolutionResult(
            is_solvable=solved,
            state=self.state,
            board=self.curr if solved else None,
            branch_count=self.branch_count,
            boards_explored=self.boards_explored,
        )
        return self._result

    # ------------------ steps ------------------
    @staticmethod
    def propagate(board: Board) -> bool:
        """
        One row-major sweep: each cell that is solved when the sweep reaches it
        removes its digit from its row, column and block peers.
        Returns False as soon as some cell has no candidates left.
        """
        for cell in board.cells:
            if not cell.is_solved():
                continue
            d = cell.candidates[0]
            for peer in board.peers_in_row(cell):
                peer.remove(d)
            for peer in board.peers_in_col(cell):
                peer.remove(d)
            for peer in board.peers_in_block(cell):
                peer.remove(d)
            if not board.is_valid():
                return False
        return True

    def branch(self, board: Board) -> None:
        """Push one clone per candidate of the most constrained cell."""
        cell = board.pick_branch_cell()
        if cell is None:
            return
        self.branch_count += 1
        log.debug(
            "branch on r%dc%d %s (%d pending)",
            cell.row + 1, cell.col + 1, cell.render(), len(self.frontier),
        )
        for d in cell.candidates:
            g = board.clone()
            g.assign(cell.row, cell.col, d)
            self.frontier.append(g)


# ------------------ public API ------------------
def solve_puzzle(puzzle_81: str) -> SolutionResult:
    return Solver.from_string(puzzle_81).solve()
