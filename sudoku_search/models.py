from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from sudoku_search.board import Board

RC = Tuple[int, int]  # (row, col)


class MalformedPuzzleError(ValueError):
    """Puzzle string has the wrong length or contains an unknown character."""


class ConflictType(str, Enum):
    ROW = "ROW"
    COL = "COL"
    BOX = "BOX"
    NONE = "NONE"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    conflict_type: ConflictType = ConflictType.NONE
    conflict_cells: List[RC] = field(default_factory=list)
    digit: int = 0


class SolverState(str, Enum):
    PROPAGATING = "PROPAGATING"
    BRANCHING = "BRANCHING"
    SOLVED = "SOLVED"
    EXHAUSTED = "EXHAUSTED"


@dataclass(frozen=True)
class SolutionResult:
    is_solvable: bool
    state: SolverState
    board: Optional["Board"] = None
    branch_count: int = 0
    boards_explored: int = 0

    @property
    def solution81(self) -> Optional[str]:
        if not self.is_solvable or self.board is None:
            return None
        return self.board.to_string()
