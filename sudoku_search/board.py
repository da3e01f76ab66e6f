from __future__ import annotations
from typing import Dict, List, Optional

from sudoku_search.models import ConflictType, MalformedPuzzleError, ValidationResult, RC

DIGITS = list(range(1, 10))
UNKNOWN = ".*"

# Row-major cell indices of each constraint region.
ROWS = [[r * 9 + c for c in range(9)] for r in range(9)]
COLS = [[r * 9 + c for r in range(9)] for c in range(9)]
BOXES = [
    [r * 9 + c
     for r in range(br * 3, br * 3 + 3)
     for c in range(bc * 3, bc * 3 + 3)]
    for br in range(3) for bc in range(3)
]

GRID_SEPARATOR = "-------+-------+-------"


def block_index(r: int, c: int) -> int:
    # 0 | 1 | 2
    # --+---+--
    # 3 | 4 | 5
    # --+---+--
    # 6 | 7 | 8
    return (r // 3) * 3 + (c // 3)


def parse_81(s: str) -> List[List[int]]:
    """
    Candidate lists for the 81 cells of a puzzle string, row-major.
    Digits 1-9 are clues, '.' and '*' are unknown cells.
    """
    if len(s) != 81:
        raise MalformedPuzzleError(f"Expected 81 characters, got {len(s)}")
    cells: List[List[int]] = []
    for i, ch in enumerate(s):
        if ch in UNKNOWN:
            cells.append(DIGITS[:])
        elif ch in "123456789":
            cells.append([int(ch)])
        else:
            raise MalformedPuzzleError(
                f"Invalid char '{ch}' at position {i} (r{i // 9 + 1}, c{i % 9 + 1})."
            )
    return cells


class Cell:
    __slots__ = ("row", "col", "candidates")

    def __init__(self, row: int, col: int, candidates: List[int]):
        self.row = row
        self.col = col
        self.candidates = candidates

    @property
    def block(self) -> int:
        return block_index(self.row, self.col)

    @property
    def index(self) -> int:
        return 9 * self.row + self.col

    @property
    def value(self) -> int:
        """The placed digit, or 0 while more than one candidate remains."""
        return self.candidates[0] if len(self.candidates) == 1 else 0

    def remove(self, digit: int) -> bool:
        """Return True if digit was a candidate and has been removed."""
        if digit not in self.candidates:
            return False
        self.candidates.remove(digit)
        return True

    def is_solved(self) -> bool:
        return len(self.candidates) == 1

    def is_valid(self) -> bool:
        return len(self.candidates) > 0

    def render(self, bracketed: bool = True) -> str:
        s = "".join(str(d) for d in self.candidates)
        return f"[{s}]" if bracketed else s

    def clone(self) -> "Cell":
        return Cell(self.row, self.col, self.candidates[:])

    def __repr__(self) -> str:
        return f"Cell(r{self.row + 1}c{self.col + 1}, {self.render()})"


class Board:
    """
    Search-state board:
    - cells[i] is the Cell at row i // 9, column i % 9
    - each Cell carries its remaining candidate digits
    - the board owns its cells; clone() never shares them
    """

    def __init__(self, cells: List[Cell]):
        if len(cells) != 81:
            raise ValueError(f"A board needs 81 cells, got {len(cells)}")
        self.cells = cells

    @staticmethod
    def from_string(puzzle_81: str) -> "Board":
        candidates = parse_81(puzzle_81)
        return Board([Cell(i // 9, i % 9, cand) for i, cand in enumerate(candidates)])

    def clone(self) -> "Board":
        return Board([cell.clone() for cell in self.cells])

    __copy__ = clone

    def cell(self, row: int, col: int) -> Cell:
        if not (0 <= row < 9 and 0 <= col < 9):
            raise IndexError(f"Cell ({row}, {col}) is outside the 9x9 grid")
        return self.cells[9 * row + col]

    def assign(self, row: int, col: int, digit: int) -> None:
        """Collapse a cell to the single given digit."""
        if digit not in DIGITS:
            raise ValueError(f"Digit must be in 1..9, got {digit!r}")
        self.cell(row, col).candidates = [digit]

    def _others(self, region: List[int], target: Cell) -> List[Cell]:
        return [self.cells[i] for i in region if i != target.index]

    def peers_in_row(self, target: Cell) -> List[Cell]:
        return self._others(ROWS[target.row], target)

    def peers_in_col(self, target: Cell) -> List[Cell]:
        return self._others(COLS[target.col], target)

    def peers_in_block(self, target: Cell) -> List[Cell]:
        return self._others(BOXES[target.block], target)

    def is_valid(self) -> bool:
        return all(cell.is_valid() for cell in self.cells)

    def is_solved(self) -> bool:
        return all(cell.is_solved() for cell in self.cells)

    def pick_branch_cell(self) -> Optional[Cell]:
        """
        Most constrained open cell (fewest candidates, at least two).
        Ties go to the first one in row-major order; None if no cell is open.
        """
        unsolved = [cell for cell in self.cells if len(cell.candidates) > 1]
        if not unsolved:
            return None
        return min(unsolved, key=lambda cell: len(cell.candidates))

    def to_string(self) -> str:
        return "".join(str(cell.value) if cell.is_solved() else "." for cell in self.cells)

    def render_grid(self) -> str:
        s = ""
        for cell in self.cells:
            s += (" " + cell.render(False)) if cell.is_solved() else " *"
            if cell.col in (2, 5):
                s += " |"
            if cell.col == 8:
                s += "\n"
                if cell.row in (2, 5):
                    s += GRID_SEPARATOR + "\n"
        return s

    def render_line(self, bracketed: bool = True) -> str:
        s = ""
        for cell in self.cells:
            s += cell.render(bracketed)
            if cell.col == 8 and cell.row != 8:
                s += "\n"
        return s

    def __str__(self) -> str:
        return self.render_line()

    def validate_rules(self) -> ValidationResult:
        """First duplicated placed digit in a row, then a column, then a box."""
        for region_type, regions in (
            (ConflictType.ROW, ROWS),
            (ConflictType.COL, COLS),
            (ConflictType.BOX, BOXES),
        ):
            for region in regions:
                digit, dup = self._find_duplicate(region)
                if dup:
                    return ValidationResult(False, region_type, dup, digit)
        return ValidationResult(True, ConflictType.NONE, [])

    def _find_duplicate(self, region: List[int]):
        seen: Dict[int, List[RC]] = {}
        for i in region:
            cell = self.cells[i]
            if not cell.is_solved():
                continue
            seen.setdefault(cell.value, []).append((cell.row, cell.col))
        for d, cells in seen.items():
            if len(cells) > 1:
                return d, cells
        return 0, []
