# tests/conftest.py
import pytest

from sudoku_search.board import Board

CLASSIC = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
CLASSIC_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


@pytest.fixture
def classic():
    return CLASSIC


@pytest.fixture
def classic_solution():
    return CLASSIC_SOLUTION


@pytest.fixture
def solved_board():
    return Board.from_string(CLASSIC_SOLUTION)


@pytest.fixture
def open_band():
    # classic solution with the whole top band blanked: every unknown starts
    # with three candidates after elimination, so the search has to guess
    return "." * 27 + CLASSIC_SOLUTION[27:]


def assert_sudoku(s: str):
    """Each digit exactly once per row, column and box."""
    assert len(s) == 81
    grid = [[int(s[r * 9 + c]) for c in range(9)] for r in range(9)]
    full = set(range(1, 10))
    for r in range(9):
        assert set(grid[r]) == full
    for c in range(9):
        assert {grid[r][c] for r in range(9)} == full
    for br in range(3):
        for bc in range(3):
            assert {grid[r][c] for r in range(br * 3, br * 3 + 3) for c in range(bc * 3, bc * 3 + 3)} == full
