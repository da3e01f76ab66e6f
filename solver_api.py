from __future__ import annotations

from flask import Flask, request, jsonify
from flask_cors import CORS

from sudoku_search.board import Board
from sudoku_search.models import MalformedPuzzleError
from sudoku_search.puzzles import PUZZLES
from sudoku_search.solver import Solver

app = Flask(__name__)
CORS(app)


def _norm81(s) -> str:
    return "".join(str(s or "").split())


def _grid_rows(board: Board):
    return [[board.cell(r, c).value for c in range(9)] for r in range(9)]


def _clue_conflicts(board: Board):
    """
    Duplicated clues in a row/col/box.
    Returns (ok, explanation, cells) with cells as {"r", "c", "digit"}, 1-indexed.
    """
    check = board.validate_rules()
    if check.is_valid:
        return True, "", []
    cells = [{"r": r + 1, "c": c + 1, "digit": check.digit} for (r, c) in check.conflict_cells]
    explanation = (
        f"Sudoku rule violation: digit {check.digit} appears more than once in a "
        f"{check.conflict_type.value.lower()}. The puzzle has no solution."
    )
    return False, explanation, cells


@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.get("/puzzles")
def puzzles():
    return jsonify({"puzzles": PUZZLES})


@app.post("/solve")
def solve():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object with a 'puzzle' field"}), 400
    try:
        board = Board.from_string(_norm81(data.get("puzzle", "")))
    except MalformedPuzzleError as e:
        return jsonify({"error": str(e)}), 400

    ok, expl, conflicts = _clue_conflicts(board)
    app.logger.debug("solve request, clues consistent=%s", ok)

    result = Solver(board.clone()).solve()
    return jsonify({
        "validation": {"ok": ok, "explanation": expl, "conflicts": conflicts},
        "solver": {
            "ok": result.is_solvable,
            "state": result.state.value,
            "solution81": result.solution81,
            "grid": _grid_rows(result.board) if result.is_solvable else None,
            "branch_count": result.branch_count,
            "boards_explored": result.boards_explored,
        },
    })


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8000, debug=True)
