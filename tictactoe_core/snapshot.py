from __future__ import annotations

from typing import Any, Dict, List

from .board import Board, Cell, Player, SIZE
from .state import GameState


def board_to_json(b: Board) -> List[List[str]]:
    return [[cell.value for cell in row] for row in b.rows()]


def board_from_json(rows: Any) -> Board:
    """Builds a Board from a 3x3 list of '.', 'X', 'O' strings."""
    if not isinstance(rows, list) or len(rows) != SIZE:
        raise ValueError(f"board must be a list of {SIZE} rows")
    grid: List[Cell] = []
    for row in rows:
        if not isinstance(row, list) or len(row) != SIZE:
            raise ValueError(f"each board row must hold {SIZE} cells")
        for x in row:
            grid.append(Cell(str(x)))
    return Board(grid=tuple(grid))


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "board": board_to_json(s.board),
        "currentPlayer": s.current.value,
    }


def json_to_state(obj: Any) -> GameState:
    """Inverse of state_to_json. Raises ValueError on malformed input.

    Only the shape is checked; a board that could not arise from legal play
    is accepted as-is.
    """
    if not isinstance(obj, dict):
        raise ValueError("state must be a JSON object")
    try:
        rows = obj["board"]
        current = obj["currentPlayer"]
    except KeyError as e:
        raise ValueError(f"missing key: {e.args[0]}") from e
    board = board_from_json(rows)
    return GameState(board=board, current=Player(str(current)))
