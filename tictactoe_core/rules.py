from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Cell, Coord, Player, SIZE


class Outcome(Enum):
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


def _winning_lines() -> List[Tuple[Coord, ...]]:
    """All lines of three, in search order: rows, then columns, then diagonals."""
    lines: List[Tuple[Coord, ...]] = []
    for r in range(SIZE):
        lines.append(tuple((r, c) for c in range(SIZE)))
    for c in range(SIZE):
        lines.append(tuple((r, c) for r in range(SIZE)))
    lines.append(tuple((i, i) for i in range(SIZE)))
    lines.append(tuple((i, SIZE - 1 - i) for i in range(SIZE)))
    return lines


WINNING_LINES: Tuple[Tuple[Coord, ...], ...] = tuple(_winning_lines())


def line_owner(board: Board, line: Tuple[Coord, ...]) -> Optional[Player]:
    """Returns the player holding every cell of the line, if any."""
    first = board.at(*line[0])
    if first is Cell.EMPTY:
        return None
    for rc in line[1:]:
        if board.at(*rc) is not first:
            return None
    return first.player


def find_winning_line(board: Board) -> Optional[Tuple[Coord, ...]]:
    for line in WINNING_LINES:
        if line_owner(board, line) is not None:
            return line
    return None


def find_winner(board: Board) -> Optional[Player]:
    """Returns the owner of the first complete line found, or None."""
    line = find_winning_line(board)
    if line is None:
        return None
    return line_owner(board, line)


def is_full(board: Board) -> bool:
    return all(cell is not Cell.EMPTY for cell in board.grid)


def evaluate(board: Board) -> Tuple[Outcome, Optional[Player]]:
    """Classifies a board. A win takes precedence over a full board."""
    winner = find_winner(board)
    if winner is not None:
        return Outcome.WIN, winner
    if is_full(board):
        return Outcome.DRAW, None
    return Outcome.CONTINUE, None
