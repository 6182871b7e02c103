from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Cell, Coord, Player
from .rules import Outcome, evaluate
from .state import GameState

log = logging.getLogger("engine")


class CellOccupied(Exception):
    """Raised when a move targets a cell that already holds a mark."""

    def __init__(self, row: int, col: int, cell: Cell) -> None:
        super().__init__(f"Cell ({row + 1},{col + 1}) is already taken by {cell.value}")
        self.row = row
        self.col = col
        self.cell = cell


@dataclass(frozen=True)
class MoveResult:
    """Outcome of an accepted move.

    ``board`` is the position right after the move, before any reset, so a
    finished game can still be shown to the player. ``player`` made the move.
    """
    outcome: Outcome
    winner: Optional[Player]
    board: Board
    player: Player

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.CONTINUE


class GameEngine:
    """Owns the game state and is the only thing allowed to change it."""

    def __init__(self, state: Optional[GameState] = None) -> None:
        self._state = state if state is not None else GameState.fresh()

    @property
    def current_player(self) -> Player:
        return self._state.current

    @property
    def board(self) -> Board:
        return self._state.board

    def cell_at(self, row: int, col: int) -> Cell:
        return self._state.board.at(row, col)

    def legal_moves(self) -> List[Coord]:
        return sorted(self._state.board.empty_cells())

    def snapshot(self) -> GameState:
        return self._state

    def restore(self, state: GameState) -> None:
        """Replaces the state wholesale. Board legality is not checked."""
        self._state = state

    def reset(self) -> None:
        self._state = GameState.fresh()

    def apply_move(self, row: int, col: int) -> MoveResult:
        """Places the current player's mark at (row, col), zero-based.

        A win or draw is reported once and the game restarts immediately;
        otherwise the turn passes to the other player.
        """
        state = self._state
        occupant = state.board.at(row, col)
        if occupant is not Cell.EMPTY:
            raise CellOccupied(row, col, occupant)

        mover = state.current
        board = state.board.with_cell(row, col, Cell.of(mover))
        outcome, winner = evaluate(board)
        if outcome is Outcome.CONTINUE:
            self._state = GameState(board, mover.other())
        else:
            log.debug("game over: %s (winner=%s)", outcome.value, winner.value if winner else None)
            self.reset()
        return MoveResult(outcome=outcome, winner=winner, board=board, player=mover)
