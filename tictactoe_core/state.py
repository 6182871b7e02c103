from __future__ import annotations

from dataclasses import dataclass

from .board import Board, Cell, Player


@dataclass(frozen=True)
class GameState:
    """Represents the full game state: the board and the player to move.

    Instances are immutable, so a GameState doubles as the snapshot handed
    to the persistence and presentation layers.
    """
    board: Board
    current: Player

    @classmethod
    def fresh(cls) -> "GameState":
        return cls(board=Board.empty(), current=Player.X)

    def cell_at(self, r: int, c: int) -> Cell:
        return self.board.at(r, c)

    def pretty(self) -> str:
        return f"{self.board.pretty()}\nCurrent player: {self.current.value}"
