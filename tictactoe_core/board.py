from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

Coord = Tuple[int, int]

SIZE = 3


class Player(Enum):
    X = "X"
    O = "O"

    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Cell(Enum):
    EMPTY = "."
    X = "X"
    O = "O"

    @classmethod
    def of(cls, player: Player) -> "Cell":
        """Returns the mark a player leaves on the board."""
        return cls(player.value)

    @property
    def player(self) -> Optional[Player]:
        if self is Cell.EMPTY:
            return None
        return Player(self.value)


@dataclass(frozen=True)
class Board:
    """Represents the 3x3 grid of cells."""
    grid: Tuple[Cell, ...]  # row-major, length == SIZE * SIZE

    def __post_init__(self) -> None:
        if len(self.grid) != SIZE * SIZE:
            raise ValueError(f"board must have {SIZE * SIZE} cells, got {len(self.grid)}")

    @classmethod
    def empty(cls) -> "Board":
        return cls(grid=(Cell.EMPTY,) * (SIZE * SIZE))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * SIZE + c

    def at(self, r: int, c: int) -> Cell:
        return self.grid[self.index(r, c)]

    def with_cell(self, r: int, c: int, cell: Cell) -> "Board":
        """Returns a copy of the board with one cell replaced."""
        grid = list(self.grid)
        grid[self.index(r, c)] = cell
        return Board(grid=tuple(grid))

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(SIZE):
            for c in range(SIZE):
                yield (r, c)

    def rows(self) -> List[Tuple[Cell, ...]]:
        return [self.grid[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def empty_cells(self) -> List[Coord]:
        return [rc for rc in self.coords() if self.at(*rc) is Cell.EMPTY]

    def pretty(self) -> str:
        """Generates a human-readable grid with 1-based row and column labels."""
        lines: List[str] = ["  " + " ".join(str(c + 1) for c in range(SIZE))]
        for r, row in enumerate(self.rows()):
            lines.append(f"{r + 1} " + " ".join(cell.value for cell in row))
        return "\n".join(lines)
