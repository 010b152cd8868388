from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .geometry import Point

# Each row of an arrangement is packed into one nibble of the identifier.
NIBBLE_BITS = 4
UID_BITS = 48


class BoardSize:
    """Supported board sizes. MAX is bounded by the identifier width."""
    MIN = 4
    MAX = UID_BITS // NIBBLE_BITS
    DEFAULT = 8


class SquareState(Enum):
    EMPTY = "empty"
    QUEEN = "queen"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def resolved(self):
        """True once the search has finished with this column."""
        return self in (SquareState.SUCCESS, SquareState.FAILED)


class Square:
    """
    One cell of the work board.

    Tracks its search state and how many placed queens currently attack it.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.state = SquareState.EMPTY
        self.territory_count = 0

    @property
    def is_queen(self) -> bool:
        return self.state is SquareState.QUEEN

    @property
    def is_empty(self) -> bool:
        return self.state is SquareState.EMPTY

    @property
    def is_under_attack(self) -> bool:
        return self.territory_count > 0

    def add_territory(self, delta: int):
        self.territory_count += delta
        assert self.territory_count >= 0, (
            f"territory count of ({self.x}, {self.y}) dropped below zero"
        )

    def __repr__(self):
        return f"Square({self.x}, {self.y}, {self.state.name}, {self.territory_count})"


Grid = List[List[Square]]


def create_grid(size: int) -> Grid:
    """
    Build an empty size x size grid.

    Args:
        size (int): Board size.

    Returns:
        list[list[Square]]: Squares indexed as grid[x][y].
    """
    return [[Square(x, y) for y in range(size)] for x in range(size)]


def adjust_territory(grid: Grid, points: Iterable[Point], delta: int):
    """
    Add `delta` to the territory count of every square in `points`.

    Placing a queen applies +1 over its rays and removing it applies -1,
    so the counts stay balanced.
    """
    for point in points:
        grid[point.x][point.y].add_territory(delta)


def clear_row(grid: Grid, y: int):
    """Reset every square of row `y` back to EMPTY."""
    for column in grid:
        column[y].state = SquareState.EMPTY


def row_has_state(grid: Grid, y: int, state: SquareState) -> bool:
    return any(column[y].state is state for column in grid)


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Immutable copy of a work board handed to views.

    `states` and `territory` are row-major: states[y][x].
    """
    size: int
    states: Tuple[Tuple[SquareState, ...], ...]
    territory: Tuple[Tuple[int, ...], ...]
    cursor: Optional[Point] = None

    @classmethod
    def from_grid(cls, grid: Grid, size: int, cursor: Optional[Point] = None):
        states = tuple(
            tuple(grid[x][y].state for x in range(size)) for y in range(size)
        )
        territory = tuple(
            tuple(grid[x][y].territory_count for x in range(size)) for y in range(size)
        )
        return cls(size, states, territory, cursor)

    def state_at(self, x: int, y: int) -> SquareState:
        return self.states[y][x]

    def is_queen(self, x: int, y: int) -> bool:
        return self.states[y][x] is SquareState.QUEEN

    def territory_at(self, x: int, y: int) -> int:
        return self.territory[y][x]

    def queen_columns(self) -> List[int]:
        """
        Column of the queen in each row, -1 where a row has none.

        Returns:
            list[int]: columns[y] = x of the queen on row y.
        """
        columns = []
        for row in self.states:
            queens = [x for x, state in enumerate(row) if state is SquareState.QUEEN]
            columns.append(queens[0] if queens else -1)
        return columns
