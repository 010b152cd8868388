from typing import List

from .board import NIBBLE_BITS, Grid
from .geometry import DOWN, LEFT, RIGHT, UP, Direction

NIBBLE_MASK = (1 << NIBBLE_BITS) - 1


def arranged_uid(grid: Grid, size: int, start_x: int = 0, start_y: int = 0,
                 dir1: Direction = RIGHT, dir2: Direction = DOWN) -> int:
    """
    Build an identifier for the queens currently on a full board.

    The board is walked from (start_x, start_y): `dir2` selects the line
    (outer index j) and `dir1` the position on that line (inner index i).
    A queen found at (i, j) contributes (i + 1) << (j * 4), so each line
    owns one nibble holding the 1-based position of its queen.

    Args:
        grid (list[list[Square]]): Squares indexed as grid[x][y].
        size (int): Board size.
        start_x (int): Column of the walk origin.
        start_y (int): Row of the walk origin.
        dir1 (Direction): Inner walking direction.
        dir2 (Direction): Outer walking direction.

    Returns:
        int: The identifier.

    Examples:
        A 4x4 board with queens at (2,0), (0,1), (3,2), (1,3) gives
        3 + (1 << 4) + (4 << 8) + (2 << 12) = 9235 for the default walk.
    """
    uid = 0
    for j in range(size):
        for i in range(size):
            x = start_x + dir1.dx * i + dir2.dx * j
            y = start_y + dir1.dy * i + dir2.dy * j
            if grid[x][y].is_queen:
                uid |= (i + 1) << (j * NIBBLE_BITS)
    return uid


def arranged_gid(grid: Grid, size: int) -> int:
    """
    Identifier shared by every rotation and reflection of an arrangement.

    Takes the minimum of arranged_uid() over the 4 corners combined with
    both axis orders, which covers the 8 symmetries of the square.
    """
    last = size - 1
    walks = (
        (0, 0, RIGHT, DOWN),
        (0, 0, DOWN, RIGHT),
        (last, 0, LEFT, DOWN),
        (last, 0, DOWN, LEFT),
        (0, last, RIGHT, UP),
        (0, last, UP, RIGHT),
        (last, last, LEFT, UP),
        (last, last, UP, LEFT),
    )
    return min(arranged_uid(grid, size, *walk) for walk in walks)


def decode_uid(uid: int, size: int) -> List[int]:
    """
    Turn a default-walk identifier back into queen columns.

    Returns:
        list[int]: columns[y] = x of the queen on row y, -1 for empty rows.
    """
    return [((uid >> (y * NIBBLE_BITS)) & NIBBLE_MASK) - 1 for y in range(size)]
