from typing import List, NamedTuple


class Point(NamedTuple):
    """A location on the board. x is the column, y is the row."""
    x: int
    y: int


class Direction(NamedTuple):
    """Move amount for one step along a ray."""
    dx: int
    dy: int


RIGHT = Direction(1, 0)
LEFT = Direction(-1, 0)
UP = Direction(0, -1)
DOWN = Direction(0, 1)

# Order matters only for determinism of queen_territory_points().
QUEEN_DIRECTIONS = (
    Direction(-1, -1),  # left up
    UP,
    Direction(1, -1),   # right up
    LEFT,
    RIGHT,
    Direction(-1, 1),   # left down
    DOWN,
    Direction(1, 1),    # right down
)


def is_on_board(size: int, x: int, y: int) -> bool:
    """
    Check whether a location lies on a size x size board.

    Args:
        size (int): Board size.
        x (int): Column.
        y (int): Row.

    Returns:
        bool: True if both coordinates are in [0, size).
    """
    return 0 <= x < size and 0 <= y < size


def queen_territory_points(size: int, origin: Point) -> List[Point]:
    """
    Collect every square a queen on `origin` attacks.

    Each of the 8 rays is walked from the square next to the origin
    outwards until it leaves the board. The origin itself is never included.

    Args:
        size (int): Board size.
        origin (Point): Location of the queen.

    Returns:
        list[Point]: Attacked points, ray by ray, inner to outer.

    Examples:
        >>> queen_territory_points(4, Point(0, 0))[:3]
        [Point(x=1, y=0), Point(x=2, y=0), Point(x=3, y=0)]
    """
    points = []
    for direction in QUEEN_DIRECTIONS:
        for distance in range(1, size):
            x = origin.x + direction.dx * distance
            y = origin.y + direction.dy * distance
            if not is_on_board(size, x, y):
                break
            points.append(Point(x, y))
    return points
