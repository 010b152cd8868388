import pytest

from nqueen.helpers import WorkBoard
from nqueen.helpers.board import SquareState, create_grid


def grid_from_columns(columns):
    """Build a grid with a queen at (columns[y], y) for every row y."""
    grid = create_grid(len(columns))
    for y, x in enumerate(columns):
        if x >= 0:
            grid[x][y].state = SquareState.QUEEN
    return grid


def is_valid_solution(columns):
    n = len(columns)
    if sorted(columns) != list(range(n)):
        return False
    for y1 in range(n):
        for y2 in range(y1 + 1, n):
            if abs(columns[y1] - columns[y2]) == y2 - y1:
                return False
    return True


@pytest.fixture
def board4():
    return WorkBoard(4)


@pytest.fixture
def make_grid():
    return grid_from_columns


@pytest.fixture
def valid_solution():
    return is_valid_solution
