import logging
from typing import List, NamedTuple

from .board import (BoardSize, BoardSnapshot, SquareState, adjust_territory,
                    clear_row, create_grid, row_has_state)
from .errors import InvalidConfiguration, OutOfBounds
from .geometry import Point, is_on_board, queen_territory_points
from .identifier import arranged_gid, arranged_uid

logger = logging.getLogger(__name__)


class StepResult(NamedTuple):
    executed: bool
    solved: bool


class WorkBoard:
    """
    Step-driven N-Queens search.

    Every call to step() performs one transition of the backtracking search
    and leaves the board in a state that can be inspected or rendered. The
    cursor track stands in for the call stack of the recursive algorithm:
    it holds one point per open row, the top being the square under the
    cursor.
    """

    def __init__(self, board_size: int = BoardSize.DEFAULT, exclude_symmetry: bool = False):
        """
        Create an empty work board with the cursor on (0, 0).

        Args:
            board_size (int): Board size, BoardSize.MIN to BoardSize.MAX.
            exclude_symmetry (bool): Count rotations and reflections of a
                solution only once.

        Raises:
            InvalidConfiguration: If board_size is not a supported size.
        """
        if isinstance(board_size, bool) or not isinstance(board_size, int):
            raise InvalidConfiguration(f"board size must be an integer, got {board_size!r}")
        if not BoardSize.MIN <= board_size <= BoardSize.MAX:
            raise InvalidConfiguration(
                f"board size must be between {BoardSize.MIN} and {BoardSize.MAX}, got {board_size}"
            )

        self.__size = board_size
        self.__exclude_symmetry = bool(exclude_symmetry)
        self.__squares = create_grid(board_size)
        self.__track = [Point(0, 0)]
        self.__result_ids = []

    @property
    def board_size(self) -> int:
        return self.__size

    @property
    def exclude_symmetry(self) -> bool:
        return self.__exclude_symmetry

    @property
    def is_finished(self) -> bool:
        """True once every arrangement has been searched."""
        point = self.current_point()
        return (
            point.y == 0
            and point.x + 1 >= self.__size
            and self.__squares[point.x][point.y].state.resolved
        )

    def current_point(self) -> Point:
        return self.__track[-1]

    def track(self) -> List[Point]:
        return list(self.__track)

    def square_state(self, x: int, y: int) -> SquareState:
        return self.__square(x, y).state

    def is_queen(self, x: int, y: int) -> bool:
        return self.__square(x, y).is_queen

    def territory_count(self, x: int, y: int) -> int:
        return self.__square(x, y).territory_count

    def result_count(self) -> int:
        return len(self.__result_ids)

    def result_ids(self) -> List[int]:
        return list(self.__result_ids)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.from_grid(self.__squares, self.__size, self.current_point())

    def __square(self, x, y):
        if not is_on_board(self.__size, x, y):
            raise OutOfBounds(self.__size, x, y)
        return self.__squares[x][y]

    def step(self) -> StepResult:
        """
        Execute one transition of the search.

        Returns:
            StepResult: executed is False once the search is exhausted,
            solved is True when this step completed a new solution.
        """
        point = self.current_point()
        square = self.__squares[point.x][point.y]
        last_row = point.y + 1 >= self.__size
        solved = False

        if square.is_empty:
            if square.is_under_attack:
                square.state = SquareState.FAILED
            else:
                square.state = SquareState.QUEEN
                adjust_territory(self.__squares, queen_territory_points(self.__size, point), 1)
                if last_row:
                    solved = self.__register_result()
        elif square.is_queen:
            if not last_row:
                self.__track.append(Point(0, point.y + 1))
            else:
                self.__back_previous_row()
        else:
            if point.x + 1 < self.__size:
                self.__track[-1] = Point(point.x + 1, point.y)
            elif point.y > 0:
                self.__back_previous_row()
            else:
                return StepResult(False, False)

        assert len(self.__track) == self.current_point().y + 1, "cursor track out of step with row"
        return StepResult(True, solved)

    def __register_result(self):
        if self.__exclude_symmetry:
            gid = arranged_gid(self.__squares, self.__size)
            if gid in self.__result_ids:
                logger.debug("arrangement %#x is symmetric to a known result", gid)
                return False
            self.__result_ids.append(gid)
            result_id = gid
        else:
            result_id = arranged_uid(self.__squares, self.__size)
            self.__result_ids.append(result_id)

        logger.info("solution %d found: %#x", len(self.__result_ids), result_id)
        return True

    def __back_previous_row(self):
        point = self.__track[-1]
        prev_point = self.__track[-2]
        square = self.__squares[point.x][point.y]

        if square.is_queen:
            adjust_territory(self.__squares, queen_territory_points(self.__size, point), -1)
            result_state = SquareState.SUCCESS
        elif row_has_state(self.__squares, point.y, SquareState.SUCCESS):
            # A queen placed earlier in this row already led to a solution.
            result_state = SquareState.SUCCESS
        else:
            result_state = SquareState.FAILED

        clear_row(self.__squares, point.y)
        self.__track.pop()
        self.__squares[prev_point.x][prev_point.y].state = result_state

        # The previous row's queen is lifted; its square is now resolved.
        adjust_territory(self.__squares, queen_territory_points(self.__size, prev_point), -1)
