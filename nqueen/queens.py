import logging
import threading

from .helpers import BoardSize, StepResult, WorkBoard

logger = logging.getLogger(__name__)

MIN_INTERVAL_MS = 10
MAX_INTERVAL_MS = 1000
DEFAULT_INTERVAL_MS = 50


class Session:
    """
    Owns one work board and drives it for a view.

    A session is created by whoever presents the puzzle (a web request
    handler, a script, a test) and passed around explicitly; nothing about
    a running search lives in module state.

    Stepping, running and resetting hold `lock`, so a session shared by
    several threads still advances one transition at a time. Callers that
    read the board after an operation can hold the same (re-entrant) lock
    around both.
    """

    def __init__(self, board_size: int = BoardSize.DEFAULT, exclude_symmetry: bool = False,
                 view=None, interval_ms: int = DEFAULT_INTERVAL_MS):
        """
        Initialize a session and show the empty board.

        Args:
            board_size (int): Board dimension (n x n).
            exclude_symmetry (bool): Count symmetric solutions once.
            view (View | None): Receives renders and solutions.
            interval_ms (int): Delay between steps when auto-running.
        """
        self.lock = threading.RLock()
        self.view = view
        self.interval_ms = interval_ms
        self.__work_board = WorkBoard(board_size, exclude_symmetry)
        self.solutions = []
        self.render()

    @property
    def work_board(self) -> WorkBoard:
        return self.__work_board

    @property
    def interval_ms(self) -> int:
        return self.__interval_ms

    @interval_ms.setter
    def interval_ms(self, value: int):
        if isinstance(value, bool):
            raise TypeError("interval must be a number of milliseconds")
        value = int(value)
        if not MIN_INTERVAL_MS <= value <= MAX_INTERVAL_MS:
            raise ValueError(
                f"interval must be between {MIN_INTERVAL_MS} and {MAX_INTERVAL_MS} ms, got {value}"
            )
        self.__interval_ms = value

    @property
    def finished(self) -> bool:
        return self.__work_board.is_finished

    def render(self):
        with self.lock:
            if self.view is not None:
                self.view.render(self.__work_board.snapshot(), self.__work_board.current_point())

    def __collect_solution(self):
        snapshot = self.__work_board.snapshot()
        self.solutions.append(snapshot)
        if self.view is not None:
            self.view.report_solution(snapshot, self.__work_board.result_count())

    def run_step(self) -> StepResult:
        """
        Advance the search by one step and update the view.

        Returns:
            StepResult: The work board's result for this step.
        """
        with self.lock:
            result = self.__work_board.step()
            if result.executed:
                self.render()
            else:
                logger.debug("search already finished, nothing to step")
            if result.solved:
                self.__collect_solution()
            return result

    def run_steps(self, count: int) -> int:
        """
        Run up to `count` steps, stopping early when the search finishes.

        Returns:
            int: Number of steps actually executed.
        """
        executed = 0
        with self.lock:
            for _ in range(count):
                if not self.run_step().executed:
                    break
                executed += 1
        return executed

    def run_all(self, max_steps: int = None) -> int:
        """
        Run the search to the end, rendering only the final board.

        Every solution found on the way is still reported to the view.

        Args:
            max_steps (int | None): Stop after this many steps if given.

        Returns:
            int: Number of steps executed.
        """
        executed = 0
        with self.lock:
            while max_steps is None or executed < max_steps:
                result = self.__work_board.step()
                if result.solved:
                    self.__collect_solution()
                if not result.executed:
                    break
                executed += 1

            self.render()
            logger.info("ran %d steps, %d results on %dx%d board",
                        executed, self.__work_board.result_count(),
                        self.__work_board.board_size, self.__work_board.board_size)
        return executed

    def reset(self, board_size: int = None, exclude_symmetry: bool = None):
        """
        Start over with a new work board.

        Arguments left as None keep the current configuration.

        Raises:
            InvalidConfiguration: If board_size is not supported. The
                current work board is kept in that case.
        """
        with self.lock:
            if board_size is None:
                board_size = self.__work_board.board_size
            if exclude_symmetry is None:
                exclude_symmetry = self.__work_board.exclude_symmetry

            self.__work_board = WorkBoard(board_size, exclude_symmetry)
            self.solutions = []
            if self.view is not None:
                self.view.clear()
            self.render()
        logger.debug("session reset to %dx%d, exclude_symmetry=%s",
                     board_size, board_size, exclude_symmetry)

    def __str__(self) -> str:
        board = self.__work_board
        return f"{board.board_size}-Queens session with {board.result_count()} results"
