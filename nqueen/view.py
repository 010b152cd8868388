from abc import ABC, abstractmethod

from .helpers import BoardSnapshot, Point, SquareState

SQUARE_CHARS = {
    SquareState.EMPTY: "",
    SquareState.QUEEN: "Q",
    SquareState.SUCCESS: "o",
    SquareState.FAILED: "x",
}


class View(ABC):
    """
    Presentation side of a session.

    A session calls render() after every executed step and report_solution()
    whenever a step completes a new solution. Implementations never touch
    the work board itself, only the snapshots they are given.
    """

    @abstractmethod
    def render(self, snapshot: BoardSnapshot, cursor: Point):
        """Show the board after a step."""

    @abstractmethod
    def report_solution(self, snapshot: BoardSnapshot, count: int):
        """Show a newly found solution; `count` is the running result count."""

    def clear(self):
        """Forget everything shown so far. Called when a session is reset."""


def on_cursor_rays(cursor: Point, x: int, y: int) -> bool:
    """True if (x, y) shares a row, column or diagonal with the cursor."""
    dx = x - cursor.x
    dy = y - cursor.y
    return dx == 0 or dy == 0 or abs(dx) == abs(dy)


class TextView(View):
    """Plain text rendering, one line per row."""

    def __init__(self, empty_char="."):
        self.empty_char = empty_char
        self.board_text = ""
        self.solutions = []

    def format_board(self, snapshot: BoardSnapshot) -> str:
        """
        Convert a snapshot into a multi-line string.

        'Q' marks queens, 'o' resolved-with-success squares, 'x' failed
        squares and `empty_char` everything else.

        Args:
            snapshot (BoardSnapshot): Board to format.

        Returns:
            str: Multi-line string representation.
        """
        rows = []
        for row in snapshot.states:
            rows.append("".join(SQUARE_CHARS[state] or self.empty_char for state in row))
        return "\n".join(rows)

    def render(self, snapshot, cursor):
        self.board_text = self.format_board(snapshot)

    def report_solution(self, snapshot, count):
        self.solutions.append(f"<{count}>\n" + self.format_board(snapshot))

    def clear(self):
        self.board_text = ""
        self.solutions = []

    def __str__(self):
        return self.board_text


class HtmlView(View):
    """
    HTML table rendering for the web page.

    Cells carry CSS classes the page styles: cell-cursor for the square
    under the cursor, cell-queen for queens, cell-territory-emphasis for
    squares on the rays of a queen under the cursor and cell-territory for
    any other attacked square.
    """

    def __init__(self):
        self.board_html = ""
        self.solutions = []

    @staticmethod
    def cell_classes(snapshot: BoardSnapshot, cursor: Point, x: int, y: int) -> list:
        classes = ["cell"]
        cursor_on_queen = cursor is not None and snapshot.is_queen(cursor.x, cursor.y)

        if cursor is not None and (x, y) == (cursor.x, cursor.y):
            classes.append("cell-cursor")
        if snapshot.is_queen(x, y):
            classes.append("cell-queen")
        elif cursor_on_queen and on_cursor_rays(cursor, x, y):
            classes.append("cell-territory-emphasis")
        elif snapshot.territory_at(x, y) > 0:
            classes.append("cell-territory")
        return classes

    def format_board(self, snapshot: BoardSnapshot, cursor: Point = None) -> str:
        board_str = "<table class='board'>"
        for y in range(snapshot.size):
            board_str += "<tr>"
            for x in range(snapshot.size):
                classes = " ".join(self.cell_classes(snapshot, cursor, x, y))
                text = SQUARE_CHARS[snapshot.state_at(x, y)]
                board_str += f"<td id='{x}_{y}' class='{classes}'>{text}</td>"
            board_str += "</tr>"
        board_str += "</table>"
        return board_str

    def format_solution(self, snapshot: BoardSnapshot, count: int) -> str:
        result_str = f"<div class='result-board-area'><div>&lt;{count}&gt;</div><table>"
        for y in range(snapshot.size):
            result_str += "<tr>"
            for x in range(snapshot.size):
                if snapshot.is_queen(x, y):
                    result_str += "<td class='cell cell-small cell-queen'>Q</td>"
                else:
                    result_str += "<td class='cell cell-small'></td>"
            result_str += "</tr>"
        result_str += "</table></div>"
        return result_str

    def render(self, snapshot, cursor):
        self.board_html = self.format_board(snapshot, cursor)

    def report_solution(self, snapshot, count):
        self.solutions.append(self.format_solution(snapshot, count))

    def clear(self):
        self.board_html = ""
        self.solutions = []
