from .board import BoardSize, BoardSnapshot, Square, SquareState
from .errors import InvalidConfiguration, OutOfBounds
from .geometry import Direction, Point, is_on_board, queen_territory_points
from .identifier import arranged_gid, arranged_uid, decode_uid
from .WorkBoard import StepResult, WorkBoard

__all__ = [
    "BoardSize",
    "BoardSnapshot",
    "Direction",
    "InvalidConfiguration",
    "OutOfBounds",
    "Point",
    "Square",
    "SquareState",
    "StepResult",
    "WorkBoard",
    "arranged_gid",
    "arranged_uid",
    "decode_uid",
    "is_on_board",
    "queen_territory_points",
]
