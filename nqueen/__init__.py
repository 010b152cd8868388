from .helpers import BoardSize, InvalidConfiguration, OutOfBounds, SquareState, StepResult, WorkBoard
from .queens import Session
from .view import HtmlView, TextView, View

__version__ = "1.0.0"
