class InvalidConfiguration(ValueError):
    """Raised when a work board is built with an unsupported configuration."""


class OutOfBounds(IndexError):
    """Raised when a square outside the board is queried."""

    def __init__(self, size, x, y):
        super().__init__(f"({x}, {y}) is outside a {size}x{size} board")
        self.size = size
        self.x = x
        self.y = y
