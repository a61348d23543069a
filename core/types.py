"""
Shared types for the flow board.
Separated to avoid circular imports between modules.
"""
from typing import Optional, Sequence, Tuple

# (row, col)
Point = Tuple[int, int]


class FlowBoardError(Exception):
    """Base class for every error raised by the board."""


class FormatError(FlowBoardError, ValueError):
    """Malformed level description (bad header, bad flow line, out-of-bounds point)."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class BoardReadError(FlowBoardError, OSError):
    """The level stream failed while reading (strict parse mode only)."""


class RangeError(FlowBoardError, IndexError):
    """Color index, row or column outside the board."""


class OccupiedError(FlowBoardError):
    """Target cell already belongs to a flow; `occupant` is its stored value (color index + 1)."""

    def __init__(self, location: Point, occupant: int):
        self.location = location
        self.occupant = occupant
        super().__init__(f"cell already occupied: {location} holds value {occupant}")


class AdjacencyError(FlowBoardError):
    """Extending a flow would break its 4-adjacency chain."""

    def __init__(self, points: Sequence[Point]):
        self.points = tuple(points)
        chain = "->".join(f"({r},{c})" for r, c in self.points)
        super().__init__(f"cells are not adjacent: {chain}")
