"""
Flow paths and 4-adjacency predicates.

A flow is anchored at both ends: the start and end points come from the
level description and never move. Growth happens by appending to the
interior, so the declared end point is always the last element of the path.
"""
from typing import Iterable, List, Sequence, Tuple

from core.types import Point


def are_adjacent(point: Point, next_point: Point) -> bool:
    """True if the two points differ by exactly 1 along exactly one axis."""
    dx = point[0] - next_point[0]
    dy = point[1] - next_point[1]
    return dx * dx + dy * dy == 1


def are_all_adjacent(points: Sequence[Point]) -> bool:
    """True if every consecutive pair is adjacent (vacuously true below 2 points)."""
    for i in range(len(points) - 1):
        if not are_adjacent(points[i], points[i + 1]):
            return False
    return True


def adjacent_to_any(point: Point, points: Iterable[Point]) -> bool:
    """True if `point` is adjacent to at least one of `points`."""
    return any(are_adjacent(p, point) for p in points)


class Flow:
    """
    One color's path from a fixed start to a fixed end.

    Attributes:
        anchor_start: First point of the path (immutable)
        anchor_end: Last point of the path (immutable)
        interior: Points added by extension, in order, between the anchors
    """

    __slots__ = ("_anchor_start", "_anchor_end", "interior")

    def __init__(self, anchor_start: Point, anchor_end: Point, interior: Iterable[Point] = ()):
        self._anchor_start: Point = tuple(anchor_start)
        self._anchor_end: Point = tuple(anchor_end)
        self.interior: List[Point] = [tuple(p) for p in interior]

    @property
    def anchor_start(self) -> Point:
        return self._anchor_start

    @property
    def anchor_end(self) -> Point:
        return self._anchor_end

    @property
    def points(self) -> Tuple[Point, ...]:
        """Full path: start, interior..., end."""
        return (self._anchor_start, *self.interior, self._anchor_end)

    def candidate(self, point: Point) -> Tuple[Point, ...]:
        """Path that would result from extending with `point`."""
        return (self._anchor_start, *self.interior, tuple(point), self._anchor_end)

    def extend(self, point: Point) -> None:
        """Splice `point` in just before the end anchor. No validation here."""
        self.interior.append(tuple(point))

    def is_connected(self) -> bool:
        return are_all_adjacent(self.points)

    def copy(self) -> "Flow":
        return Flow(self._anchor_start, self._anchor_end, self.interior)

    def __len__(self) -> int:
        return len(self.interior) + 2

    def __eq__(self, other) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self.points == other.points

    def __repr__(self) -> str:
        return f"Flow({list(self.points)})"
