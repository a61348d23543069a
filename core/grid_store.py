"""
FlowStore - occupancy grid and flow list for a flow puzzle board.

Pure data plus invariant-preserving mutators. Nothing here takes a lock;
the Board facade owns the lock and calls into the store while holding it.
During parsing the store is populated before it is shared, so no lock is
needed there either.
"""
from typing import List

import numpy as np

from core.flow import Flow
from core.types import FormatError, Point


class FlowStore:
    """
    Grid state and flows for one board.

    Attributes:
        lines: Number of rows in the grid (fixed after construction)
        cols: Number of columns in the grid (fixed after construction)
        grid: (lines, cols) integer array; 0 = empty, k + 1 = occupied by flow k
        flows: Flows in color-index order
    """

    GRID_DTYPE = np.int32

    def __init__(self, lines: int, cols: int):
        """
        Allocate an empty grid.

        Args:
            lines: Number of rows (must be > 0)
            cols: Number of columns (must be > 0)
        """
        if lines <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive: {lines}x{cols}")

        self.lines: int = lines
        self.cols: int = cols
        self.grid: np.ndarray = np.zeros((lines, cols), dtype=self.GRID_DTYPE)
        self.flows: List[Flow] = []

    # =============================================================================
    # QUERIES
    # =============================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.lines and 0 <= col < self.cols

    def get(self, row: int, col: int) -> int:
        return int(self.grid[row, col])

    def is_full(self) -> bool:
        return bool(np.all(self.grid != 0))

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.grid == 0))

    def flow_count(self) -> int:
        return len(self.flows)

    # =============================================================================
    # MUTATIONS
    # =============================================================================

    def register_flow(self, point_a: Point, point_b: Point) -> int:
        """
        Record a new flow from its two terminal points.

        Both cells are marked with the new flow's color index + 1. Duplicate
        points and far-apart terminals are accepted; adjacency is only
        enforced when the flow is extended.

        Returns:
            The color index assigned to the flow

        Raises:
            FormatError: If either point lies outside the grid
        """
        for row, col in (point_a, point_b):
            if not self.in_bounds(row, col):
                raise FormatError(
                    f"point ({row},{col}) outside {self.lines}x{self.cols} board"
                )

        index = len(self.flows)
        for row, col in (point_a, point_b):
            self.grid[row, col] = index + 1
        self.flows.append(Flow(point_a, point_b))
        return index

    def occupy(self, color_index: int, point: Point) -> None:
        """Mark `point` for the flow and splice it before the flow's end anchor."""
        row, col = point
        self.grid[row, col] = color_index + 1
        self.flows[color_index].extend(point)

    # =============================================================================
    # COPYING
    # =============================================================================

    def copy(self) -> "FlowStore":
        """Deep copy: fresh grid array and fresh Flow objects."""
        clone = FlowStore(self.lines, self.cols)
        clone.grid = self.grid.copy()
        clone.flows = [flow.copy() for flow in self.flows]
        return clone
