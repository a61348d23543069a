"""
Board - concurrency-safe facade over a FlowStore.

One reader/writer lock guards the grid and the flow list:
    - write lock: color_cell
    - read lock:  get, solved, clone, grid_string, colors_string and the
                  other read accessors
    - no lock:    lines, cols (dimensions are fixed when the store is built)

Errors are raised as FlowBoardError subclasses; a failed call leaves the
board unchanged.
"""
import io
import logging
from typing import Optional, Tuple

import numpy as np

from core.config import DEFAULT_CONFIG, BoardConfig, ExtendPolicy
from core.flow import are_all_adjacent
from core.grid_store import FlowStore
from core.parser import LevelSource, parse_store
from core.types import AdjacencyError, OccupiedError, Point, RangeError
from render.palette import PaletteEntry
from render.terminal import render_flows, render_grid
from utils.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class Board:
    """
    Flow puzzle board shared between threads.

    Build one with parse(), Board.from_text() or Board.load_from_file();
    the store is fully populated before the board is handed out.
    """

    def __init__(self, store: FlowStore, config: Optional[BoardConfig] = None):
        self._store = store
        self._config = config or DEFAULT_CONFIG
        self._lock = ReadWriteLock()
        # Copied once; the grid is never resized
        self._lines = store.lines
        self._cols = store.cols

    # =============================================================================
    # CONSTRUCTION
    # =============================================================================

    @classmethod
    def parse(cls, stream: LevelSource, config: Optional[BoardConfig] = None) -> 'Board':
        config = config or DEFAULT_CONFIG
        return cls(parse_store(stream, config), config=config)

    @classmethod
    def from_text(cls, text: str, config: Optional[BoardConfig] = None) -> 'Board':
        """Parse a level held in a string."""
        return cls.parse(io.StringIO(text), config)

    @classmethod
    def load_from_file(cls, filename: str, config: Optional[BoardConfig] = None) -> 'Board':
        """Load a level file."""
        with open(filename, 'r', encoding='utf-8') as f:
            return cls.parse(f, config)

    @property
    def config(self) -> BoardConfig:
        return self._config

    # =============================================================================
    # DIMENSIONS (unlocked: fixed for the board's lifetime)
    # =============================================================================

    def lines(self) -> int:
        return self._lines

    def cols(self) -> int:
        return self._cols

    # =============================================================================
    # MUTATION
    # =============================================================================

    def color_cell(self, color_index: int, row: int, col: int) -> None:
        """
        Extend flow `color_index` by the cell (row, col).

        The new point is spliced in just before the flow's end anchor, so the
        declared end point stays last.

        Raises:
            RangeError: color index, row or column out of range (checked in that order)
            OccupiedError: the cell already belongs to a flow
            AdjacencyError: the spliced path would not be adjacent
        """
        with self._lock.write_locked():
            store = self._store
            if not 0 <= color_index < store.flow_count():
                raise RangeError("color index out of range")
            if not 0 <= row < self._lines:
                raise RangeError("row out of range")
            if not 0 <= col < self._cols:
                raise RangeError("column out of range")

            occupant = store.get(row, col)
            if occupant != 0:
                raise OccupiedError((row, col), occupant)

            candidate = store.flows[color_index].candidate((row, col))
            checked = candidate if self._config.extend_policy is ExtendPolicy.CLOSED else candidate[:-1]
            if not are_all_adjacent(checked):
                logger.debug("rejected extension of flow %d: %s", color_index, checked)
                raise AdjacencyError(checked)

            store.occupy(color_index, (row, col))

    # =============================================================================
    # QUERIES
    # =============================================================================

    def get(self, row: int, col: int) -> int:
        """Raw cell value: 0 for empty, else color index + 1."""
        with self._lock.read_locked():
            if not (0 <= row < self._lines and 0 <= col < self._cols):
                raise RangeError(f"cell ({row},{col}) out of range")
            return self._store.get(row, col)

    def solved(self) -> bool:
        """True if every cell is occupied and every flow is adjacent end to end."""
        with self._lock.read_locked():
            if not self._store.is_full():
                return False
            for flow in self._store.flows:
                if not flow.is_connected():
                    return False
            return True

    def clone(self) -> 'Board':
        """Independent copy: mutating either board never affects the other."""
        with self._lock.read_locked():
            store = self._store.copy()
        return Board(store, config=self._config)

    def flow_count(self) -> int:
        with self._lock.read_locked():
            return self._store.flow_count()

    def flow_points(self, color_index: int) -> Tuple[Point, ...]:
        with self._lock.read_locked():
            if not 0 <= color_index < self._store.flow_count():
                raise RangeError("color index out of range")
            return self._store.flows[color_index].points

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the grid."""
        with self._lock.read_locked():
            grid = self._store.grid.copy()
        grid.flags.writeable = False
        return grid

    def view(self) -> Tuple[np.ndarray, Tuple[Tuple[Point, ...], ...]]:
        """Grid copy and every flow's points, taken under one read lock."""
        with self._lock.read_locked():
            grid = self._store.grid.copy()
            flows = tuple(flow.points for flow in self._store.flows)
        grid.flags.writeable = False
        return grid, flows

    def empty_cells(self) -> int:
        with self._lock.read_locked():
            return self._store.empty_count()

    # =============================================================================
    # RENDERING
    # =============================================================================

    def grid_string(self, palette: Optional[Tuple[PaletteEntry, ...]] = None) -> str:
        with self._lock.read_locked():
            return render_grid(
                self._store.grid,
                palette=palette or self._config.palette,
                use_color=self._config.use_color,
            )

    def colors_string(self) -> str:
        with self._lock.read_locked():
            return render_flows((flow.points, flow.is_connected()) for flow in self._store.flows)

    def __str__(self) -> str:
        return self.grid_string()

    def __repr__(self) -> str:
        return f"Board({self._lines}x{self._cols}, flows={self.flow_count()})"
