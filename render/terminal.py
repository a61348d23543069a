"""
Plain-text rendering of a board grid and its flows.

These functions work on plain data (a 2D grid and point sequences); the
board takes its read lock and hands them a consistent view.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

from render.palette import DEFAULT_PALETTE, PaletteEntry, palette_entry
from utils.coords import point_to_string

# (row, col); kept local so rendering does not import the core package
Point = Tuple[int, int]

CELL_WIDTH = 3
UNCONNECTED_MARKER = "[???]->"


def _delimiter(cols: int) -> str:
    return "+" + "+".join("-" * CELL_WIDTH for _ in range(cols)) + "+\n"


def render_grid(grid, palette: Optional[Tuple[PaletteEntry, ...]] = None, use_color: bool = True) -> str:
    """
    Draw a bordered ASCII table of the grid.

    Args:
        grid: 2D array-like of cell values (0 = empty, else colorIndex + 1)
        palette: Palette to cycle through (defaults to the 8-entry table)
        use_color: Wrap occupied cells in ANSI color escapes

    Returns:
        The table, starting with a newline like the board's str()
    """
    palette = palette or DEFAULT_PALETTE
    rows = [list(row) for row in grid]
    cols = len(rows[0]) if rows else 0

    parts: List[str] = ["\n", _delimiter(cols)]
    for row in rows:
        for value in row:
            value = int(value)
            parts.append("|")
            if value == 0:
                parts.append(" " * CELL_WIDTH)
                continue
            text = f" {value} "
            parts.append(palette_entry(value, palette).paint(text) if use_color else text)
        parts.append("|\n")
        parts.append(_delimiter(cols))
    return "".join(parts)


def render_flow(points: Sequence[Point], connected: bool) -> str:
    """One flow as an arrow chain; a broken chain is flagged before its last point."""
    parts: List[str] = []
    last = len(points) - 1
    for i, point in enumerate(points):
        if i == last and not connected:
            parts.append(UNCONNECTED_MARKER)
        parts.append(f"({point_to_string(*point)})")
        if i != last:
            parts.append("->")
    return "".join(parts)


def render_flows(flows: Iterable[Tuple[Sequence[Point], bool]]) -> str:
    """Render (points, connected) pairs, one flow per line."""
    return "".join(render_flow(points, connected) + "\n" for points, connected in flows)
