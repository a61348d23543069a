"""
Board Figure Renderer
Draws a flow board with matplotlib: one square per cell, colored by the
flow occupying it, with each flow's path drawn through its cell centers.

Key features:
- Reads the board through view(), so the board lock is
  never held while drawing
- Uses the same palette as the terminal renderer
- Terminal points of every flow get an inner ring
"""
from typing import Optional, Sequence, Tuple

import matplotlib.patches as patches
import numpy as np

from render.palette import DEFAULT_PALETTE, PaletteEntry, palette_entry

EMPTY_FACECOLOR = "#FFFFFF"


class BoardFigureRenderer:
    """
    Render a flow board using matplotlib.
    Row 0 is drawn at the top, like the terminal table.
    """

    def __init__(self, cell_size: float = 1.0, padding: float = 0.25,
                 palette: Optional[Tuple[PaletteEntry, ...]] = None, text_weight: str = 'bold'):
        """
        Initialize the renderer.

        Args:
            cell_size: Side length of a cell in data units
            padding: Padding around the board in units of cell_size
            palette: Palette to cycle through (defaults to the terminal palette)
            text_weight: Font weight for color numbers ('normal' or 'bold')
        """
        self.S = float(cell_size)
        self.pad = float(padding)
        self.palette = palette or DEFAULT_PALETTE
        self.tw = text_weight

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        """Data coordinates of the center of (row, col)."""
        return (col + 0.5) * self.S, (row + 0.5) * self.S

    def facecolor(self, value: int) -> str:
        if value == 0:
            return EMPTY_FACECOLOR
        return palette_entry(value, self.palette).rgb

    def _draw_cell(self, ax, row: int, col: int, value: int):
        x, y = col * self.S, row * self.S
        ax.add_patch(patches.Rectangle(
            (x, y), self.S, self.S,
            facecolor=self.facecolor(value),
            edgecolor='black',
            linewidth=1,
        ))
        if value:
            cx, cy = self.cell_center(row, col)
            ax.text(cx, cy, str(value),
                    ha='center', va='center',
                    fontsize=max(6, min(18, 12 * self.S)),
                    fontweight=self.tw,
                    color='black', zorder=6)

    def _draw_flow(self, ax, points: Sequence[Tuple[int, int]], color: str):
        centers = np.array([self.cell_center(r, c) for r, c in points], dtype=float)
        if len(centers) >= 2:
            ax.plot(centers[:, 0], centers[:, 1],
                    color=color, linewidth=max(1.0, 6 * self.S),
                    solid_capstyle='round', alpha=0.6, zorder=4)
        for end in (points[0], points[-1]):
            cx, cy = self.cell_center(*end)
            ax.add_patch(patches.Circle(
                (cx, cy), radius=0.35 * self.S,
                facecolor='none', edgecolor='black', linewidth=1.5, zorder=5,
            ))

    def render_grid(self, grid, flows: Sequence[Sequence[Tuple[int, int]]] = (), ax=None):
        """
        Render a grid array and its flows' point sequences.

        Returns:
            Matplotlib axis object
        """
        if ax is None:
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(6, 6))

        grid = np.asarray(grid)
        lines, cols = grid.shape

        for row in range(lines):
            for col in range(cols):
                self._draw_cell(ax, row, col, int(grid[row, col]))

        for index, points in enumerate(flows):
            if points:
                self._draw_flow(ax, points, palette_entry(index + 1, self.palette).rgb)

        pad = self.pad * self.S
        ax.set_aspect('equal')
        ax.set_xlim(-pad, cols * self.S + pad)
        ax.set_ylim(lines * self.S + pad, -pad)  # Invert Y so row 0 is on top
        ax.axis('off')
        return ax

    def render_board(self, board, ax=None):
        """Render a Board from a consistent snapshot."""
        grid, flows = board.view()
        return self.render_grid(grid, flows, ax=ax)

    def save(self, board, filename: str, dpi: int = 100) -> None:
        """Render `board` to an image file."""
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=(max(3, board.cols()), max(3, board.lines())))
        try:
            self.render_board(board, ax)
            fig.tight_layout()
            fig.savefig(filename, dpi=dpi)
        finally:
            plt.close(fig)
