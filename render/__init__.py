"""
Flow Board - Rendering Package
Terminal palette and text renderers. The matplotlib renderer lives in
render.board_figure and is imported on demand.
"""
from .palette import DEFAULT_PALETTE, PaletteEntry, palette_entry
from .terminal import render_grid, render_flow, render_flows

__all__ = ['DEFAULT_PALETTE', 'PaletteEntry', 'palette_entry', 'render_grid', 'render_flow', 'render_flows']
