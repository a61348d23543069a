"""
Read-only terminal palette for grid rendering.

Each entry pairs an ANSI background with a contrasting foreground. Cells
pick their entry by `value % len(palette)`.
"""
from dataclasses import dataclass
from typing import Tuple

ANSI_RESET = "\x1b[0m"


@dataclass(frozen=True)
class PaletteEntry:
    name: str
    background: int   # SGR code 40-47
    foreground: int   # SGR code 30-37
    rgb: str          # hex equivalent, used by the matplotlib renderer

    def paint(self, text: str) -> str:
        return f"\x1b[{self.background};{self.foreground}m{text}{ANSI_RESET}"


DEFAULT_PALETTE: Tuple[PaletteEntry, ...] = (
    PaletteEntry("black", 40, 37, "#303030"),
    PaletteEntry("red", 41, 37, "#d62728"),
    PaletteEntry("green", 42, 30, "#2ca02c"),
    PaletteEntry("yellow", 43, 30, "#f0c419"),
    PaletteEntry("blue", 44, 37, "#1f4fd6"),
    PaletteEntry("magenta", 45, 37, "#b03aa6"),
    PaletteEntry("cyan", 46, 30, "#17becf"),
    PaletteEntry("white", 47, 30, "#e8e8e8"),
)


def palette_entry(value: int, palette: Tuple[PaletteEntry, ...] = DEFAULT_PALETTE) -> PaletteEntry:
    """Entry used for a stored cell value (colorIndex + 1)."""
    return palette[value % len(palette)]
