"""
Point <-> text helpers for the level format ("row,col").
"""
import re
from typing import Tuple

_DIGITS = re.compile(r"[0-9]+")


def point_to_string(row: int, col: int) -> str:
    """Convert a coordinate pair to the "row,col" form used in level files."""
    return f"{row},{col}"


def string_to_int(token: str) -> int:
    """
    Parse an unsigned decimal field.

    Only ASCII digits are accepted: no sign, underscores or padding.

    Raises:
        ValueError: If the token is not a plain run of digits
    """
    if not _DIGITS.fullmatch(token):
        raise ValueError(f"expected a non-negative integer, got {token!r}")
    return int(token)


def string_to_point(coord_str: str) -> Tuple[int, int]:
    """
    Parse a "row,col" token.

    Raises:
        ValueError: If the token does not hold exactly two integers
    """
    parts = coord_str.strip().split(',')
    if len(parts) != 2:
        raise ValueError(f"expected 'row,col', got {coord_str!r}")
    return string_to_int(parts[0]), string_to_int(parts[1])
