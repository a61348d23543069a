"""
Level parser.

Reads the line-oriented level format into a populated board:

    <lines>,<cols>
    <r1>,<c1> <r2>,<c2>      one line per flow, in color-index order

Blank lines are skipped. A stream failure after the header is handled
according to the configured ParseMode.
"""
import logging
from typing import IO, Iterable, Optional, Tuple, Union

from core.config import DEFAULT_CONFIG, BoardConfig, ParseMode
from core.grid_store import FlowStore
from core.types import BoardReadError, FormatError, Point
from utils.coords import string_to_int, string_to_point

logger = logging.getLogger(__name__)

HEADER_FORMAT_ERROR = "first line should indicate the size of the board (e.g. '5,5')"
FLOW_FORMAT_ERROR = "lines should indicate the positions of 2 points (e.g. '0,0 0,3')"

STREAM_ERRORS = (OSError, UnicodeDecodeError)

LevelSource = Union[IO[str], Iterable[str]]


def parse_size(line: str) -> Tuple[int, int]:
    """
    Parse the "<lines>,<cols>" header.

    Raises:
        FormatError: Unless the line holds exactly two positive integers
    """
    fields = line.strip().split(',')
    if len(fields) != 2:
        raise FormatError(HEADER_FORMAT_ERROR, line_number=1)
    try:
        lines, cols = string_to_int(fields[0]), string_to_int(fields[1])
    except ValueError:
        raise FormatError(HEADER_FORMAT_ERROR, line_number=1) from None
    if lines <= 0 or cols <= 0:
        raise FormatError(f"board size must be positive, got {lines},{cols}", line_number=1)
    return lines, cols


def parse_flow_line(line: str, line_number: Optional[int] = None) -> Tuple[Point, Point]:
    """
    Parse one "<r1>,<c1> <r2>,<c2>" flow line into its two terminal points.

    Raises:
        FormatError: Wrong token count or non-integer coordinate
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise FormatError(FLOW_FORMAT_ERROR, line_number=line_number)
    try:
        return string_to_point(tokens[0]), string_to_point(tokens[1])
    except ValueError:
        raise FormatError(FLOW_FORMAT_ERROR, line_number=line_number) from None


def parse_store(stream: LevelSource, config: BoardConfig = DEFAULT_CONFIG) -> FlowStore:
    """
    Build a FlowStore from a level stream.

    Args:
        stream: Text stream (or any iterable of lines)
        config: Controls what happens on a mid-stream read failure

    Raises:
        FormatError: Malformed header or flow line, or out-of-bounds point
        BoardReadError: Stream failure, in strict mode or while reading the header
    """
    if isinstance(stream, str):
        raise TypeError("parse() expects a stream of lines; use Board.from_text() for a string")
    try:
        lines_iter = iter(stream)
    except STREAM_ERRORS as e:
        raise BoardReadError(f"error reading input: {e}") from e
    try:
        header = next(lines_iter, "")
    except STREAM_ERRORS as e:
        raise BoardReadError(f"error reading input: {e}") from e
    if not header.strip():
        raise FormatError(HEADER_FORMAT_ERROR, line_number=1)

    lines, cols = parse_size(header)
    logger.debug("board of %d lines and %d cols", lines, cols)
    store = FlowStore(lines, cols)

    line_number = 1
    while True:
        try:
            line = next(lines_iter)
        except StopIteration:
            break
        except STREAM_ERRORS as e:
            if config.parse_mode is ParseMode.STRICT:
                raise BoardReadError(f"error reading input after line {line_number}: {e}") from e
            logger.error(
                "Error reading level after line %d, keeping %d flow(s): %s",
                line_number, store.flow_count(), e,
            )
            break

        line_number += 1
        if not line.strip():
            continue

        point_a, point_b = parse_flow_line(line, line_number)
        try:
            index = store.register_flow(point_a, point_b)
        except FormatError as e:
            raise FormatError(str(e), line_number=line_number) from None
        logger.debug("flow %d: %s -> %s", index, point_a, point_b)

    return store


def parse(stream: LevelSource, config: Optional[BoardConfig] = None):
    """Parse a level stream into a Board (see parse_store for errors)."""
    from core.board import Board

    return Board.parse(stream, config)
