"""
Level parsing: header and flow lines, blank lines, malformed input and
stream failures in lenient and strict modes.
"""
import io
import logging

import pytest

from core.board import Board
from core.config import BoardConfig, ParseMode
from core.parser import parse, parse_flow_line, parse_size, parse_store
from core.types import BoardReadError, FormatError
from utils.coords import string_to_int


class FailingStream:
    """Yields the given lines, then fails like a broken file handle."""

    def __init__(self, lines, error=None):
        self._lines = list(lines)
        self._error = error or OSError("device went away")

    def __iter__(self):
        for line in self._lines:
            yield line
        raise self._error


def test_round_trip_scenario():
    board = parse(io.StringIO("2,2\n0,0 1,1\n0,1 1,0\n"))
    assert board.lines() == 2
    assert board.cols() == 2
    assert board.flow_count() == 2
    assert board.get(0, 0) == 1
    assert board.get(1, 1) == 1
    assert board.get(0, 1) == 2
    assert board.get(1, 0) == 2
    assert board.empty_cells() == 0
    # full, but (0,0)-(1,1) is diagonal, so not solved
    assert board.solved() is False


def test_example_level(load_level):
    board = load_level("example_3x3.txt")
    assert (board.lines(), board.cols()) == (3, 3)
    assert board.flow_points(0) == ((0, 0), (2, 2))
    assert board.flow_points(1) == ((0, 2), (2, 0))
    assert board.get(1, 1) == 0


def test_blank_lines_and_crlf_are_tolerated():
    board = Board.from_text("3,3\r\n\r\n0,0 0,2\r\n\n   \n1,0 1,2\n")
    assert board.flow_count() == 2
    assert board.get(1, 2) == 2


def test_header_only_gives_board_without_flows():
    board = Board.from_text("2,3\n")
    assert (board.lines(), board.cols()) == (2, 3)
    assert board.flow_count() == 0
    assert board.empty_cells() == 6


@pytest.mark.parametrize("header", [
    "3", "3,3,3", "a,3", "3,b", "-1,3", "0,3", "3,0",
    "1_0,3", "+3,3", "3, 3", "", "\n",
])
def test_bad_header(header):
    with pytest.raises(FormatError) as excinfo:
        Board.from_text(header + "\n0,0 1,1\n" if header.strip() else header)
    assert excinfo.value.line_number == 1


def test_parse_size():
    assert parse_size("5,7\n") == (5, 7)
    with pytest.raises(FormatError):
        parse_size("5;7")


@pytest.mark.parametrize("line", [
    "0,0",
    "0,0 1,1 2,2",
    "0,0 1",
    "0,0 1,1,1",
    "a,0 1,1",
    "0,0 1,x",
    "0_1,2 1,1",
    "0,0 +1,1",
    "0,0 1,\u0661",
])
def test_bad_flow_line(line):
    with pytest.raises(FormatError):
        parse_flow_line(line)


def test_parse_flow_line():
    assert parse_flow_line("0,1 2,3\n") == ((0, 1), (2, 3))


def test_underscored_numbers_are_rejected():
    with pytest.raises(FormatError) as excinfo:
        Board.from_text("1_0,3\n0,0 0_1,2\n")
    assert excinfo.value.line_number == 1

    with pytest.raises(FormatError) as excinfo:
        Board.from_text("3,3\n0,0 0_1,2\n")
    assert excinfo.value.line_number == 2


@pytest.mark.parametrize("token", ["7", "007"])
def test_string_to_int_accepts_plain_digits(token):
    assert string_to_int(token) == 7


@pytest.mark.parametrize("token", ["", "-7", "+7", "7_0", " 7", "7 ", "\u0667"])
def test_string_to_int_rejects_everything_else(token):
    with pytest.raises(ValueError):
        string_to_int(token)


@pytest.mark.parametrize("line", ["3,0 0,0", "0,0 0,3", "-1,0 0,0", "0,0 0,-1"])
def test_out_of_bounds_point_reports_its_line(line):
    with pytest.raises(FormatError) as excinfo:
        Board.from_text(f"3,3\n0,0 0,1\n\n{line}\n")
    assert excinfo.value.line_number == 4
    assert "line 4" in str(excinfo.value)


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        Board.from_text("3,3\nnonsense\n")


def test_lenient_mode_keeps_partial_board_and_logs(caplog):
    stream = FailingStream(["3,3\n", "0,0 0,2\n"])
    with caplog.at_level(logging.ERROR, logger="core.parser"):
        board = parse(stream, BoardConfig(parse_mode=ParseMode.LENIENT))
    assert board.flow_count() == 1
    assert board.get(0, 2) == 1
    assert any("device went away" in r.getMessage() for r in caplog.records)


def test_lenient_is_the_default():
    board = parse(FailingStream(["2,2\n"], UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad byte")))
    assert board.flow_count() == 0


def test_strict_mode_raises():
    stream = FailingStream(["3,3\n", "0,0 0,2\n"])
    with pytest.raises(BoardReadError) as excinfo:
        parse(stream, BoardConfig(parse_mode=ParseMode.STRICT))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_header_read_failure_always_raises():
    with pytest.raises(BoardReadError):
        parse_store(FailingStream([]))


def test_string_input_is_rejected():
    with pytest.raises(TypeError):
        parse("2,2\n0,0 0,1\n")


def test_parse_accepts_iterable_of_lines():
    board = parse(["1,2\n", "0,0 0,1\n"])
    assert board.solved()


def test_config_is_attached(plain_config):
    board = Board.from_text("1,2\n0,0 0,1\n", plain_config)
    assert board.config is plain_config
