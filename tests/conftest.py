import os
import sys
import pytest

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.board import Board
from core.config import BoardConfig, ExtendPolicy


@pytest.fixture
def load_level():
    """Returns a function that loads a Board from a file under levels/."""
    def _load(name, config=None):
        return Board.load_from_file(os.path.join(PROJECT_ROOT, "levels", name), config)
    return _load


@pytest.fixture
def plain_config():
    """Config without ANSI colors, for exact string comparisons."""
    return BoardConfig(use_color=False)


@pytest.fixture
def frontier_config():
    return BoardConfig(use_color=False, extend_policy=ExtendPolicy.FRONTIER)


@pytest.fixture
def diagonal_board(plain_config):
    """2x2 board, fully occupied by two flows whose terminals are diagonal."""
    return Board.from_text("2,2\n0,0 1,1\n0,1 1,0\n", plain_config)


@pytest.fixture
def corridor_board(plain_config):
    """1x4 corridor: one flow from (0,0) to (0,3) with two open cells between."""
    return Board.from_text("1,4\n0,0 0,3\n", plain_config)
