"""
Flow Board - Core Package
Grid and flow store, level parsing, and the lock-guarded board engine.
"""
from .types import (
    Point, FlowBoardError, FormatError, BoardReadError,
    RangeError, OccupiedError, AdjacencyError,
)
from .flow import Flow, are_adjacent, are_all_adjacent, adjacent_to_any
from .grid_store import FlowStore
from .config import BoardConfig, ParseMode, ExtendPolicy
from .parser import parse, parse_store
from .board import Board

__all__ = [
    'Point', 'FlowBoardError', 'FormatError', 'BoardReadError',
    'RangeError', 'OccupiedError', 'AdjacencyError',
    'Flow', 'are_adjacent', 'are_all_adjacent', 'adjacent_to_any',
    'FlowStore', 'BoardConfig', 'ParseMode', 'ExtendPolicy',
    'parse', 'parse_store', 'Board',
]
