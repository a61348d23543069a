"""
Level inspection tool.
Loads a level file, prints its grid and flows, and reports whether the
board is solved. Optionally saves a matplotlib rendering.
"""
import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional

# Add project root to path first
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Then import project modules
from core.board import Board
from core.config import BoardConfig, ExtendPolicy, ParseMode
from core.types import FormatError

EXIT_OK = 0
EXIT_BAD_LEVEL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect a flow puzzle level")
    parser.add_argument("level", help="Path to a level file ('<lines>,<cols>' header, one flow per line)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on a stream read error instead of keeping the flows read so far",
    )
    parser.add_argument(
        "--frontier",
        action="store_true",
        help="Only require adjacency from a flow's start to its newest point when extending",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in the grid")
    parser.add_argument("--plot", metavar="PATH", help="Save a matplotlib rendering of the board")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace, base: Optional[BoardConfig] = None) -> BoardConfig:
    config = base or BoardConfig.from_env()
    if args.strict:
        config = replace(config, parse_mode=ParseMode.STRICT)
    if args.frontier:
        config = replace(config, extend_policy=ExtendPolicy.FRONTIER)
    if args.no_color:
        config = replace(config, use_color=False)
    return config


def describe(board: Board) -> str:
    """Grid, flows and status as printed by the tool."""
    status = "solved" if board.solved() else f"not solved ({board.empty_cells()} empty cells)"
    return (
        f"board of {board.lines()} lines and {board.cols()} cols, {board.flow_count()} flow(s)\n"
        f"{board.grid_string()}\n"
        f"{board.colors_string()}"
        f"{status}\n"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = config_from_args(args)
    try:
        board = Board.load_from_file(args.level, config)
    except (FormatError, OSError) as e:
        print(f"Error loading level {args.level}: {e}", file=sys.stderr)
        return EXIT_BAD_LEVEL

    sys.stdout.write(describe(board))

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        from render.board_figure import BoardFigureRenderer

        BoardFigureRenderer().save(board, args.plot)
        print(f"Saved rendering to {args.plot}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
