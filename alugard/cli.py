"""CLI for inspecting puzzle levels and grid geometry.

Usage::

    python -m alugard.cli levels

    # Dump the octagon grid of level 2 on an 800x600 board
    python -m alugard.cli grid --level 2 --width 800 --height 600
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from alugard.config import settings
from alugard.engine.errors import UnknownLevelError
from alugard.puzzle.levels import default_registry
from alugard.puzzle.tessellation import build_level_grid

logger = logging.getLogger(__name__)


def _cmd_levels(args: argparse.Namespace) -> int:
    for config in default_registry().list_levels():
        print(f"{config.level}: {config.label} ({config.cols}x{config.rows}, scatter {config.scatter_px:g}px)")
    return 0


def _cmd_grid(args: argparse.Namespace) -> int:
    try:
        config = default_registry().get(args.level)
    except UnknownLevelError as e:
        print(str(e), file=sys.stderr)
        return 1

    cells, side_length, piece_size = build_level_grid(config, args.width, args.height)
    logger.info(f"Built {len(cells)} cells for level {config.level}")
    output = {
        "level": config.level,
        "side_length": side_length,
        "piece_size": piece_size,
        "cells": [
            cell.model_dump(mode="json", include={"id", "origin_x", "origin_y", "center_x", "center_y", "neighbors"})
            for cell in cells
        ],
    }
    print(json.dumps(output, indent=2 if args.pretty else None))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="alugard", description="Octagon puzzle tools")
    sub = parser.add_subparsers(dest="command", required=True)

    levels = sub.add_parser("levels", help="List built-in levels")
    levels.set_defaults(func=_cmd_levels)

    grid = sub.add_parser("grid", help="Print a level's grid as JSON")
    grid.add_argument("--level", type=int, default=settings.default_level)
    grid.add_argument("--width", type=float, required=True, help="Board width (px)")
    grid.add_argument("--height", type=float, required=True, help="Board height (px)")
    grid.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    grid.set_defaults(func=_cmd_grid)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level.upper(), stream=sys.stderr)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
