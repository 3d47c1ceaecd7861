#!/usr/bin/env python3
"""Print the drawing commands of the animation or the arrow as JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from simulation.headless import render_arrow, render_frames

LOGGER_NAME = "tools.dump_frames"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

DEFAULT_TICKS = 3
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for the frame dump utility."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--ticks",
        type=int,
        default=DEFAULT_TICKS,
        help="Number of animation ticks to render.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument(
        "--arrow",
        nargs=3,
        type=float,
        metavar=("BASE_X", "BASE_Y", "LENGTH"),
        help="Dump the commands for a single arrow instead of the animation.",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Logging verbosity for the utility output.",
    )
    args = parser.parse_args(argv)
    if args.ticks < 0:
        parser.error("--ticks cannot be negative")
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    return args


def configure_logging(log_level: str) -> logging.Logger:
    """Configure the root logger and return the module logger."""
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger(LOGGER_NAME)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    logger = configure_logging(args.log_level)

    if args.arrow is not None:
        base_x, base_y, length = args.arrow
        logger.info("Rendering arrow from (%s, %s) with length %s", base_x, base_y, length)
        payload = [command.to_dict() for command in render_arrow(base_x, base_y, length)]
    else:
        logger.info("Rendering %s tick(s) on a %sx%s surface", args.ticks, args.width, args.height)
        frames = render_frames(args.ticks, args.width, args.height, log_callback=logger.debug)
        payload = [frame.to_dict() for frame in frames]

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
