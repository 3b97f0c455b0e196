from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from . import config
from .config import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrapsnake",
        description="Play snake on a wrap-around grid.",
    )
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Grid height in cells.")
    parser.add_argument("--scale", type=int, default=config.SCALE, help="Window scale factor.")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Frame rate cap (does not change game speed).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser


def settings_from_args(ns: argparse.Namespace) -> Settings:
    return dataclasses.replace(
        Settings(),
        grid_width=ns.width,
        grid_height=ns.height,
        scale=ns.scale,
        fps=ns.fps,
        seed=ns.seed,
    ).validate()


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, ns.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = settings_from_args(ns)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # pygame is only needed once there is a window to open.
    from .game import run

    return run(settings)


if __name__ == "__main__":
    raise SystemExit(main())
