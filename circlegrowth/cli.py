"""
Command-line interface for circlegrowth
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import replace
from typing import List, Optional

import yaml

from circlegrowth.config import Config, load_config
from circlegrowth.host import GrowthHost

logger = logging.getLogger(__name__)

CONSOLE_HANDLER = "circlegrowth-console"
FILE_HANDLER = "circlegrowth-file"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        description="circlegrowth - fill a viewport with circles placed on intersection points"
    )

    parser.add_argument("width", help="Viewport width in pixels", type=float)

    parser.add_argument("height", help="Viewport height in pixels", type=float)

    parser.add_argument("--steps", "-s", help="Number of ticks to run", type=int, default=100)

    parser.add_argument(
        "--delay", "-d", help="Seconds between ticks (default: host.step_delay)", type=float, default=None
    )

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument(
        "--output", "-o", help="Render the final circles to this image (png, svg, ...)", default=None
    )

    parser.add_argument("--radius", "-r", help="Circle radius", type=float, default=None)

    parser.add_argument(
        "--no-bounds-check",
        help="Accept candidates outside the viewport (legacy behaviour)",
        action="store_true",
    )

    parser.add_argument(
        "--seed-corners", help="Seed all four viewport corners", action="store_true"
    )

    parser.add_argument(
        "--stop-when-packed",
        help="Stop as soon as a tick adds no circle",
        action="store_true",
    )

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )

    return parser.parse_args(argv)


def _has_handler(logger_, name):
    return any(handler.get_name() == name for handler in logger_.handlers)


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Set up the root logger with a console handler and an optional log file.
    Calling it again only updates the level; handlers are added once.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    if not _has_handler(root_logger, CONSOLE_HANDLER):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(console_handler)

    if log_dir and not _has_handler(root_logger, FILE_HANDLER):
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"circlegrowth_{time.strftime('%Y%m%d_%H%M%S')}.log")
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)
        logger.info(f"Logging to {log_file}")


def build_config(args: argparse.Namespace) -> Config:
    """Load the YAML config (if any) and apply command-line overrides"""
    if args.config and not os.path.exists(args.config):
        raise FileNotFoundError(f"Config file '{args.config}' not found")

    config = load_config(args.config)

    if args.radius is not None:
        config.engine = replace(config.engine, radius=args.radius)
    if args.no_bounds_check:
        config.engine = replace(config.engine, check_bounds=False)
    if args.seed_corners:
        config.host = replace(config.host, seed_mode="corners")
    if args.delay is not None:
        config.host = replace(config.host, step_delay=args.delay)
    if args.log_level:
        config.log_level = args.log_level

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1

    setup_logging(config.log_level, config.log_dir)

    try:
        host = GrowthHost(config)
        host.resize(args.width, args.height)
        state = host.run(max_steps=args.steps, stop_when_packed=args.stop_when_packed)
    except ValueError as e:
        logger.error(f"Growth failed: {e}")
        return 1

    if args.output:
        from circlegrowth.render import save_circles

        save_circles(
            state.circles,
            host.viewport,
            args.output,
            radius=config.engine.radius,
            config=config.render,
        )

    print(f"Circles: {len(state.circles)}")
    print(f"Step: {state.step}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
