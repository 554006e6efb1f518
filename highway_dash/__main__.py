"""
Entry point for Highway Dash.

Arrow Up to accelerate, Left/Right to steer, R or the Restart button after a crash,
Escape to quit.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import GameConfig


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="highway-dash", description="Three-lane endless driving game")
    parser.add_argument("--fps", type=int, default=None, help="frame (and tick) rate")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle spawning")
    parser.add_argument("--spawn-probability", type=float, default=None,
                        help="chance of a new obstacle each tick")
    parser.add_argument("--debug", action="store_true", default=None, help="enable debug logging")
    args = parser.parse_args(argv)

    # command line wins over HIGHWAY_DASH_* environment variables
    overrides = {name: value for name, value in (("fps", args.fps),
                                                  ("spawn_probability", args.spawn_probability),
                                                  ("debug", args.debug))
                 if value is not None}
    try:
        args.config = GameConfig(**overrides)
    except ValidationError as e:
        parser.error(str(e))
    return args


def main(argv=None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    config = args.config
    setup_logging(config.debug)

    logger = logging.getLogger(__name__)
    logger.info("Highway Dash starting...")

    # pygame is only needed once we actually open a window
    from .sim import run

    try:
        run(config, seed=args.seed)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
