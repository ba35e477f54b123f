"""Command-line entry point.

Loads a plate (from a file or the bundled pattern library), builds a
simulation and either opens the curses viewer or, with --headless, prints
the population of each generation.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import EngineConfig, ViewerConfig
from .core.errors import RuleParseError
from .core.life import Life
from .core.rules import LifeRule
from .core.stepper import GenerationStepper
from .patterns.library import get_pattern, list_patterns
from .patterns.plate import load_plate

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyperlife",
        description="Sparse Game of Life in any number of dimensions")
    parser.add_argument("pattern", nargs="?", help="Plate file ('#' marks live cells)")
    parser.add_argument("--pattern-name", default=None,
                        help=f"Bundled pattern: {', '.join(list_patterns())}")
    parser.add_argument("--dimensions", "-d", type=int, default=2, help="Number of lattice axes")
    parser.add_argument("--rule", default="B3/S23", help="Rule in B/S notation")
    parser.add_argument("--delay", type=int, default=100, help="Milliseconds between frames")
    parser.add_argument("--workers", type=int, default=None, help="Step worker threads (default: CPU count)")
    parser.add_argument("--headless", type=int, metavar="GENERATIONS", default=None,
                        help="Print population for this many generations instead of opening the viewer")
    parser.add_argument("--log-file", default=None, help="Write log records to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Route log records to a file, or to stderr in headless mode.

    The curses screen owns the terminal, so interactive runs without a
    log file keep logging silent.
    """
    level = getattr(logging, args.log_level)
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=level, format=LOG_FORMAT)
    elif args.headless is not None:
        logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)


def load_simulation(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Life:
    """Build the initial generation from the parsed arguments."""
    if args.dimensions < 2:
        parser.error("--dimensions must be at least 2 to seed from a plate")

    if args.pattern and args.pattern_name:
        parser.error("give either a pattern file or --pattern-name, not both")

    try:
        if args.pattern:
            plate = load_plate(args.pattern)
        else:
            plate = get_pattern(args.pattern_name or "gosper_gun")
    except OSError as e:
        parser.error(f"cannot read pattern file: {e}")
    except KeyError as e:
        parser.error(str(e.args[0]))

    try:
        rule = LifeRule.parse(args.rule)
    except RuleParseError as e:
        parser.error(str(e))

    try:
        stepper = GenerationStepper(EngineConfig(max_workers=args.workers))
    except ValueError as e:
        parser.error(str(e))

    return Life.from_plate(plate, rule, args.dimensions, stepper)


def run_headless(game: Life, generations: int) -> int:
    """Print generation and population for each step."""
    print(f"{game.generation}\t{game.active_cells()}")
    with game.stepper:
        for current in game.evolve(generations):
            print(f"{current.generation}\t{current.active_cells()}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the hyperlife command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args)
    game = load_simulation(args, parser)
    logger.info(f"Loaded {game.active_cells()} cells into a {game.dimension}D lattice, rule {game.rule!r}")

    if args.headless is not None:
        return run_headless(game, args.headless)

    # Imported late so headless runs work without a terminal
    from .display.session import Session
    from .display.terminal import launch

    try:
        config = ViewerConfig(delay_ms=args.delay)
    except ValueError as e:
        parser.error(str(e))

    try:
        launch(Session(game), config)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
