"""CLI entry point for the language playground programs.

Each sub-command runs one standalone program:

    python -m src.main hello
    python -m src.main guess [--seed N] [--min N] [--max N]
    python -m src.main variables [--show-mutation]
"""

import argparse
import sys

from dotenv import load_dotenv

from src.core.config import config
from src.core.programs import guessing_game, hello_world, variables
from src.utils.logging_config import get_logger, setup_logging

# Load environment variables once at startup
load_dotenv()

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="language-playgrounds",
        description="Introductory language playground programs",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for diagnostics on stderr (default: from LOG_LEVEL env var)",
    )
    subparsers = parser.add_subparsers(dest="program", required=True)

    subparsers.add_parser("hello", help="Print a greeting")

    guess = subparsers.add_parser("guess", help="Play the number guessing game")
    guess.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random number generator (default: GUESS_SEED env var)",
    )
    guess.add_argument(
        "--min",
        dest="low",
        type=int,
        default=None,
        help="Lowest possible secret number (default: GUESS_MIN env var or 1)",
    )
    guess.add_argument(
        "--max",
        dest="high",
        type=int,
        default=None,
        help="Highest possible secret number (default: GUESS_MAX env var or 100)",
    )

    demo = subparsers.add_parser("variables", help="Show variable mutation and shadowing")
    demo.add_argument(
        "--show-mutation",
        action="store_true",
        help="Also show a mutable variable being reassigned",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected program."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config.reload()
    setup_logging(level=args.log_level)
    logger.debug("Configuration: %s", config.to_dict())

    if args.program == "hello":
        hello_world.run()
        return 0

    if args.program == "variables":
        variables.run(show_mutation=args.show_mutation)
        return 0

    low = args.low if args.low is not None else config.guess_min
    high = args.high if args.high is not None else config.guess_max
    issues = config.load_errors + config.check_range(low, high)
    if issues:
        parser.error("; ".join(issues))

    try:
        guessing_game.run(seed=args.seed, low=low, high=high)
    except guessing_game.InputReadError as e:
        logger.debug("Input read failure", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
