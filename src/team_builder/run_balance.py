"""Split the player roster into engagement-balanced teams.

Usage:
    python -m src.team_builder.run_balance --teams N --seed S [--debug]
        [--input PATH] [--delimiter CHAR] [--log-level LEVEL]

Examples:
    python -m src.team_builder.run_balance --teams 4 --seed 42
    python -m src.team_builder.run_balance --teams 3 --seed 7 --debug
"""

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from src.data_pipeline.config import DEFAULT_DELIMITER, DEFAULT_INPUT_FILE
from src.data_pipeline.ingestion import ParseError, PlayerIngester
from src.data_pipeline.scoring import EmptyInputError, EngagementScorer
from src.logging_config import setup_logging
from src.team_builder.errors import InvalidConfigurationError, MissingArgumentError
from src.team_builder.reporter import TeamReporter
from src.team_builder.team import SelectionResult
from src.team_builder.trial_selector import TrialSelector

logger = logging.getLogger(__name__)

_REQUIRED_OPTIONS = ("teams", "seed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="balance-teams",
        description="Assign players to teams with balanced engagement scores.",
    )
    parser.add_argument("--teams", type=int, default=None,
                        help="Number of teams to create (required)")
    parser.add_argument("--seed", default=None,
                        help="Seed for the random number generator (required)")
    parser.add_argument("--debug", action="store_true",
                        help="Print per-trial statistics before the result")
    parser.add_argument("--input", type=Path, default=DEFAULT_INPUT_FILE,
                        help=f"Player table (default: {DEFAULT_INPUT_FILE.name})")
    parser.add_argument("--delimiter", default=DEFAULT_DELIMITER,
                        help="Single-character field delimiter (default: ';')")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Console log level (default: WARNING)")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse *argv*, raising MissingArgumentError for absent required options."""
    args = build_parser().parse_args(argv)
    missing = [f"--{name}" for name in _REQUIRED_OPTIONS if getattr(args, name) is None]
    if missing:
        raise MissingArgumentError(missing)
    return args


def normalize_seed(value) -> str:
    """Canonical text form of a numeric seed.

    Integral values drop their fractional part, so ``1``, ``01`` and
    ``1.0`` all produce the same trial seeds.

    Raises:
        InvalidConfigurationError: if *value* is not a finite number.
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Seed must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise InvalidConfigurationError(f"Seed must be finite, got {value!r}")
    if number.is_integer():
        return str(int(number))
    return repr(number)


def balance_teams(
    input_file: Path,
    num_teams: int,
    seed,
    delimiter: str = DEFAULT_DELIMITER,
) -> SelectionResult:
    """Load, score and balance the roster.

    Raises:
        FileNotFoundError: if *input_file* does not exist.
        ParseError: if the table is malformed.
        EmptyInputError: if the table has no players.
        InvalidConfigurationError: for a bad team count, seed or delimiter.
    """
    ingester = PlayerIngester(input_file, delimiter=delimiter)
    seed = normalize_seed(seed)
    selector = TrialSelector(num_teams, seed)

    players = ingester.read_players()
    if not players:
        raise EmptyInputError(f"No players found in {input_file}")

    scored = EngagementScorer().score(players)
    logger.info(
        "Balancing %d players into %d teams (seed=%s)",
        len(scored), num_teams, seed,
    )
    return selector.run(scored)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except MissingArgumentError as e:
        parser = build_parser()
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2

    setup_logging(args.log_level)

    try:
        result = balance_teams(args.input, args.teams, args.seed, args.delimiter)
    except (FileNotFoundError, ParseError, EmptyInputError, InvalidConfigurationError) as e:
        logger.error("Team balancing failed: %s", e)
        return 1

    TeamReporter().write_report(result, debug=args.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
