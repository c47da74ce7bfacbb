import argparse
import logging
import sys
from typing import Optional

from .assignment import summarize_assignment
from .models import Assignment, PoolMode, ReviewAssignerError
from .config import (
    find_config_file,
    load_config,
    merge_config,
    OUTPUT_FORMATS,
)
from .output import format_assignment_table


logger = logging.getLogger(__name__)


def setup_logging(verbosity: int) -> None:
    """Setup logging based on verbosity level.

    Maps effective verbosity to logging levels:
      2: DEBUG   (-vv)  - Engine internals, per-direction details
      1: INFO    (-v)   - Loaded pools, exported files
      0: WARNING (none) - Success message + warnings (default)
     -1: ERROR   (-q)   - Only errors
     -2: CRITICAL (-qq) - Only critical (errors + above)
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    elif verbosity == 0:
        level = logging.WARNING
    elif verbosity == -1:
        level = logging.ERROR
    else:
        level = logging.CRITICAL

    logging.basicConfig(
        level=level,
        format='%(message)s',
        stream=sys.stderr
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser."""
    parser = argparse.ArgumentParser(
        description="Assign code reviewers so that every reviewee is covered with balanced load"
    )
    parser.add_argument(
        "-i", "--input",
        required=True,
        help="Path to pool file (JSON or YAML)"
    )
    parser.add_argument(
        "-m", "--mode",
        choices=[mode.value for mode in PoolMode],
        default=None,
        help="Assignment mode: single (circular review) or dual (cross review). Detected from input if omitted"
    )
    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format: table (default, console only), csv, markdown, json, yaml"
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Export directory or file path; a timestamp is added to the file name (default: .)"
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible assignments"
    )
    parser.add_argument(
        "-n", "--dry-run",
        action="store_true",
        default=None,
        help="Print assignments without writing any file"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="Validate input without assigning"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=None,
        help="Increase output verbosity (-v, -vv)"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=None,
        help="Decrease output verbosity (-q, -qq)"
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to config file (optional)"
    )
    return parser


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments and merge with config file."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config_file = find_config_file(args.config)
    config = {}
    if config_file:
        try:
            config = load_config(config_file)
            logger.info(f"Loaded config from: {config_file}")
        except ReviewAssignerError:
            handle_error(sys.exc_info()[1])
    elif args.config:
        logger.warning(f"Config file not found: {args.config}")

    try:
        args = merge_config(config, args)
    except ReviewAssignerError:
        handle_error(sys.exc_info()[1])

    verbosity = args.verbose - args.quiet
    setup_logging(verbosity)

    return args


def handle_error(error: Exception) -> None:
    """Print error message and exit with error code."""
    logger.error(f"Error: {error}")
    sys.exit(1)


def print_dry_run_summary(assignment: Assignment) -> None:
    """Print preview of assignments without writing files."""
    print("\n[DRY RUN] Preview - No files will be written")
    print(format_assignment_table(assignment))


def print_success_summary(assignment: Assignment, written: Optional[str], verbosity: int) -> None:
    """Print success message and summary."""
    if verbosity < 0:
        return
    summary = summarize_assignment(assignment)
    print(
        f"Successfully assigned {summary.total_reviewers} reviewers "
        f"covering {summary.covered_reviewees} reviewees "
        f"(load {summary.min_load}-{summary.max_load})"
    )
    if written:
        print(f"Output written to: {written}")
