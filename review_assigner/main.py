#!/usr/bin/env python3
"""
Code Review Assigner

Assigns code reviewers so that every reviewee is covered at least once and
reviewer load stays balanced.

Usage:
    python assign_reviews.py -i team.json
    python assign_reviews.py -i pools.json -m dual -f markdown -o docs/
    python assign_reviews.py -i team.yaml -f csv -s 42

Single-pool input:
    {"people": [{"name": "Alice", "employeeId": "E1"}, ...]}

Dual-pool input:
    {"poolA": {"people": [...]}, "poolB": {"people": [...]}}
"""

import logging
import sys

from .assignment import assign, make_rng
from .cli import (
    parse_arguments,
    handle_error,
    print_dry_run_summary,
    print_success_summary,
)
from .config import DEFAULT_FORMAT
from .export import (
    ASSIGNMENTS_PREFIX,
    export_csv,
    export_markdown,
    timestamped_path,
    write_output,
)
from .io import load_pools
from .models import PoolMode, ReviewAssignerError, ValidationError
from .output import format_output_json, format_output_yaml, print_assignments
from .validation import ValidationResult, validate_pool_data, print_validation_result


logger = logging.getLogger(__name__)


def write_assignment(assignment, mode: PoolMode, args) -> str:
    """Write the assignment in the requested format, returning the path."""
    if args.format == "csv":
        return str(export_csv(assignment, args.output))
    if args.format == "markdown":
        return str(export_markdown(assignment, args.output, mode))

    params = {"input": args.input, "mode": mode.value, "seed": args.seed}
    if args.format == "json":
        content = format_output_json(assignment, params)
    else:
        content = format_output_yaml(assignment, params)
    path = timestamped_path(args.output, args.format, ASSIGNMENTS_PREFIX)
    write_output(content, path)
    logger.info(f"{args.format.upper()} exported: {path}")
    return str(path)


def main(argv=None):
    args = parse_arguments(argv)
    verbosity = args.verbose - args.quiet

    mode = PoolMode(args.mode) if args.mode else None
    try:
        mode, pools = load_pools(args.input, mode)
    except ValidationError as e:
        if args.validate:
            result = ValidationResult(is_valid=False, errors=[e.message])
            print_validation_result(result, args.input, None, verbosity)
            sys.exit(1)
        handle_error(e)
    except ReviewAssignerError:
        handle_error(sys.exc_info()[1])

    for pool_name, people in pools.items():
        logger.info(f"Loaded {len(people)} people into {pool_name} ({mode.value} mode)")

    if args.validate:
        result = validate_pool_data(pools, mode)
        print_validation_result(result, args.input, pools, verbosity)
        sys.exit(0 if result.is_valid else 1)

    if args.seed is not None:
        logger.info(f"Using random seed: {args.seed}")
    rng = make_rng(args.seed)

    try:
        assignment = assign(pools, mode, rng)
    except ReviewAssignerError:
        handle_error(sys.exc_info()[1])

    if args.dry_run:
        print_dry_run_summary(assignment)
        return

    written = None
    if args.format == DEFAULT_FORMAT:
        if verbosity >= 0:
            print_assignments(assignment)
    else:
        try:
            written = write_assignment(assignment, mode, args)
        except ReviewAssignerError:
            handle_error(sys.exc_info()[1])

    print_success_summary(assignment, written, verbosity)


if __name__ == "__main__":
    main()
