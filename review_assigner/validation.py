"""
Pool Validation Module

Validation of people pools happens in two flavours:

1. Precondition checks (validate_pool, validate_no_overlap):
   - Used by the assignment engine before it touches a pool
   - Raise ValidationError on the first broken rule
   - Report every offending employeeId, not just the first one

2. Report checks (validate_pool_data):
   - Used by the --validate CLI flag
   - Collect all errors and warnings into a ValidationResult
   - Never raise

Structural problems with the input document itself (missing keys, bad JSON)
are reported by io.py before any of this runs.
"""

from dataclasses import dataclass, field
from typing import Optional

from .models import Person, PoolMode, ValidationError, SINGLE_POOL_MIN_SIZE


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)


def find_duplicate_ids(people: list[Person]) -> list[str]:
    """Return duplicated employee ids in first-seen order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for person in people:
        if person.employee_id in seen:
            if person.employee_id not in duplicates:
                duplicates.append(person.employee_id)
        else:
            seen.add(person.employee_id)
    return duplicates


def find_overlapping_ids(pool_a: list[Person], pool_b: list[Person]) -> list[str]:
    """Return ids present in both pools, in pool B order."""
    pool_a_ids = {p.employee_id for p in pool_a}
    overlap: list[str] = []
    for person in pool_b:
        if person.employee_id in pool_a_ids and person.employee_id not in overlap:
            overlap.append(person.employee_id)
    return overlap


def collect_pool_errors(people: Optional[list[Person]], pool_name: str) -> tuple[list[str], list[str]]:
    """Check a single pool and return (errors, offending_ids).

    Rules:
    - Pool is not None and not empty
    - No None members, every member is a Person
    - No duplicate employeeId
    """
    if people is None:
        return [f"{pool_name} must not be None"], []
    if not people:
        return [f"{pool_name} must not be empty"], []

    errors = []
    for idx, person in enumerate(people, start=1):
        if person is None:
            errors.append(f"{pool_name} entry {idx} is None")
        elif not isinstance(person, Person):
            errors.append(f"{pool_name} entry {idx} is not a Person: {person!r}")
    if errors:
        return errors, []

    duplicates = find_duplicate_ids(people)
    if duplicates:
        return [f"{pool_name} contains duplicate employeeId: {', '.join(duplicates)}"], duplicates

    return [], []


def validate_pool(people: Optional[list[Person]], pool_name: str) -> None:
    """Raise ValidationError if the pool cannot be used for an assignment."""
    errors, offending_ids = collect_pool_errors(people, pool_name)
    if errors:
        raise ValidationError(errors[0], offending_ids)


def validate_no_overlap(pool_a: list[Person], pool_b: list[Person]) -> None:
    """Raise ValidationError naming every id shared by both pools."""
    overlap = find_overlapping_ids(pool_a, pool_b)
    if overlap:
        raise ValidationError(
            f"poolA and poolB share employeeId: {', '.join(overlap)}",
            overlap
        )


def validate_pool_data(pools: dict[str, list[Person]], mode: PoolMode) -> ValidationResult:
    """Validate loaded pools without raising.

    Checks the same rules the engine enforces, plus a couple of warnings
    that do not block an assignment:
    - dual mode with very different pool sizes (some reviewers idle)

    Args:
        pools: Mapping of pool name to people ("people" for single mode,
            "poolA" and "poolB" for dual mode)
        mode: Assignment mode the pools are meant for

    Returns:
        ValidationResult with any errors or warnings found
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not pools:
        errors.append("No pools found in input")
        return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

    for pool_name, people in pools.items():
        pool_errors, _ = collect_pool_errors(people, pool_name)
        errors.extend(pool_errors)

    if mode == PoolMode.SINGLE:
        check_single_pool(pools, errors)
    else:
        check_dual_pools(pools, errors, warnings)

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings
    )


def check_single_pool(pools: dict[str, list[Person]], errors: list[str]) -> None:
    for pool_name, people in pools.items():
        if people and len(people) < SINGLE_POOL_MIN_SIZE:
            errors.append(
                f"{pool_name}: single-pool mode needs at least {SINGLE_POOL_MIN_SIZE} people, got {len(people)}"
            )


def check_dual_pools(pools: dict[str, list[Person]], errors: list[str], warnings: list[str]) -> None:
    pool_a = pools.get("poolA")
    pool_b = pools.get("poolB")
    if pool_a is None or pool_b is None:
        errors.append("Dual-pool mode needs both poolA and poolB")
        return
    if not pool_a or not pool_b or None in pool_a or None in pool_b:
        return

    overlap = find_overlapping_ids(pool_a, pool_b)
    if overlap:
        errors.append(f"poolA and poolB share employeeId: {', '.join(overlap)}")

    if len(pool_a) > len(pool_b):
        warnings.append(
            f"{len(pool_a) - len(pool_b)} poolA reviewer(s) will be idle when reviewing poolB"
        )
    elif len(pool_b) > len(pool_a):
        warnings.append(
            f"{len(pool_b) - len(pool_a)} poolB reviewer(s) will be idle when reviewing poolA"
        )


def print_validation_result(
    result: ValidationResult,
    filepath: str,
    pools: Optional[dict[str, list[Person]]] = None,
    verbosity: int = 0,
) -> None:
    """Print validation result in the specified format."""
    if verbosity < 0:
        return

    print("=== Input Validation ===")
    print(f"File: {filepath}")
    print()

    if pools:
        for pool_name, people in pools.items():
            print(f"✓ {pool_name}: {len(people) if people else 0} people found")
    else:
        print("✓ 0 people found")
    print()

    if result.warnings:
        print("Warnings:")
        for warning in result.warnings:
            print(f"  ⚠ {warning}")
        print()

    if result.errors:
        print("Errors:")
        for error in result.errors:
            print(f"  ✗ {error}")
        print()

    status = "PASSED" if result.is_valid else "FAILED"
    parts = []
    if result.error_count > 0:
        parts.append(f"{result.error_count} error{'s' if result.error_count != 1 else ''}")
    if result.warning_count > 0:
        parts.append(f"{result.warning_count} warning{'s' if result.warning_count != 1 else ''}")

    status_str = f"{status} ({', '.join(parts)})" if parts else status
    print(f"Status: {status_str}")
