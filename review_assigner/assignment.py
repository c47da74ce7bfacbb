import logging
import random
from dataclasses import dataclass
from typing import Optional

from .models import (
    Assignment,
    Person,
    PoolMode,
    ValidationError,
    SINGLE_POOL_MIN_SIZE,
)
from .validation import validate_pool, validate_no_overlap


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentSummary:
    total_reviewers: int
    covered_reviewees: int
    total_tasks: int
    average_load: float
    max_load: int
    min_load: int


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a random source, seeded when a seed is given."""
    return random.Random(seed)


def shuffled(items: list, rng: Optional[random.Random] = None) -> list:
    """Return a Fisher-Yates shuffled copy of items.

    Only ``rng.randint`` is used, so tests can pass any object that
    provides it. The input list is left untouched.
    """
    if rng is None:
        rng = make_rng()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def merge_assignments(*assignments: Assignment) -> Assignment:
    """Merge assignments, concatenating reviewee lists of repeated reviewers."""
    merged: Assignment = {}
    for assignment in assignments:
        for reviewer, reviewees in assignment.items():
            if reviewer in merged:
                logger.warning(f"{reviewer} appears as reviewer in more than one direction")
                merged[reviewer] = merged[reviewer] + list(reviewees)
            else:
                merged[reviewer] = list(reviewees)
    return merged


def assign_single_pool(people: list[Person], rng: Optional[random.Random] = None) -> Assignment:
    """Assign reviewers in a single pool by closing a random cycle.

    Everyone reviews the next person in a shuffled order, and the last
    person reviews the first. Each person reviews exactly one colleague and
    is reviewed exactly once.

    Raises:
        ValidationError: the pool is invalid or has fewer than two people
    """
    validate_pool(people, "people")
    if len(people) < SINGLE_POOL_MIN_SIZE:
        raise ValidationError(
            f"Single-pool mode needs at least {SINGLE_POOL_MIN_SIZE} people, got {len(people)}",
            tuple(p.employee_id for p in people)
        )

    order = shuffled(people, rng)
    n = len(order)
    assignment: Assignment = {}
    for i, reviewer in enumerate(order):
        reviewee = order[(i + 1) % n]
        assignment[reviewer] = [reviewee]
        logger.debug(f"{reviewer} -> {reviewee}")
    return assignment


def assign_direction(
    reviewers: list[Person],
    reviewees: list[Person],
    rng: Optional[random.Random] = None,
    direction: str = "",
) -> Assignment:
    """Distribute reviewees over reviewers so that every reviewee is covered once.

    When there are at least as many reviewers as reviewees, a random subset
    of ``len(reviewees)`` reviewers gets one reviewee each and the rest sit
    this direction out. Otherwise every reviewer takes part and reviewees
    are dealt round robin, so loads differ by at most one.
    """
    if not reviewees:
        return {}
    if not reviewers:
        raise ValidationError(
            f"Direction {direction or '?'}: no reviewers available to cover {len(reviewees)} reviewee(s)",
            tuple(p.employee_id for p in reviewees)
        )

    if rng is None:
        rng = make_rng()
    shuffled_reviewees = shuffled(reviewees, rng)
    shuffled_reviewers = shuffled(reviewers, rng)
    assignment: Assignment = {}

    if len(reviewers) >= len(reviewees):
        selected = shuffled_reviewers[:len(reviewees)]
        logger.debug(
            f"Direction {direction}: selected {len(selected)}/{len(reviewers)} reviewers, load 1 each"
        )
        for reviewer, reviewee in zip(selected, shuffled_reviewees):
            assignment[reviewer] = [reviewee]
    else:
        logger.debug(
            f"Direction {direction}: {len(reviewers)} reviewers share {len(reviewees)} reviewees"
        )
        for i, reviewee in enumerate(shuffled_reviewees):
            reviewer = shuffled_reviewers[i % len(shuffled_reviewers)]
            assignment.setdefault(reviewer, []).append(reviewee)

    return assignment


def assign_dual_pool(
    pool_a: list[Person],
    pool_b: list[Person],
    rng: Optional[random.Random] = None,
) -> Assignment:
    """Cross-review two disjoint pools: A reviews all of B, B reviews all of A.

    Raises:
        ValidationError: either pool is invalid or the pools share ids
    """
    validate_pool(pool_a, "poolA")
    validate_pool(pool_b, "poolB")
    validate_no_overlap(pool_a, pool_b)

    if rng is None:
        rng = make_rng()
    a_to_b = assign_direction(pool_a, pool_b, rng, "A→B")
    b_to_a = assign_direction(pool_b, pool_a, rng, "B→A")
    return merge_assignments(a_to_b, b_to_a)


def assign(
    pools: dict[str, list[Person]],
    mode: PoolMode,
    rng: Optional[random.Random] = None,
) -> Assignment:
    """Run the assignment for already loaded pools."""
    if mode == PoolMode.SINGLE:
        return assign_single_pool(pools.get("people"), rng)
    return assign_dual_pool(pools.get("poolA"), pools.get("poolB"), rng)


def reviewer_loads(assignment: Assignment) -> dict[Person, int]:
    """Number of reviewees per reviewer."""
    return {reviewer: len(reviewees) for reviewer, reviewees in assignment.items()}


def sorted_assignment(assignment: Assignment) -> list[tuple[Person, list[Person]]]:
    """Assignment entries ordered by reviewer employee id."""
    return sorted(assignment.items(), key=lambda item: item[0].employee_id)


def summarize_assignment(assignment: Assignment) -> AssignmentSummary:
    loads = list(reviewer_loads(assignment).values())
    covered = {p.employee_id for reviewees in assignment.values() for p in reviewees}
    total_tasks = sum(loads)
    return AssignmentSummary(
        total_reviewers=len(loads),
        covered_reviewees=len(covered),
        total_tasks=total_tasks,
        average_load=total_tasks / len(loads) if loads else 0.0,
        max_load=max(loads) if loads else 0,
        min_load=min(loads) if loads else 0,
    )
