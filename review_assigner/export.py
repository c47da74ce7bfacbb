"""
Assignment Export Module

Writes assignments to CSV or Markdown files. Every exported file name gets
a timestamp so that repeated runs never overwrite each other:

    exports/          -> exports/code_review_assignments_20260207_174522.csv
    review.csv        -> review_20260207_174522.csv
    review.txt        -> review.txt_20260207_174522.csv

Rows are always ordered by reviewer employee id.
"""

import csv
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from .assignment import sorted_assignment, summarize_assignment
from .models import Assignment, FileError, PoolMode, ValidationError


logger = logging.getLogger(__name__)


FILENAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
CONTENT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

ASSIGNMENTS_PREFIX = "code_review_assignments"
MD_PREFIX = "review_summary"

CSV_HEADER = [
    "reviewer_name",
    "reviewer_id",
    "reviewee_names",
    "reviewee_ids",
    "reviewee_count",
    "timestamp",
]

MODE_LABELS = {
    PoolMode.SINGLE: "Single pool (circular review)",
    PoolMode.DUAL: "Dual pool (cross review)",
}


def is_directory_path(base_path: str) -> bool:
    """Check if base_path should be treated as a directory.

    A path is a directory when it ends with a separator, already exists
    as a directory, or has no dot and is not an existing file.
    """
    path = Path(base_path)
    if base_path.endswith(("/", os.sep)):
        return True
    if path.is_dir():
        return True
    return "." not in path.name and not path.is_file()


def timestamped_path(
    base_path: Optional[str],
    extension: str,
    default_prefix: str,
    timestamp: Optional[str] = None,
) -> Path:
    """Build the export path with a timestamp in the file name."""
    if not base_path or not base_path.strip():
        base_path = "."
    if timestamp is None:
        timestamp = datetime.now().strftime(FILENAME_TIMESTAMP_FORMAT)

    path = Path(base_path)
    if is_directory_path(base_path):
        return path / f"{default_prefix}_{timestamp}.{extension}"

    name = path.name
    stem, _, ext = name.rpartition(".")
    if stem and ext and ext.lower() == extension.lower():
        filename = f"{stem}_{timestamp}.{extension}"
    else:
        filename = f"{name}_{timestamp}.{extension}"
    return path.parent / filename


def check_assignment(assignment: Assignment, export_format: str) -> None:
    if not assignment:
        raise ValidationError(f"{export_format} export: assignment is empty")
    for reviewer, reviewees in assignment.items():
        if reviewer is None:
            raise ValidationError(f"{export_format} export: assignment contains a None reviewer")
        if reviewees is None:
            raise ValidationError(
                f"{export_format} export: reviewer {reviewer.employee_id} has no reviewee list",
                (reviewer.employee_id,)
            )


def create_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileError(f"Cannot create directory {path.parent}: {e}")


def build_csv_rows(assignment: Assignment, content_time: str) -> list[list[str]]:
    rows = []
    for reviewer, reviewees in sorted_assignment(assignment):
        rows.append([
            reviewer.name,
            reviewer.employee_id,
            ";".join(p.name for p in reviewees),
            ";".join(p.employee_id for p in reviewees),
            str(len(reviewees)),
            content_time,
        ])
    return rows


def export_csv(assignment: Assignment, base_path: Optional[str]) -> Path:
    """Export assignments to a UTF-8 (with BOM) CSV file.

    Returns:
        Path of the written file
    """
    check_assignment(assignment, "CSV")
    path = timestamped_path(base_path, "csv", ASSIGNMENTS_PREFIX)
    create_parent_dir(path)

    content_time = datetime.now().strftime(CONTENT_TIMESTAMP_FORMAT)
    try:
        with open(path, "w", newline="", encoding="utf-8-sig") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            writer.writerows(build_csv_rows(assignment, content_time))
    except OSError as e:
        raise FileError(f"Error writing CSV file: {e}")

    logger.info(f"CSV exported: {path} ({len(assignment)} rows)")
    return path


def escape_markdown(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def format_markdown(assignment: Assignment, mode: PoolMode, content_time: str) -> str:
    """Render the Markdown report body."""
    summary = summarize_assignment(assignment)

    lines = [
        "# Code Review Assignments",
        "",
        f"> **Generated**: {content_time}  ",
        f"> **Mode**: {MODE_LABELS.get(mode, mode.value)}  ",
        "",
        "## Summary",
        "| Item | Value |",
        "|------|------|",
        f"| Reviewers | **{summary.total_reviewers}** |",
        f"| Reviewees covered | **{summary.covered_reviewees}** |",
        f"| Review tasks | **{summary.total_tasks}** |",
        f"| Average load | **{summary.average_load:.1f}** |",
        f"| Max / min load | **{summary.max_load}** / **{summary.min_load}** |",
        "",
        "> Every reviewee is covered, reviewers are sampled as needed, loads differ by at most 1.",
        "",
        "## Assignments",
        "| Reviewer | ID | Reviewees | Reviewee IDs | Count |",
        "|:-------|:-----|:----------|:--------------|-----:|",
    ]

    for reviewer, reviewees in sorted_assignment(assignment):
        names = ", ".join(escape_markdown(p.name) for p in reviewees) or "—"
        ids = ", ".join(p.employee_id for p in reviewees) or "—"
        lines.append(
            f"| {escape_markdown(reviewer.name)} | `{reviewer.employee_id}` | {names} | `{ids}` | {len(reviewees)} |"
        )

    lines.extend([
        "",
        "## Notes",
        "- **Reviewers**: review the listed people's code before the deadline",
        "- **Reviewees**: have your changes ready and ping your reviewer",
        "- **Load**: assignments are balanced automatically",
        "",
        "---",
        "Generated by review-assigner. File names carry a timestamp so earlier reports are kept.",
    ])
    return "\n".join(lines) + "\n"


def export_markdown(assignment: Assignment, base_path: Optional[str], mode: PoolMode) -> Path:
    """Export assignments to a Markdown report.

    Returns:
        Path of the written file
    """
    check_assignment(assignment, "Markdown")
    path = timestamped_path(base_path, "md", MD_PREFIX)
    create_parent_dir(path)

    content_time = datetime.now().strftime(CONTENT_TIMESTAMP_FORMAT)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_markdown(assignment, mode, content_time))
    except OSError as e:
        raise FileError(f"Error writing Markdown file: {e}")

    logger.info(f"Markdown exported: {path} ({len(assignment)} reviewers)")
    return path


def write_output(content: str, filepath: Path) -> None:
    """Write content to file."""
    create_parent_dir(filepath)
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileError(f"Error writing output file: {e}")
