import json
import unicodedata
from datetime import datetime, timezone
from typing import Optional

import yaml

from .assignment import sorted_assignment, summarize_assignment
from .models import Assignment


TABLE_PADDING = 2
MIN_RULE_WIDTH = 50
DEFAULT_COLUMN_WIDTH = 20


def is_wide_char(char: str) -> bool:
    """Check if a character takes two columns in a monospaced terminal."""
    code = ord(char)
    if 0x4E00 <= code <= 0x9FFF:  # CJK unified ideographs
        return True
    if 0x3000 <= code <= 0x303F:  # CJK symbols and punctuation
        return True
    if 0xFF00 <= code <= 0xFFEF:  # half-width and full-width forms
        return True
    return unicodedata.east_asian_width(char) in ("W", "F")


def display_width(text: Optional[str]) -> int:
    """Width of text in terminal columns (wide characters count 2)."""
    if not text:
        return 0
    return sum(2 if is_wide_char(c) else 1 for c in text)


def left_align(text: Optional[str], width: int) -> str:
    """Pad text on the right up to width columns. Never truncates."""
    text = text or ""
    pad = width - display_width(text)
    return text + " " * pad if pad > 0 else text


def right_align(text: Optional[str], width: int) -> str:
    """Pad text on the left up to width columns. Never truncates."""
    text = text or ""
    pad = width - display_width(text)
    return " " * pad + text if pad > 0 else text


def format_assignment_table(assignment: Assignment) -> str:
    """Render assignments as a two-column console table."""
    reviewer_width = max(
        (display_width(str(p)) for p in assignment),
        default=DEFAULT_COLUMN_WIDTH
    ) + TABLE_PADDING
    reviewee_width = max(
        (display_width(str(p)) for reviewees in assignment.values() for p in reviewees),
        default=DEFAULT_COLUMN_WIDTH
    ) + TABLE_PADDING
    rule = "─" * max(reviewer_width + reviewee_width, MIN_RULE_WIDTH)

    lines = [
        left_align("Reviewer", reviewer_width) + left_align("→ Reviewees", reviewee_width),
        rule,
    ]
    for reviewer, reviewees in assignment.items():
        targets = ", ".join(str(p) for p in reviewees)
        lines.append(left_align(str(reviewer), reviewer_width) + targets)
    lines.append(rule)
    lines.append(f"✓ {len(assignment)} reviewers assigned, all reviewees covered")
    return "\n".join(lines)


def print_assignments(assignment: Assignment) -> None:
    print(format_assignment_table(assignment))


def build_output_data(assignment: Assignment, params: dict) -> dict:
    """Build the plain-data view shared by the JSON and YAML formats."""
    summary = summarize_assignment(assignment)
    assignments = []
    for reviewer, reviewees in sorted_assignment(assignment):
        assignments.append({
            "reviewer": reviewer.to_dict(),
            "reviewees": [p.to_dict() for p in reviewees]
        })

    return {
        "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "parameters": {
            "input": params.get("input", ""),
            "mode": params.get("mode", ""),
            "seed": params.get("seed"),
        },
        "summary": {
            "reviewers": summary.total_reviewers,
            "covered_reviewees": summary.covered_reviewees,
            "tasks": summary.total_tasks,
            "max_load": summary.max_load,
            "min_load": summary.min_load,
        },
        "assignments": assignments
    }


def format_output_json(assignment: Assignment, params: dict) -> str:
    """Format assignments as JSON."""
    return json.dumps(build_output_data(assignment, params), indent=2, ensure_ascii=False)


def format_output_yaml(assignment: Assignment, params: dict) -> str:
    """Format assignments as YAML."""
    return yaml.safe_dump(
        build_output_data(assignment, params),
        sort_keys=False,
        allow_unicode=True
    )
