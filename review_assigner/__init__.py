from .models import (
    Person,
    PoolMode,
    Assignment,
    ReviewAssignerError,
    ValidationError,
    FileError,
    SINGLE_POOL_MIN_SIZE,
)

from .validation import (
    ValidationResult,
    validate_pool,
    validate_no_overlap,
    validate_pool_data,
)

from .assignment import (
    AssignmentSummary,
    make_rng,
    shuffled,
    merge_assignments,
    assign_single_pool,
    assign_direction,
    assign_dual_pool,
    assign,
    reviewer_loads,
    sorted_assignment,
    summarize_assignment,
)

from .config import (
    find_config_file,
    load_config,
    merge_config,
)

from .io import (
    load_document,
    parse_people,
    detect_mode,
    load_single_pool,
    load_dual_pool,
    load_pools,
)

from .output import (
    display_width,
    left_align,
    right_align,
    format_assignment_table,
    print_assignments,
    format_output_json,
    format_output_yaml,
)

from .export import (
    timestamped_path,
    export_csv,
    export_markdown,
)

from .cli import (
    setup_logging,
    handle_error,
    parse_arguments,
)

from .main import main

logger = __import__('logging').getLogger(__name__)
