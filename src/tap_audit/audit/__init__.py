from .base import Audit
from .overlap import (
    get_all_overlap_failures,
    get_all_overlap_failures_for_target,
    get_overlap_failure_for_client_rect_pair,
    get_overlap_failure_for_target_pair,
    get_too_small_targets,
    merge_symmetric_failures,
)
from .report import compute_score, get_failing_target_count, get_table_items
from .tap_targets import TapTargetsAudit, audit_tap_targets

__all__ = [
    "Audit",
    "TapTargetsAudit",
    "audit_tap_targets",
    "get_all_overlap_failures",
    "get_all_overlap_failures_for_target",
    "get_overlap_failure_for_client_rect_pair",
    "get_overlap_failure_for_target_pair",
    "get_too_small_targets",
    "merge_symmetric_failures",
    "compute_score",
    "get_failing_target_count",
    "get_table_items",
]
