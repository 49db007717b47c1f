"""
Checks that links, buttons, etc. are sufficiently large and that there's no
other tap target so close that the user might tap it by accident.
"""

from __future__ import annotations

from typing import Optional

from ..schemas.config import AuditConfig
from ..schemas.results import AuditMeta, AuditResult
from ..schemas.targets import TapTargetArtifacts
from ..utils.constants import AUDIT_ID, UI_STRINGS
from ..utils.logger import get_logger
from .base import Audit
from .overlap import get_all_overlap_failures, get_too_small_targets, merge_symmetric_failures
from .report import (
    compute_score,
    format_display_value,
    get_failing_target_count,
    get_table_headings,
    get_table_items,
    make_table_details,
)

logger = get_logger(__name__)


class TapTargetsAudit(Audit):
    def __init__(self, config: Optional[AuditConfig] = None):
        self._config = config or AuditConfig()

    @property
    def config(self) -> AuditConfig:
        return self._config

    def meta(self) -> AuditMeta:
        return AuditMeta(
            id=AUDIT_ID,
            title=UI_STRINGS["title"],
            failure_title=UI_STRINGS["failure_title"],
            description=UI_STRINGS["description"],
            required_artifacts=["MetaElements", "TapTargets"],
        )

    def audit(self, artifacts: TapTargetArtifacts) -> AuditResult:
        if not artifacts.viewport_is_mobile_optimized:
            logger.info("Viewport is not optimized for mobile, skipping tap target checks")
            return AuditResult(
                passed=False,
                explanation=UI_STRINGS["explanation_viewport_meta_not_optimized"],
                skipped=True,
            )

        tap_targets = artifacts.tap_targets
        too_small_targets = get_too_small_targets(tap_targets, self._config)
        overlap_failures = get_all_overlap_failures(too_small_targets, tap_targets, self._config)
        overlap_failures_for_display = merge_symmetric_failures(overlap_failures)
        table_items = get_table_items(overlap_failures_for_display)

        details = make_table_details(get_table_headings(), table_items)

        tap_target_count = len(tap_targets)
        failing_tap_target_count = get_failing_target_count(overlap_failures)
        score = compute_score(tap_target_count, failing_tap_target_count)

        logger.debug(
            f"{failing_tap_target_count}/{tap_target_count} tap targets failing, "
            f"{len(table_items)} overlaps reported"
        )

        return AuditResult(
            passed=len(table_items) == 0,
            score=score,
            details=details,
            display_value=format_display_value(score),
        )


def audit_tap_targets(
    artifacts: TapTargetArtifacts, config: Optional[AuditConfig] = None
) -> AuditResult:
    """Run the tap targets audit once over the given artifacts."""
    return TapTargetsAudit(config).audit(artifacts)
