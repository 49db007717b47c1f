"""
overlap.py - Overlap detection between tap targets
===================================================
For every target that is too small to comfortably tap, simulate a finger
tapping the middle of each of its tappable regions and measure how much of
that finger lands on every other target instead.

Flow:
    too small targets -> per pair exemptions -> rect x rect scoring
    -> worst failure per ordered pair -> symmetric merge
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from ..geometry.rects import (
    all_rects_contained_within_each_other,
    get_rect_at_center,
    get_rect_overlap_area,
)
from ..geometry.tappable import get_tappable_rects_from_client_rects
from ..schemas.config import AuditConfig
from ..schemas.results import ClientRectOverlapFailure, TapTargetOverlapFailure
from ..schemas.targets import Rect, TapTarget
from ..utils.logger import get_logger

logger = get_logger(__name__)

HTTP_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def client_rect_below_minimum_size(rect: Rect, config: AuditConfig) -> bool:
    return rect.width < config.finger_size_px or rect.height < config.finger_size_px


def is_too_small(target: TapTarget, config: AuditConfig) -> bool:
    """A target is too small if none of its client rects is finger sized.

    A target without client rects has nothing to tap and is never too small.
    """
    if not target.client_rects:
        return False
    return all(client_rect_below_minimum_size(rect, config) for rect in target.client_rects)


def get_too_small_targets(
    targets: Sequence[TapTarget], config: Optional[AuditConfig] = None
) -> List[TapTarget]:
    config = config or AuditConfig()
    return [target for target in targets if is_too_small(target, config)]


def is_http_or_https_link(href: Optional[str]) -> bool:
    return bool(href) and HTTP_URL_RE.match(href) is not None


def get_overlap_failure_for_client_rect_pair(
    target_rect: Rect, maybe_overlapping_rect: Rect, config: AuditConfig
) -> Optional[ClientRectOverlapFailure]:
    finger_rect = get_rect_at_center(target_rect, config.finger_size_px)
    # Score indicates how much of the finger area overlaps each target when the
    # user taps on the center of target_rect
    tap_target_score = get_rect_overlap_area(finger_rect, target_rect)
    if tap_target_score <= 0:
        return None
    overlapping_score = get_rect_overlap_area(finger_rect, maybe_overlapping_rect)

    overlap_score_ratio = overlapping_score / tap_target_score
    if overlap_score_ratio < config.max_acceptable_overlap_score_ratio:
        # Clearly aimed at target_rect rather than the other rect
        return None

    return ClientRectOverlapFailure(
        overlap_score_ratio=overlap_score_ratio,
        tap_target_score=tap_target_score,
        overlapping_target_score=overlapping_score,
    )


def get_overlap_failure_for_target_pair(
    tap_target: TapTarget,
    maybe_overlapping_target: TapTarget,
    config: Optional[AuditConfig] = None,
    tappable_rects: Optional[Sequence[Rect]] = None,
) -> Optional[TapTargetOverlapFailure]:
    """
    Worst overlap failure of tap_target against maybe_overlapping_target.

    Args:
        tap_target: The too small target the user aims at.
        maybe_overlapping_target: Any other target.
        config: Audit thresholds.
        tappable_rects: Precomputed tappable regions of tap_target.

    Returns:
        The failure with the greatest overlap ratio, or None.
    """
    config = config or AuditConfig()

    if (
        is_http_or_https_link(tap_target.href)
        and tap_target.href == maybe_overlapping_target.href
    ):
        # Same destination, tapping either one does the same thing
        return None

    if tappable_rects is None:
        tappable_rects = get_tappable_rects_from_client_rects(tap_target.client_rects, config)

    if all_rects_contained_within_each_other(
        tappable_rects, maybe_overlapping_target.client_rects
    ):
        # One target nested inside the other is usually intentional, e.g. a
        # delete button inside a list item. Missing some problems here beats
        # reporting false positives.
        return None

    greatest_failure: Optional[TapTargetOverlapFailure] = None
    for target_rect in tappable_rects:
        for maybe_overlapping_rect in maybe_overlapping_target.client_rects:
            failure = get_overlap_failure_for_client_rect_pair(
                target_rect, maybe_overlapping_rect, config
            )
            if failure is None:
                continue
            if (
                greatest_failure is None
                or failure.overlap_score_ratio > greatest_failure.overlap_score_ratio
            ):
                greatest_failure = TapTargetOverlapFailure(
                    overlap_score_ratio=failure.overlap_score_ratio,
                    tap_target_score=failure.tap_target_score,
                    overlapping_target_score=failure.overlapping_target_score,
                    tap_target=tap_target,
                    overlapping_target=maybe_overlapping_target,
                )

    return greatest_failure


def get_all_overlap_failures_for_target(
    tap_target: TapTarget,
    all_tap_targets: Sequence[TapTarget],
    config: Optional[AuditConfig] = None,
) -> List[TapTargetOverlapFailure]:
    config = config or AuditConfig()
    tappable_rects = get_tappable_rects_from_client_rects(tap_target.client_rects, config)

    failures = []
    for maybe_overlapping_target in all_tap_targets:
        if maybe_overlapping_target is tap_target:
            continue

        failure = get_overlap_failure_for_target_pair(
            tap_target, maybe_overlapping_target, config, tappable_rects
        )
        if failure is not None:
            failures.append(failure)

    return failures


def get_all_overlap_failures(
    too_small_targets: Sequence[TapTarget],
    all_targets: Sequence[TapTarget],
    config: Optional[AuditConfig] = None,
) -> List[TapTargetOverlapFailure]:
    config = config or AuditConfig()

    failures: List[TapTargetOverlapFailure] = []
    for target in too_small_targets:
        failures.extend(get_all_overlap_failures_for_target(target, all_targets, config))

    logger.debug(
        f"{len(failures)} overlap failures from {len(too_small_targets)} "
        f"too small targets out of {len(all_targets)}"
    )
    return failures


def _find_symmetric_failure(
    failure: TapTargetOverlapFailure, failures: Sequence[TapTargetOverlapFailure]
) -> Optional[int]:
    for index, candidate in enumerate(failures):
        if (
            candidate.tap_target is failure.overlapping_target
            and candidate.overlapping_target is failure.tap_target
        ):
            return index
    return None


def merge_symmetric_failures(
    overlap_failures: Sequence[TapTargetOverlapFailure],
) -> List[TapTargetOverlapFailure]:
    """Only report one failure if two targets overlap each other."""
    merged = []

    for index, failure in enumerate(overlap_failures):
        symmetric_index = _find_symmetric_failure(failure, overlap_failures)
        if symmetric_index is None:
            merged.append(failure)
            continue

        ratio = failure.overlap_score_ratio
        symmetric_ratio = overlap_failures[symmetric_index].overlap_score_ratio
        # Keep this one if it has the higher ratio, or on a tie if it came
        # first. Otherwise its partner is kept when the loop reaches it.
        if ratio > symmetric_ratio or (ratio == symmetric_ratio and index < symmetric_index):
            merged.append(failure)

    return merged
