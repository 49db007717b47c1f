"""
tappable.py - Client rects to tappable regions
==============================================
A link that wraps onto two lines reports two client rects, an icon inside
a button can report rects nested in each other. From the user's point of
view these are fewer, distinct areas to aim at. This module reduces the
raw client rects of one target to those areas.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..schemas.config import AuditConfig
from ..schemas.targets import Rect
from .rects import (
    filter_out_rects_contained_by_others,
    filter_out_tiny_rects,
    get_bounding_rect,
    get_rect_center_point,
    rect_contains_point,
    rects_touch_or_overlap,
)


def get_tappable_rects_from_client_rects(
    client_rects: Sequence[Rect], config: Optional[AuditConfig] = None
) -> List[Rect]:
    """Convert client rects to unique tappable areas from a user's perspective."""
    config = config or AuditConfig()

    # 1x1px rects are usually hidden in some obscure way and only exist for
    # e.g. accessibility, so the user would never aim at them
    rects = filter_out_tiny_rects(client_rects, config.min_tappable_rect_px)
    rects = filter_out_rects_contained_by_others(rects)
    return merge_touching_client_rects(rects, config.edge_alignment_tolerance_px)


def _almost_equal(a: float, b: float, tolerance: float) -> bool:
    return abs(a - b) <= tolerance


def _can_merge(rect_a: Rect, rect_b: Rect, tolerance: float) -> bool:
    # AAABBB      AAA
    #      or     AAA
    #             BBBBB
    line_up_horizontally = _almost_equal(rect_a.top, rect_b.top, tolerance) or _almost_equal(
        rect_a.bottom, rect_b.bottom, tolerance
    )
    line_up_vertically = _almost_equal(rect_a.left, rect_b.left, tolerance) or _almost_equal(
        rect_a.right, rect_b.right, tolerance
    )
    return rects_touch_or_overlap(rect_a, rect_b) and (
        line_up_horizontally or line_up_vertically
    )


def _find_merge(rects: List[Rect], tolerance: float) -> Optional[List[Rect]]:
    for i, rect_a in enumerate(rects):
        for j in range(i + 1, len(rects)):
            rect_b = rects[j]
            if not _can_merge(rect_a, rect_b, tolerance):
                continue

            merged = get_bounding_rect([rect_a, rect_b])
            center = get_rect_center_point(merged)
            if not (rect_contains_point(rect_a, center) or rect_contains_point(rect_b, center)):
                # Tapping the middle of the merged shape would hit neither rect
                continue

            remaining = [rect for k, rect in enumerate(rects) if k not in (i, j)]
            remaining.append(merged)
            return remaining
    return None


def merge_touching_client_rects(rects: Sequence[Rect], tolerance: float = 2) -> List[Rect]:
    """
    Merge rects that touch and line up along an edge into their bounding rect.

    Scanning starts over after every merge; client rect lists rarely hold
    more than a handful of entries.
    """
    current = list(rects)
    while True:
        merged = _find_merge(current, tolerance)
        if merged is None:
            return current
        current = merged
