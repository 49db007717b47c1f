"""Ranking overlap failures into table rows and aggregating the score."""

from __future__ import annotations

import math
from typing import List, Sequence

from ..geometry.rects import get_largest_rect
from ..schemas.results import (
    TableDetails,
    TableHeading,
    TableNode,
    TableRow,
    TapTargetOverlapFailure,
)
from ..schemas.targets import TapTarget
from ..utils.constants import UI_STRINGS


def target_to_table_node(target: TapTarget) -> TableNode:
    return TableNode(snippet=target.snippet, path=target.path, selector=target.selector)


def _to_table_row(failure: TapTargetOverlapFailure) -> TableRow:
    largest = get_largest_rect(failure.tap_target.client_rects)
    width = math.floor(largest.width)
    height = math.floor(largest.height)
    return TableRow(
        tap_target=target_to_table_node(failure.tap_target),
        overlapping_target=target_to_table_node(failure.overlapping_target),
        tap_target_score=failure.tap_target_score,
        overlapping_target_score=failure.overlapping_target_score,
        overlap_score_ratio=failure.overlap_score_ratio,
        size=f"{width}x{height}",
        width=width,
        height=height,
    )


def get_table_items(overlap_failures: Sequence[TapTargetOverlapFailure]) -> List[TableRow]:
    """Rows ordered by overlap ratio, worst first. Equal ratios keep detection order."""
    items = [_to_table_row(failure) for failure in overlap_failures]
    items.sort(key=lambda item: item.overlap_score_ratio, reverse=True)
    return items


def get_table_headings() -> List[TableHeading]:
    return [
        TableHeading(key="tapTarget", item_type="node", text=UI_STRINGS["tap_target_header"]),
        TableHeading(key="size", item_type="text", text=UI_STRINGS["size_header"]),
        TableHeading(
            key="overlappingTarget",
            item_type="node",
            text=UI_STRINGS["overlapping_target_header"],
        ),
    ]


def make_table_details(headings: List[TableHeading], items: List[TableRow]) -> TableDetails:
    return TableDetails(headings=list(headings), items=list(items))


def get_failing_target_count(overlap_failures: Sequence[TapTargetOverlapFailure]) -> int:
    """Number of distinct targets that fail against at least one neighbor."""
    return len({id(failure.tap_target) for failure in overlap_failures})


def compute_score(target_count: int, failing_target_count: int) -> float:
    if target_count <= 0:
        return 1.0
    passing = target_count - failing_target_count
    return passing / target_count


def format_display_value(score: float) -> str:
    return UI_STRINGS["display_value"].format(percent=f"{score:.0%}")
