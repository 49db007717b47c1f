"""Geometry module for the tap target audit."""

from .rects import (
    all_rects_contained_within_each_other,
    get_largest_rect,
    get_rect_at_center,
    get_rect_overlap_area,
    rect_contains,
)
from .tappable import get_tappable_rects_from_client_rects, merge_touching_client_rects

__all__ = [
    "all_rects_contained_within_each_other",
    "get_largest_rect",
    "get_rect_at_center",
    "get_rect_overlap_area",
    "rect_contains",
    "get_tappable_rects_from_client_rects",
    "merge_touching_client_rects",
]
