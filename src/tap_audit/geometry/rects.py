"""Rect arithmetic for client rects and simulated finger taps."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..schemas.targets import Rect

Point = Tuple[float, float]


def get_rect_area(rect: Rect) -> float:
    return rect.width * rect.height


def rect_contains(outer: Rect, inner: Rect) -> bool:
    """Check if inner lies within outer on both axes (edges inclusive)."""
    return (
        inner.top >= outer.top
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
        and inner.left >= outer.left
    )


def rect_contains_point(rect: Rect, point: Point) -> bool:
    x, y = point
    return rect.left <= x <= rect.right and rect.top <= y <= rect.bottom


def all_rects_contained_within_each_other(
    rects_a: Sequence[Rect], rects_b: Sequence[Rect]
) -> bool:
    """Check that every rect of one list contains or is contained by every rect of the other."""
    for rect_a in rects_a:
        for rect_b in rects_b:
            if not rect_contains(rect_a, rect_b) and not rect_contains(rect_b, rect_a):
                return False
    return True


def rects_touch_or_overlap(rect_a: Rect, rect_b: Rect) -> bool:
    return (
        rect_a.left <= rect_b.right
        and rect_b.left <= rect_a.right
        and rect_a.top <= rect_b.bottom
        and rect_b.top <= rect_a.bottom
    )


def get_rect_center_point(rect: Rect) -> Point:
    return rect.left + rect.width / 2, rect.top + rect.height / 2


def get_bounding_rect(rects: Sequence[Rect]) -> Rect:
    """Smallest rect enclosing all of the given (non-empty) rects."""
    left = min(rect.left for rect in rects)
    top = min(rect.top for rect in rects)
    right = max(rect.right for rect in rects)
    bottom = max(rect.bottom for rect in rects)
    return Rect(x=left, y=top, width=right - left, height=bottom - top)


def get_rect_overlap_area(rect_a: Rect, rect_b: Rect) -> float:
    """Area shared by two rects, 0 when they are disjoint or only touch."""
    y_overlap = min(rect_a.bottom, rect_b.bottom) - max(rect_a.top, rect_b.top)
    if y_overlap <= 0:
        return 0

    x_overlap = min(rect_a.right, rect_b.right) - max(rect_a.left, rect_b.left)
    if x_overlap <= 0:
        return 0

    return x_overlap * y_overlap


def get_rect_at_center(rect: Rect, size: float) -> Rect:
    """A size x size square centered on rect."""
    center_x, center_y = get_rect_center_point(rect)
    return Rect(x=center_x - size / 2, y=center_y - size / 2, width=size, height=size)


def get_largest_rect(rects: Sequence[Rect]) -> Rect:
    """Rect with the biggest area; the first one wins ties."""
    largest = rects[0]
    for rect in rects:
        if get_rect_area(rect) > get_rect_area(largest):
            largest = rect
    return largest


def filter_out_tiny_rects(rects: Sequence[Rect], min_size: float = 1) -> List[Rect]:
    return [rect for rect in rects if rect.width > min_size and rect.height > min_size]


def filter_out_rects_contained_by_others(rects: Sequence[Rect]) -> List[Rect]:
    """
    Drop every rect that another remaining rect contains.

    Rects are tracked by position so that identical duplicates collapse
    to a single (the last) copy instead of removing each other.
    """
    removed = set()
    for index, rect in enumerate(rects):
        for other_index, possibly_containing in enumerate(rects):
            if other_index == index or other_index in removed:
                continue
            if rect_contains(possibly_containing, rect):
                removed.add(index)
                break

    return [rect for index, rect in enumerate(rects) if index not in removed]
