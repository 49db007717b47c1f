import pytest

from tap_audit.audit.report import (
    compute_score,
    format_display_value,
    get_failing_target_count,
    get_table_headings,
    get_table_items,
    make_table_details,
    target_to_table_node,
)
from tap_audit.schemas.results import TapTargetOverlapFailure
from tap_audit.schemas.targets import Rect, TapTarget


def _target(snippet, *rects):
    return TapTarget(
        client_rects=[Rect(x=x, y=y, width=w, height=h) for x, y, w, h in rects],
        snippet=snippet,
        path=f"1,HTML,1,BODY,{snippet}",
        selector=f"a.{snippet}",
    )


def _failure(tap_target, overlapping_target, ratio):
    return TapTargetOverlapFailure(
        overlap_score_ratio=ratio,
        tap_target_score=400,
        overlapping_target_score=400 * ratio,
        tap_target=tap_target,
        overlapping_target=overlapping_target,
    )


def test_table_items_sorted_by_ratio_descending_and_stable():
    a = _target("a", (0, 0, 20, 20))
    b = _target("b", (15, 15, 20, 20))
    c = _target("c", (200, 0, 20, 20))
    d = _target("d", (225, 0, 20, 20))
    failures = [_failure(a, b, 0.3), _failure(c, d, 0.9), _failure(b, c, 0.3), _failure(d, a, 0.5)]

    items = get_table_items(failures)

    assert [item.overlap_score_ratio for item in items] == [0.9, 0.5, 0.3, 0.3]
    assert [item.tap_target.snippet for item in items] == ["c", "d", "a", "b"]


def test_table_item_carries_metadata_and_floored_size():
    subject = _target("<a>tiny</a>", (0, 0, 10.2, 10.9), (0, 20, 20.7, 10.2))
    neighbor = _target("<a>next</a>", (0, 10, 30, 30))

    [item] = get_table_items([_failure(subject, neighbor, 0.75)])

    assert item.size == "20x10"
    assert (item.width, item.height) == (20, 10)
    assert item.tap_target.to_dict() == {
        "type": "node",
        "snippet": "<a>tiny</a>",
        "path": "1,HTML,1,BODY,<a>tiny</a>",
        "selector": "a.<a>tiny</a>",
    }
    assert item.overlapping_target.snippet == "<a>next</a>"
    assert item.tap_target_score == 400
    assert item.overlapping_target_score == 300
    assert item.to_dict()["overlapScoreRatio"] == 0.75


def test_target_to_table_node_is_verbatim():
    target = TapTarget(client_rects=[], snippet="  <button>", path="p", selector="")
    node = target_to_table_node(target)
    assert (node.type, node.snippet, node.path, node.selector) == ("node", "  <button>", "p", "")


def test_failing_target_count_counts_subjects_once_by_identity():
    a = _target("same", (0, 0, 20, 20))
    twin = _target("same", (0, 0, 20, 20))
    other = _target("other", (15, 15, 20, 20))
    failures = [_failure(a, other, 0.5), _failure(a, twin, 0.6), _failure(twin, other, 0.4)]
    assert get_failing_target_count(failures) == 2
    assert get_failing_target_count([]) == 0


@pytest.mark.parametrize(
    "target_count, failing_count, expected",
    [(0, 0, 1.0), (4, 0, 1.0), (4, 1, 0.75), (4, 4, 0.0), (3, 1, 2 / 3)],
)
def test_compute_score(target_count, failing_count, expected):
    score = compute_score(target_count, failing_count)
    assert score == pytest.approx(expected)
    assert 0 <= score <= 1


def test_format_display_value():
    assert format_display_value(0.75) == "75% appropriately sized tap targets"
    assert format_display_value(1.0) == "100% appropriately sized tap targets"
    assert format_display_value(0.0) == "0% appropriately sized tap targets"


def test_table_details_headings():
    details = make_table_details(get_table_headings(), [])
    assert details.to_dict() == {
        "type": "table",
        "headings": [
            {"key": "tapTarget", "itemType": "node", "text": "Tap Target"},
            {"key": "size", "itemType": "text", "text": "Size"},
            {"key": "overlappingTarget", "itemType": "node", "text": "Overlapping Target"},
        ],
        "items": [],
    }
