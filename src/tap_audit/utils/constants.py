"""Shared constants for the tap target audit."""

# Minimum tap target edge, also the side of the simulated finger contact square
FINGER_SIZE_PX = 48

# Ratio of the finger area tapping on an unintended element
# to the finger area tapping on the intended element
MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO = 0.25

# Rects this thin (or thinner) are never something a user aims at
MIN_TAPPABLE_RECT_PX = 1

# Edges closer than this are treated as lined up when merging client rects
EDGE_ALIGNMENT_TOLERANCE_PX = 2

AUDIT_ID = "tap-targets"

UI_STRINGS = {
    "title": "Tap targets are sized appropriately",
    "failure_title": "Tap targets are not sized appropriately",
    "description": (
        "Interactive elements like buttons and links should be large enough "
        "(48x48px), and have enough space around them, to be easy enough to tap "
        "without overlapping onto other elements. [Learn more]"
        "(https://developers.google.com/web/fundamentals/accessibility/"
        "accessible-styles#multi-device_responsive_design)."
    ),
    "tap_target_header": "Tap Target",
    "size_header": "Size",
    "overlapping_target_header": "Overlapping Target",
    "explanation_viewport_meta_not_optimized": (
        "Tap targets are too small because there's no viewport meta tag "
        "optimized for mobile screens"
    ),
    "display_value": "{percent} appropriately sized tap targets",
}
