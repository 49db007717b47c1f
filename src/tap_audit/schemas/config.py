"""
Audit configuration for the tap target audit.
Holds the thresholds the overlap engine closes over.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from ..utils.constants import (
    EDGE_ALIGNMENT_TOLERANCE_PX,
    FINGER_SIZE_PX,
    MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO,
    MIN_TAPPABLE_RECT_PX,
)


@dataclass(frozen=True)
class AuditConfig:
    """Thresholds for one audit run."""

    finger_size_px: float = FINGER_SIZE_PX
    max_acceptable_overlap_score_ratio: float = MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO
    min_tappable_rect_px: float = MIN_TAPPABLE_RECT_PX
    edge_alignment_tolerance_px: float = EDGE_ALIGNMENT_TOLERANCE_PX

    def __post_init__(self):
        if self.finger_size_px <= 0:
            raise ValueError("finger_size_px must be positive")
        if not 0 < self.max_acceptable_overlap_score_ratio <= 1:
            raise ValueError("max_acceptable_overlap_score_ratio must be in (0, 1]")
        if self.min_tappable_rect_px < 0:
            raise ValueError("min_tappable_rect_px cannot be negative")
        if self.edge_alignment_tolerance_px < 0:
            raise ValueError("edge_alignment_tolerance_px cannot be negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
