"""
Result models for the tap target audit.
Defines overlap failures, table rows and the audit product.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .targets import TapTarget


@dataclass(frozen=True)
class ClientRectOverlapFailure:
    """Overlap of one tappable region of a target with one rect of another."""

    overlap_score_ratio: float
    tap_target_score: float
    overlapping_target_score: float


@dataclass(frozen=True, eq=False)
class TapTargetOverlapFailure:
    """The worst client rect failure found for an ordered target pair."""

    overlap_score_ratio: float
    tap_target_score: float
    overlapping_target_score: float
    tap_target: TapTarget
    overlapping_target: TapTarget


@dataclass(frozen=True)
class TableNode:
    """Presentation metadata of a target, carried through verbatim."""

    snippet: str
    path: str
    selector: str
    type: str = "node"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "snippet": self.snippet,
            "path": self.path,
            "selector": self.selector,
        }


@dataclass(frozen=True)
class TableRow:
    tap_target: TableNode
    overlapping_target: TableNode
    tap_target_score: float
    overlapping_target_score: float
    overlap_score_ratio: float
    size: str
    width: int
    height: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tapTarget": self.tap_target.to_dict(),
            "overlappingTarget": self.overlapping_target.to_dict(),
            "tapTargetScore": self.tap_target_score,
            "overlappingTargetScore": self.overlapping_target_score,
            "overlapScoreRatio": self.overlap_score_ratio,
            "size": self.size,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class TableHeading:
    key: str
    item_type: str
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "itemType": self.item_type, "text": self.text}


@dataclass
class TableDetails:
    headings: List[TableHeading]
    items: List[TableRow] = field(default_factory=list)
    type: str = "table"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "headings": [heading.to_dict() for heading in self.headings],
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class AuditMeta:
    id: str
    title: str
    failure_title: str
    description: str
    required_artifacts: List[str]


@dataclass
class AuditResult:
    """Product of one audit run. Score and details are None when skipped."""

    passed: bool
    score: Optional[float] = None
    details: Optional[TableDetails] = None
    display_value: Optional[str] = None
    explanation: Optional[str] = None
    skipped: bool = False

    @property
    def rows(self) -> List[TableRow]:
        return self.details.items if self.details else []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "score": self.score,
            "details": self.details.to_dict() if self.details else None,
            "display_value": self.display_value,
            "explanation": self.explanation,
            "skipped": self.skipped,
        }
