"""Schemas module for the tap target audit."""

from .config import AuditConfig
from .results import (
    AuditMeta,
    AuditResult,
    ClientRectOverlapFailure,
    TableDetails,
    TableHeading,
    TableNode,
    TableRow,
    TapTargetOverlapFailure,
)
from .targets import Rect, TapTarget, TapTargetArtifacts

__all__ = [
    "AuditConfig",
    "AuditMeta",
    "AuditResult",
    "ClientRectOverlapFailure",
    "TableDetails",
    "TableHeading",
    "TableNode",
    "TableRow",
    "TapTargetOverlapFailure",
    "Rect",
    "TapTarget",
    "TapTargetArtifacts",
]
