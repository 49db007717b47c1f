"""Tap target sizing and overlap audit for touch devices."""

from .audit import TapTargetsAudit, audit_tap_targets
from .schemas import AuditConfig, AuditResult, Rect, TapTarget, TapTargetArtifacts

__all__ = [
    "TapTargetsAudit",
    "audit_tap_targets",
    "AuditConfig",
    "AuditResult",
    "Rect",
    "TapTarget",
    "TapTargetArtifacts",
]
