from __future__ import annotations

from abc import ABC, abstractmethod

from ..schemas.results import AuditMeta, AuditResult
from ..schemas.targets import TapTargetArtifacts


class Audit(ABC):
    """
    Every page check must implement this.
    audit() is a pure function of the artifacts: no I/O, no state kept between runs.
    """

    @abstractmethod
    def meta(self) -> AuditMeta:
        raise NotImplementedError

    @abstractmethod
    def audit(self, artifacts: TapTargetArtifacts) -> AuditResult:
        """
        Input: artifacts collected from one rendered page
        Output: ONE AuditResult
        """
        raise NotImplementedError
