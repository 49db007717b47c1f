from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Rect(BaseModel):
    """Axis-aligned rectangle in page pixels."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    x: float = Field(validation_alias=AliasChoices("x", "left"))
    y: float = Field(validation_alias=AliasChoices("y", "top"))
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class TapTarget(BaseModel):
    """
    An interactive element collected from a rendered page.
    Compared by identity: two targets with the same geometry are distinct.
    """

    model_config = ConfigDict(populate_by_name=True)

    client_rects: List[Rect] = Field(
        default_factory=list,
        validation_alias=AliasChoices("client_rects", "clientRects"),
        description="One rect per fragment/line box the element occupies",
    )
    href: Optional[str] = None
    snippet: str = ""
    path: str = ""
    selector: str = ""


class TapTargetArtifacts(BaseModel):
    """Everything the audit consumes from the gatherers."""

    model_config = ConfigDict(populate_by_name=True)

    viewport_is_mobile_optimized: bool = Field(
        validation_alias=AliasChoices(
            "viewport_is_mobile_optimized", "ViewportIsMobileOptimized"
        ),
    )
    tap_targets: List[TapTarget] = Field(
        default_factory=list,
        validation_alias=AliasChoices("tap_targets", "TapTargets"),
    )
