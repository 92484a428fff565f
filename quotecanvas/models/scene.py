"""Render-ready card output — the Scene tree and the classic card description."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from quotecanvas.models.style import Typography


class SceneElement(BaseModel):
    tag: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    text: str | None = None
    children: list[SceneElement] = Field(default_factory=list)
    # Semantic role for consumers that restyle layers ("background", "patterns", …)
    role: str = ""


class Scene(BaseModel):
    """Fully resolved description of one quote card."""

    width: float
    height: float
    background_color: str
    primary_color: str
    typography: Typography
    lines: list[str] = Field(default_factory=list)
    line_height: float = 0.0
    text_height: float = 0.0
    icon: str = "Quote"
    patterns_rendered: int = 0
    patterns_skipped: int = 0
    elements: list[SceneElement] = Field(default_factory=list)

    def find(self, role: str) -> SceneElement | None:
        for element in self.elements:
            if element.role == role:
                return element
        return None


class GradientStopModel(BaseModel):
    color: str
    offset: float


class ClassicCard(BaseModel):
    """Gradient quote card driven by the ``colorScheme`` document shape."""

    paragraphs: list[str] = Field(default_factory=list)
    attribution: str = ""
    theme: str = ""
    icon: str = "Quote"
    icon_color: str = "#000000"
    corner_color: str = "#00000010"
    background_css: str = ""
    background_stops: list[GradientStopModel] = Field(default_factory=list)
    font_size: str = "base"
    attribution_font_size: str = "sm"
    font_family: str = "serif-cn"
    mood: str = ""
    emphasis: list[str] = Field(default_factory=list)
