"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from quotecanvas.models.chart import ChartConfig
from quotecanvas.models.scene import ClassicCard, Scene


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    pattern_kinds_registered: int = 0
    model_configured: bool = False


class SceneResponse(BaseModel):
    scene: Scene
    svg: str
    processing_time_ms: float = 0.0


class ClassicCardResponse(BaseModel):
    card: ClassicCard
    processing_time_ms: float = 0.0


class ChartConfigResponse(BaseModel):
    config: ChartConfig
    processing_time_ms: float = 0.0


class AnalyzeResponse(BaseModel):
    document: dict[str, Any] = Field(default_factory=dict)
    fallback_used: bool = False
    model: str | None = None
    processing_time_ms: float = 0.0
