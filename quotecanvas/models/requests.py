"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from quotecanvas.models.chart import ChartRenderOptions, ChartType


class CardRequest(BaseModel):
    text: str = Field(..., description="Quote text; newlines separate paragraphs")
    author: str | None = Field(default=None, description="Attribution author")
    source: str | None = Field(default=None, description="Attribution source (book, speech, ...)")
    style: dict[str, Any] = Field(
        default_factory=dict,
        description="Card style document (svgStyle/typography or colorScheme shape)",
    )
    fixed_format: bool = Field(default=False, description="Force the serif-cn 22px house typography")
    seed: int | None = Field(default=None, description="Seed for the themed icon pick")


class ChartConfigRequest(BaseModel):
    document: dict[str, Any] = Field(..., description="Chart analysis document")
    options: ChartRenderOptions = Field(default_factory=ChartRenderOptions)


class AnalyzeCardRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Text to style")
    render_mode: str = Field(default="geometric", description="geometric | svg | classic")


class AnalyzeChartRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Text containing the data")
    chart_type: ChartType = Field(default=ChartType.LINE, description="Requested chart type")
    use_small: bool = Field(default=False, description="Use the fast model")
