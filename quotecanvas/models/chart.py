"""Chart documents and the charting configuration built from them."""

from __future__ import annotations

import enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quotecanvas.engine.colors import WHITE, normalize_color
from quotecanvas.utils.math_helpers import to_float


class ChartType(str, enum.Enum):
    LINE = "line"
    BAR = "bar"
    PIE = "pie"
    SCATTER = "scatter"


DEFAULT_PRIMARY = "#4a90e2"
DEFAULT_SECONDARY = ("#f5a623", "#50e3c2", "#ff5a5f")


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _label(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _flag(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


class DataPoint(_Document):
    x: str = ""
    y: float = 0.0

    @field_validator("x", mode="before")
    @classmethod
    def _coerce_x(cls, v: Any) -> str:
        return _label(v)

    @field_validator("y", mode="before")
    @classmethod
    def _coerce_y(cls, v: Any) -> float:
        return to_float(v, 0.0)


class Series(_Document):
    name: str = ""
    data: list[DataPoint] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, v: Any) -> str:
        return _label(v)

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        return [p for p in v if isinstance(p, (dict, DataPoint))]

    @property
    def values(self) -> list[float]:
        return [p.y for p in self.data]


class ChartData(_Document):
    # None means the generator omitted the field entirely
    series: list[Series] | None = None
    title: str | None = None
    x_axis_label: str | None = Field(default=None, alias="xAxisLabel")
    y_axis_label: str | None = Field(default=None, alias="yAxisLabel")

    @field_validator("series", mode="before")
    @classmethod
    def _coerce_series(cls, v: Any) -> list[Any] | None:
        if v is None:
            return None
        if not isinstance(v, list):
            return None
        return [s for s in v if isinstance(s, (dict, Series))]

    @field_validator("title", "x_axis_label", "y_axis_label", mode="before")
    @classmethod
    def _coerce_labels(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None


class ChartStyle(_Document):
    theme: str = "default"
    background_color: str = Field(default=WHITE, alias="backgroundColor")
    primary_color: str = Field(default=DEFAULT_PRIMARY, alias="primaryColor")
    secondary_colors: list[str] = Field(default_factory=lambda: list(DEFAULT_SECONDARY), alias="secondaryColors")
    font_family: str = Field(default="sans-serif", alias="fontFamily")
    font_size: float = Field(default=14.0, alias="fontSize")
    show_legend: bool = Field(default=True, alias="showLegend")
    show_grid: bool = Field(default=True, alias="showGrid")
    animation: bool = True

    @field_validator("theme", mode="before")
    @classmethod
    def _coerce_theme(cls, v: Any) -> str:
        return v.strip() if isinstance(v, str) and v.strip() else "default"

    @field_validator("font_family", mode="before")
    @classmethod
    def _coerce_font_family(cls, v: Any) -> str:
        return v.strip() if isinstance(v, str) and v.strip() else "sans-serif"

    @field_validator("background_color", mode="before")
    @classmethod
    def _coerce_background(cls, v: Any) -> str:
        return normalize_color(v) if isinstance(v, str) and v.strip() else WHITE

    @field_validator("primary_color", mode="before")
    @classmethod
    def _coerce_primary(cls, v: Any) -> str:
        return normalize_color(v) if isinstance(v, str) and v.strip() else DEFAULT_PRIMARY

    @field_validator("secondary_colors", mode="before")
    @classmethod
    def _coerce_secondary(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return list(DEFAULT_SECONDARY)
        return [normalize_color(c) for c in v if isinstance(c, str) and c.strip()]

    @field_validator("font_size", mode="before")
    @classmethod
    def _coerce_font_size(cls, v: Any) -> float:
        size = to_float(v)
        return size if size is not None and size > 0 else 14.0

    @field_validator("show_legend", "show_grid", "animation", mode="before")
    @classmethod
    def _coerce_flags(cls, v: Any) -> bool:
        return _flag(v, True)


class ChartDocument(_Document):
    chart_type: ChartType = Field(default=ChartType.LINE, alias="chartType")
    data: ChartData = Field(default_factory=ChartData)
    style: ChartStyle = Field(default_factory=ChartStyle)
    insights: list[str] = Field(default_factory=list)

    @field_validator("chart_type", mode="before")
    @classmethod
    def _coerce_chart_type(cls, v: Any) -> ChartType:
        if isinstance(v, ChartType):
            return v
        try:
            return ChartType(str(v).strip().lower())
        except ValueError:
            return ChartType.LINE

    @field_validator("data", "style", mode="before")
    @classmethod
    def _coerce_section(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else {}

    @field_validator("insights", mode="before")
    @classmethod
    def _coerce_insights(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [s for s in v if isinstance(s, str) and s]


class ChartRenderOptions(BaseModel):
    """Viewer toggles that are not part of the generated document."""

    start_from_zero: bool = False
    use_fill: bool = True


# ---------------------------------------------------------------------------
# Output configuration
# ---------------------------------------------------------------------------


class LinearGradientFill(BaseModel):
    """Vertical gradient; stops are (offset 0-1, CSS color)."""

    stops: list[tuple[float, str]] = Field(default_factory=list)


class Dataset(BaseModel):
    label: str
    data: list[float] = Field(default_factory=list)
    background_color: str | list[str] | LinearGradientFill = ""
    border_color: str = ""
    border_width: float = 1.5
    fill: bool = False
    y_axis_id: Literal["y", "y1"] = "y"


class AxisTitle(BaseModel):
    display: bool = True
    text: str = ""


class ScaleConfig(BaseModel):
    type: Literal["category", "linear", "logarithmic"] = "linear"
    position: Literal["left", "right", "bottom"] = "left"
    min: float | None = None
    max: float | None = None
    show_grid: bool = True
    title: AxisTitle = Field(default_factory=AxisTitle)


class ChartConfig(BaseModel):
    chart_type: ChartType
    title: str | None = None
    labels: list[str] = Field(default_factory=list)
    datasets: list[Dataset] = Field(default_factory=list)
    scales: dict[str, ScaleConfig] = Field(default_factory=dict)
    show_legend: bool = True
    show_grid: bool = True
    animation: bool = True
    background_color: str = WHITE
    font_family: str = "sans-serif"
    font_size: float = 14.0
    insights: list[str] = Field(default_factory=list)
