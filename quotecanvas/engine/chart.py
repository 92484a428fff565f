"""Chart configuration builder — chart document → datasets, scales and axis plan."""

from __future__ import annotations

import logging
import time

from quotecanvas.engine.axes import (
    LOG_SCALE,
    AxisAssignment,
    AxisId,
    assign_axes,
    nice_max,
    primary_values,
    secondary_values,
    should_use_log,
)
from quotecanvas.engine.colors import CHART_COLORS, WHITE, rgba
from quotecanvas.engine.config import AxisPlannerConfig
from quotecanvas.models.chart import (
    AxisTitle,
    ChartConfig,
    ChartData,
    ChartDocument,
    ChartRenderOptions,
    ChartStyle,
    ChartType,
    DataPoint,
    Dataset,
    LinearGradientFill,
    ScaleConfig,
    Series,
)

logger = logging.getLogger(__name__)

PRIMARY_AXIS_FALLBACK_TITLE = "Y轴"
SECONDARY_AXIS_FALLBACK_TITLE = "Y1轴"


class ChartConfigurationError(ValueError):
    """The chart document cannot be turned into a configuration."""


def dedupe_series(series: list[Series]) -> list[Series]:
    """Drop series whose name and point count match an earlier one."""
    seen: set[tuple[str, int]] = set()
    kept: list[Series] = []
    for s in series:
        key = (s.name, len(s.data))
        if key in seen:
            logger.debug("Dropping duplicate series %r (%d points)", s.name, len(s.data))
            continue
        seen.add(key)
        kept.append(s)
    return kept


def needs_transpose(series: list[Series]) -> bool:
    if not series or not series[0].data:
        return False
    return len(series) >= 2 * len(series[0].data)


def transpose_series(series: list[Series]) -> list[Series]:
    """One series per x position of the first series; points keyed by the old series names."""
    transposed = []
    for index, point in enumerate(series[0].data):
        transposed.append(
            Series(
                name=point.x,
                data=[
                    DataPoint(x=s.name, y=s.data[index].y if index < len(s.data) else 0.0)
                    for s in series
                ],
            )
        )
    return transposed


def normalize_chart_data(data: ChartData) -> ChartData:
    """De-duplicate and, for many-short-series data, transpose (swapping axis labels)."""
    if data.series is None:
        raise ChartConfigurationError("Chart document has no data.series")

    series = dedupe_series(data.series)
    if not needs_transpose(series):
        return data.model_copy(update={"series": series})

    logger.info("Transposing %d series of %d points", len(series), len(series[0].data))
    return data.model_copy(
        update={
            "series": transpose_series(series),
            "x_axis_label": data.y_axis_label,
            "y_axis_label": data.x_axis_label,
        }
    )


def build_chart_config(
    document: ChartDocument,
    options: ChartRenderOptions | None = None,
    config: AxisPlannerConfig | None = None,
) -> ChartConfig:
    options = options or ChartRenderOptions()
    config = config or AxisPlannerConfig()
    start = time.perf_counter()

    data = normalize_chart_data(document.data)
    series = data.series or []
    style = document.style
    chart_type = document.chart_type

    result = ChartConfig(
        chart_type=chart_type,
        title=data.title,
        labels=[p.x for p in series[0].data] if series else [],
        show_legend=style.show_legend,
        show_grid=style.show_grid,
        animation=style.animation,
        background_color=style.background_color,
        font_family=style.font_family,
        font_size=style.font_size,
        insights=list(document.insights),
    )
    if not series:
        logger.info("Chart config built with no series")
        return result

    if chart_type is ChartType.PIE:
        result.datasets = [_pie_dataset(series[0])]
    else:
        assignment = assign_axes(series, chart_type, config)
        result.datasets = [
            _series_dataset(s, i, style, chart_type, options, assignment.axes[i])
            for i, s in enumerate(series)
        ]
        result.scales = _scales(series, data, style, assignment, options, config)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Chart config built: %s, %d datasets, scales=%s in %.1fms",
        chart_type.value,
        len(result.datasets),
        ",".join(result.scales) or "none",
        elapsed,
    )
    return result


def _pie_dataset(series: Series) -> Dataset:
    return Dataset(
        label=series.name,
        data=series.values,
        background_color=[CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(series.data))],
        border_color=WHITE,
        border_width=2,
    )


def _series_dataset(
    series: Series,
    index: int,
    style: ChartStyle,
    chart_type: ChartType,
    options: ChartRenderOptions,
    axis: AxisId,
) -> Dataset:
    color = style.secondary_colors[index] if index < len(style.secondary_colors) else style.primary_color
    is_line = chart_type is ChartType.LINE
    background: str | LinearGradientFill = color
    if is_line:
        background = LinearGradientFill(stops=[(0.0, rgba(color, 0.2)), (1.0, rgba(color, 0.0))])
    return Dataset(
        label=series.name,
        data=series.values,
        background_color=background,
        border_color=color,
        fill=is_line and options.use_fill,
        y_axis_id=axis.value,
    )


def _scales(
    series: list[Series],
    data: ChartData,
    style: ChartStyle,
    assignment: AxisAssignment,
    options: ChartRenderOptions,
    config: AxisPlannerConfig,
) -> dict[str, ScaleConfig]:
    zero_min = 0.0 if options.start_from_zero else None
    secondary_max = nice_max(secondary_values(series, assignment), config)
    has_secondary_scale = secondary_max > 0

    if assignment.has_secondary:
        primary_names = [series[i].name for i in assignment.indices(AxisId.PRIMARY)]
        y_title = primary_names[0] if primary_names and primary_names[0] else PRIMARY_AXIS_FALLBACK_TITLE
    else:
        y_title = data.y_axis_label or series[0].name

    scales = {
        "x": ScaleConfig(
            type="category",
            position="bottom",
            show_grid=style.show_grid,
            title=AxisTitle(text=data.x_axis_label or ""),
        ),
        "y": ScaleConfig(
            type=LOG_SCALE if should_use_log(series, assignment, config) else "linear",
            min=zero_min,
            max=nice_max(primary_values(series, assignment), config),
            show_grid=style.show_grid,
            title=AxisTitle(text=y_title),
        ),
    }
    if has_secondary_scale:
        secondary = series[assignment.secondary_index]
        scales["y1"] = ScaleConfig(
            type="linear",
            position="right",
            min=zero_min,
            max=secondary_max,
            show_grid=False,
            title=AxisTitle(text=secondary.name or SECONDARY_AXIS_FALLBACK_TITLE),
        )
    return scales
