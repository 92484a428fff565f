"""Tests for the chart configuration builder."""

import copy

import pytest

from quotecanvas.engine.chart import (
    ChartConfigurationError,
    build_chart_config,
    dedupe_series,
    needs_transpose,
    normalize_chart_data,
)
from quotecanvas.engine.colors import CHART_COLORS
from quotecanvas.llm.fallbacks import get_fallback
from quotecanvas.models.chart import (
    ChartData,
    ChartDocument,
    ChartRenderOptions,
    LinearGradientFill,
    Series,
)
from tests.conftest import CHART_DOCUMENT


def _points(*pairs):
    return [{"x": x, "y": y} for x, y in pairs]


def test_duplicate_series_removed_first_wins():
    series = [
        Series(name="A", data=_points(("x1", 1), ("x2", 2))),
        Series(name="A", data=_points(("x1", 9), ("x2", 9))),
        Series(name="B", data=_points(("x1", 3))),
    ]
    kept = dedupe_series(series)
    assert [s.name for s in kept] == ["A", "B"]
    assert kept[0].values == [1, 2]


def test_same_name_different_length_kept():
    series = [Series(name="A", data=_points(("x1", 1))), Series(name="A", data=_points(("x1", 1), ("x2", 2)))]
    assert len(dedupe_series(series)) == 2


def test_transpose_many_short_series():
    data = ChartData.model_validate({
        "series": [
            {"name": name, "data": _points(("2022", i), ("2023", i * 10))}
            for i, name in enumerate(["北京", "上海", "广州", "深圳"], start=1)
        ],
        "xAxisLabel": "年份",
        "yAxisLabel": "城市",
    })
    result = normalize_chart_data(data)
    assert [s.name for s in result.series] == ["2022", "2023"]
    assert [p.x for p in result.series[0].data] == ["北京", "上海", "广州", "深圳"]
    assert result.series[1].values == [10, 20, 30, 40]
    assert result.x_axis_label == "城市"
    assert result.y_axis_label == "年份"


def test_transpose_pads_missing_points_with_zero():
    data = ChartData.model_validate({
        "series": [
            {"name": "a", "data": _points(("p", 1), ("q", 2))},
            {"name": "b", "data": _points(("p", 3))},
            {"name": "c", "data": _points(("p", 4), ("q", 5))},
            {"name": "d", "data": _points(("p", 6), ("q", 7))},
        ],
    })
    result = normalize_chart_data(data)
    assert result.series[1].values == [2, 0, 5, 7]


def test_no_transpose_for_empty_first_series():
    assert not needs_transpose([Series(name="a"), Series(name="b")])
    assert not needs_transpose([])


def test_missing_series_raises():
    document = ChartDocument.model_validate({"chartType": "bar", "data": {"title": "t"}})
    with pytest.raises(ChartConfigurationError):
        build_chart_config(document)


def test_configuration_error_is_value_error():
    assert issubclass(ChartConfigurationError, ValueError)


def test_fallback_document_builds_empty_config():
    document = ChartDocument.model_validate(get_fallback("chart", "bar"))
    config = build_chart_config(document)
    assert config.chart_type.value == "bar"
    assert config.datasets == []
    assert config.scales == {}
    assert config.title == "数据图表"
    assert config.insights == ["暂无数据分析"]


def test_dual_axis_line_chart():
    config = build_chart_config(ChartDocument.model_validate(CHART_DOCUMENT))
    assert config.labels == ["2021", "2022", "2023"]
    assert [d.y_axis_id for d in config.datasets] == ["y", "y1"]

    y = config.scales["y"]
    assert y.type == "linear"
    assert y.max == 1000
    assert y.min is None
    assert y.title.text == "营收"
    assert not y.show_grid

    y1 = config.scales["y1"]
    assert y1.max == 20
    assert y1.position == "right"
    assert y1.title.text == "利润率"

    assert config.scales["x"].title.text == "年份"


def test_line_datasets_get_gradient_fill():
    config = build_chart_config(ChartDocument.model_validate(CHART_DOCUMENT))
    first = config.datasets[0]
    assert first.border_color == "#f5a623"
    assert first.fill is True
    assert isinstance(first.background_color, LinearGradientFill)
    assert first.background_color.stops == [(0.0, "rgba(245, 166, 35, 0.2)"), (1.0, "rgba(245, 166, 35, 0.0)")]


def test_options_zero_min_and_no_fill():
    options = ChartRenderOptions(start_from_zero=True, use_fill=False)
    config = build_chart_config(ChartDocument.model_validate(CHART_DOCUMENT), options)
    assert config.scales["y"].min == 0
    assert config.scales["y1"].min == 0
    assert not any(d.fill for d in config.datasets)


def test_bar_chart_single_axis_uses_y_label():
    doc = copy.deepcopy(CHART_DOCUMENT)
    doc["chartType"] = "bar"
    config = build_chart_config(ChartDocument.model_validate(doc))
    assert set(config.scales) == {"x", "y"}
    assert config.scales["y"].title.text == "金额"
    assert config.datasets[1].background_color == "#50e3c2"
    assert config.datasets[1].fill is False


def test_color_falls_back_to_primary():
    doc = copy.deepcopy(CHART_DOCUMENT)
    doc["style"]["secondaryColors"] = []
    config = build_chart_config(ChartDocument.model_validate(doc))
    assert all(d.border_color == "#4a90e2" for d in config.datasets)


def test_log_scale_for_wide_primary_range():
    doc = {
        "chartType": "line",
        "data": {"series": [{"name": "用户", "data": _points(("a", 1), ("b", 100), ("c", 20500))}]},
    }
    config = build_chart_config(ChartDocument.model_validate(doc))
    assert config.scales["y"].type == "logarithmic"
    assert config.scales["y"].max == 23000
    assert config.scales["y"].title.text == "用户"


def test_pie_chart():
    doc = {
        "chartType": "pie",
        "data": {"series": [{"name": "份额", "data": _points(*[(str(i), i + 1) for i in range(17)])}]},
    }
    config = build_chart_config(ChartDocument.model_validate(doc))
    assert len(config.datasets) == 1
    dataset = config.datasets[0]
    assert dataset.border_color == "#ffffff"
    assert dataset.background_color[0] == CHART_COLORS[0]
    assert dataset.background_color[15] == CHART_COLORS[0]
    assert config.scales == {}
