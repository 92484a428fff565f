"""Shared test fixtures."""

from __future__ import annotations

import random

import pytest

# Model documents as they come back from the generator

WHITE_ON_WHITE_DOCUMENT = {
    "colorScheme": {"primary": "#ffffff"},
    "typography": {"textColor": "#ffffff"},
}

GEOMETRIC_DOCUMENT = {
    "theme": "geometric",
    "svgStyle": {
        "backgroundColor": "#FDF6E3",
        "primaryColor": "#264653",
        "secondaryColor": "#E76F51",
        "patterns": [
            {"type": "circle", "x": 500, "y": 80, "attributes": {"fill": "#E76F51", "r": 60, "opacity": 0.6}},
            {"type": "rect", "x": 40, "y": 200, "attributes": {"width": 120, "fill": "#ffffff"}},
            {"type": "spiral", "x": 560, "y": 240, "attributes": {"turns": 2, "spacing": 4}},
            {"type": "wave", "x": 0, "y": 260, "attributes": {"amplitude": 8, "frequency": 0.05, "wavewidth": 672}},
            {"type": "hexagon", "x": 10, "y": 10, "attributes": {}},
            {"type": "arc", "x": 100, "y": 100, "attributes": {"rx": 50, "ry": 50, "endx": 200,
                                                              "endy": 100, "largearc": True, "sweep": False}},
        ],
    },
    "typography": {"fontFamily": "kai-cn", "fontSize": 20, "lineHeight": 2.0, "textColor": "#1d3557"},
    "explanation": "圆与波浪呼应文本的流动感",
}

CLASSIC_DOCUMENT = {
    "theme": "poetic",
    "colorScheme": {"primary": "#E8D5B7", "secondary": "#B8A07E", "textColor": "#4A3F35"},
    "iconStyle": "minimal",
    "fontSize": "xl",
    "mood": "serene",
    "emphasis": ["明月"],
    "fontFamily": "kai-cn",
}

CHART_DOCUMENT = {
    "chartType": "line",
    "data": {
        "series": [
            {"name": "营收", "data": [{"x": "2021", "y": 120}, {"x": "2022", "y": 480}, {"x": "2023", "y": 905}]},
            {"name": "利润率", "data": [{"x": "2021", "y": 8}, {"x": "2022", "y": 12}, {"x": "2023", "y": 15}]},
        ],
        "title": "年度营收",
        "xAxisLabel": "年份",
        "yAxisLabel": "金额",
    },
    "style": {
        "theme": "default",
        "backgroundColor": "#ffffff",
        "primaryColor": "#4A90E2",
        "secondaryColors": ["#F5A623", "#50E3C2"],
        "fontFamily": "sans-serif",
        "fontSize": 14,
        "showLegend": True,
        "showGrid": False,
        "animation": True,
    },
    "insights": ["营收三年增长超过七倍"],
}

QUOTE_TEXT = "道可道，非常道"

LONG_QUOTE = "天下皆知美之为美，斯恶已。皆知善之为善，斯不善已。\n故有无相生，难易相成，长短相形，高下相倾，音声相和，前后相随。"


@pytest.fixture
def rng() -> random.Random:
    return random.Random(7)


@pytest.fixture
def chart_document() -> dict:
    return CHART_DOCUMENT
