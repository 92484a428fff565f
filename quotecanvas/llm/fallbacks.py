"""Hand-authored documents returned when the model is unavailable or its output is unusable."""

from __future__ import annotations

import copy
from typing import Any

_SVG_CARD_FALLBACK: dict[str, Any] = {
    "theme": "geometric",
    "svgStyle": {
        "backgroundColor": "#ffffff",
        "primaryColor": "#4A90E2",
        "secondaryColor": "#F5A623",
        "patterns": [],
    },
    "typography": {
        "fontFamily": "elegant-cn",
        "fontSize": 24,
        "lineHeight": 1.5,
        "textColor": "#333333",
    },
    "explanation": "默认几何风格设计",
}

_CLASSIC_CARD_FALLBACK: dict[str, Any] = {
    "theme": "literary",
    "colorScheme": {
        "primary": "#7A645C",
        "secondary": "#978A85",
        "textColor": "text-gray-700",
    },
    "iconStyle": "minimal",
    "fontSize": "base",
    "mood": "neutral",
    "emphasis": [],
    "fontFamily": "elegant-cn",
}

_CHART_FALLBACK: dict[str, Any] = {
    "chartType": "line",
    "data": {
        "series": [],
        "title": "数据图表",
        "xAxisLabel": "X轴",
        "yAxisLabel": "Y轴",
    },
    "style": {
        "theme": "default",
        "backgroundColor": "#ffffff",
        "primaryColor": "#4A90E2",
        "secondaryColors": ["#F5A623", "#50E3C2", "#FF5A5F"],
        "fontFamily": "sans-serif",
        "fontSize": 14,
        "showLegend": True,
        "showGrid": True,
        "animation": True,
    },
    "insights": ["暂无数据分析"],
}

_FALLBACKS = {
    "card_svg": _SVG_CARD_FALLBACK,
    "card_geometric": _SVG_CARD_FALLBACK,
    "card_classic": _CLASSIC_CARD_FALLBACK,
    "chart": _CHART_FALLBACK,
    "chart_small": _CHART_FALLBACK,
}


def get_fallback(task: str, chart_type: str | None = None) -> dict[str, Any]:
    """Fresh copy of the fallback document for ``task``; chart fallbacks keep the requested type."""
    if task not in _FALLBACKS:
        raise ValueError(f"No fallback document for task: {task}")
    document = copy.deepcopy(_FALLBACKS[task])
    if chart_type and "chartType" in document:
        document["chartType"] = chart_type
    return document
