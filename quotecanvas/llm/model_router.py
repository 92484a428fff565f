"""Task → model selection. Fast model for card styling, quality model for chart extraction."""

from __future__ import annotations

from quotecanvas.config import settings

_TASK_MODEL_MAP = {
    "card_svg": "fast",
    "card_geometric": "fast",
    "card_classic": "fast",
    "chart": "quality",
    "chart_small": "fast",
}


def get_model_for_task(task: str) -> str:
    tier = _TASK_MODEL_MAP.get(task, "fast")
    if tier == "quality":
        return settings.model_quality
    return settings.model_fast
