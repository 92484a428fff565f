"""LangChain ChatAnthropic wrapper — one call per request, JSON document out, fallback on failure."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from quotecanvas.config import settings
from quotecanvas.llm.fallbacks import get_fallback
from quotecanvas.llm.model_router import get_model_for_task
from quotecanvas.llm.prompts import get_prompt_template, get_system_prompt

logger = logging.getLogger(__name__)


@dataclass
class ModelResult:
    document: dict[str, Any]
    fallback_used: bool = False
    model: str | None = None
    error: str | None = None


def extract_json(text: str) -> dict[str, Any]:
    """Parse the JSON object in model output, stripping markdown fences and surrounding text."""
    cleaned = re.sub(r"^```(?:json)?\s*\n?", "", text.strip())
    cleaned = re.sub(r"\n?```\s*$", "", cleaned)
    cleaned = cleaned.strip()

    json_match = re.search(r"\{[\s\S]*\}", cleaned)
    if json_match:
        cleaned = json_match.group(0)

    data = json.loads(cleaned)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _template_task(task: str) -> str:
    return "chart" if task.startswith("chart") else task


async def generate_document(task: str, text: str, chart_type: str | None = None) -> ModelResult:
    """Ask the model for a style/chart document. Never raises; failures return the fallback."""
    if not settings.anthropic_api_key:
        logger.warning("Model not configured (ANTHROPIC_API_KEY unset); using %s fallback", task)
        return ModelResult(
            document=get_fallback(task, chart_type),
            fallback_used=True,
            error="model not configured",
        )

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    model_id = get_model_for_task(task)
    template_task = _template_task(task)
    prompt = get_prompt_template(template_task).format(text=text, chart_type=chart_type or "line")
    messages = [
        SystemMessage(content=get_system_prompt(template_task)),
        HumanMessage(content=prompt),
    ]

    try:
        llm = ChatAnthropic(
            model=model_id,
            api_key=settings.anthropic_api_key,
            max_tokens=settings.max_tokens,
            temperature=settings.card_temperature if task.startswith("card") else 0.0,
        )
        response = await llm.ainvoke(messages)
        document = extract_json(str(response.content))
    except Exception as e:
        logger.warning("Model call for %s failed (%s); using fallback", task, e)
        return ModelResult(
            document=get_fallback(task, chart_type),
            fallback_used=True,
            model=model_id,
            error=str(e),
        )

    logger.info("Model %s returned %s document (%d keys)", model_id, task, len(document))
    return ModelResult(document=document, model=model_id)
