"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from quotecanvas.config import settings
from quotecanvas.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    from quotecanvas.engine.registry import get_registry

    return HealthResponse(
        status="ok",
        version="0.1.0",
        pattern_kinds_registered=get_registry().count,
        model_configured=bool(settings.anthropic_api_key),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from quotecanvas.llm.prompts import get_all_templates

    return get_all_templates()
