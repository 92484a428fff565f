"""POST /api/analyze/card and /api/analyze/chart — text → model-authored document."""

from __future__ import annotations

import time

from fastapi import APIRouter

from quotecanvas.models.requests import AnalyzeCardRequest, AnalyzeChartRequest
from quotecanvas.models.responses import AnalyzeResponse

router = APIRouter(prefix="/analyze")

_CARD_TASKS = {
    "geometric": "card_geometric",
    "svg": "card_svg",
    "classic": "card_classic",
}


@router.post("/card", response_model=AnalyzeResponse)
async def analyze_card(req: AnalyzeCardRequest) -> AnalyzeResponse:
    from quotecanvas.llm.client import generate_document

    start = time.perf_counter()
    task = _CARD_TASKS.get(req.render_mode.strip().lower(), "card_svg")
    result = await generate_document(task, req.text)
    elapsed = (time.perf_counter() - start) * 1000
    return AnalyzeResponse(
        document=result.document,
        fallback_used=result.fallback_used,
        model=result.model,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/chart", response_model=AnalyzeResponse)
async def analyze_chart(req: AnalyzeChartRequest) -> AnalyzeResponse:
    from quotecanvas.llm.client import generate_document

    start = time.perf_counter()
    task = "chart_small" if req.use_small else "chart"
    result = await generate_document(task, req.text, chart_type=req.chart_type.value)
    elapsed = (time.perf_counter() - start) * 1000
    return AnalyzeResponse(
        document=result.document,
        fallback_used=result.fallback_used,
        model=result.model,
        processing_time_ms=round(elapsed, 1),
    )
