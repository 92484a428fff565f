"""POST /api/chart/config — chart analysis document → charting configuration."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from quotecanvas.models.chart import ChartDocument
from quotecanvas.models.requests import ChartConfigRequest
from quotecanvas.models.responses import ChartConfigResponse

router = APIRouter(prefix="/chart")
logger = logging.getLogger(__name__)


@router.post("/config", response_model=ChartConfigResponse)
async def chart_config(req: ChartConfigRequest) -> ChartConfigResponse:
    from quotecanvas.engine.chart import ChartConfigurationError, build_chart_config

    start = time.perf_counter()
    document = ChartDocument.model_validate(req.document)
    try:
        config = build_chart_config(document, req.options)
    except ChartConfigurationError as e:
        logger.warning("Rejected chart document: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000
    return ChartConfigResponse(config=config, processing_time_ms=round(elapsed, 1))
