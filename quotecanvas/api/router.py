"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from quotecanvas.api import analyze, card, chart, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(card.router)
api_router.include_router(chart.router)
api_router.include_router(analyze.router)
