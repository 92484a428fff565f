"""POST /api/card/scene and /api/card/classic — card documents → render-ready output."""

from __future__ import annotations

import random
import time

from fastapi import APIRouter

from quotecanvas.models.requests import CardRequest
from quotecanvas.models.responses import ClassicCardResponse, SceneResponse
from quotecanvas.models.style import CardStyleDocument

router = APIRouter(prefix="/card")


@router.post("/scene", response_model=SceneResponse)
async def card_scene(req: CardRequest) -> SceneResponse:
    from quotecanvas.engine.scene import assemble_from_document
    from quotecanvas.svg.serializer import serialize_svg

    start = time.perf_counter()
    document = CardStyleDocument.model_validate(req.style)
    scene = assemble_from_document(
        req.text,
        req.author,
        req.source,
        document,
        fixed_format=req.fixed_format,
        rng=random.Random(req.seed),
    )
    svg = serialize_svg(scene, title=document.explanation or "")
    elapsed = (time.perf_counter() - start) * 1000
    return SceneResponse(scene=scene, svg=svg, processing_time_ms=round(elapsed, 1))


@router.post("/classic", response_model=ClassicCardResponse)
async def card_classic(req: CardRequest) -> ClassicCardResponse:
    from quotecanvas.engine.classic import build_classic_card

    start = time.perf_counter()
    document = CardStyleDocument.model_validate(req.style)
    card = build_classic_card(req.text, req.author, req.source, document, rng=random.Random(req.seed))
    elapsed = (time.perf_counter() - start) * 1000
    return ClassicCardResponse(card=card, processing_time_ms=round(elapsed, 1))
