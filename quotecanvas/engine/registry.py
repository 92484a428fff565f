"""Pattern handler registry — each pattern kind registers its repair and render steps.

Usage:
    @repairer(PatternKind.RECT)
    def repair_rect(pattern: Pattern, attrs: dict[str, Any]) -> None:
        attrs.setdefault("width", 50)

    @renderer(PatternKind.RECT, tag="rect")
    def render_rect(p: RenderablePattern) -> dict[str, Any]:
        return {"x": p.x, "y": p.y, "width": p.attributes["width"], ...}

Adding a pattern kind = one enum member + one repairer + one renderer.
``check_complete()`` fails loudly if any kind is missing either step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from quotecanvas.models.style import Pattern, PatternKind, RenderablePattern

logger = logging.getLogger(__name__)

RepairFn = Callable[[Pattern, dict[str, Any]], None]
RenderFn = Callable[[RenderablePattern], dict[str, Any]]


@dataclass
class PatternHandler:
    kind: PatternKind
    repair: RepairFn | None = None
    render: RenderFn | None = None
    tag: str = ""
    # Kinds drawn as open strokes get fill="none" by default
    stroke_only: bool = False


class PatternRegistry:
    """Registry of per-kind handlers."""

    def __init__(self) -> None:
        self._handlers: dict[PatternKind, PatternHandler] = {}

    def _slot(self, kind: PatternKind) -> PatternHandler:
        handler = self._handlers.get(kind)
        if handler is None:
            handler = PatternHandler(kind=kind)
            self._handlers[kind] = handler
        return handler

    def register_repair(self, kind: PatternKind, fn: RepairFn) -> None:
        slot = self._slot(kind)
        if slot.repair is not None:
            raise ValueError(f"Duplicate repairer for pattern kind: {kind.value}")
        slot.repair = fn
        logger.debug("Registered repairer for %s", kind.value)

    def register_render(self, kind: PatternKind, fn: RenderFn, tag: str, stroke_only: bool) -> None:
        slot = self._slot(kind)
        if slot.render is not None:
            raise ValueError(f"Duplicate renderer for pattern kind: {kind.value}")
        slot.render = fn
        slot.tag = tag
        slot.stroke_only = stroke_only
        logger.debug("Registered renderer for %s as <%s>", kind.value, tag)

    def get(self, kind: PatternKind) -> PatternHandler:
        return self._handlers[kind]

    def missing(self) -> set[PatternKind]:
        """Kinds without both a repairer and a renderer."""
        return {
            kind
            for kind in PatternKind
            if kind not in self._handlers
            or self._handlers[kind].repair is None
            or self._handlers[kind].render is None
        }

    def check_complete(self) -> None:
        missing = self.missing()
        if missing:
            names = ", ".join(sorted(k.value for k in missing))
            raise ValueError(f"Pattern kinds without handlers: {names}")

    @property
    def count(self) -> int:
        return len(self._handlers)


# Module-level singleton
_registry = PatternRegistry()


def get_registry() -> PatternRegistry:
    return _registry


def repairer(kind: PatternKind):
    """Decorator to register the kind-specific repair step."""

    def decorator(fn: RepairFn) -> RepairFn:
        _registry.register_repair(kind, fn)
        return fn

    return decorator


def renderer(kind: PatternKind, *, tag: str, stroke_only: bool = False):
    """Decorator to register the kind-specific render step."""

    def decorator(fn: RenderFn) -> RenderFn:
        _registry.register_render(kind, fn, tag, stroke_only)
        return fn

    return decorator
