"""Write SVG markup from an assembled card scene."""

from __future__ import annotations

import html
from typing import Any

from quotecanvas.models.scene import Scene, SceneElement
from quotecanvas.utils.math_helpers import fmt_number


def _attr_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return fmt_number(float(value))
    return str(value)


def _text(value: str) -> str:
    return html.escape(value, quote=False)


def _attr_string(attributes: dict[str, Any]) -> str:
    return " ".join(f'{k}="{html.escape(_attr_value(v))}"' for k, v in attributes.items() if v is not None)


def _serialize_element(element: SceneElement, depth: int, lines: list[str]) -> None:
    indent = "  " * depth
    attrs = _attr_string(element.attributes)
    opening = f"{indent}<{element.tag} {attrs}" if attrs else f"{indent}<{element.tag}"

    if element.text is None and not element.children:
        lines.append(f"{opening} />")
        return
    if not element.children:
        lines.append(f"{opening}>{_text(element.text or '')}</{element.tag}>")
        return

    lines.append(f"{opening}>")
    if element.text:
        lines.append(f"{indent}  {_text(element.text)}")
    for child in element.children:
        _serialize_element(child, depth + 1, lines)
    lines.append(f"{indent}</{element.tag}>")


def serialize_svg(
    scene: Scene,
    title: str = "",
    description: str = "",
    include_declaration: bool = True,
) -> str:
    """Generate standalone SVG markup for ``scene``."""
    w, h = fmt_number(scene.width), fmt_number(scene.height)
    lines = []
    if include_declaration:
        lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        f'<svg viewBox="0 0 {w} {h}" width="{w}" height="{h}" xmlns="http://www.w3.org/2000/svg" role="img">'
    )

    if title:
        lines.append(f"  <title>{_text(title)}</title>")
    if description:
        lines.append(f"  <desc>{_text(description)}</desc>")

    for element in scene.elements:
        _serialize_element(element, 1, lines)

    lines.append("</svg>")
    return "\n".join(lines)
