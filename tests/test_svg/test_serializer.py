"""Tests for scene → SVG markup."""

import random
import xml.etree.ElementTree as ET

from quotecanvas.engine.scene import assemble_from_document, assemble_scene
from quotecanvas.models.scene import Scene, SceneElement
from quotecanvas.models.style import CardStyleDocument, SvgStyle, Typography
from quotecanvas.svg.serializer import serialize_svg
from tests.conftest import GEOMETRIC_DOCUMENT, QUOTE_TEXT

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_serialized_scene_is_well_formed():
    doc = CardStyleDocument.model_validate(GEOMETRIC_DOCUMENT)
    scene = assemble_from_document(QUOTE_TEXT, "老子", "道德经", doc, rng=random.Random(1))
    svg = serialize_svg(scene, title=doc.explanation or "")
    root = ET.fromstring(svg.split("\n", 1)[1])
    assert root.tag == f"{SVG_NS}svg"
    assert root.attrib["viewBox"] == "0 0 672 300"
    assert root.find(f"{SVG_NS}title").text == "圆与波浪呼应文本的流动感"
    texts = [t.text for t in root.iter(f"{SVG_NS}text")]
    assert QUOTE_TEXT in texts
    assert "—— 老子《道德经》" in texts


def test_text_and_attributes_escaped():
    scene = assemble_scene('a < b & "c"', "x&y", None, SvgStyle(), Typography(), rng=random.Random(1))
    svg = serialize_svg(scene, include_declaration=False)
    assert "a &lt; b &amp; \"c\"" in svg
    root = ET.fromstring(svg)
    assert any(t.text == "—— x&y" for t in root.iter(f"{SVG_NS}text"))


def test_numbers_formatted_compactly():
    scene = Scene(
        width=100,
        height=50.5,
        background_color="#ffffff",
        primary_color="#000000",
        typography=Typography(),
        elements=[SceneElement(tag="circle", attributes={"cx": 10.0, "cy": 2.25, "r": 1 / 3, "skip": None})],
    )
    svg = serialize_svg(scene, include_declaration=False)
    assert '<circle cx="10" cy="2.25" r="0.333" />' in svg
    assert 'viewBox="0 0 100 50.5"' in svg


def test_declaration_optional():
    scene = assemble_scene(QUOTE_TEXT, None, None, SvgStyle(), Typography(), rng=random.Random(1))
    assert serialize_svg(scene).startswith("<?xml")
    assert serialize_svg(scene, include_declaration=False).startswith("<svg")
