"""Thin helpers over ElementTree for building the SVG scene graph."""

import xml.etree.ElementTree as ET
from typing import Any

from profile3d.render.animation import AnimationSpec

SVG_NS = "http://www.w3.org/2000/svg"


def node(parent: ET.Element, tag: str, attrs: dict[str, Any] | None = None, text: str | None = None) -> ET.Element:
    """Append a child element; attribute values are stringified in insertion order."""
    child = ET.SubElement(parent, tag, {k: str(v) for k, v in (attrs or {}).items()})
    if text is not None:
        child.text = text
    return child


def animate(
    parent: ET.Element,
    attribute: str,
    spec: AnimationSpec,
    tag: str = "animate",
    extra: dict[str, Any] | None = None,
) -> ET.Element:
    """Attach an ``<animate>`` (or ``<animateTransform>``) built from ``spec``."""
    attrs: dict[str, Any] = {"attributeName": attribute}
    attrs.update(extra or {})
    attrs["values"] = spec.values
    attrs["dur"] = spec.duration
    if spec.begin is not None:
        attrs["begin"] = spec.begin
    attrs["repeatCount"] = spec.repeat_count
    return node(parent, tag, attrs)


def animate_translate(parent: ET.Element, spec: AnimationSpec) -> ET.Element:
    return animate(parent, "transform", spec, tag="animateTransform", extra={"type": "translate"})


def serialize(root: ET.Element) -> str:
    return ET.tostring(root, encoding="unicode")
