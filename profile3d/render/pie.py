"""Donut chart of contributions per language, with legend."""

import logging
import math
import xml.etree.ElementTree as ET

from profile3d.config import ColorSettings, LayoutConfig
from profile3d.models import LangInfo, UserInfo
from profile3d.render import animation
from profile3d.render.numbers import to_fixed
from profile3d.render.scene import animate, node

logger = logging.getLogger(__name__)

OTHER_NAME = "other"
OTHER_COLOR = "#444444"
MAX_LANGUAGES = 5
LEGEND_ROWS = 8
GLOW_FILTER_ID = "pie-glow"

_TAU = 2 * math.pi


def pie_languages(user_info: UserInfo, pie_colors: list[str] | None = None) -> list[LangInfo]:
    """Top languages plus an ``other`` slice for the remaining commit contributions."""
    languages = [lang.model_copy() for lang in user_info.contributes_language[:MAX_LANGUAGES]]
    other = user_info.total_commit_contributions - sum(lang.contributions for lang in languages)
    if other > 0:
        languages.append(LangInfo(language=OTHER_NAME, color=OTHER_COLOR, contributions=other))
    for lang, color in zip(languages, pie_colors or []):
        lang.color = color
    return languages


def pie_angles(values: list[int]) -> list[tuple[float, float]]:
    """(start, end) angles in radians, clockwise from 12 o'clock, in input order."""
    total = sum(values)
    angles: list[tuple[float, float]] = []
    start = 0.0
    for value in values:
        end = start + (_TAU * value / total if total else 0.0)
        angles.append((start, end))
        start = end
    return angles


def _polar(radius: float, angle: float) -> str:
    return f"{to_fixed(radius * math.sin(angle))},{to_fixed(-radius * math.cos(angle))}"


def arc_path(start: float, end: float, inner: float, outer: float) -> str:
    """SVG path of an annular sector."""
    sweep = end - start
    if sweep >= _TAU - 1e-9:
        o, i = to_fixed(outer), to_fixed(inner)
        return (
            f"M0,-{o}A{o},{o},0,1,1,0,{o}A{o},{o},0,1,1,0,-{o}"
            f"M0,-{i}A{i},{i},0,1,0,0,{i}A{i},{i},0,1,0,0,-{i}Z"
        )
    large = 1 if sweep > math.pi else 0
    return (
        f"M{_polar(outer, start)}"
        f"A{to_fixed(outer)},{to_fixed(outer)},0,{large},1,{_polar(outer, end)}"
        f"L{_polar(inner, end)}"
        f"A{to_fixed(inner)},{to_fixed(inner)},0,{large},0,{_polar(inner, start)}Z"
    )


def _add_glow_filter(svg: ET.Element, layout: LayoutConfig) -> None:
    defs = node(svg, "defs")
    glow = node(defs, "filter", {"id": GLOW_FILTER_ID, "x": "-50%", "y": "-50%", "width": "200%", "height": "200%"})
    blur = node(glow, "feGaussianBlur", {"in": "SourceAlpha", "stdDeviation": "0", "result": "blur"})
    animate(blur, "stdDeviation", animation.breathing_blur(layout))
    node(glow, "feOffset", {"dx": "0", "dy": "0", "result": "offsetBlur"})
    merge = node(glow, "feMerge")
    node(merge, "feMergeNode", {"in": "offsetBlur"})
    node(merge, "feMergeNode", {"in": "SourceGraphic"})


def create_pie_language(
    svg: ET.Element,
    user_info: UserInfo,
    x: float,
    y: float,
    width: float,
    height: float,
    settings: ColorSettings,
    layout: LayoutConfig,
    force_animation: bool = False,
) -> ET.Element | None:
    if user_info.total_contributions == 0:
        return None

    languages = pie_languages(user_info, settings.pie_colors)
    if not languages:
        return None
    is_animate = settings.growing_animation or force_animation

    radius = height / 2
    margin = radius / 10
    offset = (LEGEND_ROWS - len(languages)) / 2 + 0.5
    font_size = height / LEGEND_ROWS / 1.5
    row_height = height / LEGEND_ROWS

    group = node(svg, "g", {"transform": f"translate({to_fixed(x)}, {to_fixed(y)})"})
    legend = node(group, "g", {"transform": f"translate({to_fixed(radius * 2.1)}, 0)"})

    for index, lang in enumerate(languages):
        marker = node(legend, "rect", {
            "x": 0,
            "y": to_fixed((index + offset) * row_height - font_size / 2),
            "width": to_fixed(font_size),
            "height": to_fixed(font_size),
            "fill": lang.color,
            "class": "stroke-bg",
            "stroke-width": "1px",
        })
        label = node(legend, "text", {
            "dominant-baseline": "middle",
            "x": to_fixed(font_size * 1.2),
            "y": to_fixed((index + offset) * row_height),
            "class": "fill-fg",
            "font-size": f"{to_fixed(font_size)}px",
        }, text=lang.language)
        if is_animate:
            fade = animation.fade_in(index, len(languages), layout)
            animate(marker, "fill-opacity", fade)
            animate(label, "fill-opacity", fade)

    outer = radius - margin
    inner = radius / 2

    pie_group = node(group, "g", {"transform": f"translate({to_fixed(radius)}, {to_fixed(radius)})"})
    if is_animate:
        _add_glow_filter(svg, layout)
        pie_group.set("filter", f"url(#{GLOW_FILTER_ID})")
        node(pie_group, "animateTransform", {
            "attributeName": "transform",
            "type": "translate",
            "values": f"{to_fixed(radius)} {to_fixed(radius)}",
            "dur": "0.1s",
            "repeatCount": "1",
            "fill": "freeze",
        })
        animate(pie_group, "transform", animation.breathing_scale(layout), tag="animateTransform",
                extra={"type": "scale", "additive": "sum"})

    opacity = animation.breathing_opacity(layout) if is_animate else None
    angles = pie_angles([lang.contributions for lang in languages])
    for index, (lang, (start, end)) in enumerate(zip(languages, angles)):
        slice_ = node(pie_group, "path", {
            "d": arc_path(start, end, inner, outer),
            "style": f"fill: {lang.color};",
            "class": "stroke-bg",
            "stroke-width": "2px",
        })
        node(slice_, "title", text=f"{lang.language} {lang.contributions}")
        if opacity is not None:
            animate(slice_, "fill-opacity", animation.fade_in(index, len(languages), layout))
            animate(slice_, "fill-opacity", opacity)
            animate(slice_, "d", animation.breathing_radius(
                outer, layout, lambda r, s=start, e=end: arc_path(s, e, inner, r),
            ))

    logger.debug("Drew pie with %d slices (animate=%s)", len(languages), is_animate)
    return group
