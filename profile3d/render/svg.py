"""Compose the full profile SVG: background, 3D calendar, pie chart and stats."""

import logging
import xml.etree.ElementTree as ET

from profile3d.config import BitmapColorSettings, ColorSettings, LayoutConfig, PieLangColorSettings
from profile3d.models import UserInfo
from profile3d.render.contrib3d import create_3d_contrib
from profile3d.render.css import create_css_colors
from profile3d.render.numbers import insert_thousand_separator, to_fixed, to_iso_date, to_scale
from profile3d.render.patterns import add_bitmap_defines
from profile3d.render.pie import create_pie_language
from profile3d.render.rgb import parse_color
from profile3d.render.scene import SVG_NS, node, serialize

logger = logging.getLogger(__name__)

STAR_ICON = (
    "M8 .25a.75.75 0 01.673.418l1.882 3.815 4.21.612a.75.75 0 01.416 1.279l-3.046 2.97.719 "
    "4.192a.75.75 0 01-1.088.791L8 12.347l-3.766 1.98a.75.75 0 01-1.088-.79l.72-4.194L.818 "
    "6.374a.75.75 0 01.416-1.28l4.21-.611L7.327.668A.75.75 0 018 .25zm0 2.445L6.615 5.5a.75.75 "
    "0 01-.564.41l-3.097.45 2.24 2.184a.75.75 0 01.216.664l-.528 3.084 2.769-1.456a.75.75 0 "
    "01.698 0l2.77 1.456-.53-3.084a.75.75 0 01.216-.664l2.24-2.183-3.096-.45a.75.75 0 "
    "01-.564-.41L8 2.694v.001z"
)
FORK_ICON = (
    "M5 3.25a.75.75 0 11-1.5 0 .75.75 0 011.5 0zm0 2.122a2.25 2.25 0 10-1.5 0v.878A2.25 2.25 0 "
    "005.75 8.5h1.5v2.128a2.251 2.251 0 101.5 0V8.5h1.5a2.25 2.25 0 002.25-2.25v-.878a2.25 2.25 "
    "0 10-1.5 0v.878a.75.75 0 01-.75.75h-4.5A.75.75 0 015 6.25v-.878zm3.75 7.378a.75.75 0 "
    "11-1.5 0 .75.75 0 011.5 0zm3-8.75a.75.75 0 100-1.5.75.75 0 000 1.5z"
)


def _add_background(svg: ET.Element, settings: ColorSettings, width: float, height: float) -> None:
    """Vertical gradient: light themes darken towards the bottom, dark ones brighten."""
    top = parse_color(settings.background_color)
    bottom = top.darker(0.06) if top.luminance() > 128 else top.brighter(0.08)
    defs = node(svg, "defs")
    grad = node(defs, "linearGradient", {"id": "bg-gradient", "x1": "0", "y1": "0", "x2": "0", "y2": "1"})
    node(grad, "stop", {"offset": "0%", "stop-color": settings.background_color})
    node(grad, "stop", {"offset": "100%", "stop-color": str(bottom)})
    node(svg, "rect", {"x": 0, "y": 0, "width": to_fixed(width), "height": to_fixed(height), "fill": "url(#bg-gradient)"})


def _add_card(svg: ET.Element, x: float, y: float, width: float, height: float, layout: LayoutConfig) -> None:
    pad = layout.card_padding
    node(svg, "rect", {
        "x": to_fixed(x - pad),
        "y": to_fixed(y - pad),
        "width": to_fixed(width + pad * 2),
        "height": to_fixed(height + pad * 2),
        "rx": layout.card_radius,
        "ry": layout.card_radius,
        "class": "fill-bg",
        "style": f"opacity: {layout.card_opacity};",
    })


def _stat_text(group: ET.Element, x: float, y: float, text: str, css: str, bold: bool, layout: LayoutConfig) -> ET.Element:
    style = f"font-size: {layout.stats_font_value}; font-weight: 600;" if bold else f"font-size: {layout.stats_font_label};"
    return node(group, "text", {
        "style": style,
        "x": to_fixed(x),
        "y": to_fixed(y),
        "text-anchor": "start",
        "class": css,
    }, text=text)


def _add_icon(group: ET.Element, x: float, y: float, path: str) -> None:
    icon = node(group, "g", {
        "transform": f"translate({to_fixed(x)}, {to_fixed(y)}), scale(1.5)",
        "style": "opacity: 0.9;",
    })
    node(icon, "path", {"fill-rule": "evenodd", "d": path, "class": "fill-fg"})


def _add_stats(svg: ET.Element, user_info: UserInfo, settings: ColorSettings, layout: LayoutConfig) -> None:
    group = node(svg, "g")
    y = layout.svg_height - 30

    _stat_text(group, layout.stats_x, y, insert_thousand_separator(user_info.total_contributions),
               "fill-strong", True, layout)
    label = settings.l10n.contrib if settings.l10n else "contributions"
    _stat_text(group, layout.stats_x + 60, y, label, "fill-fg", False, layout)

    _add_icon(group, layout.stats_star_x - 24, y - 21, STAR_ICON)
    stars = _stat_text(group, layout.stats_star_x + 6, y, to_scale(user_info.total_stargazer_count),
                       "fill-fg", True, layout)
    node(stars, "title", text=str(user_info.total_stargazer_count))

    _add_icon(group, layout.stats_fork_x - 24, y - 21, FORK_ICON)
    forks = _stat_text(group, layout.stats_fork_x + 4, y, to_scale(user_info.total_fork_count),
                       "fill-fg", True, layout)
    node(forks, "title", text=str(user_info.total_fork_count))

    calendar = user_info.contribution_calendar
    if calendar:
        period = f"{to_iso_date(calendar[0].date)} / {to_iso_date(calendar[-1].date)}"
        node(group, "text", {
            "style": f"font-size: {layout.stats_font_label};",
            "x": layout.svg_width - 20,
            "y": 20,
            "dominant-baseline": "hanging",
            "text-anchor": "end",
            "class": "fill-weak",
        }, text=period)


def build_svg(
    user_info: UserInfo,
    settings: ColorSettings,
    force_animation: bool = False,
    layout: LayoutConfig | None = None,
) -> ET.Element:
    """Build the scene graph for one profile image."""
    layout = layout or LayoutConfig()
    pie_only = isinstance(settings, PieLangColorSettings)
    if pie_only:
        width, height = layout.pie_width, layout.pie_height
    else:
        width, height = layout.svg_width, layout.svg_height

    svg = ET.Element("svg", {
        "xmlns": SVG_NS,
        "width": to_fixed(width),
        "height": to_fixed(height),
        "viewBox": f"0 0 {to_fixed(width)} {to_fixed(height)}",
    })
    node(svg, "style", text="\n".join([
        f"* {{ font-family: {layout.font_family}; }}",
        create_css_colors(settings),
    ]))
    if isinstance(settings, BitmapColorSettings):
        add_bitmap_defines(svg, settings)
    if pie_only:
        node(svg, "rect", {"x": 0, "y": 0, "width": to_fixed(width), "height": to_fixed(height), "class": "fill-bg"})
        create_pie_language(svg, user_info, 0, 0, layout.pie_width, layout.pie_height,
                            settings, layout, force_animation)
        return svg

    _add_background(svg, settings, width, height)

    create_3d_contrib(svg, user_info.contribution_calendar, 0, 0, width, height,
                      settings, layout, force_animation)

    pie_x = layout.stats_x
    pie_y = height - layout.pie_height - 60
    _add_card(svg, pie_x, pie_y, layout.pie_width, layout.pie_height, layout)
    create_pie_language(svg, user_info, pie_x, pie_y, layout.pie_width, layout.pie_height,
                        settings, layout, force_animation)

    _add_stats(svg, user_info, settings, layout)
    return svg


def create_svg(
    user_info: UserInfo,
    settings: ColorSettings,
    force_animation: bool = False,
    layout: LayoutConfig | None = None,
) -> str:
    """Render one profile image to SVG markup. Raises on any failure; never returns partial output."""
    markup = serialize(build_svg(user_info, settings, force_animation, layout))
    logger.debug("Rendered %s theme: %d bytes", settings.type, len(markup))
    return markup
