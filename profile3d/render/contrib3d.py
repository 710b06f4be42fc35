"""Isometric 3D contribution calendar.

Each day is drawn as a bar of three skewed rects (top, left, right) inside a
``<g>`` positioned at the bar's top. With animation on, non-empty bars grow
from the floor and then bob on a wave that travels across the grid.
"""

import logging
import math
import xml.etree.ElementTree as ET
from typing import Sequence

from profile3d.config import ColorSettings, LayoutConfig
from profile3d.models import CalendarEntry, PanelKind
from profile3d.render import animation
from profile3d.render.colors import BitmapPainter, PanelPainter, painter_for
from profile3d.render.geometry import BarGeometry, GridMetrics, layout_calendar
from profile3d.render.numbers import to_fixed
from profile3d.render.scene import animate, animate_translate, node

logger = logging.getLogger(__name__)


def _atan_degrees(value: float) -> float:
    return math.degrees(math.atan(value))


def _panel_rect(bar: ET.Element, width: float, height: float, transform: str) -> ET.Element:
    return node(bar, "rect", {
        "stroke": "none",
        "x": 0,
        "y": 0,
        "width": to_fixed(width),
        "height": to_fixed(height),
        "transform": transform,
    })


def _draw_bar(
    group: ET.Element,
    geo: BarGeometry,
    grid: GridMetrics,
    painter: PanelPainter,
    layout: LayoutConfig,
    is_animate: bool,
) -> ET.Element:
    level = geo.entry.contribution_level
    angle = to_fixed(layout.angle)
    neg_angle = to_fixed(-layout.angle)
    dxx, dyy = grid.dxx, grid.dyy
    grow = is_animate and level != 0

    bar = node(group, "g", {"transform": f"translate({to_fixed(geo.base_x)} {to_fixed(geo.top_y)})"})
    if grow:
        animate_translate(bar, animation.grow_translate(geo.base_x, geo.base_y, geo.height, layout))
        animate_translate(bar, animation.wave_translate(
            geo.base_x, geo.base_y, geo.height, geo.week, geo.day_of_week, layout,
        ))

    # top
    width_top = painter.tile_width(level, PanelKind.TOP, dxx)
    top = _panel_rect(
        bar, width_top, width_top,
        f"skewY({neg_angle}) skewX({to_fixed(_atan_degrees(dxx / 2 / dyy))}) "
        f"scale({to_fixed(dxx / width_top)} {to_fixed(2 * dyy / width_top)})",
    )
    painter.paint(top, geo.entry, PanelKind.TOP, geo.week)

    edge = math.sqrt(dxx ** 2 + dyy ** 2)

    # left
    width_left = painter.tile_width(level, PanelKind.LEFT, dxx)
    scale_left = edge / width_left
    height_left = geo.height / scale_left
    left = _panel_rect(
        bar, width_left, height_left,
        f"skewY({angle}) scale({to_fixed(dxx / width_left)} {to_fixed(scale_left)})",
    )
    painter.paint(left, geo.entry, PanelKind.LEFT, geo.week)
    if grow:
        animate(left, "height", animation.grow_panel_height(height_left, scale_left, layout))

    # right
    width_right = painter.tile_width(level, PanelKind.RIGHT, dxx)
    scale_right = edge / width_right
    height_right = geo.height / scale_right
    right = _panel_rect(
        bar, width_right, height_right,
        f"translate({to_fixed(dxx)} {to_fixed(dyy)}) skewY({neg_angle}) "
        f"scale({to_fixed(dxx / width_right)} {to_fixed(scale_right)})",
    )
    painter.paint(right, geo.entry, PanelKind.RIGHT, geo.week)
    if grow:
        animate(right, "height", animation.grow_panel_height(height_right, scale_right, layout))

    return bar


def create_3d_contrib(
    parent: ET.Element,
    calendar: Sequence[CalendarEntry],
    x: float,
    y: float,
    width: float,
    height: float,
    settings: ColorSettings,
    layout: LayoutConfig,
    force_animation: bool = False,
) -> ET.Element | None:
    """Draw the calendar into ``parent``. Returns the bar group, or None when empty.

    The group is attached only after every bar has been built, so a failure
    leaves ``parent`` untouched.
    """
    grid, bars = layout_calendar(calendar, width, height, layout)
    if grid is None:
        logger.debug("Empty calendar, no bars drawn")
        return None

    painter = painter_for(settings)
    if isinstance(painter, BitmapPainter):
        painter.check_levels({entry.contribution_level for entry in calendar})

    is_animate = settings.growing_animation or force_animation
    group = ET.Element("g")
    if x or y:
        group.set("transform", f"translate({to_fixed(x)} {to_fixed(y)})")
    for geo in bars:
        _draw_bar(group, geo, grid, painter, layout, is_animate)

    parent.append(group)
    logger.debug(
        "Drew %d bars over %d weeks (animate=%s, theme=%s)",
        len(bars), grid.week_count, is_animate, settings.type,
    )
    return group
