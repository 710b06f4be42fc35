"""Compile per-level bit masks into reusable SVG ``<pattern>`` tiles."""

import logging
import xml.etree.ElementTree as ET

from profile3d.config import BitmapColorSettings, PanelPattern
from profile3d.models import PanelKind
from profile3d.render.scene import node

logger = logging.getLogger(__name__)


def pattern_id(level: int, panel: PanelKind) -> str:
    return f"pattern_{level}_{panel.value}"


def tile_size(pattern: PanelPattern) -> tuple[int, int]:
    """(width, height) of the tile; zero sizes are clamped to 1."""
    return max(1, pattern.width), max(1, len(pattern.bitmap))


def row_bits(row: str | int) -> int:
    return int(row, 16) if isinstance(row, str) else row


def filled_cells(pattern: PanelPattern) -> list[tuple[int, int]]:
    """(x, y) of every set bit; bit x counts from the most significant of ``width``."""
    width, _ = tile_size(pattern)
    cells: list[tuple[int, int]] = []
    for y, row in enumerate(pattern.bitmap):
        bits = row_bits(row)
        for x in range(width):
            if bits & (1 << (width - x - 1)):
                cells.append((x, y))
    return cells


def cells_path(cells: list[tuple[int, int]]) -> str:
    return "".join(f"M{x},{y}h1v1h-1Z" for x, y in cells)


class PatternRegistry:
    """Emits each (level, panel) tile into ``<defs>`` at most once."""

    def __init__(self, defs: ET.Element) -> None:
        self.defs = defs
        self._emitted: set[str] = set()

    def __contains__(self, key: str) -> bool:
        return key in self._emitted

    def define(self, pattern: PanelPattern, level: int, panel: PanelKind) -> str:
        pid = pattern_id(level, panel)
        if pid in self._emitted:
            return pid

        width, height = tile_size(pattern)
        tile = node(self.defs, "pattern", {
            "id": pid,
            "x": 0,
            "y": 0,
            "width": width,
            "height": height,
            "patternUnits": "userSpaceOnUse",
        })
        node(tile, "rect", {
            "x": 0,
            "y": 0,
            "width": width,
            "height": height,
            "class": f"cont-{panel.value}-bg-{level}",
        })
        node(tile, "path", {
            "stroke": "none",
            "class": f"cont-{panel.value}-fg-{level}",
            "d": cells_path(filled_cells(pattern)),
        })
        self._emitted.add(pid)
        return pid


def add_bitmap_defines(svg: ET.Element, settings: BitmapColorSettings) -> PatternRegistry:
    """Emit tiles for every level and panel of a bitmap theme."""
    registry = PatternRegistry(node(svg, "defs"))
    for level, info in enumerate(settings.contrib_patterns):
        registry.define(info.top, level, PanelKind.TOP)
        registry.define(info.left, level, PanelKind.LEFT)
        registry.define(info.right, level, PanelKind.RIGHT)
    logger.debug("Defined %d bitmap patterns", len(settings.contrib_patterns) * 3)
    return registry
