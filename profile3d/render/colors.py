"""How each theme variant paints the three panels of a bar."""

import abc
import xml.etree.ElementTree as ET

from profile3d.config import (
    BitmapColorSettings,
    ColorSettings,
    NormalColorSettings,
    RainbowColorSettings,
    SeasonColorSettings,
)
from profile3d.errors import InconsistentSettings
from profile3d.models import CalendarEntry, PanelKind
from profile3d.render.animation import INDEFINITE, AnimationSpec
from profile3d.render.patterns import pattern_id, tile_size
from profile3d.render.rgb import hsl, parse_percent
from profile3d.render.scene import animate
from profile3d.render.season import season_pattern_index

RAINBOW_STOPS = 7
HUE_STEP = 60


class PanelPainter(abc.ABC):
    """Base class for the per-variant panel coloring."""

    def tile_width(self, level: int, panel: PanelKind, default: float) -> float:
        """Width of the unscaled panel rect before its transform is applied."""
        return default

    @abc.abstractmethod
    def paint(self, rect: ET.Element, entry: CalendarEntry, panel: PanelKind, week: int) -> None:
        ...


class NormalPainter(PanelPainter):
    def __init__(self, settings: NormalColorSettings) -> None:
        self.settings = settings

    def paint(self, rect: ET.Element, entry: CalendarEntry, panel: PanelKind, week: int) -> None:
        rect.set("class", f"cont-{panel.value}-{entry.contribution_level}")


class SeasonPainter(PanelPainter):
    def __init__(self, settings: SeasonColorSettings) -> None:
        self.settings = settings

    def paint(self, rect: ET.Element, entry: CalendarEntry, panel: PanelKind, week: int) -> None:
        pattern = season_pattern_index(entry.date)
        rect.set("class", f"cont-{panel.value}-p{pattern}-{entry.contribution_level}")


def rainbow_hues(week: int, hue_ratio: float) -> list[float]:
    offset = week * hue_ratio
    return [(i * HUE_STEP + offset) % 360 for i in range(RAINBOW_STOPS)]


class RainbowPainter(PanelPainter):
    def __init__(self, settings: RainbowColorSettings) -> None:
        self.settings = settings
        self._saturation = parse_percent(settings.saturation)
        self._lightness = [parse_percent(v) for v in settings.contrib_lightness]

    def colors(self, level: int, panel: PanelKind, week: int) -> list[str]:
        lightness = self._lightness[level]
        return [
            str(hsl(hue, self._saturation, lightness).darker(panel.darker))
            for hue in rainbow_hues(week, self.settings.hue_ratio)
        ]

    def paint(self, rect: ET.Element, entry: CalendarEntry, panel: PanelKind, week: int) -> None:
        values = ";".join(self.colors(entry.contribution_level, panel, week))
        spec = AnimationSpec(duration=self.settings.duration, values=values, repeat_count=INDEFINITE)
        animate(rect, "fill", spec)


class BitmapPainter(PanelPainter):
    def __init__(self, settings: BitmapColorSettings) -> None:
        self.settings = settings

    def check_levels(self, levels: set[int]) -> None:
        """Every level drawn needs a pattern; there is no fallback color."""
        missing = sorted(lv for lv in levels if lv >= len(self.settings.contrib_patterns))
        if missing:
            raise InconsistentSettings(
                f"bitmap theme has {len(self.settings.contrib_patterns)} contrib patterns, "
                f"calendar uses levels {missing}"
            )

    def tile_width(self, level: int, panel: PanelKind, default: float) -> float:
        pattern = getattr(self.settings.contrib_patterns[level], panel.value)
        return tile_size(pattern)[0]

    def paint(self, rect: ET.Element, entry: CalendarEntry, panel: PanelKind, week: int) -> None:
        rect.set("fill", f"url(#{pattern_id(entry.contribution_level, panel)})")


def painter_for(settings: ColorSettings) -> PanelPainter:
    """Pick the painter for the active theme variant."""
    if isinstance(settings, NormalColorSettings):
        return NormalPainter(settings)
    if isinstance(settings, SeasonColorSettings):
        return SeasonPainter(settings)
    if isinstance(settings, RainbowColorSettings):
        return RainbowPainter(settings)
    if isinstance(settings, BitmapColorSettings):
        return BitmapPainter(settings)
    raise InconsistentSettings(f"Unknown color settings type: {type(settings).__name__}")
