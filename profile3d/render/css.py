"""Theme stylesheet: the CSS classes referenced by the rendered shapes."""

from profile3d.config import (
    BitmapColorSettings,
    ColorSettings,
    NormalColorSettings,
    SeasonColorSettings,
)
from profile3d.models import PanelKind
from profile3d.render.rgb import interpolate, parse_color
from profile3d.render.season import SEASON_PATTERN_COUNT

_SEASON_STEPS = 5


def _rule(selector: str, prop: str, value: str) -> str:
    return f"{selector} {{ {prop}: {value}; }}"


def _panel_rules(prefix: str, color: str) -> list[str]:
    """Top keeps the base color; left and right are shaded by the panel factor."""
    base = parse_color(color)
    return [
        _rule(f".cont-{panel.value}-{prefix}", "fill", str(base.darker(panel.darker)) if panel.darker else color)
        for panel in PanelKind
    ]


def season_colors(palettes: list[list[str]], pattern: int) -> list[str]:
    """Per-level colors for one of the 20 seasonal patterns.

    Pattern ``5q + s`` blends from season ``q - 1`` into season ``q`` in
    ``s / 4`` steps; palettes are ordered autumn, winter, spring, summer.
    """
    quarter, step = divmod(pattern, _SEASON_STEPS)
    ratio = step / (_SEASON_STEPS - 1)
    previous = palettes[(quarter - 1) % len(palettes)]
    current = palettes[quarter]
    return [
        str(interpolate(parse_color(a), parse_color(b), ratio))
        for a, b in zip(previous, current)
    ]


def _contrib_rules(settings: ColorSettings) -> list[str]:
    rules: list[str] = []
    if isinstance(settings, NormalColorSettings):
        for level, color in enumerate(settings.contrib_colors):
            rules.extend(_panel_rules(str(level), color))
    elif isinstance(settings, SeasonColorSettings):
        for pattern in range(SEASON_PATTERN_COUNT):
            for level, color in enumerate(season_colors(settings.season_palettes, pattern)):
                rules.extend(_panel_rules(f"p{pattern}-{level}", color))
    elif isinstance(settings, BitmapColorSettings):
        for level, info in enumerate(settings.contrib_patterns):
            for panel in PanelKind:
                pattern = getattr(info, panel.value)
                rules.append(_rule(
                    f".cont-{panel.value}-bg-{level}", "fill", pattern.background or settings.background_color,
                ))
                rules.append(_rule(
                    f".cont-{panel.value}-fg-{level}", "fill", pattern.foreground or settings.foreground_color,
                ))
    # rainbow colors are animated inline; the pie-only layout draws no bars
    return rules


def create_css_colors(settings: ColorSettings) -> str:
    rules = [
        _rule(".fill-bg", "fill", settings.background_color),
        _rule(".fill-fg", "fill", settings.foreground_color),
        _rule(".fill-strong", "fill", settings.strong_color),
        _rule(".fill-weak", "fill", settings.weak_color),
        _rule(".stroke-bg", "stroke", settings.background_color),
    ]
    rules.extend(_contrib_rules(settings))
    return "\n".join(rules)
