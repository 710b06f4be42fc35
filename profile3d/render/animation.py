"""Keyframe synthesis for SMIL animations.

Every effect here is a pure function returning an ``AnimationSpec``; the
renderers turn specs into ``<animate>``/``<animateTransform>`` nodes.
"""

import math
from dataclasses import dataclass
from typing import Callable

from profile3d.config import LayoutConfig
from profile3d.render.numbers import to_fixed

INDEFINITE = "indefinite"


@dataclass(frozen=True)
class AnimationSpec:
    duration: str
    values: str
    begin: str | None = None
    repeat_count: str = "1"


def sample_keyframes(steps: int, fn: Callable[[float], str]) -> str:
    """Evaluate ``fn`` at t = 0, 1/steps, ..., 1 and join as a keyframe list."""
    return ";".join(fn(i / steps) for i in range(steps + 1))


def _sine(t: float, phase: float = 0.0) -> float:
    return math.sin(2 * math.pi * t + phase)


def _point(x: float, y: float) -> str:
    return f"{to_fixed(x)} {to_fixed(y)}"


# --- Calendar bars ---


def grow_translate(base_x: float, base_y: float, height: float, layout: LayoutConfig) -> AnimationSpec:
    """Bar origin rises from the floor to its full height."""
    values = f"{_point(base_x, base_y - layout.height_base)};{_point(base_x, base_y - height)}"
    return AnimationSpec(duration=layout.grow_duration, values=values)


def grow_panel_height(panel_height: float, scale: float, layout: LayoutConfig) -> AnimationSpec:
    """Side panel height grows in step with ``grow_translate``."""
    values = f"{to_fixed(layout.height_base / scale)};{to_fixed(panel_height)}"
    return AnimationSpec(duration=layout.grow_duration, values=values)


def wave_amplitude(height: float, layout: LayoutConfig) -> float:
    return min(height * layout.wave_amp_ratio, layout.wave_amp_max)


def wave_phase(week: int, day_of_week: int, layout: LayoutConfig) -> int:
    return (week + day_of_week) % layout.wave_phase_mod


def wave_translate(
    base_x: float,
    base_y: float,
    height: float,
    week: int,
    day_of_week: int,
    layout: LayoutConfig,
) -> AnimationSpec:
    """Continuous bob after the grow intro; neighbours are phase-shifted."""
    amp = wave_amplitude(height, layout)
    phase = wave_phase(week, day_of_week, layout) / layout.wave_phase_mod * 2 * math.pi
    top = base_y - height
    values = sample_keyframes(
        layout.wave_steps,
        lambda t: _point(base_x, top + amp * _sine(t, phase)),
    )
    return AnimationSpec(
        duration=f"{layout.wave_cycle_seconds}s",
        values=values,
        begin=layout.grow_duration,
        repeat_count=INDEFINITE,
    )


# --- Pie breathing ---


def _breath(values: str, layout: LayoutConfig) -> AnimationSpec:
    return AnimationSpec(
        duration=f"{layout.breath_seconds}s",
        values=values,
        begin=layout.grow_duration,
        repeat_count=INDEFINITE,
    )


def breathing_blur(layout: LayoutConfig) -> AnimationSpec:
    """Glow radius 0 -> 5 -> 0."""
    return _breath(
        sample_keyframes(layout.breath_steps, lambda t: f"{2.5 + 2.5 * _sine(t):.2f}"),
        layout,
    )


def breathing_opacity(layout: LayoutConfig) -> AnimationSpec:
    """Fill opacity eased between 0.85 and 1.0."""
    return _breath(
        sample_keyframes(layout.breath_steps, lambda t: f"{0.85 + 0.15 * (0.5 + 0.5 * _sine(t)):.3f}"),
        layout,
    )


def breathing_scale(layout: LayoutConfig) -> AnimationSpec:
    return _breath("1;1.01;1;0.99;1", layout)


def breathing_radius(
    outer_radius: float,
    layout: LayoutConfig,
    path_for_radius: Callable[[float], str],
) -> AnimationSpec:
    """Arc paths whose outer radius swells by ``breath_radius`` pixels."""
    return _breath(
        sample_keyframes(
            layout.breath_steps,
            lambda t: path_for_radius(outer_radius + layout.breath_radius * _sine(t)),
        ),
        layout,
    )


def fade_in(index: int, item_count: int, layout: LayoutConfig) -> AnimationSpec:
    """Staggered fade-in: item ``index`` stays hidden for ``index`` frames."""
    frames = item_count + layout.fade_steps
    values = ";".join(
        "0" if i < index else to_fixed(min((i - index) / layout.fade_steps, 1))
        for i in range(frames)
    )
    return AnimationSpec(duration=layout.grow_duration, values=values)
