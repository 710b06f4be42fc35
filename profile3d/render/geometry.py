"""Isometric geometry for the 3D contribution calendar.

Each calendar day becomes a bar standing on a diamond-shaped grid: weeks run
down-right, weekdays run down-left. The grid is sized so that ``week_slots``
diagonal steps fill the canvas width.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from profile3d.config import LayoutConfig
from profile3d.errors import InvalidGeometryInput
from profile3d.models import CalendarEntry

_EPOCH = date(1970, 1, 1)


def epoch_day(day: date) -> int:
    return day.toordinal() - _EPOCH.toordinal()


def day_of_week(day: date) -> int:
    """Sunday = 0, Monday = 1, ... Saturday = 6."""
    return day.isoweekday() % 7


def bar_height(count: int, layout: LayoutConfig) -> float:
    """Log-compressed bar height; ``height_base`` at zero contributions."""
    return math.log10(count / layout.height_divisor + 1) * layout.height_scale + layout.height_base


@dataclass(frozen=True)
class GridMetrics:
    dx: float
    dy: float
    dxx: float  # horizontal panel edge
    dyy: float  # vertical panel edge
    offset_x: float
    offset_y: float
    sunday_of_first_week: int
    week_count: int


@dataclass(frozen=True)
class BarGeometry:
    entry: CalendarEntry
    week: int
    day_of_week: int
    base_x: float
    base_y: float
    height: float

    @property
    def top_y(self) -> float:
        return self.base_y - self.height


def _check_canvas(width: float, height: float) -> None:
    for name, value in (("width", width), ("height", height)):
        if not math.isfinite(value) or value < 0:
            raise InvalidGeometryInput(f"canvas {name} must be finite and non-negative, got {value!r}")


def grid_metrics(
    calendar: Sequence[CalendarEntry],
    width: float,
    height: float,
    layout: LayoutConfig,
) -> GridMetrics | None:
    """Constant grid measurements for one calendar, or None when it is empty."""
    _check_canvas(width, height)
    if not calendar:
        return None
    if width == 0:
        raise InvalidGeometryInput("canvas width must be positive to place bars")

    first = calendar[0].date
    first_dow = day_of_week(first)
    week_count = math.ceil((len(calendar) + first_dow) / 7.0)

    dx = width / layout.week_slots
    dy = dx * math.tan(math.radians(layout.angle))
    return GridMetrics(
        dx=dx,
        dy=dy,
        dxx=dx * layout.panel_ratio,
        dyy=dy * layout.panel_ratio,
        offset_x=dx * 7,
        offset_y=height - (week_count + 7) * dy,
        sunday_of_first_week=epoch_day(first) - first_dow,
        week_count=week_count,
    )


def place_entry(entry: CalendarEntry, grid: GridMetrics, layout: LayoutConfig) -> BarGeometry:
    week = (epoch_day(entry.date) - grid.sunday_of_first_week) // 7
    dow = day_of_week(entry.date)
    return BarGeometry(
        entry=entry,
        week=week,
        day_of_week=dow,
        base_x=grid.offset_x + (week - dow) * grid.dx,
        base_y=grid.offset_y + (week + dow) * grid.dy,
        height=bar_height(entry.contribution_count, layout),
    )


def layout_calendar(
    calendar: Sequence[CalendarEntry],
    width: float,
    height: float,
    layout: LayoutConfig,
) -> tuple[GridMetrics | None, list[BarGeometry]]:
    """Place every entry of the calendar. Empty calendar -> (None, [])."""
    grid = grid_metrics(calendar, width, height, layout)
    if grid is None:
        return None, []
    return grid, [place_entry(entry, grid, layout) for entry in calendar]
