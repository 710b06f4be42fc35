"""Shared test fixtures for profile3d tests."""

from datetime import date, timedelta

import pytest

from profile3d.config import (
    BitmapColorSettings,
    ContribPattern,
    LayoutConfig,
    NormalColorSettings,
    PanelPattern,
    RainbowColorSettings,
    SeasonColorSettings,
)
from profile3d.models import CalendarEntry, LangInfo, UserInfo

THEME_BASE = dict(
    background_color="#ffffff",
    foreground_color="#00000f",
    strong_color="#111133",
    weak_color="#aaaaaa",
)


def level_for(count: int) -> int:
    if count == 0:
        return 0
    if count < 3:
        return 1
    if count < 8:
        return 2
    if count < 20:
        return 3
    return 4


def make_calendar(start: date, counts: list[int]) -> list[CalendarEntry]:
    """Contiguous calendar beginning at ``start``."""
    return [
        CalendarEntry(
            date=start + timedelta(days=i),
            contribution_count=c,
            contribution_level=level_for(c),
        )
        for i, c in enumerate(counts)
    ]


@pytest.fixture()
def layout():
    return LayoutConfig()


@pytest.fixture()
def calendar():
    """Three weeks starting on a Wednesday, mixing empty and busy days."""
    counts = [0, 1, 5, 12, 30, 0, 2] * 3
    return make_calendar(date(2024, 1, 3), counts)


@pytest.fixture()
def normal_settings():
    return NormalColorSettings(
        **THEME_BASE,
        contrib_colors=["#eeeeee", "#c6e48b", "#7bc96f", "#239a3b", "#196127"],
    )


@pytest.fixture()
def season_settings():
    return SeasonColorSettings(
        **THEME_BASE,
        contrib_colors1=["#eeeeee", "#ffcc00", "#ff9900", "#ff6600", "#cc3300"],
        contrib_colors2=["#eeeeee", "#ccddff", "#99bbff", "#6699ff", "#3366cc"],
        contrib_colors3=["#eeeeee", "#ffccee", "#ff99dd", "#ff66cc", "#cc3399"],
        contrib_colors4=["#eeeeee", "#c6e48b", "#7bc96f", "#239a3b", "#196127"],
    )


@pytest.fixture()
def rainbow_settings():
    return RainbowColorSettings(
        **THEME_BASE,
        hue_ratio=-4,
        saturation="50%",
        contrib_lightness=["20%", "30%", "50%", "60%", "70%"],
        duration="10s",
    )


def _panel(width: int, rows: list) -> PanelPattern:
    return PanelPattern(width=width, bitmap=rows, background="#101010", foreground="#f0f0f0")


@pytest.fixture()
def bitmap_settings():
    patterns = [
        ContribPattern(
            top=_panel(4, ["F", "0", "F", "0"]),
            left=_panel(8, ["80", "40"]),
            right=_panel(2, [2, 1]),
        )
        for _ in range(5)
    ]
    return BitmapColorSettings(**THEME_BASE, contrib_patterns=patterns)


@pytest.fixture()
def user_info(calendar):
    return UserInfo(
        contribution_calendar=calendar,
        contributes_language=[
            LangInfo(language="Python", color="#3572A5", contributions=60),
            LangInfo(language="TypeScript", color="#3178c6", contributions=25),
        ],
        total_contributions=1234,
        total_commit_contributions=100,
        total_stargazer_count=5321,
        total_fork_count=42,
    )


@pytest.fixture()
def calendar_factory():
    return make_calendar
