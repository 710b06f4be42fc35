"""Pydantic models for the contribution data handed to the renderer."""

from datetime import date as Date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts both the aggregator's camelCase keys and snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PanelKind(str, Enum):
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"

    @property
    def darker(self) -> float:
        """Darkening factor applied by the rainbow theme."""
        return _DARKER[self]


_DARKER = {
    PanelKind.TOP: 0.0,
    PanelKind.LEFT: 0.5,
    PanelKind.RIGHT: 1.0,
}


class CalendarEntry(CamelModel):
    """One day of the contribution calendar."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    date: Date
    contribution_count: int = Field(ge=0)
    contribution_level: int = Field(ge=0, le=4)


class LangInfo(CamelModel):
    language: str
    color: str
    contributions: int = Field(ge=0)


class UserInfo(CamelModel):
    """Aggregated user activity: the calendar plus scalar totals."""

    contribution_calendar: list[CalendarEntry] = Field(default_factory=list)
    contributes_language: list[LangInfo] = Field(default_factory=list)
    total_contributions: int = 0
    total_commit_contributions: int = 0
    total_stargazer_count: int = 0
    total_fork_count: int = 0
