"""Configuration, theme and input-document loading for profile3d."""

from pathlib import Path
from typing import Annotated, Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from profile3d.models import CamelModel, UserInfo


class LayoutConfig(BaseModel):
    """Fixed layout and animation constants, shared read-only by every renderer."""

    model_config = ConfigDict(frozen=True)

    # isometric calendar
    angle: float = 30.0
    week_slots: int = 64
    panel_ratio: float = 0.9
    height_divisor: float = 20.0
    height_scale: float = 144.0
    height_base: float = 3.0

    # grow intro + wave
    grow_seconds: int = 3
    wave_amp_ratio: float = 0.08
    wave_amp_max: float = 4.0
    wave_phase_mod: int = 16
    wave_cycle_seconds: int = 4
    wave_steps: int = 16

    # pie breathing
    breath_seconds: int = 6
    breath_steps: int = 40
    breath_radius: float = 6.0
    fade_steps: int = 5

    # document
    svg_width: int = 1280
    svg_height: int = 850
    pie_height: float = 200 * 1.3
    card_padding: int = 12
    card_radius: int = 12
    card_opacity: str = "0.3"
    stats_x: int = 50
    stats_star_x: int = 280
    stats_fork_x: int = 390
    stats_font_value: str = "22px"
    stats_font_label: str = "16px"
    font_family: str = '"Ubuntu", "Helvetica", "Arial", sans-serif'

    @property
    def pie_width(self) -> float:
        return self.pie_height * 2

    @property
    def grow_duration(self) -> str:
        return f"{self.grow_seconds}s"


class Config(BaseModel):
    output_dir: str = "./profile-3d-contrib"
    layout: LayoutConfig = Field(default_factory=LayoutConfig)

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


# --- Themes ---


class L10n(CamelModel):
    contrib: str = "contributions"


class PanelPattern(CamelModel):
    """Bit-mask stencil tiled over one panel. Rows are hex strings or ints."""

    width: int = Field(ge=0)
    bitmap: list[str | int] = Field(default_factory=list)
    background: str | None = None
    foreground: str | None = None


class ContribPattern(CamelModel):
    top: PanelPattern
    left: PanelPattern
    right: PanelPattern


class _ThemeBase(CamelModel):
    background_color: str
    foreground_color: str
    strong_color: str
    weak_color: str
    growing_animation: bool = False
    file_name: str | None = None
    pie_colors: list[str] | None = None
    l10n: L10n | None = None


class NormalColorSettings(_ThemeBase):
    type: Literal["normal"] = "normal"
    contrib_colors: list[str] = Field(min_length=5, max_length=5)


class SeasonColorSettings(_ThemeBase):
    """Four 5-color palettes: autumn, winter, spring, summer."""

    type: Literal["season"] = "season"
    contrib_colors1: list[str] = Field(min_length=5, max_length=5)
    contrib_colors2: list[str] = Field(min_length=5, max_length=5)
    contrib_colors3: list[str] = Field(min_length=5, max_length=5)
    contrib_colors4: list[str] = Field(min_length=5, max_length=5)

    @property
    def season_palettes(self) -> list[list[str]]:
        return [self.contrib_colors1, self.contrib_colors2, self.contrib_colors3, self.contrib_colors4]


class RainbowColorSettings(_ThemeBase):
    type: Literal["rainbow"] = "rainbow"
    hue_ratio: float
    saturation: str
    contrib_lightness: list[str] = Field(min_length=5, max_length=5)
    duration: str


class BitmapColorSettings(_ThemeBase):
    type: Literal["bitmap"] = "bitmap"
    contrib_patterns: list[ContribPattern]


class PieLangColorSettings(_ThemeBase):
    """Language pie chart on its own, without the calendar."""

    type: Literal["pie_lang_only"] = "pie_lang_only"


ColorSettings = Annotated[
    Union[NormalColorSettings, SeasonColorSettings, RainbowColorSettings, BitmapColorSettings,
          PieLangColorSettings],
    Field(discriminator="type"),
]

_settings_adapter: TypeAdapter = TypeAdapter(ColorSettings)

DEFAULT_FILE_NAME = "profile-customize.svg"


def parse_settings(raw: dict[str, Any]) -> "ColorSettings":
    """Validate one theme mapping into its concrete settings variant."""
    return _settings_adapter.validate_python(raw)


def load_settings(path: Path) -> list["ColorSettings"]:
    """Load a theme file (YAML or JSON). A file may hold one theme or a list."""
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return []
    if isinstance(raw, list):
        return [parse_settings(item) for item in raw]
    return [parse_settings(raw)]


def load_user_info(path: Path) -> UserInfo:
    """Load the aggregated activity document produced upstream."""
    raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return UserInfo.model_validate(raw)


def _project_root() -> Path:
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
