"""Built-in themes used when no settings file is given."""

from profile3d.config import NormalColorSettings

SOLARIZED_LIGHT = NormalColorSettings(
    background_color="#fdf6e3",
    foreground_color="#657b83",
    strong_color="#586e75",
    weak_color="#93a1a1",
    contrib_colors=["#eee8d5", "#c2cf7a", "#9cb23a", "#859900", "#5b6b00"],
    pie_colors=["#268bd2", "#2aa198", "#859900", "#b58900", "#cb4b16", "#d33682"],
    file_name="profile-solarized-light.svg",
)

SOLARIZED_DARK = NormalColorSettings(
    background_color="#002b36",
    foreground_color="#839496",
    strong_color="#93a1a1",
    weak_color="#586e75",
    contrib_colors=["#073642", "#3a5a1a", "#5d7a0c", "#859900", "#b3c635"],
    pie_colors=["#268bd2", "#2aa198", "#859900", "#b58900", "#cb4b16", "#d33682"],
    file_name="profile-solarized-dark.svg",
)

DEFAULT_THEMES = [SOLARIZED_LIGHT, SOLARIZED_DARK]
