"""RGB color helpers: CSS color parsing plus d3-style darken/brighten/interpolate."""

import math
from dataclasses import dataclass

from PIL import ImageColor

_K = 0.7


@dataclass(frozen=True)
class RGB:
    r: float
    g: float
    b: float

    def darker(self, k: float = 1.0) -> "RGB":
        f = _K ** k
        return RGB(self.r * f, self.g * f, self.b * f)

    def brighter(self, k: float = 1.0) -> "RGB":
        f = (1 / _K) ** k
        return RGB(self.r * f, self.g * f, self.b * f)

    def luminance(self) -> float:
        """Perceived brightness in [0, 255]."""
        return (self.r * 299 + self.g * 587 + self.b * 114) / 1000

    def __str__(self) -> str:
        return f"rgb({_channel(self.r)}, {_channel(self.g)}, {_channel(self.b)})"


def _channel(value: float) -> int:
    # half rounds up, as browsers do
    return max(0, min(255, math.floor(value + 0.5)))


def parse_color(text: str) -> RGB:
    """Parse any CSS color Pillow understands (hex, rgb(), rgba(), hsl(), names).

    Alpha is dropped. Raises ValueError for unknown specifiers.
    """
    r, g, b = ImageColor.getrgb(text.strip())[:3]
    return RGB(r, g, b)


def hsl(hue: float, saturation: float, lightness: float) -> RGB:
    """HSL with saturation/lightness in [0, 1]."""
    return parse_color(f"hsl({hue % 360:.4f}, {saturation * 100:.4f}%, {lightness * 100:.4f}%)")


def parse_percent(value: str | float) -> float:
    """"40%" -> 0.4; bare numbers are taken as fractions."""
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("%"):
            return float(text[:-1]) / 100
        return float(text)
    return float(value)


def interpolate(a: RGB, b: RGB, t: float) -> RGB:
    return RGB(a.r + (b.r - a.r) * t, a.g + (b.g - a.g) * t, a.b + (b.b - a.b) * t)
