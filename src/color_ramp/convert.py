# convert.py – hex ↔ RGB ↔ HSB conversions
#   - 6-digit hex only, optional '#', case-insensitive
#   - HSB hue in degrees [0, 360), saturation/brightness in [0, 1]
#   - soft variants return None / zero HSB; strict variants raise

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import numpy as np
from coloraide import Color

from .errors import InvalidColorError

Hex = str

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSB:
    h: float
    s: float
    b: float


ZERO_HSB = HSB(0.0, 0.0, 0.0)


def hex_to_rgb(value: Hex) -> RGB | None:
    """Parse '#RRGGBB' / 'RRGGBB'; None for anything else."""
    if not isinstance(value, str):
        return None
    m = _HEX_RE.fullmatch(value)
    if m is None:
        return None
    r, g, b = (int(part, 16) for part in m.groups())
    return RGB(r, g, b)


def parse_hex(value: Hex) -> RGB:
    rgb = hex_to_rgb(value)
    if rgb is None:
        raise InvalidColorError(value)
    return rgb


def rgb_to_hex(rgb: RGB) -> Hex:
    return f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"


def canon_hex(value: Hex) -> Hex:
    """Normalize to '#RRGGBB' or raise InvalidColorError."""
    return rgb_to_hex(parse_hex(value))


def rgb_to_hsb(r: int, g: int, b: int) -> HSB:
    r1, g1, b1 = r / 255.0, g / 255.0, b / 255.0
    hi = max(r1, g1, b1)
    lo = min(r1, g1, b1)
    delta = hi - lo

    s = 0.0 if hi == 0 else delta / hi
    h = 0.0
    if delta != 0:
        if hi == r1:
            h = ((g1 - b1) / delta) % 6
        elif hi == g1:
            h = (b1 - r1) / delta + 2
        else:
            h = (r1 - g1) / delta + 4
        h *= 60.0
        if h < 0:
            h += 360.0
        h %= 360.0
    return HSB(h, s, hi)


def hsb_to_rgb(h: float, s: float, b: float) -> RGB:
    """Sector-based HSB → RGB; channels rounded to the nearest integer."""
    s = min(max(s, 0.0), 1.0)
    b = min(max(b, 0.0), 1.0)
    c = b * s
    hp = (h % 360.0) / 60.0
    x = c * (1 - abs(hp % 2 - 1))
    sector = int(hp) % 6
    r1, g1, b1 = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[sector]
    m = b - c
    return RGB(*(int(round((v + m) * 255.0)) for v in (r1, g1, b1)))


def hsb_to_hex(hsb: HSB) -> Hex:
    return rgb_to_hex(hsb_to_rgb(hsb.h, hsb.s, hsb.b))


def hex_to_hsb(value: Hex) -> HSB:
    """Display-grade conversion: malformed input degrades to zero HSB."""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return ZERO_HSB
    return rgb_to_hsb(rgb.r, rgb.g, rgb.b)


def _coords(color: Color, space: str) -> list[float]:
    # achromatic hues come back as NaN; report them as 0
    return np.nan_to_num(np.asarray(color.convert(space).coords(), dtype=float)).tolist()


def color_formats(value: Hex) -> dict[str, Any]:
    """HSL / HSV / Lab triples and CSS rgb strings for display."""
    rgb = parse_hex(value)
    c = Color(rgb_to_hex(rgb))
    return {
        "hsl": _coords(c, "hsl"),
        "hsv": _coords(c, "hsv"),
        "lab": _coords(c, "lab"),
        "rgb_string": f"rgb({rgb.r}, {rgb.g}, {rgb.b})",
        "rgb_array": [rgb.r, rgb.g, rgb.b],
        "rgba_string": f"rgba({rgb.r}, {rgb.g}, {rgb.b}, 1)",
        "rgba_array": [rgb.r, rgb.g, rgb.b, 1],
    }


__all__ = [
    "Hex",
    "RGB",
    "HSB",
    "ZERO_HSB",
    "hex_to_rgb",
    "parse_hex",
    "rgb_to_hex",
    "canon_hex",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "hsb_to_hex",
    "hex_to_hsb",
    "color_formats",
]
