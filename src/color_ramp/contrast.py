"""WCAG 2.1 contrast evaluation of a generated ramp against a fixed background.

Luminance comes from ColorAide (linearised sRGB → Y of XYZ-D65, i.e.
≈ 0.2126 R + 0.7152 G + 0.0722 B). Ratios are reported rounded to two
decimals and the AA threshold is tested against the rounded value.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from coloraide import Color

from .convert import Hex, parse_hex, rgb_to_hex
from .defaults import DEFAULT_BACKGROUND
from .ramp import GeneratedColor

AA_THRESHOLD = 4.5


class Ink(str, Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def hex(self) -> Hex:
        return "#FFFFFF" if self is Ink.WHITE else "#000000"


@dataclass(frozen=True)
class ContrastResult:
    step: int
    hex: Hex
    contrast_ratio: float
    ink: Ink
    meets_threshold: bool

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["ink"] = self.ink.value
        out["ink_hex"] = self.ink.hex
        return out


def _color(value: Hex) -> Color:
    # strict: a silent fallback would skew every ratio
    return Color(rgb_to_hex(parse_hex(value)))


def relative_luminance(value: Hex) -> float:
    return float(_color(value).luminance())


def contrast_ratio(a: Hex, b: Hex) -> float:
    """Unrounded (L1 + 0.05) / (L2 + 0.05) with L1 the lighter colour."""
    return float(_color(a).contrast(_color(b), method="wcag21"))


def evaluate_contrast(
    colors: Iterable[GeneratedColor], background: Hex = DEFAULT_BACKGROUND
) -> list[ContrastResult]:
    bg = _color(background)
    out: list[ContrastResult] = []
    for c in colors:
        ratio = round(float(bg.contrast(_color(c.hex), method="wcag21")), 2)
        meets = ratio > AA_THRESHOLD
        out.append(
            ContrastResult(
                step=c.step,
                hex=c.hex,
                contrast_ratio=ratio,
                ink=Ink.WHITE if meets else Ink.BLACK,
                meets_threshold=meets,
            )
        )
    return out


def first_sufficient_contrast(results: Sequence[ContrastResult]) -> ContrastResult | None:
    """Lowest step meeting the AA threshold, or None."""
    return next((r for r in results if r.meets_threshold), None)


__all__ = [
    "AA_THRESHOLD",
    "Ink",
    "ContrastResult",
    "relative_luminance",
    "contrast_ratio",
    "evaluate_contrast",
    "first_sufficient_contrast",
]
