from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping

import numpy as np

from .errors import ConfigurationError

CurveFn = Callable[[np.ndarray], np.ndarray]


class Curve(str, Enum):
    LINEAR = "linear"
    EASE_IN_SINE = "easeInSine"
    EASE_OUT_SINE = "easeOutSine"
    EASE_IN_OUT_SINE = "easeInOutSine"
    EASE_IN_QUAD = "easeInQuad"
    EASE_OUT_QUAD = "easeOutQuad"
    EASE_IN_OUT_QUAD = "easeInOutQuad"
    EASE_IN_CUBIC = "easeInCubic"
    EASE_OUT_CUBIC = "easeOutCubic"
    EASE_IN_OUT_CUBIC = "easeInOutCubic"


def _ease_in(p: int) -> CurveFn:
    return lambda u: u**p


def _ease_out(p: int) -> CurveFn:
    return lambda u: 1.0 - (1.0 - u) ** p


def _ease_in_out(p: int) -> CurveFn:
    # first half accelerates, second half mirrors it
    half = 2.0 ** (p - 1)
    return lambda u: np.where(u < 0.5, half * u**p, 1.0 - (-2.0 * u + 2.0) ** p / 2.0)


CURVES: Mapping[Curve, CurveFn] = {
    Curve.LINEAR: lambda u: u,
    Curve.EASE_IN_SINE: lambda u: 1.0 - np.cos(u * np.pi / 2.0),
    Curve.EASE_OUT_SINE: lambda u: np.sin(u * np.pi / 2.0),
    Curve.EASE_IN_OUT_SINE: lambda u: 0.5 - 0.5 * np.cos(np.pi * u),
    Curve.EASE_IN_QUAD: _ease_in(2),
    Curve.EASE_OUT_QUAD: _ease_out(2),
    Curve.EASE_IN_OUT_QUAD: _ease_in_out(2),
    Curve.EASE_IN_CUBIC: _ease_in(3),
    Curve.EASE_OUT_CUBIC: _ease_out(3),
    Curve.EASE_IN_OUT_CUBIC: _ease_in_out(3),
}


def parse_curve(value: Curve | str) -> Curve:
    try:
        return Curve(value)
    except ValueError:
        raise ConfigurationError(
            f"unknown curve {value!r}; expected one of {[c.value for c in Curve]}"
        ) from None


def apply_curve(curve: Curve | str, u: np.ndarray) -> np.ndarray:
    """Evaluate `curve` over parameters in [0, 1]; result clipped to [0, 1]."""
    fn = CURVES[parse_curve(curve)]
    u = np.asarray(u, dtype=np.float64)
    return np.clip(fn(u), 0.0, 1.0)


__all__ = ["Curve", "CURVES", "CurveFn", "parse_curve", "apply_curve"]
