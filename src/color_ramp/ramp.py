# ramp.py

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from numbers import Integral, Real
from typing import Any, Iterable, Mapping

import numpy as np

from .convert import HSB, Hex, color_formats, hsb_to_hex, parse_hex, rgb_to_hex, rgb_to_hsb
from .curves import Curve, apply_curve, parse_curve
from .errors import ConfigurationError

log = logging.getLogger(__name__)


class Rotation(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    @classmethod
    def _missing_(cls, value: object) -> Rotation | None:
        if not isinstance(value, str):
            return None
        v = value.strip().lower()
        aliases = {"cw": cls.CLOCKWISE, "ccw": cls.COUNTERCLOCKWISE}
        return aliases.get(v) or next((m for m in cls if m.value == v), None)


@dataclass(frozen=True)
class ChannelSpec:
    start: float
    end: float
    curve: Curve | str = Curve.LINEAR
    rate: float | None = None


@dataclass(frozen=True)
class RampRequest:
    steps: int
    hue: ChannelSpec
    saturation: ChannelSpec
    brightness: ChannelSpec
    minor_steps: frozenset[int] = field(default_factory=frozenset)
    lock_hex: Hex | None = None
    rotation: Rotation | str = Rotation.CLOCKWISE

    @classmethod
    def from_mapping(
        cls, props: Mapping[str, Any], options: Mapping[str, Any] | None = None
    ) -> RampRequest:
        """
        Build a request from the nested-dict shape used by the JS colour library:
          props   = {"steps", "hue", "saturation", "brightness"}  (channels: start/end/curve/rate)
          options = {"minorSteps", "lockHex", "rotation"}
        """
        if not isinstance(props, Mapping):
            raise ConfigurationError("ramp props must be a mapping")
        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            raise ConfigurationError("ramp options must be a mapping")
        try:
            return cls(
                steps=props["steps"],
                hue=_channel_from_mapping(props["hue"]),
                saturation=_channel_from_mapping(props["saturation"]),
                brightness=_channel_from_mapping(props["brightness"]),
                minor_steps=frozenset(options.get("minorSteps") or ()),
                lock_hex=options.get("lockHex"),
                rotation=options.get("rotation") or Rotation.CLOCKWISE,
            )
        except KeyError as exc:
            raise ConfigurationError(f"missing ramp field {exc.args[0]!r}") from None
        except TypeError as exc:
            raise ConfigurationError(f"malformed ramp request: {exc}") from None


def _channel_from_mapping(spec: Any) -> ChannelSpec:
    if not isinstance(spec, Mapping):
        raise ConfigurationError(f"channel spec must be a mapping, got {spec!r}")
    return ChannelSpec(
        start=spec["start"],
        end=spec["end"],
        curve=spec.get("curve", Curve.LINEAR),
        rate=spec.get("rate"),
    )


@dataclass(frozen=True)
class GeneratedColor:
    step: int
    hex: Hex
    h: float
    s: float
    b: float
    is_major: bool
    is_locked: bool

    @property
    def label(self) -> int:
        return self.step * 100

    @property
    def hsb(self) -> HSB:
        return HSB(self.h, self.s, self.b)

    def formats(self) -> dict[str, Any]:
        return color_formats(self.hex)

    def to_dict(self, *, formats: bool = False) -> dict[str, Any]:
        out = asdict(self)
        out["label"] = self.label
        if formats:
            out.update(self.formats())
        return out


# ---- validation ----


def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise ConfigurationError(f"{name} must be finite, got {v}")
    return v


def _check_channel(name: str, spec: ChannelSpec, *, unit: bool) -> None:
    if not isinstance(spec, ChannelSpec):
        raise ConfigurationError(f"{name} must be a ChannelSpec, got {spec!r}")
    for end in ("start", "end"):
        v = _number(f"{name}.{end}", getattr(spec, end))
        if unit and not 0.0 <= v <= 1.0:
            raise ConfigurationError(f"{name}.{end} must be within [0, 1], got {v}")
    parse_curve(spec.curve)
    if spec.rate is not None and _number(f"{name}.rate", spec.rate) <= 0.0:
        raise ConfigurationError(f"{name}.rate must be positive, got {spec.rate}")


def _validate(request: RampRequest) -> Rotation:
    steps = request.steps
    if isinstance(steps, bool) or not isinstance(steps, Integral) or steps < 1:
        raise ConfigurationError(f"steps must be an integer ≥ 1, got {steps!r}")
    _check_channel("hue", request.hue, unit=False)
    _check_channel("saturation", request.saturation, unit=True)
    _check_channel("brightness", request.brightness, unit=True)
    if any(isinstance(i, bool) or not isinstance(i, Integral) for i in request.minor_steps):
        raise ConfigurationError(f"minor steps must be integers, got {request.minor_steps!r}")
    try:
        return Rotation(request.rotation)
    except ValueError:
        raise ConfigurationError(f"unknown rotation {request.rotation!r}") from None


# ---- interpolation ----


def step_parameters(steps: int) -> np.ndarray:
    """t_i = i / (steps - 1); a single step sits at t = 0."""
    if steps == 1:
        return np.zeros(1)
    return np.linspace(0.0, 1.0, steps)


def channel_values(spec: ChannelSpec, u: np.ndarray) -> np.ndarray:
    """Channel value per parameter; `rate` scales the eased parameter, not the value."""
    v = apply_curve(spec.curve, u)
    if spec.rate is not None:
        # rate > 1 finishes the sweep within the first 1/rate of the ramp
        v = np.minimum(v * float(spec.rate), 1.0)
    start, end = float(spec.start), float(spec.end)
    return start + v * (end - start)


def _hsb_distance(h: np.ndarray, s: np.ndarray, b: np.ndarray, target: HSB) -> np.ndarray:
    dh = np.abs(h - target.h) % 360.0
    dh = np.minimum(dh, 360.0 - dh) / 180.0
    return dh**2 + (s - target.s) ** 2 + (b - target.b) ** 2


def nearest_step(h: np.ndarray, s: np.ndarray, b: np.ndarray, target: HSB) -> int:
    """Index of the step closest to `target`; lowest index wins ties."""
    return int(np.argmin(_hsb_distance(h, s, b, target)))


def generate_ramp(request: RampRequest) -> list[GeneratedColor]:
    rotation = _validate(request)
    n = int(request.steps)

    u = step_parameters(n)
    u_hue = 1.0 - u if rotation is Rotation.COUNTERCLOCKWISE and n > 1 else u

    hs = channel_values(request.hue, u_hue) % 360.0
    ss = np.clip(channel_values(request.saturation, u), 0.0, 1.0)
    bs = np.clip(channel_values(request.brightness, u), 0.0, 1.0)

    locked: int | None = None
    lock: tuple[Hex, HSB] | None = None
    if request.lock_hex is not None:
        rgb = parse_hex(request.lock_hex)
        lock = (rgb_to_hex(rgb), rgb_to_hsb(rgb.r, rgb.g, rgb.b))
        locked = nearest_step(hs, ss, bs, lock[1])

    out: list[GeneratedColor] = []
    for i in range(n):
        if lock is not None and i == locked:
            hex_i, hsb = lock
        else:
            hsb = HSB(float(hs[i]), float(ss[i]), float(bs[i]))
            hex_i = hsb_to_hex(hsb)
        out.append(
            GeneratedColor(
                step=i,
                hex=hex_i,
                h=hsb.h,
                s=hsb.s,
                b=hsb.b,
                is_major=i not in request.minor_steps,
                is_locked=i == locked,
            )
        )

    log.debug("generated %d-step ramp (locked step: %s)", n, locked)
    return out


def major_steps(colors: Iterable[GeneratedColor]) -> list[GeneratedColor]:
    return [c for c in colors if c.is_major]


__all__ = [
    "Rotation",
    "ChannelSpec",
    "RampRequest",
    "GeneratedColor",
    "step_parameters",
    "channel_values",
    "nearest_step",
    "generate_ramp",
    "major_steps",
]
