from __future__ import annotations

from .convert import Hex, hex_to_hsb
from .ramp import RampRequest

DEFAULT_LOCK_HEX: Hex = "#1FA846"
DEFAULT_BACKGROUND: Hex = "#FFFFFF"

DEFAULT_STEPS = 11
MAX_STEPS = 64  # upper bound accepted by the HTTP layer

SATURATION = {"start": 0.04, "end": 1.0, "curve": "linear", "rate": 2.0}
BRIGHTNESS = {"start": 1.0, "end": 0.11, "curve": "linear"}

DEFAULT_MINOR_STEPS: tuple[int, ...] = (0, 1)
DEFAULT_ROTATION = "clockwise"


def canonical_props(lock_hex: Hex = DEFAULT_LOCK_HEX, steps: int = DEFAULT_STEPS) -> dict:
    """Monochrome ramp props pinned to the hue of `lock_hex`.

    The hue readout uses the soft conversion, so a malformed lock colour yields
    hue 0 here; the lock lookup in the generator still rejects it.
    """
    h = hex_to_hsb(lock_hex).h
    return {
        "steps": steps,
        "hue": {"start": h, "end": h, "curve": "linear"},
        "saturation": dict(SATURATION),
        "brightness": dict(BRIGHTNESS),
    }


def canonical_options(lock_hex: Hex = DEFAULT_LOCK_HEX) -> dict:
    return {
        "minorSteps": list(DEFAULT_MINOR_STEPS),
        "lockHex": lock_hex,
        "rotation": DEFAULT_ROTATION,
    }


def canonical_request(lock_hex: Hex = DEFAULT_LOCK_HEX, steps: int = DEFAULT_STEPS) -> RampRequest:
    return RampRequest.from_mapping(canonical_props(lock_hex, steps), canonical_options(lock_hex))
