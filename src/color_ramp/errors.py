"""Error kinds raised by the ramp core."""

from __future__ import annotations


class RampError(ValueError):
    """Base class; subclasses ValueError so plain `except ValueError` still works."""


class ConfigurationError(RampError):
    """The ramp request is malformed (step count, curve, ranges)."""


class InvalidColorError(RampError):
    """A hex string failed the format check where no fallback is acceptable."""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid hex color: {value!r}")
        self.value = value


__all__ = ["RampError", "ConfigurationError", "InvalidColorError"]
