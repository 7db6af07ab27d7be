"""Error types raised by the operator core."""

from __future__ import annotations

import math


class PhaserError(Exception):
    """Base class for errors raised by phaser_core."""


class InvalidArgumentError(PhaserError, ValueError):
    """An argument is outside the domain an operation accepts.

    Raised at the call site, never clamped. Typical causes: a probability
    outside [0, 1], an unknown step code, or a zero bound for an index draw.
    """


def check_probability(value: float, name: str = "probability") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidArgumentError(f"{name} must be within [0, 1], got {value!r}")
    return value
