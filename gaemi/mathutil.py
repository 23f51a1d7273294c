"""Scalar math helpers used throughout the engine."""

from __future__ import annotations

import math
from typing import TypeVar

PI = 3.1415926535
TWO_PI = PI * 2.0
PI_OVER_2 = PI / 2.0
INFINITY = math.inf
NEG_INFINITY = -math.inf

T = TypeVar("T")


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / PI


def near_zero(value: float, epsilon: float = 0.001) -> bool:
    """Return True when ``value`` lies within ``epsilon`` of zero."""
    return abs(value) <= epsilon


def clamp(value: T, lower: T, upper: T) -> T:
    """Restrict ``value`` to the closed range [lower, upper]."""
    return min(upper, max(lower, value))


def cot(angle: float) -> float:
    """Cotangent of ``angle`` in radians."""
    return 1.0 / math.tan(angle)


def lerp(a: float, b: float, f: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``f``."""
    return a + f * (b - a)