"""Scalar maths helpers used throughout the engine."""

from __future__ import annotations

import math
import sys

E = 2.71828182845
PI = 3.14159265359
TAU = 6.28318530718
RAD2DEG = 57.2957795131
DEG2RAD = 0.01745329251
SQRT2 = 1.4142135624


def _round_half_away(x: float) -> float:
    """Round to nearest, with halves going away from zero."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def sigmoid(x: float) -> float:
    """Map ``x`` onto the open interval (-1, 1)."""
    try:
        return 1.0 - (2.0 / (1.0 + math.exp(x)))
    except OverflowError:
        return 1.0


def sign(x: float) -> float:
    """Return -1.0, 1.0 or 0.0 according to the sign of ``x``."""
    if x < 0.0:
        return -1.0
    if x > 0.0:
        return 1.0
    return 0.0


def snap(x: float, interval: float) -> float:
    """Snap ``x`` to the nearest multiple of ``interval``.

    Intervals of 1 or less snap to the nearest whole number.
    """
    if interval <= 1.0:
        base = math.floor(x)
        return base + _round_half_away(x - base)
    return _round_half_away(x / interval) * interval


def fract(x: float) -> float:
    """Return the fractional part of ``x`` (always non-negative)."""
    return x - math.floor(x)


def clamp(x: float, lo: float, hi: float) -> float:
    """Limit ``x`` to the range [lo, hi]."""
    low_bound = lo if lo > x else x
    return hi if hi < low_bound else low_bound


def within_epsilon(lhs: float, rhs: float, epsilon: float = sys.float_info.epsilon) -> bool:
    """Whether ``lhs`` and ``rhs`` differ by at most ``epsilon``."""
    return math.fabs(rhs - lhs) <= epsilon


def approach(start: float, target: float, amount: float) -> float:
    """Move ``start`` towards ``target`` by ``amount`` without overshooting."""
    if target > start:
        return min(start + amount, target)
    return max(start - amount, target)


def lerp(start: float, end: float, t: float) -> float:
    """Linearly interpolate between ``start`` and ``end``."""
    return start + (end - start) * t


def smooth(start: float, end: float, amount: float, time: float) -> float:
    """Exponentially ease from ``start`` towards ``end``."""
    return math.exp(amount * time / (amount - 1.0)) * (start - end) + end


def spring(bounciness: float, tension: float, t: float) -> float:
    """Damped spring response at time ``t``.

    Raises ValueError when ``bounciness`` and ``tension`` give no oscillation.
    """
    beta = math.sqrt((2.0 * bounciness) * (2.0 * tension) - 1.0)
    phase = beta * t / (2.0 * bounciness)
    decay = math.exp(-t / (2.0 * bounciness))
    return 1.0 - (1.0 / beta * decay * (math.sin(phase) + beta * math.cos(phase)))