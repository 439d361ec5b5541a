"""Easing functions that blend from a start value ``a`` to an end value ``b``.

Each tween maps a progress value ``t`` (normally in [0, 1]) through an easing
curve and interpolates linearly with the result. Values may be numbers, any
object supporting ``+``, ``-`` and scalar ``*`` (such as ``Vec2``), or lists
and tuples of those, which are blended element by element.
"""

from __future__ import annotations

import math
from typing import Any

__all__ = [
    "instant",
    "delayed",
    "linear",
    "smoothstep",
    "smootherstep",
    "smootheststep",
    "quadratic_in",
    "quadratic_out",
    "quadratic_in_out",
    "cubic_in",
    "cubic_out",
    "cubic_in_out",
    "quartic_in",
    "quartic_out",
    "quartic_in_out",
    "quintic_in",
    "quintic_out",
    "quintic_in_out",
    "sinusoidal_in",
    "sinusoidal_out",
    "sinusoidal_in_out",
    "exponential_in",
    "exponential_out",
    "exponential_in_out",
    "circular_in",
    "circular_out",
    "circular_in_out",
    "elastic_in",
    "elastic_out",
    "elastic_in_out",
    "back_in",
    "back_out",
    "back_in_out",
    "bounce_in",
    "bounce_out",
    "bounce_in_out",
]

_HALF_PI = math.pi / 2
_BACK_S = 1.70158
_BACK_S2 = 2.5949095


# ---------------------------------------------------------------------------
# Basic tweens
# ---------------------------------------------------------------------------


def instant(a: Any, b: Any, t: float) -> Any:
    """Return ``b`` regardless of ``t``."""
    return b


def delayed(a: Any, b: Any, t: float) -> Any:
    """Return ``a`` until ``t`` reaches exactly 1.0, then ``b``."""
    return b if t == 1.0 else a


def linear(a: Any, b: Any, t: float) -> Any:
    """Interpolate linearly from ``a`` to ``b``.

    Lists and tuples are blended element-wise, truncated to the shorter length.
    """
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        blended = [linear(x, y, t) for x, y in zip(a, b)]
        return tuple(blended) if isinstance(a, tuple) else blended
    return a + (b - a) * t


def smoothstep(a: Any, b: Any, t: float) -> Any:
    """Blend with 3rd order Hermite interpolation."""
    return linear(a, b, t * t * (3.0 - 2.0 * t))


def smootherstep(a: Any, b: Any, t: float) -> Any:
    """Blend with 5th order Hermite interpolation."""
    return linear(a, b, t * t * t * (t * (t * 6.0 - 15.0) + 10.0))


def smootheststep(a: Any, b: Any, t: float) -> Any:
    """Blend with 7th order Hermite interpolation."""
    eased = t * t * t * t * (t * (t * (t * -20.0 + 70.0) - 84.0) + 35.0)
    return linear(a, b, eased)


# ---------------------------------------------------------------------------
# Polynomial tweens
# ---------------------------------------------------------------------------


def quadratic_in(a: Any, b: Any, t: float) -> Any:
    """Accelerate with a 2nd order polynomial."""
    return linear(a, b, t * t)


def quadratic_out(a: Any, b: Any, t: float) -> Any:
    """Decelerate with a 2nd order polynomial."""
    return linear(a, b, t * (2.0 - t))


def quadratic_in_out(a: Any, b: Any, t: float) -> Any:
    """Accelerate then decelerate with a 2nd order polynomial."""
    t *= 2.0
    if t < 1.0:
        eased = 0.5 * t * t
    else:
        t -= 1.0
        eased = -0.5 * (t * (t - 2.0) - 1.0)
    return linear(a, b, eased)


def cubic_in(a: Any, b: Any, t: float) -> Any:
    """Accelerate with a 3rd order polynomial."""
    return linear(a, b, t * t * t)


def cubic_out(a: Any, b: Any, t: float) -> Any:
    """Decelerate with a 3rd order polynomial."""
    t -= 1.0
    return linear(a, b, t * t * t + 1.0)


def cubic_in_out(a: Any, b: Any, t: float) -> Any:
    """Accelerate then decelerate with a 3rd order polynomial."""
    t *= 2.0
    if t < 1.0:
        eased = 0.5 * t * t * t
    else:
        t -= 2.0
        eased = 0.5 * (t * t * t + 2.0)
    return linear(a, b, eased)


def quartic_in(a: Any, b: Any, t: float) -> Any:
    """Accelerate with a 4th order polynomial."""
    return linear(a, b, t * t * t * t)


def quartic_out(a: Any, b: Any, t: float) -> Any:
    """Decelerate with a 4th order polynomial."""
    t -= 1.0
    return linear(a, b, -(t * t * t * t - 1.0))


def quartic_in_out(a: Any, b: Any, t: float) -> Any:
    """Accelerate then decelerate with a 4th order polynomial."""
    t *= 2.0
    if t < 1.0:
        eased = 0.5 * t * t * t * t
    else:
        t -= 2.0
        eased = -0.5 * (t * t * t * t - 2.0)
    return linear(a, b, eased)


def quintic_in(a: Any, b: Any, t: float) -> Any:
    """Accelerate with a 5th order polynomial."""
    return linear(a, b, t * t * t * t * t)


def quintic_out(a: Any, b: Any, t: float) -> Any:
    """Decelerate with a 5th order polynomial."""
    t -= 1.0
    return linear(a, b, t * t * t * t * t + 1.0)


def quintic_in_out(a: Any, b: Any, t: float) -> Any:
    """Accelerate then decelerate with a 5th order polynomial."""
    t *= 2.0
    if t < 1.0:
        eased = 0.5 * t * t * t * t * t
    else:
        t -= 2.0
        eased = 0.5 * (t * t * t * t * t + 2.0)
    return linear(a, b, eased)


# ---------------------------------------------------------------------------
# Mathematical tweens
# ---------------------------------------------------------------------------


def sinusoidal_in(a: Any, b: Any, t: float) -> Any:
    """Accelerate along a sine curve."""
    return linear(a, b, 1.0 - math.cos(t * _HALF_PI))


def sinusoidal_out(a: Any, b: Any, t: float) -> Any:
    """Decelerate along a sine curve."""
    return linear(a, b, math.sin(t * _HALF_PI))


def sinusoidal_in_out(a: Any, b: Any, t: float) -> Any:
    """Accelerate then decelerate along a sine curve."""
    return linear(a, b, -0.5 * (math.cos(math.pi * t) - 1.0))


def exponential_in(a: Any, b: Any, t: float) -> Any:
    """Accelerate exponentially."""
    return linear(a, b, 2.0 ** (10.0 * (t - 1.0)))


def exponential_out(a: Any, b: Any, t: float) -> Any:
    """Decelerate exponentially."""
    return linear(a, b, -(2.0 ** (-10.0 * t)) + 1.0)


def exponential_in_out(a: Any, b: Any, t: float) -> Any:
    """Accelerate then decelerate exponentially."""
    t *= 2.0
    if t < 1.0:
        eased = 0.5 * 2.0 ** (10.0 * (t - 1.0))
    else:
        t -= 1.0
        eased = 0.5 * (-(2.0 ** (-10.0 * t)) + 2.0)
    return linear(a, b, eased)


def circular_in(a: Any, b: Any, t: float) -> Any:
    """Accelerate along a quarter circle; ``t`` must lie in [-1, 1]."""
    return linear(a, b, 1.0 - math.sqrt(1.0 - t * t))


def circular_out(a: Any, b: Any, t: float) -> Any:
    """Decelerate along a quarter circle; ``t`` must lie in [0, 2]."""
    t -= 1.0
    return linear(a, b, math.sqrt(1.0 - t * t))


def circular_in_out(a: Any, b: Any, t: float) -> Any:
    """Accelerate then decelerate along circular arcs."""
    t *= 2.0
    if t < 1.0:
        eased = -0.5 * (math.sqrt(1.0 - t * t) - 1.0)
    else:
        t -= 2.0
        eased = 0.5 * (math.sqrt(1.0 - t * t) + 1.0)
    return linear(a, b, eased)


# ---------------------------------------------------------------------------
# Effect tweens
# ---------------------------------------------------------------------------


def _elastic_wave(t: float) -> float:
    return math.sin((t - 0.1) * (2.0 * math.pi) * 2.5)


def elastic_in(a: Any, b: Any, t: float) -> Any:
    """Wind up with a growing oscillation before reaching ``b``."""
    if t == 0.0:
        return a
    if t == 1.0:
        return b
    t -= 1.0
    return linear(a, b, -(2.0 ** (10.0 * t)) * _elastic_wave(t))


def elastic_out(a: Any, b: Any, t: float) -> Any:
    """Overshoot ``b`` and settle with a decaying oscillation."""
    if t == 0.0:
        return a
    if t == 1.0:
        return b
    return linear(a, b, 2.0 ** (-10.0 * t) * _elastic_wave(t) + 1.0)


def elastic_in_out(a: Any, b: Any, t: float) -> Any:
    """Oscillate on both ends of the transition."""
    t *= 2.0
    t -= 1.0
    if t < 0.0:
        eased = -0.5 * 2.0 ** (10.0 * t) * _elastic_wave(t)
    else:
        eased = 2.0 ** (-10.0 * t) * _elastic_wave(t) * 0.5 + 1.0
    return linear(a, b, eased)


def back_in(a: Any, b: Any, t: float) -> Any:
    """Pull back behind ``a`` before moving to ``b``."""
    return linear(a, b, t * t * ((_BACK_S + 1.0) * t - _BACK_S))


def back_out(a: Any, b: Any, t: float) -> Any:
    """Overshoot ``b`` before settling on it."""
    t -= 1.0
    return linear(a, b, t * t * ((_BACK_S + 1.0) * t + _BACK_S) + 1.0)


def back_in_out(a: Any, b: Any, t: float) -> Any:
    """Pull back at the start and overshoot at the end."""
    t *= 2.0
    if t < 1.0:
        eased = 0.5 * (t * t * ((_BACK_S2 + 1.0) * t - _BACK_S2))
    else:
        t -= 2.0
        eased = 0.5 * (t * t * ((_BACK_S2 + 1.0) * t + _BACK_S2) + 2.0)
    return linear(a, b, eased)


def _bounce_out_curve(t: float) -> float:
    if t < 1.0 / 2.75:
        return 7.5625 * t * t
    if t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def _bounce_in_curve(t: float) -> float:
    return 1.0 - _bounce_out_curve(1.0 - t)


def _bounce_in_out_curve(t: float) -> float:
    if t < 0.5:
        return _bounce_in_curve(t * 2.0) * 0.5
    return _bounce_out_curve(t * 2.0 - 1.0) * 0.5 + 0.5


def bounce_in(a: Any, b: Any, t: float) -> Any:
    """Bounce away from ``a`` with growing hops."""
    return linear(a, b, _bounce_in_curve(t))


def bounce_out(a: Any, b: Any, t: float) -> Any:
    """Bounce into ``b`` with shrinking hops."""
    return linear(a, b, _bounce_out_curve(t))


def bounce_in_out(a: Any, b: Any, t: float) -> Any:
    """Bounce at both ends of the transition."""
    return linear(a, b, _bounce_in_out_curve(t))