"""Named easing curves for transitions.

Most curves are cubic Beziers. Bounce and elastic have no Bezier form and are
written out directly. Back, bounce and elastic leave [0, 1] on purpose.
"""
from __future__ import annotations

import math

from tick_transition.bezier import cubic_bezier
from tick_transition.types import Curve

_HALF = 0.5


def bounce_out(t: float) -> float:
    a = 4 / 11
    b = 8 / 11
    c = 0.9
    ca = 4356 / 361
    cb = 35442 / 1805
    cc = 16061 / 1805
    t2 = t * t
    if t < a:
        return 7.5625 * t2
    if t < b:
        return 9.075 * t2 - 9.9 * t + 3.4
    if t < c:
        return ca * t2 - cb * t + cc
    return 10.8 * t * t - 20.52 * t + 10.72


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    if t < _HALF:
        return _HALF * (1 - bounce_out(1 - t * 2))
    return _HALF * bounce_out(t * 2 - 1) + _HALF


def elastic_in(t: float) -> float:
    return math.sin(13 * t * math.pi / 2) * math.pow(2, 10 * (t - 1))


def elastic_out(t: float) -> float:
    return math.sin(-13 * (t + 1) * math.pi / 2) * math.pow(2, -10 * t) + 1


def elastic_in_out(t: float) -> float:
    if t < _HALF:
        return _HALF * math.sin(13 * math.pi / 2 * 2 * t) * math.pow(2, 10 * (2 * t - 1))
    return (
        _HALF * math.sin(-13 * math.pi / 2 * ((2 * t - 1) + 1)) * math.pow(2, -10 * (2 * t - 1))
        + 1
    )


def mirror(curve: Curve) -> Curve:
    """Return the curve played backwards: x -> 1 - curve(1 - x).

    Turns an entering curve into the matching leaving one.
    """

    def mirrored(x: float) -> float:
        return 1 - curve(1 - x)

    return mirrored


linear = cubic_bezier(0.25, 0.25, 0.75, 0.75)
snap = cubic_bezier(0, 1, _HALF, 1)

ease_in = cubic_bezier(0.42, 0, 1, 1)
ease_out = cubic_bezier(0, 0, 0.58, 1)
ease_in_out = cubic_bezier(0.42, 0, 0.58, 1)

back_in = cubic_bezier(0.6, -0.28, 0.735, 0.045)
circ_in = cubic_bezier(0.6, 0.04, 0.98, 0.335)
cubic_in = cubic_bezier(0.55, 0.055, 0.675, 0.19)
expo_in = cubic_bezier(0.95, 0.05, 0.795, 0.035)
quad_in = cubic_bezier(0.55, 0.085, 0.68, 0.53)
quart_in = cubic_bezier(0.895, 0.03, 0.685, 0.22)
quint_in = cubic_bezier(0.755, 0.05, 0.855, 0.06)
sine_in = cubic_bezier(0.47, 0, 0.745, 0.715)

back_out = cubic_bezier(0.175, 0.885, 0.32, 1.275)
circ_out = cubic_bezier(0.075, 0.82, 0.165, 1)
cubic_out = cubic_bezier(0.215, 0.61, 0.355, 1)
expo_out = cubic_bezier(0.19, 1, 0.22, 1)
quad_out = cubic_bezier(0.25, 0.46, 0.45, 0.94)
quart_out = cubic_bezier(0.165, 0.84, 0.44, 1)
quint_out = cubic_bezier(0.23, 1, 0.32, 1)
sine_out = cubic_bezier(0.39, 0.575, 0.565, 1)

back_in_out = cubic_bezier(0.68, -0.55, 0.265, 1.55)
circ_in_out = cubic_bezier(0.785, 0.135, 0.15, 0.86)
cubic_in_out = cubic_bezier(0.645, 0.045, 0.355, 1)
expo_in_out = cubic_bezier(1, 0, 0, 1)
quad_in_out = cubic_bezier(0.455, 0.03, 0.515, 0.955)
quart_in_out = cubic_bezier(0.77, 0, 0.175, 1)
quint_in_out = cubic_bezier(0.86, 0, 0.07, 1)
sine_in_out = cubic_bezier(0.445, 0.05, 0.55, 0.95)


EASINGS: dict[str, Curve] = {
    "linear": linear,
    "snap": snap,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_in_out": quad_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "quart_in": quart_in,
    "quart_out": quart_out,
    "quart_in_out": quart_in_out,
    "quint_in": quint_in,
    "quint_out": quint_out,
    "quint_in_out": quint_in_out,
    "expo_in": expo_in,
    "expo_out": expo_out,
    "expo_in_out": expo_in_out,
    "circ_in": circ_in,
    "circ_out": circ_out,
    "circ_in_out": circ_in_out,
    "back_in": back_in,
    "back_out": back_out,
    "back_in_out": back_in_out,
    "bounce_in": bounce_in,
    "bounce_out": bounce_out,
    "bounce_in_out": bounce_in_out,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_in_out": elastic_in_out,
}
