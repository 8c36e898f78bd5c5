"""Cubic Bezier easing curves.

A curve is defined by the control points (0, 0), (x1, y1), (x2, y2), (1, 1).
Evaluating it at x means solving x(t) = x for the curve parameter t and
returning y(t). The solver brackets t with a precomputed sample table, then
refines with Newton-Raphson, or with bisection where the slope is too shallow
for Newton to be stable.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_transition.types import InvalidCurveError

# Tuned for the performance/precision tradeoff; behavior depends on exact values.
NEWTON_ITERATIONS = 4
NEWTON_MIN_SLOPE = 0.001
SUBDIVISION_PRECISION = 0.0000001
SUBDIVISION_MAX_ITERATIONS = 10

SPLINE_TABLE_SIZE = 11
SAMPLE_STEP_SIZE = 1.0 / (SPLINE_TABLE_SIZE - 1)


def _a(a1: float, a2: float) -> float:
    return 1.0 - 3.0 * a2 + 3.0 * a1


def _b(a1: float, a2: float) -> float:
    return 3.0 * a2 - 6.0 * a1


def _c(a1: float) -> float:
    return 3.0 * a1


def calc_bezier(t: float, a1: float, a2: float) -> float:
    """x(t) given x1 and x2, or y(t) given y1 and y2."""
    return ((_a(a1, a2) * t + _b(a1, a2)) * t + _c(a1)) * t


def get_slope(t: float, a1: float, a2: float) -> float:
    """dx/dt given x1 and x2, or dy/dt given y1 and y2."""
    return 3.0 * _a(a1, a2) * t * t + 2.0 * _b(a1, a2) * t + _c(a1)


def _binary_subdivide(x: float, a: float, b: float, x1: float, x2: float) -> float:
    i = 0
    while True:
        current_t = a + (b - a) / 2.0
        current_x = calc_bezier(current_t, x1, x2) - x
        if current_x > 0.0:
            b = current_t
        else:
            a = current_t
        i += 1
        if abs(current_x) <= SUBDIVISION_PRECISION or i >= SUBDIVISION_MAX_ITERATIONS:
            return current_t


def _newton_raphson_iterate(x: float, guess_t: float, x1: float, x2: float) -> float:
    for _ in range(NEWTON_ITERATIONS):
        slope = get_slope(guess_t, x1, x2)
        if slope == 0.0:
            return guess_t
        current_x = calc_bezier(guess_t, x1, x2) - x
        guess_t -= current_x / slope
    return guess_t


@dataclass(frozen=True, slots=True)
class CubicBezier:
    """Easing curve through (0, 0), (x1, y1), (x2, y2), (1, 1).

    x1 and x2 must lie in [0, 1] so that x(t) is monotonic and the curve is
    a function of x. y1 and y2 are unconstrained, which allows overshoot.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    _samples: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise InvalidCurveError(self.x1, self.x2)
        if self.is_linear:
            samples: tuple[float, ...] = ()
        else:
            samples = tuple(
                calc_bezier(i * SAMPLE_STEP_SIZE, self.x1, self.x2)
                for i in range(SPLINE_TABLE_SIZE)
            )
        object.__setattr__(self, "_samples", samples)

    @property
    def is_linear(self) -> bool:
        return self.x1 == self.y1 and self.x2 == self.y2

    def __call__(self, x: float) -> float:
        if self.is_linear:
            return x
        # Exact at the extremes regardless of round-off in the solver.
        if x == 0:
            return 0.0
        if x == 1:
            return 1.0
        return calc_bezier(self._t_for_x(x), self.y1, self.y2)

    def _t_for_x(self, x: float) -> float:
        samples = self._samples
        interval_start = 0.0
        current = 1
        last = SPLINE_TABLE_SIZE - 1
        while current != last and samples[current] <= x:
            interval_start += SAMPLE_STEP_SIZE
            current += 1
        current -= 1

        dist = (x - samples[current]) / (samples[current + 1] - samples[current])
        guess_t = interval_start + dist * SAMPLE_STEP_SIZE

        initial_slope = get_slope(guess_t, self.x1, self.x2)
        if initial_slope >= NEWTON_MIN_SLOPE:
            return _newton_raphson_iterate(x, guess_t, self.x1, self.x2)
        if initial_slope == 0.0:
            return guess_t
        return _binary_subdivide(
            x, interval_start, interval_start + SAMPLE_STEP_SIZE, self.x1, self.x2
        )


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> CubicBezier:
    """Build a cubic Bezier easing curve. Raises InvalidCurveError on bad x values."""
    return CubicBezier(x1, y1, x2, y2)
