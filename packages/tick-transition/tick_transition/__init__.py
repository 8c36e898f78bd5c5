"""tick-transition - Eased, frame-driven progress with pause and loop."""
from __future__ import annotations

from tick_transition.bezier import CubicBezier, cubic_bezier
from tick_transition.config import TransitionConfig
from tick_transition.easing import EASINGS, mirror
from tick_transition.loop import FrameLoop
from tick_transition.transition import Transition, make_transition
from tick_transition.types import (
    Curve,
    FrameHandle,
    FrameScheduler,
    InvalidCurveError,
    TransitionState,
)

__all__ = [
    "Transition",
    "TransitionConfig",
    "TransitionState",
    "make_transition",
    "FrameLoop",
    "FrameHandle",
    "FrameScheduler",
    "CubicBezier",
    "cubic_bezier",
    "Curve",
    "InvalidCurveError",
    "EASINGS",
    "mirror",
]
