"""Shared type aliases, errors and protocols for tick-transition."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Protocol

Curve = Callable[[float], float]
FrameCallback = Callable[[float], None]


class InvalidCurveError(ValueError):
    """Raised when a cubic Bezier has x control points outside [0, 1]."""

    def __init__(self, x1: float, x2: float) -> None:
        self.x1 = x1
        self.x2 = x2
        super().__init__(f"bezier x values must be in [0, 1] range, got x1={x1!r}, x2={x2!r}")


class TransitionState(enum.Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(slots=True, eq=False)
class FrameHandle:
    """A scheduled frame or timer callback. Cancelled handles never fire."""

    callback: Callable[..., Any]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FrameScheduler(Protocol):
    """Time source and scheduling primitives a Transition is driven by.

    All times are milliseconds on a monotonic clock.
    """

    def now(self) -> float: ...

    def request_frame(self, callback: FrameCallback) -> FrameHandle: ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> FrameHandle: ...
