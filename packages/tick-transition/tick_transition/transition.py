"""Transition - frame-driven eased progress with pause, resume and looping."""
from __future__ import annotations

import functools
import logging
from typing import Callable

from tick_transition.config import TransitionConfig
from tick_transition.types import Curve, FrameHandle, FrameScheduler, TransitionState

logger = logging.getLogger(__name__)

_EVENTS = ("change", "ended")


class Transition:
    """Animates one progress value from 0 to 1 over ``duration`` milliseconds.

    Every frame the linear fraction of elapsed time is passed through the
    easing curve and handed to the ``change`` handler. Time spent paused is
    excluded from the fraction. A non-looping run fires ``ended`` once after
    its last ``change``; a looping run restarts instead and never ends.
    """

    def __init__(self, scheduler: FrameScheduler, config: TransitionConfig | None = None) -> None:
        if config is None:
            config = TransitionConfig()
        self._scheduler = scheduler
        self._ease = config.curve
        self.duration = config.duration
        self.delay = config.delay
        self.loop = config.loop

        self._state = TransitionState.IDLE
        self._start = 0.0
        self._diff = 0.0
        self._generation = 0
        self._pending: FrameHandle | None = None
        self._on_change: Callable[[float], None] | None = None
        self._on_ended: Callable[[], None] | None = None

    @property
    def ease(self) -> Curve:
        return self._ease

    @property
    def state(self) -> TransitionState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state in (TransitionState.RUNNING, TransitionState.PAUSED)

    @property
    def paused(self) -> bool:
        return self._state is TransitionState.PAUSED

    def on(self, event: str, handler: Callable[..., None] | None) -> None:
        """Set the single handler for ``change`` or ``ended``, replacing any previous one."""
        if event == "change":
            self._on_change = handler
        elif event == "ended":
            self._on_ended = handler
        else:
            raise ValueError(f"Unknown event {event!r}, expected one of {_EVENTS}")

    def run(self, duration: float | None = None, delay: float | None = None) -> None:
        """Start the transition from zero, or restart it if already running.

        A given ``duration`` or ``delay`` replaces the stored value for this
        and every later run.
        """
        if duration is not None:
            self.duration = duration
        if delay is not None:
            self.delay = delay

        self._cancel_pending()
        self._diff = 0.0

        if self.delay > 0:
            logger.debug("Transition scheduled in %sms for %sms", self.delay, self.duration)
            self._state = TransitionState.SCHEDULED
            self._pending = self._scheduler.call_later(self.delay, self._begin)
        else:
            logger.debug("Transition started for %sms", self.duration)
            self._begin()

    def pause(self) -> None:
        if self._state is not TransitionState.RUNNING:
            logger.debug("pause() ignored in state %s", self._state.value)
            return
        self._diff += self._scheduler.now() - self._start
        self._cancel_pending()
        self._state = TransitionState.PAUSED
        logger.debug("Transition paused after %sms", self._diff)

    def play(self) -> None:
        """Resume a paused run. Does nothing in any other state."""
        if self._state is not TransitionState.PAUSED:
            logger.debug("play() ignored in state %s", self._state.value)
            return
        logger.debug("Transition resumed at %sms", self._diff)
        self._begin()

    def _begin(self) -> None:
        self._generation += 1
        self._start = self._scheduler.now()
        self._state = TransitionState.RUNNING
        self._request_frame()

    def _request_frame(self) -> None:
        self._pending = self._scheduler.request_frame(
            functools.partial(self._frame, self._generation)
        )

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _fraction(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        fraction = (now - self._start + self._diff) / self.duration
        return min(fraction, 1.0)

    def _frame(self, generation: int, now: float) -> None:
        # Frames left over from before a pause or restart must not touch progress.
        if self._state is not TransitionState.RUNNING or generation != self._generation:
            return
        self._pending = None

        fraction = self._fraction(now)
        progress = self._ease(fraction)
        if self._on_change is not None:
            self._on_change(progress)

        # The handler paused or restarted the transition.
        if self._state is not TransitionState.RUNNING or generation != self._generation:
            return

        if fraction < 1:
            self._request_frame()
        elif self.loop:
            logger.debug("Transition looped")
            self._diff = 0.0
            self._begin()
        else:
            self._state = TransitionState.IDLE
            logger.debug("Transition ended")
            if self._on_ended is not None:
                self._on_ended()


def make_transition(
    scheduler: FrameScheduler,
    ease: Curve | str = "ease_in",
    duration: float = 800,
    delay: float = 0,
    loop: bool = False,
) -> Transition:
    """Return a Transition built from keyword defaults."""
    return Transition(
        scheduler, TransitionConfig(ease=ease, duration=duration, delay=delay, loop=loop)
    )
