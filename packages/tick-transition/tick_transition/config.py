"""Transition configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_transition.easing import EASINGS
from tick_transition.types import Curve


@dataclass(frozen=True)
class TransitionConfig:
    """Immutable defaults for a Transition.

    Attributes:
        ease: Easing curve, or the name of one in EASINGS.
        duration: Milliseconds per run. Zero or negative completes on the first frame.
        delay: Milliseconds to wait before the first frame of a run.
        loop: Restart at the end of every run instead of ending.
    """

    ease: Curve | str = "ease_in"
    duration: float = 800
    delay: float = 0
    loop: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.ease, str):
            if self.ease not in EASINGS:
                raise ValueError(f"Unknown easing {self.ease!r}")
        elif not callable(self.ease):
            raise ValueError(f"ease must be callable or an easing name, got {self.ease!r}")

    @property
    def curve(self) -> Curve:
        if isinstance(self.ease, str):
            return EASINGS[self.ease]
        return self.ease
