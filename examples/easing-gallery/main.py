"""Easing Gallery - Interactive easing curve visualizer.

Exercises tick-transition: one Transition per lane, all driven by a shared
FrameLoop stepped once per rendered frame.

Controls:
  Space   Run (or restart) every lane
  P       Pause / resume
  L       Toggle looping
  D       Toggle a 500ms start delay
  +/-     Adjust duration
  Left/Right  Previous / next curve family
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_transition import FrameLoop, Transition, TransitionState, make_transition

from ui.constants import (
    BG_COLOR,
    DURATION_MAX,
    DURATION_MIN,
    DURATION_STEP,
    FAMILIES,
    FPS,
    SCREEN_H,
    SCREEN_W,
)
from ui.lanes import draw_lanes
from ui.status import draw_sidebar, draw_status_bar

logger = logging.getLogger("easing_gallery")


class GalleryState:
    """Holds the frame loop, the per-lane transitions and their latest progress."""

    def __init__(self) -> None:
        self.frames = FrameLoop(fps=FPS)

        self.family_index = 0
        self.duration = 1200.0
        self.delay = 0.0
        self.loop = False
        self.run_count = 0
        self.ended_count = 0

        # Linear timeline sharing the lanes' timing; its progress is the raw fraction.
        self.timeline = self._make_timeline()
        self.fraction = 0.0
        self.lanes: list[Transition] = []
        self.progress: list[float] = []
        self._build_lanes()

    @property
    def family(self) -> str:
        return FAMILIES[self.family_index][0]

    @property
    def easing_names(self) -> list[str]:
        return FAMILIES[self.family_index][1]

    def _make_timeline(self) -> Transition:
        timeline = make_transition(self.frames, ease="linear", duration=self.duration)
        timeline.on("change", self._on_fraction)
        timeline.on("ended", self._on_ended)
        return timeline

    def _on_fraction(self, fraction: float) -> None:
        self.fraction = fraction

    def _on_ended(self) -> None:
        self.ended_count += 1
        logger.info("%s curves finished after %.0fms", self.family, self.duration)

    def _build_lanes(self) -> None:
        for lane in self.lanes:
            lane.pause()
        self.lanes = []
        self.progress = [0.0] * len(self.easing_names)
        for i, name in enumerate(self.easing_names):
            lane = make_transition(self.frames, ease=name, duration=self.duration, loop=self.loop)
            lane.on("change", self._progress_setter(i))
            self.lanes.append(lane)

    def _progress_setter(self, index: int):
        def on_change(progress: float) -> None:
            self.progress[index] = progress

        return on_change

    def _all(self) -> list[Transition]:
        return [self.timeline, *self.lanes]

    def run(self) -> None:
        self.run_count += 1
        self.fraction = 0.0
        self.progress = [0.0] * len(self.lanes)
        for transition in self._all():
            transition.loop = self.loop
            transition.run(self.duration, self.delay)

    def toggle_pause(self) -> None:
        if self.timeline.paused:
            for transition in self._all():
                transition.play()
        else:
            for transition in self._all():
                transition.pause()

    def toggle_loop(self) -> None:
        self.loop = not self.loop
        for transition in self._all():
            transition.loop = self.loop

    def toggle_delay(self) -> None:
        self.delay = 0.0 if self.delay else 500.0

    def change_duration(self, step: float) -> None:
        self.duration = min(max(self.duration + step, DURATION_MIN), DURATION_MAX)

    def change_family(self, step: int) -> None:
        self.family_index = (self.family_index + step) % len(FAMILIES)
        self.timeline.pause()
        self.timeline = self._make_timeline()
        self.fraction = 0.0
        self._build_lanes()

    @property
    def state(self) -> TransitionState:
        return self.timeline.state


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive easing curve gallery")
    parser.add_argument("-v", "--verbose", action="store_true", help="log transition events")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery - tick-transition demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.run()
                elif event.key == pygame.K_p:
                    state.toggle_pause()
                elif event.key == pygame.K_l:
                    state.toggle_loop()
                elif event.key == pygame.K_d:
                    state.toggle_delay()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.change_duration(DURATION_STEP)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.change_duration(-DURATION_STEP)
                elif event.key == pygame.K_RIGHT:
                    state.change_family(1)
                elif event.key == pygame.K_LEFT:
                    state.change_family(-1)

        # --- Frame ---
        state.frames.step()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, font, state.easing_names, state.progress, state.fraction)
        draw_sidebar(
            screen,
            font,
            family=state.family,
            state=state.state,
            duration=state.duration,
            delay=state.delay,
            loop=state.loop,
            runs=state.run_count,
            ended=state.ended_count,
            fps=FPS,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
