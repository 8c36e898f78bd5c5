"""Info panel (sidebar) and bottom status bar."""
from __future__ import annotations

import pygame

from tick_transition import TransitionState

from ui.constants import (
    LABEL_COLOR,
    LANE_COUNT,
    LANE_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)

_STATE_COLORS = {
    TransitionState.IDLE: TEXT_DIM,
    TransitionState.SCHEDULED: (240, 200, 80),
    TransitionState.RUNNING: (100, 255, 100),
    TransitionState.PAUSED: (255, 120, 120),
}


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    family: str,
    state: TransitionState,
    duration: float,
    delay: float,
    loop: bool,
    runs: int,
    ended: int,
    fps: int,
) -> None:
    """Draw right-side info panel."""
    x = SCREEN_W - SIDEBAR_W
    h = LANE_H * LANE_COUNT

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render("INFO", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    surface.blit(font.render(f"Family: {family}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(state.value.upper(), True, _STATE_COLORS[state]), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render(f"Runs: {runs}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Ended: {ended}", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render(f"Dur: {duration:.0f}ms", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Delay: {delay:.0f}ms", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"FPS: {fps}", True, TEXT_COLOR), (cx, cy))
    cy += line_h

    loop_str = "ON" if loop else "OFF"
    loop_color = (100, 255, 100) if loop else TEXT_DIM
    surface.blit(font.render(f"Loop: {loop_str}", True, loop_color), (cx, cy))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = LANE_H * LANE_COUNT
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[Space] Run  [P] Pause/Play  [L] Loop  [D] Delay  [+/-] Duration  [</>] Family  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
