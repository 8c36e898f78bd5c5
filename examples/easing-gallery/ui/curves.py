"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from tick_transition import EASINGS

from ui.constants import CURVE_BG, TEXT_DIM

# Back and elastic leave [0, 1]; leave room above and below the unit box.
_HEADROOM = 0.25


def draw_curve_plot(
    surface: pygame.Surface,
    easing_name: str,
    color: tuple[int, int, int],
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw an easing curve with a tracking dot at ``current_t``."""
    pad = 10
    plot_x = x + pad
    plot_w = w - 2 * pad
    unit_h = (h - 2 * pad) / (1 + 2 * _HEADROOM)
    base_y = y + pad + unit_h * (1 + _HEADROOM)

    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    # Unit box axes
    pygame.draw.line(surface, TEXT_DIM, (plot_x, base_y), (plot_x + plot_w, base_y))
    pygame.draw.line(surface, TEXT_DIM, (plot_x, base_y), (plot_x, base_y - unit_h))

    easing_fn = EASINGS[easing_name]
    samples = 80
    points = []
    for i in range(samples + 1):
        t = i / samples
        v = easing_fn(t)
        points.append((plot_x + t * plot_w, base_y - v * unit_h))
    pygame.draw.lines(surface, color, False, points, 2)

    if 0.0 <= current_t <= 1.0:
        v = easing_fn(current_t)
        dot_x = int(plot_x + current_t * plot_w)
        dot_y = int(base_y - v * unit_h)
        pygame.draw.circle(surface, (255, 255, 255), (dot_x, dot_y), 4)
        pygame.draw.circle(surface, color, (dot_x, dot_y), 3)
