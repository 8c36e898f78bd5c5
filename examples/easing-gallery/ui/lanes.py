"""Lane rendering: label, curve plot and orb track per easing curve."""
from __future__ import annotations

import pygame

from ui.constants import (
    CURVE_W,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_COLORS,
    LANE_H,
    ORB_RADIUS,
    TRACK_BG,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
)
from ui.curves import draw_curve_plot


def draw_lanes(
    surface: pygame.Surface,
    font: pygame.font.Font,
    easing_names: list[str],
    progress: list[float],
    fraction: float,
) -> None:
    """Draw one lane per curve; orbs sit at each lane's eased progress."""
    track_x = LABEL_W + CURVE_W
    width = LABEL_W + CURVE_W + TRACK_W

    for i, easing in enumerate(easing_names):
        lane_y = i * LANE_H
        color = LANE_COLORS[i % len(LANE_COLORS)]

        pygame.draw.rect(surface, LANE_BG, (0, lane_y, width, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (width, lane_y + LANE_H - 1))

        label = font.render(easing, True, LABEL_COLOR)
        surface.blit(label, (10, lane_y + LANE_H // 2 - label.get_height() // 2))

        draw_curve_plot(surface, easing, color, LABEL_W, lane_y + 10, CURVE_W, LANE_H - 20, fraction)

        pygame.draw.rect(surface, TRACK_BG, (track_x, lane_y, TRACK_W, LANE_H))
        rail_y = lane_y + LANE_H // 2
        rail_left = track_x + TRACK_PAD
        rail_right = track_x + TRACK_W - TRACK_PAD
        pygame.draw.line(surface, TRACK_RAIL, (rail_left, rail_y), (rail_right, rail_y), 2)

        dim_color = tuple(c // 3 for c in color)
        pygame.draw.circle(surface, dim_color, (rail_left, rail_y), 4)
        pygame.draw.circle(surface, dim_color, (rail_right, rail_y), 4)

        ox = int(rail_left + (rail_right - rail_left) * progress[i])
        pygame.draw.circle(surface, color, (ox, rail_y), ORB_RADIUS)
        pygame.draw.circle(surface, (255, 255, 255), (ox, rail_y), ORB_RADIUS, 1)
