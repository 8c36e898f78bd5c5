"""Layout constants, color definitions and curve families."""

# Timing
FPS = 60

# Layout dimensions
LANE_COUNT = 3
LANE_H = 120
LABEL_W = 120
CURVE_W = 140
TRACK_W = 440
SIDEBAR_W = 160
STATUS_H = 36

SCREEN_W = LABEL_W + CURVE_W + TRACK_W + SIDEBAR_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H

# Orb
ORB_RADIUS = 10
TRACK_PAD = 20  # padding inside the track

# Duration limits (ms)
DURATION_STEP = 200
DURATION_MIN = 200
DURATION_MAX = 4000

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_BG = (25, 25, 40)
TRACK_RAIL = (60, 60, 80)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

# One color per lane: in, out, in_out
LANE_COLORS: list[tuple[int, int, int]] = [
    (255, 160, 40),
    (60, 220, 80),
    (220, 80, 220),
]

FAMILIES: list[tuple[str, list[str]]] = [
    ("keyword", ["ease_in", "ease_out", "ease_in_out"]),
    ("sine", ["sine_in", "sine_out", "sine_in_out"]),
    ("quad", ["quad_in", "quad_out", "quad_in_out"]),
    ("cubic", ["cubic_in", "cubic_out", "cubic_in_out"]),
    ("quart", ["quart_in", "quart_out", "quart_in_out"]),
    ("quint", ["quint_in", "quint_out", "quint_in_out"]),
    ("expo", ["expo_in", "expo_out", "expo_in_out"]),
    ("circ", ["circ_in", "circ_out", "circ_in_out"]),
    ("back", ["back_in", "back_out", "back_in_out"]),
    ("bounce", ["bounce_in", "bounce_out", "bounce_in_out"]),
    ("elastic", ["elastic_in", "elastic_out", "elastic_in_out"]),
]
