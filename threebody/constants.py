"""Window, simulation and colour settings shared across the simulator."""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An 8-bit RGBA colour, usable anywhere pygame accepts a colour."""

    r: int
    g: int
    b: int
    a: int = 255


# Window configuration
WINDOW_WIDTH = 1300
WINDOW_HEIGHT = 800
DT = 0.01

STAR_COLOUR = Color(255, 255, 255)

TEAL = Color(20, 255, 236)
BLUE = Color(80, 160, 255)
YELLOW = Color(255, 223, 0)
GREEN = Color(0, 255, 128)
ORANGE = Color(255, 140, 0)
SKY_BLUE = Color(0, 191, 255)
PURPLE = Color(176, 38, 255)
RED = Color(255, 87, 51)

GREEN_TRAIL = Color(144, 238, 144)
ORANGE_TRAIL = Color(255, 200, 100)
SKY_BLUE_TRAIL = Color(173, 216, 230)
BLUE_TRAIL = Color(80, 160, 255)
YELLOW_TRAIL = Color(255, 223, 0)
PURPLE_TRAIL = Color(196, 147, 255)

P1_COL = GREEN
P2_COL = ORANGE
P3_COL = BLUE

TRAIL_LENGTH = 1100
TRAIL_SIZE = 2.0
TRAIL_COL1 = GREEN_TRAIL
TRAIL_COL2 = ORANGE_TRAIL
TRAIL_COL3 = BLUE_TRAIL

PI = 3.14159265389793
EPSILON = 0.0