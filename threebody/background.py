"""A static field of randomly placed stars."""

from __future__ import annotations

import random

import pygame
from pygame.math import Vector2

from .constants import WINDOW_HEIGHT, WINDOW_WIDTH, Color


class Background:
    """Stars scattered over the window; positions are their top-left corners."""

    def __init__(
        self,
        num_stars: int,
        size: float,
        colour: Color,
        rng: random.Random | None = None,
    ) -> None:
        if num_stars < 0:
            raise ValueError("num_stars must not be negative")
        rng = rng or random.Random()
        self.size = float(size)
        self.colour = Color(*colour)
        self.stars: list[Vector2] = [
            Vector2(rng.randrange(WINDOW_WIDTH), rng.randrange(WINDOW_HEIGHT))
            for _ in range(num_stars)
        ]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every star onto ``surface``."""
        offset = Vector2(self.size, self.size)
        for star in self.stars:
            pygame.draw.circle(surface, self.colour, star + offset, self.size)