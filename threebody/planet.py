"""A single gravitating body with a fading trail."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

import pygame
from pygame.math import Vector2

from .constants import TRAIL_SIZE, Color

_GLOW_SCALE = 5
_GLOW_STEPS = 16
_BODY_COLOUR = Color(255, 255, 255)


class Planet:
    """A body moved by semi-implicit Euler steps, remembering recent positions."""

    def __init__(
        self,
        velocity: Sequence[float],
        position: Sequence[float],
        mass: float,
        radius: float,
        colour: Color,
        trail_colour: Color,
        trail_length: int,
    ) -> None:
        self.velocity = Vector2(velocity)
        self.position = Vector2(position)
        self.acceleration = Vector2(0, 0)
        self.mass = float(mass)
        self.radius = float(radius)
        self.colour = Color(*colour)
        self.trail_colour = Color(*trail_colour)
        self.trail_length = int(trail_length)
        self.trail: deque[Vector2] = deque(maxlen=self.trail_length)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Planet):
            return NotImplemented
        return self.position == other.position and self.mass == other.mass

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Planet(position={tuple(self.position)}, velocity={tuple(self.velocity)}, "
            f"mass={self.mass}, radius={self.radius})"
        )

    def move(self, correction: Sequence[float]) -> None:
        """Apply the current acceleration, then shift by velocity plus a camera correction."""
        self.velocity += self.acceleration
        self.position += self.velocity + Vector2(correction)
        self.trail.append(Vector2(self.position))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the trail, the coloured glow and the white body onto ``surface``."""
        self._draw_trail(surface)
        self._draw_glow(surface)
        pygame.draw.circle(surface, _BODY_COLOUR, self.position, self.radius)

    def _draw_trail(self, surface: pygame.Surface) -> None:
        if not self.trail:
            return
        size = TRAIL_SIZE
        left = math.floor(min(p.x for p in self.trail))
        top = math.floor(min(p.y for p in self.trail))
        right = math.ceil(max(p.x for p in self.trail) + 2 * size)
        bottom = math.ceil(max(p.y for p in self.trail) + 2 * size)
        overlay = pygame.Surface((right - left + 1, bottom - top + 1), pygame.SRCALPHA)
        count = len(self.trail)
        r, g, b, _ = self.trail_colour
        for index, point in enumerate(self.trail):
            alpha = int(index / count * 255)
            # Dots are positioned by their top-left corner.
            centre = (point.x - left + size, point.y - top + size)
            pygame.draw.circle(overlay, (r, g, b, alpha), centre, size)
        surface.blit(overlay, (left, top))

    def _draw_glow(self, surface: pygame.Surface) -> None:
        glow_radius = self.radius * _GLOW_SCALE
        extent = math.ceil(glow_radius)
        if extent <= 0:
            return
        glow = pygame.Surface((2 * extent, 2 * extent), pygame.SRCALPHA)
        r, g, b, _ = self.colour
        for step in range(_GLOW_STEPS):
            fraction = step / _GLOW_STEPS
            alpha = int(200 * ((step + 1) / _GLOW_STEPS) ** 2)
            pygame.draw.circle(
                glow, (r, g, b, alpha), (extent, extent), glow_radius * (1 - fraction)
            )
        surface.blit(glow, (self.position.x - extent, self.position.y - extent))