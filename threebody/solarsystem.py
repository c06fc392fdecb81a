"""N-body gravity simulation with merging collisions."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame
from pygame.math import Vector2

from .constants import EPSILON, WINDOW_HEIGHT, WINDOW_WIDTH, Color
from .planet import Planet


def blend_colors(a: Color, b: Color, t: float) -> Color:
    """Linearly interpolate from ``a`` to ``b``; ``t`` is clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return Color(*(int(x + t * (y - x)) for x, y in zip(Color(*a), Color(*b))))


class SolarSystem:
    """A set of planets under mutual gravity, kept centred in the window."""

    def __init__(
        self,
        velocities: Sequence[Sequence[float]],
        masses: Sequence[float],
        positions: Sequence[Sequence[float]],
        radii: Sequence[float],
        colours: Sequence[Color],
        trail_colours: Sequence[Color],
        trail_length: int,
        g: float,
    ) -> None:
        if len(velocities) != len(masses) or len(velocities) != len(positions):
            raise ValueError(
                "Mismatch in sizes: 'velocities', 'masses', and 'positions' "
                "must all have the same length."
            )
        if len(radii) < len(velocities) or len(colours) < len(velocities) or len(
            trail_colours
        ) < len(velocities):
            raise ValueError("'radii', 'colours' and 'trail_colours' need an entry per planet.")

        self.g = float(g)
        self.trail_length = int(trail_length)
        self.planets: list[Planet] = [
            Planet(velocity, position, mass, radius, colour, trail_colour, self.trail_length)
            for velocity, mass, position, radius, colour, trail_colour in zip(
                velocities, masses, positions, radii, colours, trail_colours
            )
        ]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every planet onto ``surface``."""
        for planet in self.planets:
            planet.draw(surface)

    def update(self) -> None:
        """Advance one step: gravity, centring correction, then collisions."""
        if len(self.planets) <= 1:
            return

        total = Vector2(0, 0)
        for planet in self.planets:
            planet.acceleration = Vector2(0, 0)
            total += planet.position
            for other in self.planets:
                if other is planet:
                    continue
                offset = other.position - planet.position
                dist_sq = offset.length_squared()
                if dist_sq == 0:
                    # Coincident bodies have no direction; they merge below.
                    continue
                force = self.g * planet.mass * other.mass / (dist_sq + EPSILON * EPSILON)
                planet.acceleration += offset / math.sqrt(dist_sq) * (force / planet.mass)

        average = total / len(self.planets)
        correction = Vector2(WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0) - average

        for planet in self.planets:
            planet.move(correction)

        self.handle_collisions()

    def handle_collisions(self) -> bool:
        """Merge the first pair of touching planets; return whether a merge happened."""
        for i, current in enumerate(self.planets):
            for j, other in enumerate(self.planets):
                if i == j:
                    continue
                distance = (other.position - current.position).length()
                if distance > current.radius + other.radius:
                    continue
                total_mass = current.mass + other.mass
                merged = Planet(
                    (current.mass * current.velocity + other.mass * other.velocity) / total_mass,
                    current.position,
                    total_mass,
                    current.radius + other.radius,
                    blend_colors(current.colour, other.colour, 0.5),
                    blend_colors(current.trail_colour, other.trail_colour, 0.5),
                    self.trail_length,
                )
                self.planets = [
                    planet for k, planet in enumerate(self.planets) if k not in (i, j)
                ]
                self.planets.append(merged)
                return True
        return False