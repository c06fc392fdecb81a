"""Named starting configurations for three-body orbits."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from .constants import (
    P1_COL,
    P2_COL,
    P3_COL,
    PI,
    TRAIL_COL1,
    TRAIL_COL2,
    TRAIL_COL3,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Color,
)
from .solarsystem import SolarSystem

Vec = tuple[float, float]

_COLOURS = (P1_COL, P2_COL, P3_COL)
_TRAIL_COLOURS = (TRAIL_COL1, TRAIL_COL2, TRAIL_COL3)


@dataclass(frozen=True)
class OrbitConfig:
    """Everything needed to start a simulation from a given configuration."""

    name: str
    positions: tuple[Vec, ...]
    velocities: tuple[Vec, ...]
    masses: tuple[float, ...]
    radii: tuple[float, ...]
    colours: tuple[Color, ...]
    trail_colours: tuple[Color, ...]
    trail_length: int
    g: float
    notes: tuple[str, ...] = ()

    def build_system(self) -> SolarSystem:
        """Create a simulation seeded with this configuration."""
        return SolarSystem(
            self.velocities,
            self.masses,
            self.positions,
            self.radii,
            self.colours,
            self.trail_colours,
            self.trail_length,
            self.g,
        )


def _centre() -> Vec:
    return WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0


def _scaled(vector: Vec, factor: float) -> Vec:
    return vector[0] * factor, vector[1] * factor


def lagrange_orbit() -> OrbitConfig:
    """Three equal masses on an equilateral triangle rotating rigidly."""
    mass = 100.0
    radius = 10.0
    pos_x, pos_y = _centre()
    offset = 250.0
    angle = 30 * PI / 180

    positions = (
        (pos_x, pos_y - offset),
        (pos_x - offset * math.cos(angle), pos_y + offset * math.sin(angle)),
        (pos_x + offset * math.cos(angle), pos_y + offset * math.sin(angle)),
    )

    side = offset * math.sqrt(3)
    angular_velocity = 0.01
    period = 2 * PI / angular_velocity
    g = (4 * PI * PI * side**3) / (3 * mass * period * period)
    speed = angular_velocity * offset

    velocities = (
        _scaled((-1.0, 0.0), speed),
        _scaled((math.cos(60 * PI / 180), math.sin(60 * PI / 180)), speed),
        _scaled((math.sin(angle), -math.cos(angle)), speed),
    )

    return OrbitConfig(
        name="lagrange",
        positions=positions,
        velocities=velocities,
        masses=(mass, mass, mass),
        radii=(radius, radius, radius),
        colours=_COLOURS,
        trail_colours=_TRAIL_COLOURS,
        trail_length=200,
        g=g,
        notes=(
            "Configured Lagrange orbit with:",
            f"  Angular velocity: {angular_velocity:g}",
            f"  G value: {g:g}",
        ),
    )


def euler_orbit() -> OrbitConfig:
    """Three collinear bodies, a heavy one at the centre, rotating together."""
    centre_mass = 100.0
    outer_mass = centre_mass * 0.5
    planet_radius = 10.0
    centre_radius = planet_radius * (centre_mass / outer_mass) ** (1 / 3) * 2
    outer_radius = planet_radius

    pos_x, pos_y = _centre()
    euler_ratio = 3.6742346141747673
    centre_offset = 100.0
    reach = euler_ratio * centre_offset

    positions = (
        (pos_x - reach, pos_y),
        (pos_x, pos_y),
        (pos_x + reach, pos_y),
    )

    g = 40.0
    angular_velocity = math.sqrt(g * centre_mass / reach**3) * 1.055

    velocities = (
        (0.0, angular_velocity * reach),
        (0.0, 0.0),
        (0.0, -angular_velocity * reach),
    )

    return OrbitConfig(
        name="euler",
        positions=positions,
        velocities=velocities,
        masses=(outer_mass, centre_mass, outer_mass),
        radii=(outer_radius, centre_radius, outer_radius),
        colours=_COLOURS,
        trail_colours=_TRAIL_COLOURS,
        trail_length=200,
        g=g,
        notes=(
            "Configured Euler orbit with:",
            f"Euler ratio: {euler_ratio:g}",
            f"Angular velocity: {angular_velocity:g}",
            f"G value: {g:g}",
        ),
    )


def figure8_orbit() -> OrbitConfig:
    """The periodic figure-of-eight choreography for three equal masses."""
    mass = 100.0
    radius = 10.0
    g = 16.0
    pos_x, pos_y = _centre()

    unit_positions = (
        (-0.97000436, 0.24308753),
        (0.97000436, -0.24308753),
        (0.0, 0.0),
    )
    unit_velocities = (
        (0.4662036850, 0.4323657300),
        (0.4662036850, 0.4323657300),
        (-0.93240737, -0.86473146),
    )

    scale = 400.0
    velocity_scale = 2.0
    positions = tuple((x * scale + pos_x, y * scale + pos_y) for x, y in unit_positions)
    velocities = tuple(_scaled(v, velocity_scale) for v in unit_velocities)

    return OrbitConfig(
        name="figure8",
        positions=positions,
        velocities=velocities,
        masses=(mass, mass, mass),
        radii=(radius, radius, radius),
        colours=_COLOURS,
        trail_colours=_TRAIL_COLOURS,
        trail_length=400,
        g=g,
        notes=("Configured figure-8 orbit",),
    )


def _broucke(
    name: str,
    offsets: tuple[float, float, float],
    speeds: tuple[float, float, float],
    g: float,
    pos_scale: float,
    v_scale: float,
    notes: tuple[str, ...],
) -> OrbitConfig:
    mass = 100.0
    radius = 10.0
    pos_x, pos_y = _centre()
    return OrbitConfig(
        name=name,
        positions=tuple((pos_x + dx * pos_scale, pos_y) for dx in offsets),
        velocities=tuple((0.0, vy * v_scale) for vy in speeds),
        masses=(mass, mass, mass),
        radii=(radius, radius, radius),
        colours=_COLOURS,
        trail_colours=_TRAIL_COLOURS,
        trail_length=1100,
        g=g,
        notes=notes,
    )


def broucke_a3() -> OrbitConfig:
    """Broucke's periodic orbit A3, starting collinear on the horizontal axis."""
    return _broucke(
        "broucke-a3",
        (0.812382071, -1.1273158206, 0.3149337497),
        (1.4601869417, -0.8973577042, -0.5628292375),
        g=10.0,
        pos_scale=250.0,
        v_scale=2.0,
        notes=("BrouckeA3 Orbit Initialized!",),
    )


def broucke_a7() -> OrbitConfig:
    """Broucke's periodic orbit A7, starting collinear on the horizontal axis."""
    g = 18.0
    return _broucke(
        "broucke-a7",
        (-0.1095519101, 1.6613533905, -1.5518014804),
        (0.9913358338, -0.1569959746, -0.8343398592),
        g=g,
        pos_scale=200.0,
        v_scale=3.0,
        notes=(f"Computed G = {g:g}", "BrouckeA3 Orbit Initialized!"),
    )


ORBITS: dict[str, Callable[[], OrbitConfig]] = {
    "lagrange": lagrange_orbit,
    "euler": euler_orbit,
    "figure8": figure8_orbit,
    "broucke-a3": broucke_a3,
    "broucke-a7": broucke_a7,
}