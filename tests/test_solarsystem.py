import pygame
import pytest
from pygame.math import Vector2

from threebody.constants import WINDOW_HEIGHT, WINDOW_WIDTH, Color
from threebody.solarsystem import SolarSystem, blend_colors

A = Color(0, 100, 200, 255)
B = Color(100, 200, 0, 55)
CENTRE = (WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0)


def make_system(positions, velocities, masses, radii=None, g=1.0, trail_length=10):
    n = len(positions)
    radii = radii if radii is not None else [1.0] * n
    colours = [A, B, A, B][:n]
    return SolarSystem(velocities, masses, positions, radii, colours, colours, trail_length, g)


def test_blend_endpoints():
    assert blend_colors(A, B, 0.0) == A
    assert blend_colors(A, B, 1.0) == B


def test_blend_clamps_t():
    assert blend_colors(A, B, -3.0) == A
    assert blend_colors(A, B, 7.0) == B


def test_blend_midpoint_between_components():
    mid = blend_colors(A, B, 0.5)
    for m, x, y in zip(mid, A, B):
        assert min(x, y) <= m <= max(x, y)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        SolarSystem([(0, 0)], [1.0, 2.0], [(0, 0)], [1.0], [A], [A], 10, 1.0)


def test_constructs_planets_in_order():
    system = make_system([(0, 0), (500, 0)], [(1, 0), (0, 1)], [3.0, 4.0])
    assert [p.mass for p in system.planets] == [3.0, 4.0]
    assert system.planets[1].position == Vector2(500, 0)


def test_single_planet_does_not_move():
    system = make_system([(10, 20)], [(5, 5)], [1.0])
    system.update()
    assert system.planets[0].position == Vector2(10, 20)


def test_equal_masses_stay_centred():
    system = make_system(
        [(100, 100), (300, 200)], [(0.5, -1.0), (-0.5, 1.0)], [50.0, 50.0], g=2.0
    )
    for _ in range(5):
        system.update()
        centre = sum((p.position for p in system.planets), Vector2()) / 2
        assert centre.x == pytest.approx(CENTRE[0])
        assert centre.y == pytest.approx(CENTRE[1])


def test_accelerations_balance_momentum():
    system = make_system([(0, 0), (300, 400)], [(0, 0), (0, 0)], [10.0, 30.0], g=5.0)
    system.update()
    a, b = system.planets
    momentum = a.mass * a.acceleration + b.mass * b.acceleration
    assert momentum.length() == pytest.approx(0.0, abs=1e-9)
    assert a.acceleration.dot(Vector2(300, 400)) > 0


def test_gravity_follows_inverse_square():
    near = make_system([(0, 0), (100, 0)], [(0, 0), (0, 0)], [1.0, 1.0], g=1.0)
    far = make_system([(0, 0), (200, 0)], [(0, 0), (0, 0)], [1.0, 1.0], g=1.0)
    near.update()
    far.update()
    ratio = near.planets[0].acceleration.x / far.planets[0].acceleration.x
    assert ratio == pytest.approx(4.0)


def test_collision_merges_conserving_mass_and_momentum():
    system = make_system(
        [(0, 0), (5, 0), (1000, 1000)],
        [(1, 0), (-2, 3), (0, 0)],
        [2.0, 6.0, 1.0],
        radii=[3.0, 4.0, 1.0],
    )
    assert system.handle_collisions() is True
    assert len(system.planets) == 2
    assert system.planets[0].position == Vector2(1000, 1000)
    merged = system.planets[-1]
    assert merged.mass == 8.0
    assert merged.radius == 7.0
    assert merged.position == Vector2(0, 0)
    expected = 2.0 * Vector2(1, 0) + 6.0 * Vector2(-2, 3)
    assert (merged.mass * merged.velocity).x == pytest.approx(expected.x)
    assert (merged.mass * merged.velocity).y == pytest.approx(expected.y)
    assert merged.colour == blend_colors(A, B, 0.5)
    assert merged.trail_length == system.trail_length


def test_no_collision_when_apart():
    system = make_system([(0, 0), (100, 0)], [(0, 0), (0, 0)], [1.0, 1.0], radii=[5.0, 5.0])
    assert system.handle_collisions() is False
    assert len(system.planets) == 2


def test_update_merges_touching_planets():
    system = make_system(
        [(0, 0), (3, 0)], [(0, 0), (0, 0)], [1.0, 1.0], radii=[2.0, 2.0], g=0.0
    )
    system.update()
    assert len(system.planets) == 1
    assert system.planets[0].mass == 2.0


def test_draw_renders_each_planet():
    system = make_system([(50, 50), (150, 150)], [(0, 0), (0, 0)], [1.0, 1.0], radii=[4.0, 4.0])
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    system.draw(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((150, 150)))[:3] == (255, 255, 255)