# threebody

A small two-dimensional gravity simulation that shows well-known periodic
solutions of the three-body problem. Each body leaves a fading trail and has a
coloured glow, drawn over a field of stars. When two bodies touch, they merge
into one.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
threebody
```

This opens a 1300×800 window titled "Three-Body Simulation" and runs until the
window is closed. The window is redrawn at up to 60 frames per second; the
physics advances by one `SolarSystem.update()` for every 0.01 s of elapsed
time, with the time counted per frame capped at 0.25 s. Each starting
configuration prints a few lines about itself when it is chosen.

Options:

- `--orbit {broucke-a3,broucke-a7,euler,figure8,lagrange}`: starting
  configuration (default `broucke-a7`)
- `--stars N`: number of background stars (default 20, must not be negative)
- `--seed N`: seed for placing the stars, so the same seed gives the same sky
- `--frames N`: stop by itself after `N` frames (must be positive)

## Starting configurations

`threebody.initialconditions` provides one function per configuration, each
returning an `OrbitConfig`:

- `lagrange_orbit()`: three equal masses at the corners of an equilateral
  triangle that turns about its centre
- `euler_orbit()`: three bodies in a line, with a heavier, larger body in the
  middle
- `figure8_orbit()`: the figure-eight choreography
- `broucke_a3()`: Broucke periodic orbit A3
- `broucke_a7()`: Broucke periodic orbit A7

The same functions are available by command-line name in the `ORBITS`
dictionary. An `OrbitConfig` is a frozen dataclass holding the positions,
velocities, masses, radii, colours, trail colours, trail length, gravitational
constant `g` and the `notes` printed at start-up; `build_system()` turns it
into a `SolarSystem`.

## Using it as a library

```python
from threebody.initialconditions import figure8_orbit

config = figure8_orbit()
system = config.build_system()

for _ in range(1000):
    system.update()

for planet in system.planets:
    print(planet.mass, planet.radius, tuple(planet.position))
```

`SolarSystem(velocities, masses, positions, radii, colours, trail_colours,
trail_length, g)` raises `ValueError` when the velocities, masses and positions
differ in length, or when there are fewer radii or colours than bodies.

`SolarSystem.update()` does nothing when there is one body or none. Otherwise
it works out the pairwise gravitational accelerations, adds each acceleration
to its body's velocity, and moves each body by its velocity plus a shared
correction: the distance from the bodies' mean position to the centre of the
window. This keeps the system in view. It then calls `handle_collisions()`.

`SolarSystem.handle_collisions()` merges the first pair of bodies it finds
whose distance is no more than the sum of their radii, and returns whether it
merged anything. The merged body is placed at the first body's position and
added at the end of `planets`; it has the total mass, the mass-weighted mean
velocity, the sum of the two radii, and colours halfway between the two, as
given by `blend_colors(a, b, t)`.

A `Planet` keeps its last `trail_length` positions in `trail`. Two planets
compare equal when their positions and masses are equal.

`SolarSystem.draw(surface)`, `Planet.draw(surface)` and
`Background.draw(surface)` draw onto any pygame surface. `Background(num_stars,
size, colour, rng=None)` places its stars with the given `random.Random`, or a
fresh one when none is given.

Colours are `threebody.constants.Color` named tuples of red, green, blue and
alpha; the window size, time step and palette are in the same module.

## What it does not do

The window cannot be panned, zoomed or paused, and bodies cannot be added
while it runs; closing the window is the only interaction. At most one pair of
bodies merges per step.