"""Two-dimensional gravitational simulation of classic three-body orbits, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["constants", "planet", "solarsystem", "initialconditions", "background", "app"]