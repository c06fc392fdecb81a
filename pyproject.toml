[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threebody"
version = "0.1.0"
description = "Two-dimensional gravitational N-body simulation with classic three-body orbits, drawn with pygame"
requires-python = ">=3.10"
keywords = ["three-body", "n-body", "gravity", "orbits", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
threebody = "threebody.app:main"

[tool.hatch.build.targets.wheel]
packages = ["threebody"]

[tool.pytest.ini_options]
addopts = "-ra"
