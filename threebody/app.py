"""Command-line entry point that opens a window and runs the simulation."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from .background import Background
from .constants import DT, STAR_COLOUR, WINDOW_HEIGHT, WINDOW_WIDTH
from .initialconditions import ORBITS

_FRAME_RATE = 60
_MAX_FRAME_TIME = 0.25
_STAR_RADIUS = 1.5


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(
        prog="threebody", description="Animate a gravitational three-body system."
    )
    parser.add_argument(
        "--orbit", choices=sorted(ORBITS), default="broucke-a7", help="starting configuration"
    )
    parser.add_argument("--stars", type=int, default=20, help="number of background stars")
    parser.add_argument("--seed", type=int, default=None, help="seed for star placement")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)
    if args.stars < 0:
        parser.error("--stars must not be negative")
    if args.frames is not None and args.frames < 1:
        parser.error("--frames must be positive")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation window until it is closed."""
    args = parse_args(argv)
    config = ORBITS[args.orbit]()
    for line in config.notes:
        print(line)

    system = config.build_system()
    background = Background(args.stars, _STAR_RADIUS, STAR_COLOUR, random.Random(args.seed))

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Three-Body Simulation")
        clock = pygame.time.Clock()
        accumulator = 0.0
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            # Cap frame time so a stall does not trigger a burst of physics steps.
            accumulator += min(clock.tick(_FRAME_RATE) / 1000.0, _MAX_FRAME_TIME)
            while accumulator >= DT:
                system.update()
                accumulator -= DT

            screen.fill((0, 0, 0))
            background.draw(screen)
            system.draw(screen)
            pygame.display.flip()

            frames += 1
            if args.frames is not None and frames >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0