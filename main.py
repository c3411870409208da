"""
2D Boids Simulation
===================

A flocking simulation: each boid steers away from crowding neighbours,
matches the heading of its local flock and drifts toward its centre.

Controls:
    - Space: Pause/resume
    - R: Re-randomise the flock
    - ESC: Quit

Usage:
    python main.py                     # Defaults from config/boids.py
    python main.py --boids 300         # Bigger flock
    python main.py --seed 7            # Reproducible start
"""

import argparse
import sys

from config import boids as config
from boids import Flock, FrameDimensions, InvalidFlockConfig
from core import Application


def build_flock(count: int) -> Flock:
    """Create a flock from the configured rule parameters."""
    return Flock(
        count,
        config.BOIDS["crowding_radius"],
        config.BOIDS["local_radius"],
        config.BOIDS["repulsion_factor"],
        config.BOIDS["adhesion_factor"],
        config.BOIDS["cohesion_factor"],
        max_speed=config.BOIDS["max_speed"],
        time_per_frame=config.BOIDS["time_per_frame"],
        boundary_inset=config.BOIDS["radius"],
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2D boids flocking simulation")
    parser.add_argument("--boids", type=int, default=config.BOIDS["count"],
                        help="Number of boids in the flock")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the starting positions and velocities")
    parser.add_argument("--width", type=float, default=config.WINDOW["width"],
                        help="Frame width in pixels")
    parser.add_argument("--height", type=float, default=config.WINDOW["height"],
                        help="Frame height in pixels")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        flock = build_flock(args.boids)
    except InvalidFlockConfig as e:
        print("[Boids] Invalid flock configuration:")
        for error in e.errors:
            print(f"  - {error}")
        sys.exit(1)

    app = Application(flock, FrameDimensions(args.width, args.height), seed=args.seed)
    app.run()


if __name__ == "__main__":
    main()
