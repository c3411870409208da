"""2D boids flocking simulation."""

from .boid import Boid, FrameDimensions, clamp_to_frame, limit_speed, reflect_off_boundaries
from .flock import Flock, scan_neighbours
from .validate import (
    Factor,
    FactorAboveOne,
    FactorBelowZero,
    InvalidFlockConfig,
    LocalRadiusNotLargerThanCrowdingRadius,
    NegativeFlockSize,
)

__all__ = [
    "Boid",
    "FrameDimensions",
    "Flock",
    "InvalidFlockConfig",
    "Factor",
    "FactorAboveOne",
    "FactorBelowZero",
    "LocalRadiusNotLargerThanCrowdingRadius",
    "NegativeFlockSize",
    "clamp_to_frame",
    "limit_speed",
    "reflect_off_boundaries",
    "scan_neighbours",
]
