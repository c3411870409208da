"""Individual boid entity with position, velocity, and the pure rules that move it."""

import numpy as np
from dataclasses import dataclass, field, replace
from typing import NamedTuple


# Positions that still fall outside the frame after a move are pulled back by this much
FRAME_EDGE_OFFSET = 0.1


class FrameDimensions(NamedTuple):
    """Size of the frame the flock lives in, origin at the top-left corner."""
    frame_width: float
    frame_height: float

    def as_array(self) -> np.ndarray:
        return np.array([self.frame_width, self.frame_height], dtype=np.float64)


def _vec2(x: float = 0.0, y: float = 0.0) -> np.ndarray:
    return np.array([x, y], dtype=np.float64)


@dataclass(frozen=True, eq=False)
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Every operation returns a new value; nothing mutates in place.

    Attributes:
        position: 2D position in frame space
        velocity: 2D displacement per tick
    """
    position: np.ndarray = field(default_factory=_vec2)
    velocity: np.ndarray = field(default_factory=_vec2)

    @classmethod
    def new(cls, x: float, y: float, vx: float, vy: float) -> "Boid":
        return cls(position=_vec2(x, y), velocity=_vec2(vx, vy))

    @classmethod
    def zero(cls) -> "Boid":
        return cls()

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def vx(self) -> float:
        return float(self.velocity[0])

    @property
    def vy(self) -> float:
        return float(self.velocity[1])

    def with_velocity(self, velocity: np.ndarray) -> "Boid":
        return replace(self, velocity=np.asarray(velocity, dtype=np.float64).copy())

    def with_position(self, position: np.ndarray) -> "Boid":
        return replace(self, position=np.asarray(position, dtype=np.float64).copy())

    def is_crowded_by(self, other: "Boid", crowding_radius: float) -> bool:
        """True if `other` sits inside the axis-aligned square of half-width `crowding_radius`."""
        delta = np.abs(self.position - other.position)
        return bool(delta[0] < crowding_radius and delta[1] < crowding_radius)

    def is_within_sight_of(self, other: "Boid", local_radius: float) -> bool:
        """True if `other` is close enough to count as part of the local flock."""
        delta = np.abs(self.position - other.position)
        return bool(delta[0] < local_radius and delta[1] < local_radius)

    def align(self, num_local: int, local_velocity_sum: np.ndarray, adhesion_factor: float) -> np.ndarray:
        """
        Steer towards the average heading of the local flock.

        Args:
            num_local: Number of local flockmates (must be > 0)
            local_velocity_sum: Sum of their velocities
            adhesion_factor: Fraction of the gap to the mean velocity closed this tick

        Returns:
            The new velocity
        """
        average_velocity = np.asarray(local_velocity_sum, dtype=np.float64) / num_local
        return self.velocity + (average_velocity - self.velocity) * adhesion_factor

    def uncrowd(self, num_crowding: int, crowding_position_sum: np.ndarray, repulsion_factor: float) -> np.ndarray:
        """Steer away from the average position of crowding boids."""
        average_position = np.asarray(crowding_position_sum, dtype=np.float64) / num_crowding
        return self.velocity + (self.position - average_position) * repulsion_factor

    def cohere(self, num_local: int, local_position_sum: np.ndarray, cohesion_factor: float) -> np.ndarray:
        """Steer towards the average position of the local flock (the reverse of uncrowding)."""
        average_position = np.asarray(local_position_sum, dtype=np.float64) / num_local
        return self.velocity + (average_position - self.position) * cohesion_factor

    def move(self, time_per_frame: float) -> "Boid":
        """d = tv"""
        return replace(self, position=self.position + self.velocity * time_per_frame)


def limit_speed(velocity: np.ndarray, max_speed: float) -> np.ndarray:
    """Scale `velocity` down to `max_speed` if it is faster, otherwise return it unchanged."""
    velocity = np.asarray(velocity, dtype=np.float64)
    speed = np.linalg.norm(velocity)
    if speed > max_speed:
        return velocity * (max_speed / speed)
    return velocity.copy()


def reflect_off_boundaries(
    boid: Boid,
    frame: FrameDimensions,
    time_per_frame: float,
    inset: float = 0.0,
) -> Boid:
    """
    Turn any velocity component that would carry the boid to or past a frame edge next tick back inwards.

    Works like an electric fence: the check uses the predicted position, so the
    boid turns around before it crosses rather than bouncing afterwards.

    Args:
        boid: The boid to check
        frame: Frame size
        time_per_frame: Time step used for the prediction
        inset: Distance from each edge at which the fence sits (usually the drawn radius)

    Returns:
        The boid with its velocity pointing away from any edge it is about to reach; position is untouched
    """
    predicted = boid.position + boid.velocity * time_per_frame
    upper = frame.as_array() - inset

    velocity = boid.velocity.copy()
    for axis in range(2):
        if predicted[axis] >= upper[axis]:
            velocity[axis] = -abs(velocity[axis])
        elif predicted[axis] <= inset:
            velocity[axis] = abs(velocity[axis])

    return replace(boid, velocity=velocity)


def clamp_to_frame(boid: Boid, frame: FrameDimensions) -> Boid:
    """Pull a boid that escaped the frame back just inside the edge it crossed."""
    bounds = frame.as_array()
    position = boid.position.copy()
    for axis in range(2):
        if position[axis] <= 0.0:
            position[axis] = FRAME_EDGE_OFFSET
        elif position[axis] >= bounds[axis]:
            position[axis] = bounds[axis] - FRAME_EDGE_OFFSET
    return replace(boid, position=position)
