"""Flock management - brute-force neighbour scan with Numba JIT and double-buffered ticks."""

import numpy as np
from numba import njit
from typing import List, NamedTuple, Optional

from .boid import (
    Boid,
    FrameDimensions,
    clamp_to_frame,
    limit_speed,
    reflect_off_boundaries,
)
from .validate import InvalidFlockConfig, validate_flock_config


# ============================================================================
# NUMBA JIT-COMPILED NEIGHBOUR SCAN
# ============================================================================

@njit(cache=True)
def scan_neighbours(
    positions: np.ndarray,
    velocities: np.ndarray,
    index: int,
    crowding_radius: float,
    local_radius: float,
):
    """
    Classify every other boid as crowding, local, or ignored and sum each class.

    Crowding takes priority: a crowding boid is never also counted as local.
    """
    num_boids = positions.shape[0]
    px = positions[index, 0]
    py = positions[index, 1]

    crowd_count = 0
    crowd_x, crowd_y = 0.0, 0.0

    local_count = 0
    local_x, local_y = 0.0, 0.0
    local_vx, local_vy = 0.0, 0.0

    for j in range(num_boids):
        if j == index:
            continue

        dx = abs(px - positions[j, 0])
        dy = abs(py - positions[j, 1])

        if dx < crowding_radius and dy < crowding_radius:
            crowd_count += 1
            crowd_x += positions[j, 0]
            crowd_y += positions[j, 1]
        elif dx < local_radius and dy < local_radius:
            local_count += 1
            local_x += positions[j, 0]
            local_y += positions[j, 1]
            local_vx += velocities[j, 0]
            local_vy += velocities[j, 1]

    return crowd_count, crowd_x, crowd_y, local_count, local_x, local_y, local_vx, local_vy


class Neighbourhood(NamedTuple):
    """Per-class sums gathered by the neighbour scan for one boid."""
    crowding_count: int
    crowding_position_sum: np.ndarray
    local_count: int
    local_position_sum: np.ndarray
    local_velocity_sum: np.ndarray


# ============================================================================
# FLOCK CLASS
# ============================================================================

class Flock:
    """
    A fixed-size flock of boids sharing one set of rule parameters.

    Boid state lives in two pairs of arrays. Updates read the current pair
    and write the next pair, and `commit()` swaps them at the end of a tick,
    so the outcome does not depend on the order boids are updated in.
    """

    def __init__(
        self,
        flock_size: int,
        crowding_radius: float,
        local_radius: float,
        repulsion_factor: float,
        adhesion_factor: float,
        cohesion_factor: float,
        *,
        max_speed: float = 8.0,
        time_per_frame: float = 1.0,
        boundary_inset: float = 0.0,
    ):
        # Nothing is allocated unless the whole configuration is valid
        errors = validate_flock_config(
            crowding_radius,
            local_radius,
            repulsion_factor,
            adhesion_factor,
            cohesion_factor,
            flock_size,
        )
        if errors:
            raise InvalidFlockConfig(errors)

        self.flock_size = int(flock_size)
        self.crowding_radius = float(crowding_radius)
        self.local_radius = float(local_radius)   # far boids in the flock don't influence a boid
        self.repulsion_factor = float(repulsion_factor)
        self.adhesion_factor = float(adhesion_factor)
        self.cohesion_factor = float(cohesion_factor)
        self.max_speed = float(max_speed)
        self.time_per_frame = float(time_per_frame)
        self.boundary_inset = float(boundary_inset)

        # Boid data
        self.positions = np.zeros((self.flock_size, 2), dtype=np.float64)
        self.velocities = np.zeros((self.flock_size, 2), dtype=np.float64)

        # Write buffer for the tick in progress
        self._next_positions = np.zeros_like(self.positions)
        self._next_velocities = np.zeros_like(self.velocities)

    def __len__(self) -> int:
        return self.flock_size

    @property
    def boids(self) -> List[Boid]:
        return [self.boid(i) for i in range(self.flock_size)]

    def boid(self, index: int) -> Boid:
        self._check_index(index)
        return Boid(
            position=self.positions[index].copy(),
            velocity=self.velocities[index].copy(),
        )

    def set_boids(self, boids: List[Boid]):
        """Replace every boid's state; the list length must match the flock size."""
        if len(boids) != self.flock_size:
            raise ValueError(f"expected {self.flock_size} boids, got {len(boids)}")
        for i, boid in enumerate(boids):
            self.positions[i] = boid.position
            self.velocities[i] = boid.velocity
        np.copyto(self._next_positions, self.positions)
        np.copyto(self._next_velocities, self.velocities)

    def warmup(self):
        """Pre-compile the Numba scan so the first frame doesn't stall."""
        pos = np.random.rand(4, 2).astype(np.float64) * 10
        vel = np.random.rand(4, 2).astype(np.float64)
        scan_neighbours(pos, vel, 0, 2.0, 5.0)

    def randomly_generate_boids(self, frame: FrameDimensions, rng: Optional[np.random.Generator] = None):
        """
        Scatter the flock around the middle of the frame.

        Positions land within a tenth of the frame size of the centre on each
        axis; each velocity component is drawn from [-max_speed, max_speed].
        """
        if rng is None:
            rng = np.random.default_rng()

        bounds = frame.as_array()
        mid_frame = bounds / 2.0
        max_starting_dist_from_mid = bounds / 10.0

        self.positions = mid_frame + rng.uniform(
            -max_starting_dist_from_mid,
            max_starting_dist_from_mid,
            size=(self.flock_size, 2),
        )
        self.velocities = rng.uniform(-self.max_speed, self.max_speed, size=(self.flock_size, 2))

        self._next_positions = self.positions.copy()
        self._next_velocities = self.velocities.copy()

    def neighbourhood(self, index: int) -> Neighbourhood:
        """Crowding and local-flock sums for one boid, read from the current state."""
        self._check_index(index)
        (crowd_count, crowd_x, crowd_y,
         local_count, local_x, local_y, local_vx, local_vy) = scan_neighbours(
            self.positions,
            self.velocities,
            index,
            self.crowding_radius,
            self.local_radius,
        )
        return Neighbourhood(
            crowding_count=int(crowd_count),
            crowding_position_sum=np.array([crowd_x, crowd_y]),
            local_count=int(local_count),
            local_position_sum=np.array([local_x, local_y]),
            local_velocity_sum=np.array([local_vx, local_vy]),
        )

    def next_boid(self, index: int, frame: FrameDimensions) -> Boid:
        """Compute one boid's state for the next tick without storing it."""
        boid = self.boid(index)
        hood = self.neighbourhood(index)

        if hood.crowding_count > 0:
            boid = boid.with_velocity(
                boid.uncrowd(hood.crowding_count, hood.crowding_position_sum, self.repulsion_factor)
            )

        if hood.local_count > 0:
            boid = boid.with_velocity(
                boid.align(hood.local_count, hood.local_velocity_sum, self.adhesion_factor)
            )
            boid = boid.with_velocity(
                boid.cohere(hood.local_count, hood.local_position_sum, self.cohesion_factor)
            )

        # A boid with no neighbours at all keeps its heading and just moves on

        # Limit once all rules are applied, then move, then fence for the next tick
        boid = boid.with_velocity(limit_speed(boid.velocity, self.max_speed))
        boid = clamp_to_frame(boid.move(self.time_per_frame), frame)
        return reflect_off_boundaries(boid, frame, self.time_per_frame, self.boundary_inset)

    def update_boid(self, index: int, frame: FrameDimensions) -> Boid:
        """
        Update one boid for the current tick.

        The new state goes to the write buffer and only becomes visible to
        other boids' updates after `commit()`.
        """
        boid = self.next_boid(index, frame)
        self._next_positions[index] = boid.position
        self._next_velocities[index] = boid.velocity
        return boid

    def commit(self):
        """Finish the tick: the written state becomes the current state."""
        self.positions, self._next_positions = self._next_positions, self.positions
        self.velocities, self._next_velocities = self._next_velocities, self.velocities

        # Boids not updated this tick carry their state over
        np.copyto(self._next_positions, self.positions)
        np.copyto(self._next_velocities, self.velocities)

    def tick(self, frame: FrameDimensions):
        """Update every boid once, in index order, then commit."""
        for i in range(self.flock_size):
            self.update_boid(i, frame)
        self.commit()

    def _check_index(self, index: int):
        if not 0 <= index < self.flock_size:
            raise IndexError(f"boid index {index} out of range for flock of {self.flock_size}")
