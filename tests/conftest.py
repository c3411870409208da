"""Shared fixtures for the boids tests."""

import numpy as np
import pytest

from boids import Flock, FrameDimensions


@pytest.fixture
def frame():
    """The default 800x500 frame."""
    return FrameDimensions(800.0, 500.0)


@pytest.fixture
def square_frame():
    return FrameDimensions(1000.0, 1000.0)


@pytest.fixture
def rng():
    """Seeded generator so randomised flocks are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def make_flock():
    """Factory for flocks with zeroed rule factors unless overridden."""
    def _make(size=0, crowding_radius=4.0, local_radius=50.0,
              repulsion=0.0, adhesion=0.0, cohesion=0.0, **kwargs):
        return Flock(size, crowding_radius, local_radius,
                     repulsion, adhesion, cohesion, **kwargs)
    return _make
