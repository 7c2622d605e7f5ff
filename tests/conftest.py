"""
Pytest configuration and shared fixtures.
"""

import pytest

from trailcore.data_models import Body
from trailcore.physics import GravityIntegrator, circular_orbit_speed


@pytest.fixture
def integrator():
    """Integrator with the default gravitational constant."""
    return GravityIntegrator(g=100.0)


@pytest.fixture
def four_bodies():
    """A heavy central body with three light companions."""
    return [
        Body("Sun", 2000.0, (0.5, 0.3), (0.0, 0.0)),
        Body("Inner", 1.0, (100.0, 0.3), (0.0, 30.0)),
        Body("Middle", 1.0, (-100.0, -30.0), (20.0, -20.0)),
        Body("Outer", 1.0, (-200.0, 40.0), (0.0, -10.0)),
    ]


@pytest.fixture
def binary():
    """Two equal masses on a circular orbit of radius 50 around the origin."""
    mass, radius = 1000.0, 50.0
    speed = circular_orbit_speed(mass, 2 * radius, radius, g=100.0)
    return [
        Body("A", mass, (radius, 0.0), (0.0, speed)),
        Body("B", mass, (-radius, 0.0), (0.0, -speed)),
    ]
