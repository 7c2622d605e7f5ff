#!/usr/bin/env python3
"""
Data models for Gravity Trails.

Units and usage
- position is in world units, velocity in world units per second, mass is a positive scalar.
- radius and color only affect rendering; radius is in pixels so bodies stay visible at any zoom.
- Bodies are mutated in place by the integrator every frame and are owned by a Simulation.
"""
from dataclasses import dataclass
from typing import Tuple

from .constants import BODY_COLOR, BODY_RADIUS


@dataclass
class Body:
    """
    A point mass in the simulation.

    Fields:
    - name: Identifier for the body
    - mass: Mass (world units)
    - position: 2D position (x, y)
    - velocity: 2D velocity (vx, vy)
    - color: RGB tuple used for rendering
    - radius: Drawn radius in pixels
    """
    name: str
    mass: float
    position: Tuple[float, float]
    velocity: Tuple[float, float] = (0.0, 0.0)
    color: Tuple[int, int, int] = BODY_COLOR
    radius: int = BODY_RADIUS

    def momentum(self) -> Tuple[float, float]:
        return (self.mass * self.velocity[0], self.mass * self.velocity[1])
