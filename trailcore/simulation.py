#!/usr/bin/env python3
"""
Simulation state and per-frame driver for Gravity Trails.

A Simulation owns the bodies, one trail per body, the accelerations carried between
integration steps, and the write index shared by every trail. One tick is:

    integrate -> write trails at write_index -> draw -> advance write_index

The draw callback runs before the index advances so that renderers see the slot
that was just written as the newest sample.
"""
import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from .constants import DIAGNOSTIC_INTERVAL, G, TRAIL_LENGTH
from .data_models import Body
from .physics import GravityIntegrator, kinetic_energy, potential_energy, total_momentum
from .trails import TrailBuffer, validate_trail_length
from .vector_utils import ZERO, Vec2

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """Raised when a set of bodies cannot form a valid simulation."""


def validate_bodies(bodies: Sequence[Body]) -> None:
    if not bodies:
        raise SceneError("a scene needs at least one body")
    seen = {}
    for b in bodies:
        if not b.mass > 0:
            raise SceneError(f"body {b.name!r} must have a positive mass, got {b.mass}")
        key = (float(b.position[0]), float(b.position[1]))
        if key in seen:
            raise SceneError(f"bodies {seen[key]!r} and {b.name!r} start at the same position {key}")
        seen[key] = b.name


class Simulation:
    """
    Owns all mutable simulation state; nothing else writes to it.

    Attributes:
        bodies: Bodies in a fixed order for the whole run.
        trails: trails[i] belongs to bodies[i].
        accelerations: Accelerations from the previous step, one per body.
        write_index: Slot written this frame, in [0, trail_length).
        frame: Number of completed ticks.
    """

    def __init__(self, bodies: Sequence[Body], trail_length: int = TRAIL_LENGTH, g: float = G):
        try:
            self.trail_length = validate_trail_length(trail_length)
        except ValueError as exc:
            raise SceneError(str(exc)) from exc
        validate_bodies(bodies)

        # each simulation integrates its own copies; the caller's bodies are left untouched
        self.bodies: List[Body] = [replace(b) for b in bodies]
        self.integrator = GravityIntegrator(g)
        self.trails: List[TrailBuffer] = [TrailBuffer(b.position, self.trail_length) for b in self.bodies]
        self.accelerations: List[Vec2] = [ZERO for _ in self.bodies]
        self.write_index = 0
        self.frame = 0
        self.elapsed = 0.0

        logger.info(
            "Simulation created with %d bodies, trail length %d, G=%g",
            len(self.bodies), self.trail_length, self.integrator.g,
        )

    def step(self, dt: float) -> None:
        """Integrate all bodies by dt and record their new positions at write_index."""
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self.accelerations = self.integrator.step(self.bodies, self.accelerations, dt)
        for body, trail in zip(self.bodies, self.trails):
            trail.write(self.write_index, body.position)
        self.elapsed += dt

    def advance_write_index(self) -> None:
        self.write_index = (self.write_index + 1) % self.trail_length

    def tick(self, dt: float, draw: Optional[Callable[["Simulation"], None]] = None) -> None:
        """Run one full frame: step, draw (if given), then advance the write index."""
        self.step(dt)
        if draw is not None:
            draw(self)
        self.advance_write_index()
        self.frame += 1
        if self.frame % DIAGNOSTIC_INTERVAL == 0:
            self.log_diagnostics()

    def log_diagnostics(self) -> None:
        px, py = total_momentum(self.bodies)
        energy = kinetic_energy(self.bodies) + potential_energy(self.bodies, self.integrator.g)
        logger.debug(
            "frame %d t=%.3f momentum=(%.6g, %.6g) energy=%.6g",
            self.frame, self.elapsed, px, py, energy,
        )
