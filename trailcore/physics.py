#!/usr/bin/env python3
"""
Core physics for Gravity Trails.

Responsibilities
- Compute pairwise gravitational accelerations by direct O(N^2) summation.
- Advance body states with a symmetric scheme that averages the acceleration of the
  previous step with the one of the current step.
- Provide diagnostics (momentum, energy) and a circular-orbit speed helper.

Integration scheme
For every body, with a_old carried over from the previous call and a_new computed
from the current positions:

    mean = (a_old + a_new) / 2
    x   += v * dt + (mean / 2) * dt^2
    v   += (mean / 2) * dt

The caller keeps the returned a_new and passes it back as a_old on the next call.
Starting from a zero a_old is fine; the first step simply sees half the pull.

Numerical notes
- Bodies must not coincide. |d|^2 is clamped from below to min_distance_sq and the
  direction of a zero displacement is the zero vector, so two coincident bodies exert
  no force on each other instead of producing NaN.
- N is expected to be a handful of bodies, so no spatial partitioning is done.
"""

import math
from typing import List, Sequence, Tuple

from .constants import G, MIN_DISTANCE_SQUARED
from .data_models import Body
from .vector_utils import ZERO, Vec2, vec_add, vec_len_sq, vec_mean, vec_norm, vec_scale, vec_sub


class GravityIntegrator:
    """
    Newtonian N-body integrator using the averaged-acceleration update.

    The acceleration of body i due to body j is

        a_ij = G * m_j / |d|^2 * d_hat,   d = x_j - x_i
    """

    def __init__(self, g: float = G, min_distance_sq: float = MIN_DISTANCE_SQUARED):
        self.g = float(g)
        self.min_distance_sq = max(0.0, float(min_distance_sq))

    def pair_acceleration(self, position_i: Vec2, position_j: Vec2, mass_j: float) -> Vec2:
        """Acceleration on a body at position_i caused by a mass_j at position_j."""
        d = vec_sub(position_j, position_i)
        r_squared = max(vec_len_sq(d), self.min_distance_sq)
        return vec_scale(vec_norm(d), self.g * mass_j / r_squared)

    def compute_accelerations(self, bodies: Sequence[Body]) -> List[Vec2]:
        """
        Net acceleration of every body from all the others, same order as bodies.
        """
        accelerations = []
        for i, bi in enumerate(bodies):
            total = ZERO
            for j, bj in enumerate(bodies):
                if i == j:
                    continue
                total = vec_add(total, self.pair_acceleration(bi.position, bj.position, bj.mass))
            accelerations.append(total)
        return accelerations

    def step(self, bodies: Sequence[Body], previous_accelerations: Sequence[Vec2], dt: float) -> List[Vec2]:
        """
        Advance bodies in place by dt and return the accelerations to carry into the next step.

        Args:
            bodies: Bodies to integrate (position and velocity are replaced).
            previous_accelerations: Accelerations returned by the previous call, one per body.
            dt: Elapsed time in seconds (>= 0).
        """
        if len(previous_accelerations) != len(bodies):
            raise ValueError(
                f"expected {len(bodies)} previous accelerations, got {len(previous_accelerations)}"
            )

        new_accelerations = self.compute_accelerations(bodies)
        for body, a_old, a_new in zip(bodies, previous_accelerations, new_accelerations):
            half_mean = vec_scale(vec_mean(a_old, a_new), 0.5)
            body.position = vec_add(
                body.position,
                vec_add(vec_scale(body.velocity, dt), vec_scale(half_mean, dt * dt)),
            )
            body.velocity = vec_add(body.velocity, vec_scale(half_mean, dt))
        return new_accelerations


def total_momentum(bodies: Sequence[Body]) -> Tuple[float, float]:
    """Sum of mass * velocity over all bodies."""
    px, py = 0.0, 0.0
    for b in bodies:
        mx, my = b.momentum()
        px += mx
        py += my
    return (px, py)


def kinetic_energy(bodies: Sequence[Body]) -> float:
    return sum(0.5 * b.mass * vec_len_sq(b.velocity) for b in bodies)


def potential_energy(bodies: Sequence[Body], g: float = G) -> float:
    """Pairwise gravitational potential energy, -G m_i m_j / r summed over i < j."""
    energy = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            r = math.sqrt(vec_len_sq(vec_sub(bodies[j].position, bodies[i].position)))
            if r > 0:
                energy -= g * bodies[i].mass * bodies[j].mass / r
    return energy


def circular_orbit_speed(attracting_mass: float, separation: float, orbit_radius: float, g: float = G) -> float:
    """
    Speed that keeps a body on a circle of orbit_radius under GravityIntegrator.

    The attracting body of attracting_mass sits at distance separation. The velocity
    update applies half of the mean acceleration, so the centripetal balance is

        v^2 / r = (G * M / d^2) / 2

    Returns 0.0 for non-positive distances.
    """
    if separation <= 0 or orbit_radius <= 0:
        return 0.0
    return math.sqrt(0.5 * g * attracting_mass * orbit_radius / (separation * separation))
