"""Unit tests for the gravity integrator."""

import math

import pytest

from trailcore.data_models import Body
from trailcore.physics import (
    GravityIntegrator,
    circular_orbit_speed,
    kinetic_energy,
    potential_energy,
    total_momentum,
)


def _distance(a, b):
    return math.hypot(a.position[0] - b.position[0], a.position[1] - b.position[1])


class TestPairAcceleration:
    """Tests for GravityIntegrator.pair_acceleration."""

    def test_magnitude_and_direction(self, integrator):
        ax, ay = integrator.pair_acceleration((0.0, 0.0), (10.0, 0.0), 50.0)
        assert ax == pytest.approx(100.0 * 50.0 / 100.0)
        assert ay == 0.0

    def test_points_towards_other_body(self, integrator):
        ax, ay = integrator.pair_acceleration((1.0, 1.0), (-2.0, 5.0), 3.0)
        assert ax < 0
        assert ay > 0
        assert ax / ay == pytest.approx(-3.0 / 4.0)

    def test_newtons_third_law(self, integrator):
        pi, mi = (3.0, -7.0), 12.0
        pj, mj = (-40.0, 25.0), 0.5
        a_on_i = integrator.pair_acceleration(pi, pj, mj)
        a_on_j = integrator.pair_acceleration(pj, pi, mi)
        assert mi * a_on_i[0] == pytest.approx(-mj * a_on_j[0])
        assert mi * a_on_i[1] == pytest.approx(-mj * a_on_j[1])

    def test_coincident_bodies_exert_no_force(self, integrator):
        ax, ay = integrator.pair_acceleration((2.0, 2.0), (2.0, 2.0), 1000.0)
        assert (ax, ay) == (0.0, 0.0)

    def test_custom_constant(self):
        strong = GravityIntegrator(g=200.0)
        assert strong.pair_acceleration((0.0, 0.0), (0.0, 2.0), 1.0)[1] == pytest.approx(50.0)


class TestComputeAccelerations:

    def test_single_body_feels_nothing(self, integrator):
        assert integrator.compute_accelerations([Body("Lonely", 5.0, (1.0, 1.0))]) == [(0.0, 0.0)]

    def test_sums_over_all_other_bodies(self, integrator):
        bodies = [
            Body("Centre", 1.0, (0.0, 0.0)),
            Body("Right", 4.0, (2.0, 0.0)),
            Body("Left", 4.0, (-2.0, 0.0)),
        ]
        accelerations = integrator.compute_accelerations(bodies)
        assert accelerations[0][0] == pytest.approx(0.0)
        assert accelerations[0][1] == pytest.approx(0.0)
        # Right is pulled by Centre (d=2) and Left (d=4)
        assert accelerations[1][0] == pytest.approx(-(100.0 * 1.0 / 4.0 + 100.0 * 4.0 / 16.0))

    def test_net_force_is_zero(self, integrator, four_bodies):
        accelerations = integrator.compute_accelerations(four_bodies)
        fx = sum(b.mass * a[0] for b, a in zip(four_bodies, accelerations))
        fy = sum(b.mass * a[1] for b, a in zip(four_bodies, accelerations))
        assert fx == pytest.approx(0.0, abs=1e-9)
        assert fy == pytest.approx(0.0, abs=1e-9)


class TestStep:
    """Tests for GravityIntegrator.step."""

    def test_update_formula(self, integrator):
        bodies = [Body("A", 1.0, (0.0, 0.0), (1.0, 0.0)), Body("B", 100.0, (10.0, 0.0))]
        old = [(2.0, 0.0), (0.0, 0.0)]
        expected_new = integrator.compute_accelerations(bodies)
        dt = 0.5

        new = integrator.step(bodies, old, dt)

        assert new == expected_new
        half_mean = (old[0][0] + new[0][0]) / 4.0
        assert bodies[0].position[0] == pytest.approx(1.0 * dt + half_mean * dt * dt)
        assert bodies[0].velocity[0] == pytest.approx(1.0 + half_mean * dt)

    def test_zero_dt_keeps_state(self, integrator, four_bodies):
        before = [(b.position, b.velocity) for b in four_bodies]
        accelerations = [(0.0, 0.0)] * 4
        for _ in range(5):
            accelerations = integrator.step(four_bodies, accelerations, 0.0)
        assert [(b.position, b.velocity) for b in four_bodies] == before

    def test_mismatched_accelerations(self, integrator, four_bodies):
        with pytest.raises(ValueError):
            integrator.step(four_bodies, [(0.0, 0.0)], 0.1)

    def test_momentum_conserved(self, integrator, four_bodies):
        before = total_momentum(four_bodies)
        accelerations = [(0.0, 0.0)] * len(four_bodies)
        for _ in range(200):
            accelerations = integrator.step(four_bodies, accelerations, 1 / 60)
        after = total_momentum(four_bodies)
        assert after[0] == pytest.approx(before[0], abs=1e-8)
        assert after[1] == pytest.approx(before[1], abs=1e-8)

    def test_circular_binary_keeps_separation(self, integrator, binary):
        radius = binary[0].position[0]
        speed = binary[0].velocity[1]
        period = 2 * math.pi * radius / speed
        dt = 0.005
        separation = _distance(*binary)

        accelerations = [(0.0, 0.0), (0.0, 0.0)]
        for _ in range(int(period / dt)):
            accelerations = integrator.step(binary, accelerations, dt)
            assert _distance(*binary) == pytest.approx(separation, rel=0.02)

        # one period later both bodies are back near their starting points
        assert binary[0].position[0] == pytest.approx(radius, abs=0.05 * radius)
        assert abs(binary[0].position[1]) < 0.1 * radius


class TestDiagnostics:

    def test_total_momentum(self):
        bodies = [Body("A", 2.0, (0.0, 0.0), (1.0, -1.0)), Body("B", 3.0, (1.0, 0.0), (0.0, 2.0))]
        assert total_momentum(bodies) == (2.0, 4.0)

    def test_kinetic_energy(self):
        assert kinetic_energy([Body("A", 2.0, (0.0, 0.0), (3.0, 4.0))]) == pytest.approx(25.0)

    def test_potential_energy(self):
        bodies = [Body("A", 2.0, (0.0, 0.0)), Body("B", 3.0, (0.0, 6.0))]
        assert potential_energy(bodies, g=100.0) == pytest.approx(-100.0)

    def test_circular_orbit_speed(self):
        # v^2 / r = G M / d^2 / 2
        v = circular_orbit_speed(1000.0, 100.0, 50.0, g=100.0)
        assert v * v / 50.0 == pytest.approx(0.5 * 100.0 * 1000.0 / 100.0 ** 2)

    def test_circular_orbit_speed_degenerate(self):
        assert circular_orbit_speed(1000.0, 0.0, 50.0) == 0.0
