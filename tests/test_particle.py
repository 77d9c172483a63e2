"""
Tests for single-particle operations: Verlet integration, acceleration
accumulation, boundary clamping and identity.
"""

import numpy as np
import pytest

from verlet_sims.core import Particle


class TestIntegration:
    """Position-Verlet step."""

    def test_velocity_continuity(self):
        """After integrate, displacement equals old velocity plus gravity."""
        p = Particle(id=1, position=(0.0, 0.0), previous_position=(-1.0, -2.0),
                     radius=5.0, gravity=(0.0, 0.1))
        old_velocity = p.velocity.copy()
        p.integrate()
        assert np.allclose(p.position - p.previous_position, old_velocity + np.array([0.0, 0.1]))
        assert np.allclose(p.previous_position, [0.0, 0.0])

    def test_repeated_free_fall(self):
        """Starting at rest, n steps of constant g cover g * n(n+1)/2."""
        p = Particle(id=1, position=(0.0, 0.0), radius=1.0, gravity=(0.0, 0.5))
        for _ in range(4):
            p.integrate()
        assert p.position[1] == pytest.approx(0.5 * 10)
        assert p.position[0] == 0.0

    def test_at_rest_without_gravity_stays_put(self):
        p = Particle(id=1, position=(3.0, 4.0), radius=1.0)
        p.integrate()
        assert np.array_equal(p.position, [3.0, 4.0])


class TestAcceleration:

    def test_accelerate_accumulates(self):
        p = Particle(id=1, position=(0.0, 0.0), radius=1.0)
        p.accelerate((1.0, 0.0))
        p.accelerate((0.5, 2.0))
        assert np.allclose(p.pending_acceleration, [1.5, 2.0])

    def test_integrate_applies_and_clears_acceleration(self):
        p = Particle(id=1, position=(0.0, 0.0), radius=1.0, gravity=(0.0, 1.0))
        p.accelerate((2.0, 0.0))
        p.integrate()
        assert np.allclose(p.position, [2.0, 1.0])
        assert np.array_equal(p.pending_acceleration, [0.0, 0.0])

    def test_apply_gravity_uses_particle_gravity(self):
        p = Particle(id=1, position=(0.0, 0.0), radius=1.0, gravity=(0.0, 0.25))
        p.apply_gravity()
        assert np.allclose(p.pending_acceleration, [0.0, 0.25])


class TestConfineToCircle:

    def test_clamps_onto_inner_circle(self):
        """Center (0,0), radius 100, particle radius 10 at (95,0) -> (90,0)."""
        p = Particle(id=1, position=(95.0, 0.0), radius=10.0)
        p.confine_to_circle((0.0, 0.0), 100.0)
        assert np.allclose(p.position, [90.0, 0.0])

    def test_clamp_keeps_direction(self):
        p = Particle(id=1, position=(300.0, 400.0), radius=10.0)
        p.confine_to_circle((0.0, 0.0), 100.0)
        assert np.allclose(p.position, [54.0, 72.0])
        assert np.linalg.norm(p.position) == pytest.approx(90.0)

    def test_inside_is_untouched(self):
        p = Particle(id=1, position=(10.0, -20.0), radius=10.0)
        p.confine_to_circle((0.0, 0.0), 100.0)
        assert np.array_equal(p.position, [10.0, -20.0])

    def test_clamp_does_not_touch_previous_position(self):
        p = Particle(id=1, position=(95.0, 0.0), previous_position=(85.0, 0.0), radius=10.0)
        p.confine_to_circle((0.0, 0.0), 100.0)
        assert np.array_equal(p.previous_position, [85.0, 0.0])

    def test_particle_at_center_is_finite(self):
        """Boundary smaller than the particle: the centered particle has no direction to move."""
        p = Particle(id=1, position=(0.0, 0.0), radius=10.0)
        p.confine_to_circle((0.0, 0.0), 5.0)
        assert np.all(np.isfinite(p.position))
        assert np.array_equal(p.position, [0.0, 0.0])


class TestConfineToBox:

    def test_wall_hit_bounces_back_inward(self):
        """The overshoot past the wall becomes velocity pointing back inside."""
        p = Particle(id=1, position=(1045.0, 300.0), previous_position=(1040.0, 300.0), radius=10.0)
        p.confine_to_box(50.0, 50.0, 1050.0, 550.0)
        assert np.allclose(p.position, [1040.0, 300.0])
        assert np.allclose(p.velocity, [-5.0, 0.0])

    def test_floor_hit_bounces_up(self):
        p = Particle(id=1, position=(300.0, 545.0), previous_position=(300.0, 540.0), radius=10.0)
        p.confine_to_box(50.0, 50.0, 1050.0, 550.0)
        assert np.allclose(p.position, [300.0, 540.0])
        assert np.allclose(p.velocity, [0.0, -5.0])

    def test_corner(self):
        """Bottom wall clamps first, then the left wall; only the last overshoot survives."""
        p = Particle(id=1, position=(52.0, 549.0), radius=10.0)
        p.confine_to_box(50.0, 50.0, 1050.0, 550.0)
        assert np.allclose(p.position, [60.0, 540.0])
        assert np.allclose(p.previous_position, [52.0, 540.0])
        assert np.allclose(p.velocity, [8.0, 0.0])

    def test_inside_keeps_velocity(self):
        p = Particle(id=1, position=(500.0, 300.0), previous_position=(499.0, 300.0), radius=10.0)
        p.confine_to_box(50.0, 50.0, 1050.0, 550.0)
        assert np.allclose(p.velocity, [1.0, 0.0])

    def test_bounce_carries_through_integrate(self):
        p = Particle(id=1, position=(300.0, 545.0), previous_position=(300.0, 540.0), radius=10.0)
        p.confine_to_box(50.0, 50.0, 1050.0, 550.0)
        p.integrate()
        assert np.allclose(p.position, [300.0, 535.0])


class TestIdentity:

    def test_equality_by_id(self):
        a = Particle(id=7, position=(0.0, 0.0), radius=1.0)
        b = Particle(id=7, position=(5.0, 5.0), radius=3.0, color=(1, 2, 3))
        c = Particle(id=8, position=(0.0, 0.0), radius=1.0)
        assert a == b
        assert a != c
        assert len({a, b, c}) == 2

    def test_inputs_are_copied(self):
        pos = np.array([1.0, 2.0])
        p = Particle(id=1, position=pos, radius=1.0)
        pos[0] = 99.0
        assert p.position[0] == 1.0
        assert p.previous_position is not p.position

