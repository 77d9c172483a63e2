# src/verlet_sims/core/particle.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

Color = Tuple[int, int, int]


def _zero() -> np.ndarray:
    return np.zeros(2, dtype=float)


@dataclass(eq=False)
class Particle:
    """
    A circular body integrated with position Verlet.

    - position / previous_position: velocity is their difference, never stored
    - pending_acceleration: accumulated by accelerate(), cleared by integrate()
    - gravity: constant pulled in by apply_gravity() on every integration step

    Identity is the id; two particles with the same id are the same particle.
    """
    id: int
    position: np.ndarray          # shape (2,)
    radius: float
    color: Color = (255, 255, 255)
    gravity: np.ndarray = field(default_factory=_zero)
    previous_position: np.ndarray | None = None
    pending_acceleration: np.ndarray = field(default_factory=_zero)

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=float).copy()
        if self.previous_position is None:
            self.previous_position = self.position.copy()
        else:
            self.previous_position = np.asarray(self.previous_position, dtype=float).copy()
        self.gravity = np.asarray(self.gravity, dtype=float).copy()
        self.pending_acceleration = np.asarray(self.pending_acceleration, dtype=float).copy()
        self.radius = float(self.radius)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Particle):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def velocity(self) -> np.ndarray:
        return self.position - self.previous_position

    def accelerate(self, acc) -> None:
        self.pending_acceleration += np.asarray(acc, dtype=float)

    def apply_gravity(self) -> None:
        self.accelerate(self.gravity)

    def integrate(self) -> None:
        """Advance one substep. Call after collisions and constraints are resolved."""
        velocity = self.position - self.previous_position
        self.previous_position = self.position.copy()
        self.apply_gravity()
        self.position = self.position + velocity + self.pending_acceleration
        self.pending_acceleration = _zero()

    def confine_to_circle(self, center, radius: float) -> None:
        """
        Pull the particle back onto the circle of radius (radius - self.radius)
        around center if it has drifted outside. A particle sitting exactly on
        the center is left alone.
        """
        center = np.asarray(center, dtype=float)
        v = center - self.position
        dist = float(np.linalg.norm(v))
        limit = radius - self.radius
        if dist > limit and dist > 0.0:
            n = v / dist
            self.position = center - n * limit

    def confine_to_box(self, xmin: float, ymin: float, xmax: float, ymax: float) -> None:
        """
        Clamp the particle inside an axis-aligned box, one wall at a time
        (bottom, top, right, left). Before each clamp previous_position is set
        to the position being clamped, so the particle leaves the wall with a
        velocity equal to its overshoot, pointing back inside.
        """
        r = self.radius
        if self.position[1] + r > ymax:
            self._clamp_axis(1, ymax - r)
        if self.position[1] - r < ymin:
            self._clamp_axis(1, ymin + r)
        if self.position[0] + r > xmax:
            self._clamp_axis(0, xmax - r)
        if self.position[0] - r < xmin:
            self._clamp_axis(0, xmin + r)

    def _clamp_axis(self, axis: int, value: float) -> None:
        self.previous_position = self.position.copy()
        pos = self.position.copy()
        pos[axis] = value
        self.position = pos
