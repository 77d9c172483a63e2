from __future__ import annotations
from typing import TYPE_CHECKING, Iterable
import numpy as np
if TYPE_CHECKING:
    from verlet_sims.core import Particle


def max_penetration(particles: Iterable[Particle]) -> float:
    """Deepest pairwise overlap (radius sum minus center distance), 0 if none."""
    ps = list(particles)
    if len(ps) < 2:
        return 0.0
    pos = np.array([p.position for p in ps], dtype=float)
    rad = np.array([p.radius for p in ps], dtype=float)
    diff = pos[:, None, :] - pos[None, :, :]
    dist = np.linalg.norm(diff, axis=-1)
    overlap = rad[:, None] + rad[None, :] - dist
    # ignore self-pairs
    np.fill_diagonal(overlap, -np.inf)
    return max(float(overlap.max()), 0.0)


def kinetic_energy(particles: Iterable[Particle]) -> float:
    """
    Sum of 0.5 * m * |v|^2 with area as mass and v the per-substep displacement.
    """
    total = 0.0
    for p in particles:
        v = np.asarray(p.velocity, dtype=float)
        mass = np.pi * p.radius ** 2
        total += 0.5 * mass * float(np.dot(v, v))
    return total
