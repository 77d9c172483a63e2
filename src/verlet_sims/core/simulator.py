# src/verlet_sims/core/simulator.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np

from .boundary import Boundary, CircleBoundary
from .config import (
    check_population_cap,
    check_radius_range,
    check_response_coefficient,
    check_substep_count,
    check_vector,
)
from .errors import ConfigError
from .particle import Color, Particle
from .recording import (
    ParticleSnapshot,
    SimulationRecording,
    make_particle_snapshot,
    snapshot_frame,
)
from verlet_sims.utils.physics_utils import kinetic_energy
from verlet_sims.utils.random import rng as named_rng

ColorFn = Callable[[int], Color]


@dataclass(frozen=True)
class SpawnArea:
    """
    Where new particles appear: a row starting at `origin`, each new id shifted
    right by `stride` and wrapped back every `width` units.
    """
    origin: tuple[float, float] = (100.0, 100.0)
    width: float = 500.0
    stride: float = 5.0

    def __post_init__(self):
        check_vector("spawn origin", self.origin)
        if not self.width > 0 or not self.stride > 0:
            raise ConfigError(f"spawn width and stride must be positive, got {self.width!r}, {self.stride!r}")

    def position(self, particle_id: int) -> np.ndarray:
        x0, y0 = self.origin
        return np.array([x0 + (particle_id * self.stride) % self.width, y0], dtype=float)


@dataclass(frozen=True)
class SpawnCadence:
    """Caller-side policy: a tick is spawn-eligible once every `every` ticks."""
    every: int = 4

    def __post_init__(self):
        if isinstance(self.every, bool) or not isinstance(self.every, int) or self.every <= 0:
            raise ConfigError(f"spawn cadence must be a positive integer, got {self.every!r}")

    def __call__(self, tick: int) -> bool:
        return tick % self.every == 0


def _white(_: int) -> Color:
    return (255, 255, 255)


class Simulator:
    """
    Position-Verlet particle solver with in-place pairwise relaxation.

    Each tick optionally spawns one particle, then runs `substep_count`
    substeps. A substep walks the particles in insertion order; particle i is
    first pushed apart from every later particle j, then confined to the
    boundary, then integrated. Corrections land immediately, so later pairs in
    the same sweep see positions already moved by earlier pairs.

    Without an explicit boundary the particles are held in a CircleBoundary
    of radius 300 centered at (550, 300).
    """

    def __init__(
        self,
        population_cap: int,
        spawn_area: SpawnArea,
        radius_range: Sequence[float],
        gravity,
        response_coefficient: float,
        substep_count: int,
        *,
        boundary: Boundary | None = None,
        rng: np.random.Generator | None = None,
        color_fn: ColorFn | None = None,
    ):
        self.population_cap = check_population_cap(population_cap)
        self.min_radius, self.max_radius = check_radius_range(radius_range)
        self.gravity = check_vector("gravity", gravity)
        self.response_coefficient = check_response_coefficient(response_coefficient)
        self.substep_count = check_substep_count(substep_count)
        if not isinstance(spawn_area, SpawnArea):
            raise ConfigError(f"spawn_area must be a SpawnArea, got {type(spawn_area).__name__}")
        self.spawn_area = spawn_area
        if boundary is None:
            boundary = CircleBoundary()
        boundary.validate(self.max_radius)
        self.boundary = boundary
        self.rng = rng if rng is not None else named_rng("physics")
        self.color_fn = color_fn if color_fn is not None else _white

        self._particles: List[Particle] = []
        self.next_id = 1
        self.tick_count = 0

    @property
    def n_particles(self) -> int:
        return len(self._particles)

    @property
    def at_capacity(self) -> bool:
        return len(self._particles) >= self.population_cap

    def spawn(self) -> Particle | None:
        """Add one particle at the spawn row, or do nothing once the cap is reached."""
        if self.at_capacity:
            return None
        pid = self.next_id
        radius = float(self.rng.uniform(self.min_radius, self.max_radius))
        particle = Particle(
            id=pid,
            position=self.spawn_area.position(pid),
            radius=radius,
            color=tuple(self.color_fn(pid)),
            gravity=self.gravity,
        )
        self._particles.append(particle)
        self.next_id += 1
        return particle

    def resolve_collision(self, a: Particle, b: Particle) -> bool:
        """
        Push two overlapping particles apart along their center line, the
        smaller one moving more. Returns True if a correction was applied.
        """
        d = a.position - b.position
        dist = float(np.hypot(d[0], d[1]))
        min_dist = a.radius + b.radius
        # coincident centers have no normal
        if not (0.0 < dist < min_dist):
            return False
        n = d / dist
        total = a.radius + b.radius
        ratio_a = a.radius / total
        ratio_b = b.radius / total
        delta = 0.5 * self.response_coefficient * (dist - min_dist)
        a.position -= n * (ratio_b * delta)
        b.position += n * (ratio_a * delta)
        return True

    def step(self) -> None:
        particles = self._particles
        n = len(particles)
        for i in range(n):
            p = particles[i]
            for j in range(i + 1, n):
                self.resolve_collision(p, particles[j])
            self.boundary.confine(p)
            p.integrate()

    def tick(self, spawn_gate: bool = False) -> Particle | None:
        """Advance one frame. Returns the spawned particle, if any."""
        spawned = self.spawn() if spawn_gate else None
        for _ in range(self.substep_count):
            self.step()
        self.tick_count += 1
        return spawned

    def particles(self) -> list[ParticleSnapshot]:
        return [make_particle_snapshot(p) for p in self._particles]

    def iter_particles(self):
        """Live particles, for diagnostics. Do not mutate."""
        return iter(self._particles)


def run_simulation(
    simulator: Simulator,
    n_ticks: int,
    cadence: SpawnCadence | None = None,
    log_interval: int = 600,
) -> SimulationRecording:
    """
    Tick the simulator n_ticks times and record a frame after every tick.
    """
    cadence = cadence if cadence is not None else SpawnCadence()
    recording = SimulationRecording()
    for t in range(n_ticks):
        spawned = simulator.tick(spawn_gate=cadence(t))
        frame = snapshot_frame(
            simulator.tick_count,
            simulator.particles(),
            static_registry=recording.particle_static,
            spawned=spawned is not None,
        )
        recording.add_frame(frame)
        if (t + 1) % log_interval == 0:
            print(f"Simulated {t + 1} / {n_ticks} ticks...")
            print(f"Number of particles: {simulator.n_particles}, "
                  f"kinetic energy: {kinetic_energy(simulator.iter_particles()):.3f}")
    return recording
