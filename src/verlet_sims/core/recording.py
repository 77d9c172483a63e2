# src/verlet_sims/core/recording.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, Tuple

if TYPE_CHECKING:
    from .particle import Particle


@dataclass(frozen=True)
class ParticleSnapshot:
    """Read-only view of one particle, handed to renderers between ticks."""
    id: int
    position: Tuple[float, float]
    radius: float
    color: Tuple[int, int, int]


@dataclass
class ParticleStaticSnapshot:
    """Static properties of a particle, stored once per recording."""
    id: int
    radius: float
    color: Tuple[float, float, float]  # normalized 0–1 for matplotlib


@dataclass
class FrameSnapshot:
    tick: int
    positions: dict[int, Tuple[float, float]]
    spawned: bool = False

    @property
    def n_particles(self) -> int:
        return len(self.positions)


@dataclass
class SimulationRecording:
    """
    In-memory record of a run, one frame per tick.

    `meta` holds config, seed, etc.
    """
    frames: list[FrameSnapshot] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    particle_static: Dict[int, ParticleStaticSnapshot] = field(default_factory=dict)

    def add_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)

    @property
    def ticks(self) -> list[int]:
        return [f.tick for f in self.frames]

    def frame_at_tick(self, tick: int) -> FrameSnapshot:
        """Frame recorded closest to `tick`."""
        if not self.frames:
            raise ValueError("Recording has no frames")
        return min(self.frames, key=lambda f: abs(f.tick - tick))


def make_particle_snapshot(particle: Particle) -> ParticleSnapshot:
    pos = particle.position
    return ParticleSnapshot(
        id=particle.id,
        position=(float(pos[0]), float(pos[1])),
        radius=float(particle.radius),
        color=tuple(int(c) for c in particle.color),
    )


def make_particle_static_snapshot(snap: ParticleSnapshot) -> ParticleStaticSnapshot:
    return ParticleStaticSnapshot(
        id=snap.id,
        radius=snap.radius,
        color=tuple(c / 255 for c in snap.color),
    )


def snapshot_frame(
    tick: int,
    particles: Iterable[ParticleSnapshot],
    *,
    static_registry: Dict[int, ParticleStaticSnapshot],
    spawned: bool = False,
) -> FrameSnapshot:
    positions: dict[int, Tuple[float, float]] = {}
    for snap in particles:
        # Radius and color never change, so they are stored once per id
        if snap.id not in static_registry:
            static_registry[snap.id] = make_particle_static_snapshot(snap)
        positions[snap.id] = snap.position
    return FrameSnapshot(tick=tick, positions=positions, spawned=spawned)
