# src/verlet_sims/core/__init__.py

from .errors import ConfigError
from .config import SimConfig
from .particle import Particle
from .boundary import Boundary, CircleBoundary, BoxBoundary
from .simulator import Simulator, SpawnArea, SpawnCadence, run_simulation
from .recording import (
    ParticleSnapshot,
    ParticleStaticSnapshot,
    FrameSnapshot,
    SimulationRecording,
)

__all__ = [
    "ConfigError",
    "SimConfig",
    "Particle",
    "Boundary",
    "CircleBoundary",
    "BoxBoundary",
    "Simulator",
    "SpawnArea",
    "SpawnCadence",
    "run_simulation",
    "ParticleSnapshot",
    "ParticleStaticSnapshot",
    "FrameSnapshot",
    "SimulationRecording",
]
