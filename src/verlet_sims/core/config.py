# src/verlet_sims/core/config.py

from __future__ import annotations
from dataclasses import dataclass, field, fields
from numbers import Integral, Real
from typing import Any, Mapping, Sequence

import numpy as np

from .errors import ConfigError

COLOR_STRATEGIES = ("cycle", "random", "discrete")


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def check_radius_range(radius_range: Sequence[float]) -> tuple[float, float]:
    if len(radius_range) != 2:
        raise ConfigError(f"radius_range must be (min, max), got {radius_range!r}")
    lo, hi = radius_range
    if not (isinstance(lo, Real) and isinstance(hi, Real)) or not (0 < lo <= hi < float("inf")):
        raise ConfigError(f"radius bounds must satisfy 0 < min <= max, got min={lo!r}, max={hi!r}")
    return float(lo), float(hi)


def check_population_cap(population_cap: Any) -> int:
    return _positive_int("population_cap", population_cap)


def check_substep_count(substep_count: Any) -> int:
    return _positive_int("substep_count", substep_count)


def check_response_coefficient(response_coefficient: Any) -> float:
    if not isinstance(response_coefficient, Real) or not (0.0 < response_coefficient <= 1.0):
        raise ConfigError(f"response_coefficient must lie in (0, 1], got {response_coefficient!r}")
    return float(response_coefficient)


def check_vector(name: str, value: Any) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a 2-vector of numbers, got {value!r}") from e
    if arr.shape != (2,) or not np.all(np.isfinite(arr)):
        raise ConfigError(f"{name} must be a finite 2-vector, got {value!r}")
    return arr


@dataclass
class SimConfig:
    boundary: dict = field(default_factory=lambda: {'type': 'CircleBoundary', 'params': {'center': [550.0, 300.0], 'radius': 300.0}})
    population_cap: int = 750
    spawn_origin: tuple[float, float] = (100.0, 100.0)
    spawn_stride: float = 5.0
    spawn_width: float = 500.0
    min_radius: float = 5.0
    max_radius: float = 15.0
    gravity: tuple[float, float] = (0.0, 0.1)   # y grows downward
    response_coefficient: float = 0.75
    substep_count: int = 10
    spawn_every: int = 4
    cmap: str | None = None   # None -> rainbow
    color_strategy: str = "cycle"   # how a cmap is walked: cycle, random or discrete

    @property
    def radius_range(self) -> tuple[float, float]:
        return (self.min_radius, self.max_radius)

    def validate(self) -> None:
        check_population_cap(self.population_cap)
        check_substep_count(self.substep_count)
        check_radius_range(self.radius_range)
        check_response_coefficient(self.response_coefficient)
        check_vector("gravity", self.gravity)
        check_vector("spawn_origin", self.spawn_origin)
        _positive_int("spawn_every", self.spawn_every)
        if not self.spawn_width > 0 or not self.spawn_stride > 0:
            raise ConfigError(
                f"spawn_width and spawn_stride must be positive, got {self.spawn_width!r}, {self.spawn_stride!r}"
            )
        if self.color_strategy not in COLOR_STRATEGIES:
            raise ConfigError(
                f"color_strategy must be one of {COLOR_STRATEGIES}, got {self.color_strategy!r}"
            )
        if 'type' not in self.boundary:
            raise ConfigError(f"boundary needs a 'type' entry, got {self.boundary!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimConfig":
        """Build from a preset mapping, rejecting keys that are not config fields."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
        kwargs = dict(data)
        for name in ("gravity", "spawn_origin"):
            if name in kwargs:
                kwargs[name] = tuple(kwargs[name])
        return cls(**kwargs)

    @classmethod
    def from_args(cls, args, base: "SimConfig | None" = None) -> "SimConfig":
        """Overlay argparse values that were actually given (not None) onto `base`."""
        base = base if base is not None else cls()
        kwargs = {}
        for f in fields(cls):
            name = f.name
            value = getattr(args, name, None)
            if value is None:
                continue
            #first special cases
            if name == 'gravity':
                kwargs[name] = (0.0, float(value))
            #all other cases
            else:
                kwargs[name] = value
        return cls(**{**{f.name: getattr(base, f.name) for f in fields(cls)}, **kwargs})
