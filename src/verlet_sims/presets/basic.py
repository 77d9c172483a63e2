from __future__ import annotations
import numpy as np
from verlet_sims.core import SimConfig, Simulator, SpawnArea, SpawnCadence, ConfigError, boundary
from verlet_sims.utils.reflection import get_class
from verlet_sims.visual.color_sampler import make_color_fn


def make_boundary(boundary_cfg: dict) -> boundary.Boundary:
    try:
        cls = get_class(boundary_cfg['type'], boundary, base=boundary.Boundary)
    except ValueError as e:
        raise ConfigError(f"Unknown boundary type {boundary_cfg.get('type')!r}") from e
    try:
        return cls(**(boundary_cfg.get('params') or {}))
    except TypeError as e:
        raise ConfigError(f"Bad parameters for {cls.__name__}: {boundary_cfg.get('params')!r}") from e


def make_simulator(sim_config: SimConfig, rng: np.random.Generator | None = None) -> Simulator:
    sim_config.validate()
    spawn_area = SpawnArea(
        origin=tuple(sim_config.spawn_origin),
        width=sim_config.spawn_width,
        stride=sim_config.spawn_stride,
    )
    return Simulator(
        population_cap=sim_config.population_cap,
        spawn_area=spawn_area,
        radius_range=sim_config.radius_range,
        gravity=sim_config.gravity,
        response_coefficient=sim_config.response_coefficient,
        substep_count=sim_config.substep_count,
        boundary=make_boundary(sim_config.boundary),
        rng=rng,
        color_fn=make_color_fn(sim_config.cmap, sim_config.color_strategy),
    )


def make_cadence(sim_config: SimConfig) -> SpawnCadence:
    return SpawnCadence(every=sim_config.spawn_every)
