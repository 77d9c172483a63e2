import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from verlet_sims.core import CircleBoundary, Simulator, SpawnArea


@pytest.fixture
def make_sim():
    """Factory for small simulators with an injected, seeded generator."""
    def _make(
        population_cap=10,
        spawn_area=None,
        radius_range=(5.0, 15.0),
        gravity=(0.0, 0.1),
        response_coefficient=0.75,
        substep_count=10,
        boundary=None,
        seed=0,
        **kwargs,
    ):
        return Simulator(
            population_cap=population_cap,
            spawn_area=spawn_area if spawn_area is not None else SpawnArea((100.0, 100.0), 500.0, 5.0),
            radius_range=radius_range,
            gravity=gravity,
            response_coefficient=response_coefficient,
            substep_count=substep_count,
            boundary=boundary if boundary is not None else CircleBoundary((550.0, 300.0), 300.0),
            rng=np.random.default_rng(seed),
            **kwargs,
        )
    return _make
