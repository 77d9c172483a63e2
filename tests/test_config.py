"""
Tests for configuration: SimConfig validation, CLI overlay, YAML presets and
simulator wiring.
"""

from pathlib import Path

import numpy as np
import pytest

from verlet_sims.core import BoxBoundary, CircleBoundary, ConfigError, SimConfig
from verlet_sims.presets.basic import make_boundary, make_cadence, make_simulator
from verlet_sims.utils.cli import build_parser
from verlet_sims.utils.preset_loader import load_preset
from verlet_sims.utils.random import seed_all
from verlet_sims.visual.color_sampler import ColorSampler, rainbow_color

CONFIGS = Path(__file__).parent.parent / "configs"


class TestSimConfig:

    def test_defaults_are_valid(self):
        cfg = SimConfig()
        cfg.validate()
        assert cfg.population_cap == 750
        assert cfg.substep_count == 10
        assert cfg.response_coefficient == 0.75
        assert cfg.radius_range == (5.0, 15.0)

    @pytest.mark.parametrize("overrides", [
        {"min_radius": 0.0},
        {"min_radius": 20.0},
        {"population_cap": 0},
        {"substep_count": -2},
        {"response_coefficient": 0.0},
        {"spawn_every": 0},
        {"spawn_width": 0.0},
        {"gravity": (0.0, float("inf"))},
        {"boundary": {"params": {}}},
        {"color_strategy": "plaid"},
    ])
    def test_invalid(self, overrides):
        with pytest.raises(ConfigError):
            SimConfig(**overrides).validate()

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigError, match="bogus"):
            SimConfig.from_dict({"bogus": 1})

    def test_from_dict_converts_vectors(self):
        cfg = SimConfig.from_dict({"gravity": [0.0, 0.3], "spawn_origin": [1.0, 2.0]})
        assert cfg.gravity == (0.0, 0.3)
        assert cfg.spawn_origin == (1.0, 2.0)

    def test_from_args_overlays_given_flags(self):
        args = build_parser().parse_args(["--population", "50", "--gravity", "0.2", "--substeps", "3"])
        base = SimConfig(max_radius=8.0)
        cfg = SimConfig.from_args(args, base=base)
        assert cfg.population_cap == 50
        assert cfg.gravity == (0.0, 0.2)
        assert cfg.substep_count == 3
        assert cfg.max_radius == 8.0
        assert cfg.response_coefficient == 0.75

    def test_from_args_color_strategy(self):
        args = build_parser().parse_args(["--cmap", "plasma", "--color_strategy", "discrete"])
        cfg = SimConfig.from_args(args)
        assert cfg.cmap == "plasma"
        assert cfg.color_strategy == "discrete"

    def test_cli_rejects_unknown_color_strategy(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--color_strategy", "plaid"])

    def test_from_args_without_flags_keeps_defaults(self):
        args = build_parser().parse_args([])
        assert SimConfig.from_args(args) == SimConfig()


class TestPresets:

    def test_bundled_default(self):
        cfg = load_preset(CONFIGS / "default.yaml").to_sim_config()
        assert cfg == SimConfig()

    def test_bundled_box(self):
        preset = load_preset(CONFIGS / "box.yaml")
        assert [p.name for p in preset.loaded_files] == ["base.yaml", "box.yaml"]
        sim = make_simulator(preset.to_sim_config(), rng=np.random.default_rng(0))
        assert isinstance(sim.boundary, BoxBoundary)
        assert sim.population_cap == 400

    def test_include_order_and_override(self, tmp_path):
        (tmp_path / "a.yaml").write_text("population_cap: 10\nmin_radius: 2.0\n")
        (tmp_path / "b.yaml").write_text("include: [a.yaml]\nmin_radius: 3.0\n")
        (tmp_path / "top.yaml").write_text("include: [b.yaml]\npopulation_cap: 20\n")
        preset = load_preset(tmp_path / "top.yaml")
        assert preset.resolved == {"population_cap": 20, "min_radius": 3.0}

    def test_nested_dicts_merge(self, tmp_path):
        (tmp_path / "a.yaml").write_text("boundary: {type: CircleBoundary, params: {radius: 50.0}}\n")
        (tmp_path / "b.yaml").write_text("include: [a.yaml]\nboundary: {params: {center: [0.0, 0.0]}}\n")
        resolved = load_preset(tmp_path / "b.yaml").resolved
        assert resolved["boundary"] == {"type": "CircleBoundary", "params": {"radius": 50.0, "center": [0.0, 0.0]}}

    def test_include_cycle(self, tmp_path):
        (tmp_path / "a.yaml").write_text("include: [b.yaml]\n")
        (tmp_path / "b.yaml").write_text("include: [a.yaml]\n")
        with pytest.raises(ValueError, match="cycle"):
            load_preset(tmp_path / "a.yaml")

    def test_non_mapping_root(self, tmp_path):
        (tmp_path / "a.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_preset(tmp_path / "a.yaml")


class TestWiring:

    def test_make_simulator_uses_config(self):
        cfg = SimConfig(population_cap=12, substep_count=3, gravity=(0.0, 0.5), cmap="viridis")
        sim = make_simulator(cfg, rng=np.random.default_rng(1))
        assert sim.population_cap == 12
        assert sim.substep_count == 3
        assert np.allclose(sim.gravity, [0.0, 0.5])
        assert isinstance(sim.boundary, CircleBoundary)
        assert isinstance(sim.color_fn, ColorSampler)

    def test_color_strategy_reaches_sampler(self):
        cfg = SimConfig(cmap="viridis", color_strategy="discrete")
        sim = make_simulator(cfg, rng=np.random.default_rng(1))
        assert sim.color_fn.strategy == "discrete"
        assert sim.spawn().color == ColorSampler("viridis", strategy="discrete")(1)

    def test_rainbow_by_default(self):
        sim = make_simulator(SimConfig(), rng=np.random.default_rng(1))
        p = sim.spawn()
        assert p.color == rainbow_color(1)

    def test_unknown_boundary(self):
        with pytest.raises(ConfigError):
            make_boundary({"type": "HexBoundary"})

    def test_bad_boundary_params(self):
        with pytest.raises(ConfigError):
            make_boundary({"type": "CircleBoundary", "params": {"side": 3}})

    def test_make_simulator_validates(self):
        with pytest.raises(ConfigError):
            make_simulator(SimConfig(max_radius=400.0))

    def test_cadence(self):
        assert make_cadence(SimConfig(spawn_every=3)).every == 3


class TestColors:

    def test_rainbow_is_rgb_bytes(self):
        for i in range(50):
            c = rainbow_color(i)
            assert len(c) == 3
            assert all(0 <= v <= 255 for v in c)

    def test_cycle_is_deterministic(self):
        sampler = ColorSampler("viridis", period=10)
        assert sampler(3) == sampler(13)
        assert sampler(3) != sampler(4)

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            ColorSampler("viridis", vmin=0.9, vmax=0.1)

    def test_discrete_snaps_to_n_colors(self):
        sampler = ColorSampler("viridis", strategy="discrete", period=120, n_discrete=4)
        colors = {sampler(i) for i in range(120)}
        assert len(colors) == 4
        assert sampler(0) == sampler(29)
        assert sampler(0) != sampler(30)

    def test_random_is_reproducible_after_seed_all(self):
        sampler = ColorSampler("viridis", strategy="random")
        seed_all(3)
        first = [sampler(i) for i in range(5)]
        seed_all(3)
        assert [sampler(i) for i in range(5)] == first
        assert len(set(first)) > 1

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            ColorSampler("viridis", strategy="plaid")(1)
