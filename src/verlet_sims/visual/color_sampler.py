# verlet_sims/visual/color_sampler.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

import numpy as np
import matplotlib as mpl

from verlet_sims.utils.random import rng

Strategy = Literal["cycle", "random", "discrete"]
RGB = tuple[int, int, int]


def rainbow_color(i: float) -> RGB:
    """Squared-sine rainbow: neighbouring ids get neighbouring hues."""
    phases = (0.0, 0.33 * 2.0 * np.pi, 0.66 * 2.0 * np.pi)
    return tuple(int(255 * np.sin(i + ph) ** 2) for ph in phases)


def rgba_float_to_u8(rgba) -> RGB:
    return tuple(int(round(255 * c)) for c in rgba[:3])


@dataclass(frozen=True)
class ColorSampler:
    """
    Colors particles from a Matplotlib colormap.

    Typical usage:
        sampler = ColorSampler("viridis", strategy="cycle", period=120)
        rgb = sampler(particle_id)

    Strategies:
      - "cycle": walk the colormap by id, wrapping every `period` ids
      - "random": draw from the "color" RNG stream (seed_all makes it reproducible)
      - "discrete": like "cycle" but snapped to `n_discrete` evenly spaced colors
    """

    cmap: str | mpl.colors.Colormap = "viridis"
    strategy: Strategy = "cycle"

    # Range in colormap parameter space
    vmin: float = 0.05
    vmax: float = 0.95

    period: int = 120
    n_discrete: int = 16

    def __post_init__(self):
        lo, hi = float(self.vmin), float(self.vmax)
        if not (0.0 <= lo < hi <= 1.0):
            raise ValueError(f"Invalid vmin/vmax: {lo=}, {hi=} (need 0<=vmin<vmax<=1)")
        if self.period <= 0 or self.n_discrete <= 0:
            raise ValueError(f"period and n_discrete must be > 0, got {self.period}, {self.n_discrete}")

    def _get_cmap(self) -> mpl.colors.Colormap:
        if isinstance(self.cmap, str):
            return mpl.colormaps[self.cmap]
        return self.cmap

    def _u_for_id(self, particle_id: int) -> float:
        lo, hi = float(self.vmin), float(self.vmax)
        if self.strategy == "random":
            return float(rng("color").uniform(lo, hi))
        phase = (particle_id % self.period) / self.period
        if self.strategy == "discrete":
            k = int(self.n_discrete)
            vals = np.linspace(lo, hi, k, dtype=float)
            return float(vals[min(int(phase * k), k - 1)])
        if self.strategy == "cycle":
            return lo + (hi - lo) * phase
        raise ValueError(f"Unknown strategy: {self.strategy!r}")

    def color_at(self, u: float) -> RGB:
        """Map u in [0,1] through the colormap."""
        if not (0.0 <= float(u) <= 1.0):
            raise ValueError(f"u must be in [0,1], got {u}")
        return rgba_float_to_u8(self._get_cmap()(float(u)))

    def __call__(self, particle_id: int) -> RGB:
        return self.color_at(self._u_for_id(particle_id))


def make_color_fn(cmap: str | None = None, strategy: Strategy = "cycle") -> Callable[[int], RGB]:
    """Rainbow when no colormap is named, otherwise a ColorSampler."""
    if cmap is None:
        return rainbow_color
    return ColorSampler(cmap, strategy=strategy)

