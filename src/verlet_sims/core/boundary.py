# src/verlet_sims/core/boundary.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from .errors import ConfigError
from .particle import Particle


class Boundary(ABC):
    @abstractmethod
    def confine(self, particle: Particle) -> None:
        """Mutate the particle's position so it lies inside the domain."""
        ...

    @abstractmethod
    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        """
        Return True if a (possibly extended) point is fully inside the domain.

        `radius` lets you check "does this circle of radius r fit inside?".
        """
        ...

    @abstractmethod
    def bounds(self) -> tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax) for camera setup / plotting."""
        ...

    @abstractmethod
    def validate(self, max_radius: float) -> None:
        """Raise ConfigError if a particle of max_radius cannot fit inside."""
        ...

    def _prepare_ax(self, ax, delta):
        created_fig = False
        fig = None
        if ax is None:
            fig, ax = plt.subplots()
            created_fig = True
        xmin, xmax, ymin, ymax = self.bounds()
        ax.set_xlim(xmin - delta, xmax + delta)
        ax.set_ylim(ymin - delta, ymax + delta)
        ax.set_aspect("equal", adjustable="box")
        return fig, ax, created_fig


@dataclass
class CircleBoundary(Boundary):
    center: Tuple[float, float] = (550.0, 300.0)
    radius: float = 300.0

    def __post_init__(self):
        self.center = tuple(float(c) for c in self.center)
        self.radius = float(self.radius)

    def confine(self, particle: Particle) -> None:
        particle.confine_to_circle(self.center, self.radius)

    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        d = np.asarray(pos, dtype=float) - np.asarray(self.center)
        return float(np.linalg.norm(d)) <= self.radius - radius

    def bounds(self) -> tuple[float, float, float, float]:
        cx, cy = self.center
        return cx - self.radius, cx + self.radius, cy - self.radius, cy + self.radius

    def validate(self, max_radius: float) -> None:
        if not np.all(np.isfinite(self.center)):
            raise ConfigError(f"Boundary center must be finite, got {self.center}")
        if not self.radius > max_radius:
            raise ConfigError(
                f"Boundary radius {self.radius} must exceed the largest particle radius {max_radius}"
            )

    def plot(self, ax=None, delta=0, **kwargs):
        """
        Plot the circular boundary.

        Parameters
        ----------
        ax : matplotlib.axes.Axes, optional
            Axes to draw on. If None, a new figure and axes are created.
        **kwargs :
            Extra keyword arguments passed to Circle, e.g.
            edgecolor, facecolor, linewidth.

        Returns
        -------
        ax or (fig, ax)
        """
        fig, ax, created_fig = self._prepare_ax(ax, delta)
        ax.add_patch(Circle(self.center, self.radius, **kwargs))
        if created_fig:
            return fig, ax
        return ax


@dataclass
class BoxBoundary(Boundary):
    xmin: float = 50.0
    ymin: float = 50.0
    xmax: float = 1050.0
    ymax: float = 550.0

    def confine(self, particle: Particle) -> None:
        particle.confine_to_box(self.xmin, self.ymin, self.xmax, self.ymax)

    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        x, y = float(pos[0]), float(pos[1])
        return (
            x - radius >= self.xmin
            and x + radius <= self.xmax
            and y - radius >= self.ymin
            and y + radius <= self.ymax
        )

    def bounds(self) -> tuple[float, float, float, float]:
        return self.xmin, self.xmax, self.ymin, self.ymax

    def validate(self, max_radius: float) -> None:
        if self.xmax - self.xmin <= 2 * max_radius or self.ymax - self.ymin <= 2 * max_radius:
            raise ConfigError(
                f"Box {self.bounds()} is too small for particles of radius {max_radius}"
            )

    def plot(self, ax=None, delta=0, **kwargs):
        fig, ax, created_fig = self._prepare_ax(ax, delta)
        ax.add_patch(Rectangle((self.xmin, self.ymin), self.xmax - self.xmin, self.ymax - self.ymin, **kwargs))
        if created_fig:
            return fig, ax
        return ax
