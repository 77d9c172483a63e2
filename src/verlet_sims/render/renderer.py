# src/verlet_sims/render/renderer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import PatchCollection
from matplotlib.patches import Circle

if TYPE_CHECKING:
    from verlet_sims.core.boundary import Boundary
    from verlet_sims.core.recording import FrameSnapshot, ParticleStaticSnapshot


def fig_inches_from_pixels(width_px: int | None = None,
                           height_px: int | None = None,
                           dpi: int = 100,
                           figsize_default: tuple[float, float] = (6.0, 6.0)) -> tuple[float, float]:
    if width_px is not None and height_px is not None:
        return (width_px / dpi, height_px / dpi)
    return figsize_default


@dataclass
class RendererConfig:
    figsize: tuple[float, float] = (6.0, 6.0)
    dpi: int = 150
    width_px: int | None = None
    height_px: int | None = None
    background_color: str | None = "black"
    world_color: str | None = "#111111"
    boundary_color: str | None = "white"
    hud_color: str = "white"
    padding: float = 0.05   # in world units, as a fraction of the boundary span
    show_hud: bool = True


class MatplotlibRenderer:
    def __init__(self, config: RendererConfig | None = None,
                 particle_static: dict[int, ParticleStaticSnapshot] | None = None,
                 boundary: Boundary | None = None):
        self.config = config or RendererConfig()
        self.particle_static = particle_static or {}
        self.boundary = boundary
        self.fig = None
        self.ax = None
        self._hud_text = None

    def init_figure(self):
        fig, ax = plt.subplots(
            figsize=fig_inches_from_pixels(width_px=self.config.width_px,
                                           height_px=self.config.height_px,
                                           dpi=self.config.dpi,
                                           figsize_default=self.config.figsize),
            dpi=self.config.dpi,
        )
        bg = self.config.background_color if self.config.background_color is not None else "none"
        fig.patch.set_facecolor(bg)
        ax.set_position([0.0, 0.0, 1.0, 1.0])
        self._hud_text = fig.text(0.02, 0.98, "", ha="left", va="top",
                                  size=10, color=self.config.hud_color)
        self.fig, self.ax = fig, ax
        return fig, ax

    def render_snapshot(self, snapshot: FrameSnapshot, *, ax: Axes | None = None) -> None:
        """
        Draw a single frame snapshot onto the given Axes (the renderer's own by default).
        """
        if ax is None:
            if self.ax is None:
                self.init_figure()
            ax = self.ax
        ax.clear()
        self._setup_axes(ax)
        if self.boundary is not None:
            self._draw_boundary(ax)

        patches, colors = [], []
        for pid, pos in snapshot.positions.items():
            static = self.particle_static[pid]
            patches.append(Circle(pos, static.radius))
            colors.append(static.color)
        if patches:
            ax.add_collection(PatchCollection(patches, facecolors=colors, edgecolors="none"))

        if self._hud_text is not None:
            text = f"{snapshot.n_particles} particles\ntick {snapshot.tick}" if self.config.show_hud else ""
            self._hud_text.set_text(text)

    # --- helpers ---

    def _setup_axes(self, ax: Axes) -> None:
        ax.set_facecolor(self.config.background_color if self.config.background_color is not None else "none")
        ax.set_aspect("equal", adjustable="box")
        ax.set_axis_off()
        if self.boundary is not None:
            xmin, xmax, ymin, ymax = self.boundary.bounds()
            pad = self.config.padding * max(xmax - xmin, ymax - ymin)
            ax.set_xlim(xmin - pad, xmax + pad)
            # y grows downward, like the screen
            ax.set_ylim(ymax + pad, ymin - pad)

    def _draw_boundary(self, ax: Axes) -> None:
        self.boundary.plot(
            ax=ax,
            facecolor=self.config.world_color if self.config.world_color is not None else "none",
            edgecolor=self.config.boundary_color if self.config.boundary_color is not None else "none",
            linewidth=2,
        )
        # plot() resets limits; restore the padded, flipped view
        self._setup_axes(ax)
