from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt

from .renderer import MatplotlibRenderer, RendererConfig

if TYPE_CHECKING:
    from verlet_sims.core import Boundary, SimulationRecording


def export_frame(
    recording: SimulationRecording,
    *,
    out_path: str | Path,
    frame_index: int | None = None,
    tick: int | None = None,
    renderer: MatplotlibRenderer | None = None,
    boundary: Boundary | None = None,
) -> Path:
    """
    Render a single frame from `recording` to a PNG (or whatever extension you provide),
    matching the video renderer's visuals.

    Provide either:
      - frame_index (index into recording.frames)
      - tick (choose the frame closest to that tick)
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if (frame_index is None) == (tick is None):
        raise ValueError("Provide exactly one of frame_index or tick")

    frames = recording.frames
    if not frames:
        raise ValueError("Recording has no frames")

    if frame_index is not None:
        if frame_index < -len(frames) or frame_index >= len(frames):
            raise IndexError(f"frame_index {frame_index} out of range (0..{len(frames)-1})")
        frame = frames[frame_index]
    else:
        frame = recording.frame_at_tick(tick)

    if renderer is None:
        renderer = MatplotlibRenderer(RendererConfig(), particle_static=recording.particle_static, boundary=boundary)

    renderer.init_figure()
    renderer.render_snapshot(frame, ax=renderer.ax)
    renderer.fig.savefig(out_path, dpi=renderer.config.dpi, bbox_inches=None, pad_inches=0,
                         facecolor=renderer.fig.get_facecolor())
    plt.close(renderer.fig)
    return out_path
