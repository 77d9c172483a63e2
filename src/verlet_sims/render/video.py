# src/verlet_sims/render/video.py

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
import shutil

import matplotlib.pyplot as plt
from matplotlib.animation import FFMpegWriter

from .renderer import MatplotlibRenderer, RendererConfig

if TYPE_CHECKING:
    from verlet_sims.core import Boundary, SimulationRecording

PREVIEW_FFMPEG_ARGS = [
    "-crf", "35",
    "-preset", "ultrafast",
    "-pix_fmt", "yuv420p",
]
FINAL_FFMPEG_ARGS = [
    "-crf", "18",
    "-preset", "slow",
    "-pix_fmt", "yuv420p",
]


def render_video(
    recording: SimulationRecording,
    *,
    output_path: str | Path,
    fps: int = 60,
    renderer: MatplotlibRenderer | None = None,
    boundary: Boundary | None = None,
    bitrate: int | None = None,
    preview: bool = False,
    log_interval: int = 1  # seconds of video
) -> Path:
    """
    Render a SimulationRecording to an MP4, one recorded tick per video frame.

    Requirements:
        - ffmpeg installed and discoverable by Matplotlib.
    """
    if shutil.which("ffmpeg") is None:
        raise RuntimeError(
            "ffmpeg not found. Install with: conda install -c conda-forge ffmpeg"
        )
    if renderer is None:
        renderer = MatplotlibRenderer(RendererConfig(), particle_static=recording.particle_static, boundary=boundary)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer = FFMpegWriter(
        fps=fps,
        metadata={"artist": "verlet_sims"},
        bitrate=bitrate,
        extra_args=PREVIEW_FFMPEG_ARGS if preview else FINAL_FFMPEG_ARGS,
    )

    renderer.init_figure()
    with writer.saving(renderer.fig, str(output_path), renderer.config.dpi):
        for idx, frame in enumerate(recording.frames):
            renderer.render_snapshot(frame, ax=renderer.ax)
            if (idx + 1) % (fps * log_interval) == 0:
                print(f"Rendered {(idx + 1) / fps:.1f} seconds of video...")
            writer.grab_frame()
    plt.close(renderer.fig)
    return output_path
