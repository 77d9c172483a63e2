# scripts/main.py

from __future__ import annotations

from pathlib import Path
from dataclasses import asdict

from verlet_sims.core import run_simulation, SimConfig
from verlet_sims.presets.basic import make_simulator, make_cadence
from verlet_sims.render.frame_export import export_frame
from verlet_sims.render.renderer import MatplotlibRenderer, RendererConfig
from verlet_sims.render.video import render_video
from verlet_sims.utils.cli import build_parser
from verlet_sims.utils.preset_loader import load_preset
from verlet_sims.utils.random import seed_all

PROJECT_ROOT = Path(__file__).parent.parent


def main():
    parser = build_parser()
    args = parser.parse_args()
    base = load_preset(args.preset).to_sim_config() if args.preset is not None else None
    sim_config = SimConfig.from_args(args, base=base)

    seed_all(args.seed)

    # 1. Build the simulator
    simulator = make_simulator(sim_config)

    # 2. Run and record
    recording = run_simulation(simulator, args.ticks, make_cadence(sim_config), log_interval=args.frame_rate * 10)
    print(f"Simulation completed with {simulator.n_particles} particles.")
    recording.meta = {
        "sim_config": asdict(sim_config),
        "seed": args.seed,
        "engine_version": "0.1.0",
    }

    # 3. Output paths
    exp_dir = PROJECT_ROOT / args.outdir / args.exp_name
    exp_dir.mkdir(exist_ok=True, parents=True)

    renderer = MatplotlibRenderer(RendererConfig(),
                                  particle_static=recording.particle_static,
                                  boundary=simulator.boundary)
    if not args.no_video:
        print("Rendering video...")
        render_video(
            recording,
            output_path=exp_dir / "video.mp4",
            fps=args.frame_rate,
            renderer=renderer,
            bitrate=args.bitrate,
            preview=args.preview,
        )

    if args.export_frame:
        export_frame(
            recording,
            out_path=exp_dir / "last_frame.png",
            frame_index=-1,
            renderer=renderer,
        )


if __name__ == "__main__":
    main()
