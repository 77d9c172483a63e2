import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Verlet particle simulation')
    parser.add_argument('--preset', type=str, default=None, metavar='PATH',
                        help='YAML preset with simulation settings (flags below override it)')
    parser.add_argument('--exp_name', type=str, default='', metavar='N',
                        help='experiment_name')
    parser.add_argument('--seed', type=int, default=1, metavar='N',
                        help='random seed (default: 1)')
    parser.add_argument('--ticks', type=int, default=3600, metavar='N',
                        help='number of ticks (frames) to simulate (default: 3600)')
    parser.add_argument('--frame_rate', type=int, default=60, metavar='N',
                        help='frame rate for rendering (default: 60)')
    parser.add_argument('--outdir', type=str, default='results', metavar='N',
                        help='directory to save the rendered output (default: results)')
    parser.add_argument('--population_cap', '--population', type=int, default=None, metavar='N',
                        help='number of particles to spawn in total (default: 750)')
    parser.add_argument('--substep_count', '--substeps', type=int, default=None, metavar='N',
                        help='relaxation substeps per tick (default: 10)')
    parser.add_argument('--spawn_every', type=int, default=None, metavar='N',
                        help='spawn a particle every N ticks (default: 4)')
    parser.add_argument('--min_radius', type=float, default=None, metavar='R',
                        help='smallest particle radius (default: 5)')
    parser.add_argument('--max_radius', type=float, default=None, metavar='R',
                        help='largest particle radius (default: 15)')
    parser.add_argument('--response_coefficient', '--response', type=float, default=None, metavar='K',
                        help='fraction of overlap corrected per collision, in (0, 1] (default: 0.75)')
    parser.add_argument(
        "--gravity",
        type=float,
        default=None,
        help="Gravity per substep in the downward (positive y) direction (default: 0.1).",
    )
    parser.add_argument(
        "--cmap",
        type=str,
        default=None,
        help="Matplotlib colormap for particles (default: rainbow)",
    )
    parser.add_argument(
        "--color_strategy",
        type=str,
        default=None,
        choices=["cycle", "random", "discrete"],
        help="how particle ids walk the --cmap colormap (default: cycle)",
    )
    parser.add_argument('--bitrate', type=int, default=8000, metavar='N',
                        help='bitrate for the rendered video in kbps (default: 8000)')
    parser.add_argument(
        "--preview",
        action='store_true',
        help="whether to use preview settings for faster rendering"
    )
    parser.add_argument(
        "--no_video",
        action='store_true',
        help="skip video rendering"
    )
    parser.add_argument(
        "--export_frame",
        action='store_true',
        help="also save the last frame as a PNG"
    )
    return parser

'''
usage: python scripts/main.py --exp_name pile --seed 42 --ticks 4000 \
    --preset configs/default.yaml --population 400 --substeps 8 --cmap plasma \
    --color_strategy discrete --export_frame
'''
