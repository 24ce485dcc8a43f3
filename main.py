#!/usr/bin/env python3
"""
PathForge - A Python Monte Carlo Path Tracer

Main entry point for rendering scenes.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

from pathforge.image import to_ldr, write_ppm
from pathforge.renderer import Renderer, RenderSettings
from pathforge.scenes import SCENES, build_scene
from pathforge.scene_parser import SceneParseError, load_scene


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='PathForge - A Python Monte Carlo Path Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene four --output four.ppm
  python main.py --width 1200 --aspect 1.5 --samples 500 --output final.png
  python main.py --scene-file scenes/demo.yaml --output - > demo.ppm
        '''
    )

    parser.add_argument('--width', type=int, default=400, help='Image width (default: 400)')
    parser.add_argument('--aspect', type=float, default=16 / 9, help='Aspect ratio width/height (default: 16/9)')
    parser.add_argument('--samples', type=int, default=100, help='Samples per pixel (default: 100)')
    parser.add_argument('--depth', type=int, default=50, help='Max ray depth (default: 50)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (default: unseeded)')
    parser.add_argument('--output', type=str, default='output/render.ppm',
                        help="Output filename, '-' for PPM on stdout")
    parser.add_argument('--scene', type=str, default='random', choices=sorted(SCENES),
                        help='Built-in scene to render (default: random)')
    parser.add_argument('--scene-file', type=str, default=None,
                        help='YAML/JSON scene description (overrides --scene and size options)')
    parser.add_argument('--quiet', action='store_true', help='Suppress progress output')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    def status(message: str = '', **kwargs):
        if not args.quiet:
            print(message, file=sys.stderr, **kwargs)

    try:
        if args.scene_file:
            world, camera, settings = load_scene(args.scene_file)
            if args.seed is not None:
                settings.seed = args.seed
            scene_name = args.scene_file
        else:
            settings = RenderSettings(
                width=args.width,
                aspect_ratio=args.aspect,
                samples_per_pixel=args.samples,
                max_depth=args.depth,
                seed=args.seed
            )
            scene_rng = np.random.default_rng(args.seed)
            world, camera = build_scene(args.scene, settings.width / settings.height, scene_rng)
            scene_name = args.scene
    except (SceneParseError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    status("=" * 60)
    status("PathForge Path Tracer")
    status("=" * 60)
    status("Render Settings:")
    status(f"  Resolution: {settings.width}x{settings.height}")
    status(f"  Samples: {settings.samples_per_pixel}")
    status(f"  Max Depth: {settings.max_depth}")
    status(f"  Scene: {scene_name} ({len(world)} objects)")

    renderer = Renderer(settings)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            status(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    if not args.quiet:
        renderer.set_progress_callback(progress_callback)

    status("\nRendering...")
    start_time = time.time()

    image = renderer.render(world, camera)

    elapsed = time.time() - start_time
    status(f"\nRender completed in {elapsed:.2f} seconds")
    if elapsed > 0:
        rays = settings.width * settings.height * settings.samples_per_pixel
        status(f"  Samples per second: {rays / elapsed:.0f}")

    try:
        if args.output == '-':
            write_ppm(to_ldr(image), sys.stdout)
            sys.stdout.flush()
        else:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            status(f"\nSaving to: {args.output}")
            renderer.save_image(image, output_path)
    except OSError as e:
        print(f"Error: cannot write output: {e}", file=sys.stderr)
        return 1

    status("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
