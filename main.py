#!/usr/bin/env python3
"""
raycaster - A Python Whitted-style Ray Tracer

Main entry point for rendering scenes.
"""

import argparse
import dataclasses
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from raycaster.vec3 import Vec3, Point3
from raycaster.color import Color
from raycaster.scene import Scene
from raycaster.shapes import Sphere, Plane, Background
from raycaster.lights import Light, AmbientLight, PointLight, DirectionalLight
from raycaster.renderer import Renderer, RenderSettings
from raycaster.scene_parser import SceneParseError, load_scene


def create_demo_scene() -> Tuple[Scene, List[Light]]:
    """Create the demo scene: three colored spheres over a ground plane."""
    scene = Scene([
        Background(Color(0, 0, 0)),
        # Red sphere, shiny
        Sphere(Point3(0, 0, 4), 1.0, Color(255, 0, 0), reflection=500, specular=0.2),
        # Green sphere, matte
        Sphere(Point3(-2, -1, 8), 1.5, Color(0, 255, 0), reflection=10, specular=0.1),
        # Blue sphere, mirror-like
        Sphere(Point3(2, -1, 8), 1.5, Color(0, 0, 255), reflection=500, specular=0.4),
        # Ground
        Plane(Point3(0, -2.5, 0), Vec3(0, 1, 0), Color(255, 255, 0), reflection=1000, specular=0.3),
    ])

    lights: List[Light] = [
        AmbientLight(0.2),
        PointLight(0.6, Point3(0, 0, 0)),
        DirectionalLight(0.2, Vec3(1, 4, 4)),
    ]
    return scene, lights


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='raycaster - A Python Whitted-style Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output render.png
  python main.py --width 1000 --height 1000 --depth 6 --output big.png
  python main.py --scene scenes/mirrors.yaml --output mirrors.png
        '''
    )

    parser.add_argument('--width', type=int, default=None, help='Image width (default: 500)')
    parser.add_argument('--height', type=int, default=None, help='Image height (default: 500)')
    parser.add_argument('--depth', type=int, default=None, help='Max reflection depth (default: 4)')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename')
    parser.add_argument('--scene', type=str, default='demo',
                        help='"demo" or a path to a YAML/JSON scene file (default: demo)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Print header
    print("=" * 60)
    print("raycaster")
    print("=" * 60)

    # Create scene
    print(f"\nCreating scene: {args.scene}")
    if args.scene == 'demo':
        scene, lights = create_demo_scene()
        settings = RenderSettings()
    else:
        try:
            scene, lights, settings = load_scene(args.scene)
        except SceneParseError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    overrides = {}
    if args.width is not None:
        overrides['width'] = args.width
    if args.height is not None:
        overrides['height'] = args.height
    if args.depth is not None:
        overrides['recursion_depth'] = args.depth
    if overrides:
        try:
            settings = dataclasses.replace(settings, **overrides)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"  Objects in scene: {len(scene)}")
    print(f"  Lights: {len(lights)}")

    print(f"\nRender Settings:")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Samples: {len(settings.jitter)}")
    print(f"  Max Depth: {settings.recursion_depth}")

    # Create renderer
    renderer = Renderer(scene, lights, settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    # Render
    print("\nRendering...")
    start_time = time.time()

    image = renderer.render()

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    if elapsed > 0:
        rays = settings.width * settings.height * len(settings.jitter)
        print(f"  Primary rays per second: {rays / elapsed:.0f}")

    # Ensure output directory exists
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Save image
    print(f"\nSaving to: {args.output}")
    renderer.save_image(image, str(output_path))

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
