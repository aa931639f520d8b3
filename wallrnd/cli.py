#!/usr/bin/env python3
"""
Command-line wallpaper generation.

Usage:
    wallrnd --image <output.svg> [options]

Options:
    --config FILE   Configuration file (JSON, see --init)
    --init FILE     Write the default configuration to FILE and exit
    --log FILE      Record the generated scene to FILE
    --load FILE     Reuse a scene recorded with --log
    --time HHMM     Time used to select themes (default: now)
    --width/--height  Override the frame size
    --seed N        Seed the random generator
    --preview FILE  Also render a raster preview (PNG)
    --verbose SPEC  Any of P (progress), D (details), I (info), W (warnings), A (all)

Example:
    wallrnd --config ~/.config/wallrnd.json --image /tmp/wallpaper.svg --verbose PW
"""

from dataclasses import dataclass, replace
from datetime import datetime
import argparse
import os
import random
import sys

try:
    from .config import MetaConfig
    from .scene import Scene, save_scene, load_scene
    from .svg import paint_tiles
    from .preview import save_preview
except ImportError:
    from config import MetaConfig
    from scene import Scene, save_scene, load_scene
    from svg import paint_tiles
    from preview import save_preview


@dataclass
class Verbosity:
    """Which kinds of messages to print."""
    prog: bool = False
    details: bool = False
    info: bool = False
    warn: bool = False

    @classmethod
    def from_str(cls, descriptor: str) -> "Verbosity":
        descriptor = descriptor.upper()
        for ch in descriptor:
            if ch not in "PDIWA":
                raise ValueError(f"Invalid verbosity descriptor {descriptor!r}, expected '^[PDIWA]*$'")
        everything = "A" in descriptor
        return cls(
            prog=everything or "P" in descriptor,
            details=everything or "D" in descriptor,
            info=everything or "I" in descriptor,
            warn=everything or "W" in descriptor,
        )


def current_time() -> int:
    """Local time as HHMM."""
    now = datetime.now()
    return now.hour * 100 + now.minute


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wallrnd',
        description='Generate a random tiled wallpaper as SVG',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --image wallpaper.svg
  %(prog)s --init wallrnd.json
  %(prog)s --config wallrnd.json --image out.svg --log scene.json
  %(prog)s --config wallrnd.json --image out.svg --load scene.json
        """
    )
    parser.add_argument('--image', default='',
                        help='Output SVG file')
    parser.add_argument('--config', default='',
                        help='Configuration file (default: built-in settings)')
    parser.add_argument('--init', default='',
                        help='Write the default configuration to this file and exit')
    parser.add_argument('--log', default='',
                        help='Record the generated scene to this file')
    parser.add_argument('--load', default='',
                        help='Reuse a scene recorded with --log')
    parser.add_argument('--time', type=int, default=None,
                        help='Time as HHMM used to select themes (default: now)')
    parser.add_argument('--width', type=int, default=None,
                        help='Override frame width')
    parser.add_argument('--height', type=int, default=None,
                        help='Override frame height')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random generator')
    parser.add_argument('--preview', default='',
                        help='Also render a raster preview to this file')
    parser.add_argument('--verbose', type=Verbosity.from_str, default=Verbosity(),
                        help='Verbosity descriptor: any of P, D, I, W, A')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    verbose = args.verbose

    if args.init:
        if verbose.prog:
            print("Initializing configuration file")
        MetaConfig.default().save(args.init)
        return 0

    time = args.time
    if time is None:
        time = current_time()
        if verbose.info:
            print(f"Using current time: {time}")

    rng = random.Random(args.seed)

    try:
        if verbose.prog:
            print("Reading configuration")
        if args.config:
            if not os.path.exists(args.config) and verbose.warn:
                print("Settings file not found")
            meta = MetaConfig.load(args.config)
        else:
            meta = MetaConfig.default()
        errors = meta.validate()
        if errors:
            if verbose.warn:
                for e in errors:
                    print(f"Warning: {e}")
                print("Switching to default settings.")
            meta = MetaConfig.default()

        if verbose.prog:
            print("Choosing random settings according to configuration")
        cfg = meta.pick(rng, time)
        if args.width is not None or args.height is not None:
            cfg.frame = replace(
                cfg.frame,
                w=args.width if args.width is not None else cfg.frame.w,
                h=args.height if args.height is not None else cfg.frame.h,
            )
        if verbose.details:
            print(f"Tiling: {cfg.tiling.value}, pattern: {cfg.pattern.value}")
            print(f"Frame: {cfg.frame.w}x{cfg.frame.h}")

        if verbose.prog:
            print("Building scene")
        scene = Scene.new(cfg, rng)

        if args.load:
            if verbose.prog:
                print(f"Loading scene: {args.load}")
            scene, cfg.frame = load_scene(args.load)

        if args.log:
            if verbose.prog:
                print(f"Recording scene: {args.log}")
            save_scene(args.log, scene, cfg.frame)

        if not args.image:
            if verbose.warn:
                print("No destination specified")
            return 1

        if verbose.prog:
            print("Creating tiling")
        tiles = cfg.make_tiling(rng)
        if verbose.details:
            print(f"Regions: {len(scene.items)}, tiles: {len(tiles)}")
        document = paint_tiles(cfg.frame, tiles, scene, rng, cfg.line_color, cfg.line_width)

        if verbose.prog:
            print("Writing image to file")
        tmp_dest = args.image + ".tmp"
        document.save(tmp_dest)
        os.replace(tmp_dest, args.image)

        if args.preview:
            if verbose.prog:
                print(f"Rendering preview: {args.preview}")
            save_preview(document, args.preview)

    except Exception as e:
        print(f"ERROR: {e}")
        return 1

    if verbose.prog:
        print("Process exited successfully")
    return 0


if __name__ == '__main__':
    sys.exit(main())
