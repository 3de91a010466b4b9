"""
Command-line seam carving: load an image, remove vertical seams, save it.

    python -m seamcarve photo.jpg 100 --output narrow.png
"""

import argparse
from pathlib import Path

from .carving import SeamCarver
from .errors import SeamCarveError
from .pixels import load_pixels, save_pixels

DEFAULT_OUTPUT = 'output.png'


def build_parser():
    parser = argparse.ArgumentParser(
        prog='seamcarve',
        description="Shrink an image's width by removing low-energy vertical seams"
    )
    parser.add_argument(
        'image',
        type=str,
        help='Path to the input image'
    )
    parser.add_argument(
        'carves',
        type=int,
        help='Number of seams to remove (must be less than the image width)'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        default=DEFAULT_OUTPUT,
        help=f'Output image path (default: {DEFAULT_OUTPUT})'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Do not report each removed seam'
    )
    return parser


def report_seam(index):
    print(f"[INFO] Removed seam: {index}")


def run(image_path, carves, output_path=DEFAULT_OUTPUT, quiet=False):
    """Load, carve and save. Raises SeamCarveError on any failed stage."""
    pixels = load_pixels(image_path)
    print(f"[OK] Loaded image: {image_path}")

    carver = SeamCarver(pixels)
    carved = carver.run(carves, on_seam=None if quiet else report_seam)

    save_pixels(carved, output_path)
    print(f"[OK] Generated: {output_path}")
    return carved


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        run(args.image, args.carves, Path(args.output), quiet=args.quiet)
    except SeamCarveError as ex:
        print(f"[ERROR] {ex.stage}: {ex}")
        return 1

    print("[OK] Finished")
    return 0
