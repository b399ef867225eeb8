#!/usr/bin/env python3
"""
Shrink an image by seam carving.

Removes vertical seams until the target width is reached, then
horizontal seams until the target height is reached.

    python resize_demo.py photo.jpg --width 300 --height 200 --output small.png
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from seam_carver.pixels import load_image, save_pixel_grid
from seam_carver.carving import resize_image, carve_cheapest


def main():
    parser = argparse.ArgumentParser(
        description="Shrink an image by seam carving"
    )
    parser.add_argument(
        'image',
        type=str,
        help='Input image path'
    )
    parser.add_argument(
        '--width',
        type=int,
        help='Target width (default: keep current width)'
    )
    parser.add_argument(
        '--height',
        type=int,
        help='Target height (default: keep current height)'
    )
    parser.add_argument(
        '--cheapest',
        type=int,
        metavar='N',
        help='Instead of a target size, remove N seams in whichever direction is cheaper'
    )
    parser.add_argument(
        '--output',
        type=str,
        default='carved.png',
        help='Output image path (default: carved.png)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        help='Logging level (default: INFO)'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    image = load_image(args.image)
    print(f"Loaded {args.image}: {image.width()} x {image.height()}")

    if args.cheapest is not None:
        carved = carve_cheapest(image, args.cheapest)
    else:
        carved = resize_image(image, target_width=args.width, target_height=args.height)

    save_pixel_grid(carved, args.output)
    print(f"Saved: {args.output} ({carved.width()} x {carved.height()})")


if __name__ == '__main__':
    main()
