#!/usr/bin/env python3
"""
Show an image, its dual-gradient energy map, and the current cheapest
vertical and horizontal seams.
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import matplotlib.pyplot as plt

from seam_carver.carver import SeamCarver
from seam_carver.energy import normalize_energy
from seam_carver.pixels import load_image


def main():
    parser = argparse.ArgumentParser(
        description="Plot energy map and least-energy seams of an image"
    )
    parser.add_argument('image', type=str, help='Input image path')
    parser.add_argument(
        '--output',
        type=str,
        help='Save the figure here instead of showing it'
    )
    args = parser.parse_args()

    image = load_image(args.image)
    carver = SeamCarver(image)

    energy = normalize_energy(carver.energy_map())
    vertical = carver.find_vertical_seam()
    horizontal = carver.find_horizontal_seam()

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].imshow(image.to_array())
    axes[0].set_title(f'Image ({image.width()} x {image.height()})')

    axes[1].imshow(energy.numpy(), cmap='gray')
    axes[1].set_title('Energy')

    for ax in axes:
        ax.plot(vertical, range(len(vertical)), 'r-', linewidth=1)
        ax.plot(range(len(horizontal)), horizontal, 'c-', linewidth=1)
        ax.axis('off')

    plt.tight_layout()
    if args.output:
        plt.savefig(args.output, dpi=150)
        print(f"Saved: {args.output}")
    else:
        plt.show()


if __name__ == '__main__':
    main()
