"""Shared test fixtures for the seam carver test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seam_carver.pixels import PixelGrid


# 3x4 image from the dual-gradient worked example, one row per list
REFERENCE_COLORS = [
    [(255, 101, 51), (255, 101, 153), (255, 101, 255)],
    [(255, 153, 51), (255, 153, 153), (255, 153, 255)],
    [(255, 203, 51), (255, 204, 153), (255, 205, 255)],
    [(255, 255, 51), (255, 255, 153), (255, 255, 255)],
]


def make_grid(colors):
    """PixelGrid from a list of rows of (r, g, b) tuples."""
    grid = PixelGrid(len(colors[0]), len(colors))
    for row, line in enumerate(colors):
        for col, color in enumerate(line):
            grid.set_color(col, row, color)
    return grid


def make_random_grid(width, height, seed=0):
    """PixelGrid with random colors."""
    generator = torch.Generator().manual_seed(seed)
    packed = torch.randint(0, 1 << 24, (height, width), generator=generator)
    return PixelGrid.from_packed(packed)


def make_flat_grid(width, height, color=(90, 120, 200)):
    return make_grid([[color] * width for _ in range(height)])


@pytest.fixture
def reference_grid():
    """The 3x4 worked-example image."""
    return make_grid(REFERENCE_COLORS)


@pytest.fixture
def random_grid():
    """Random 12x9 image."""
    return make_random_grid(12, 9, seed=42)
