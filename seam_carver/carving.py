"""
High-level carving functions that drive a SeamCarver to a result.
"""

import logging
from typing import Optional

from .carver import SeamCarver
from .pixels import PixelGrid
from .seam import seam_energy

logger = logging.getLogger(__name__)


def carve_image(image: PixelGrid, n_seams: int,
                direction: str = 'vertical') -> PixelGrid:
    """
    Remove the cheapest seam n_seams times in one direction.

    Args:
        image: Image to carve
        n_seams: Number of seams to remove
        direction: 'vertical' (narrower) or 'horizontal' (shorter)

    Returns:
        Carved image
    """
    if direction not in ('vertical', 'horizontal'):
        raise ValueError(f"Invalid direction: {direction}")

    carver = SeamCarver(image)
    extent = carver.width() if direction == 'vertical' else carver.height()
    if not 0 <= n_seams < extent:
        raise ValueError(f"Cannot remove {n_seams} {direction} seams from a dimension of {extent}")

    logger.info("Removing %d %s seams from %d x %d image",
                n_seams, direction, carver.width(), carver.height())

    for i in range(n_seams):
        if direction == 'vertical':
            carver.remove_vertical_seam(carver.find_vertical_seam())
        else:
            carver.remove_horizontal_seam(carver.find_horizontal_seam())
        logger.debug("Removed seam %d/%d", i + 1, n_seams)

    return carver.to_image()


def resize_image(image: PixelGrid, target_width: Optional[int] = None,
                 target_height: Optional[int] = None) -> PixelGrid:
    """
    Shrink an image to a target size, vertical seams first.

    Args:
        image: Image to carve
        target_width: Output width (None keeps the current width)
        target_height: Output height (None keeps the current height)

    Returns:
        Image of size target_width x target_height
    """
    carver = SeamCarver(image)
    W, H = carver.width(), carver.height()
    target_width = W if target_width is None else target_width
    target_height = H if target_height is None else target_height

    if not 1 <= target_width <= W:
        raise ValueError(f"Target width {target_width} outside [1, {W}]")
    if not 1 <= target_height <= H:
        raise ValueError(f"Target height {target_height} outside [1, {H}]")

    logger.info("Resizing %d x %d -> %d x %d", W, H, target_width, target_height)

    while carver.width() > target_width:
        carver.remove_vertical_seam(carver.find_vertical_seam())
    while carver.height() > target_height:
        carver.remove_horizontal_seam(carver.find_horizontal_seam())

    return carver.to_image()


def carve_cheapest(image: PixelGrid, n_seams: int) -> PixelGrid:
    """
    Remove n_seams seams, each time taking whichever of the best vertical
    and best horizontal seam has the lower total energy.

    Vertical wins ties. A direction whose dimension has reached 1 is
    skipped.

    Args:
        image: Image to carve
        n_seams: Number of seams to remove

    Returns:
        Carved image
    """
    carver = SeamCarver(image)
    available = (carver.width() - 1) + (carver.height() - 1)
    if not 0 <= n_seams <= available:
        raise ValueError(f"Cannot remove {n_seams} seams, at most {available} available")

    logger.info("Removing %d cheapest seams from %d x %d image",
                n_seams, carver.width(), carver.height())

    for i in range(n_seams):
        energy = carver.energy_map()
        vertical_cost = horizontal_cost = float('inf')

        if carver.width() > 1:
            vertical = carver.find_vertical_seam()
            vertical_cost = seam_energy(energy, vertical)
        if carver.height() > 1:
            horizontal = carver.find_horizontal_seam()
            horizontal_cost = seam_energy(energy.t(), horizontal)

        if vertical_cost <= horizontal_cost:
            carver.remove_vertical_seam(vertical)
            logger.debug("Seam %d/%d: vertical (energy %.3f)", i + 1, n_seams, vertical_cost)
        else:
            carver.remove_horizontal_seam(horizontal)
            logger.debug("Seam %d/%d: horizontal (energy %.3f)", i + 1, n_seams, horizontal_cost)

    return carver.to_image()
