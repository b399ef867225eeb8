"""
Content-aware image shrinking by seam carving.

Repeatedly finds the connected top-to-bottom (or left-to-right) path of
pixels with the least dual-gradient energy and removes it.
"""

__version__ = "0.1.0"

from .errors import (
    SeamCarvingError,
    NullInputError,
    OutOfBoundsError,
    InvalidSeamError,
    SeamOutOfBoundsError,
    CannotShrinkFurtherError,
)
from .pixels import PixelGrid, pack_rgb, unpack_rgb, load_image, save_pixel_grid
from .energy import dual_gradient_energy, pixel_energy, normalize_energy
from .seam import dp_seam, seam_energy, validate_seam, remove_seam, invalidated_pixels
from .carver import SeamCarver
from .carving import carve_image, resize_image, carve_cheapest

__all__ = [
    'SeamCarvingError',
    'NullInputError',
    'OutOfBoundsError',
    'InvalidSeamError',
    'SeamOutOfBoundsError',
    'CannotShrinkFurtherError',
    'PixelGrid',
    'pack_rgb',
    'unpack_rgb',
    'load_image',
    'save_pixel_grid',
    'dual_gradient_energy',
    'pixel_energy',
    'normalize_energy',
    'dp_seam',
    'seam_energy',
    'validate_seam',
    'remove_seam',
    'invalidated_pixels',
    'SeamCarver',
    'carve_image',
    'resize_image',
    'carve_cheapest',
]
