"""
Seam carving session.

A SeamCarver owns the pixels of one image together with a cached energy
map of the same shape. Seams are only ever found and removed top to
bottom; horizontal seams transpose both grids, run the vertical routine
and transpose back.
"""

import logging
from contextlib import contextmanager
from typing import List

import torch

from .energy import dual_gradient_energy, pixel_energy
from .errors import NullInputError, OutOfBoundsError
from .pixels import PixelGrid
from .seam import dp_seam, validate_seam, remove_seam, invalidated_pixels

logger = logging.getLogger(__name__)


class SeamCarver:
    """
    Content-aware shrinking of a single image.

    Coordinates are (col, row) in the logical image. Internally the grids
    are (H, W) tensors, held transposed only while a horizontal operation
    is running.

    Attributes:
        _rgb: Packed RGB pixels (H, W), int32
        _energy: Dual-gradient energy of each pixel (H, W), float64
        _transposed: Whether the grids are currently stored transposed
    """

    def __init__(self, image: PixelGrid):
        if image is None:
            raise NullInputError("image is null")
        if not isinstance(image, PixelGrid):
            raise TypeError(f"Expected a PixelGrid, got {type(image).__name__}")

        self._rgb = image.packed()
        self._energy = dual_gradient_energy(self._rgb)
        self._transposed = False

        logger.debug("Created carver for %d x %d image", self.width(), self.height())

    # ------------------------------------------------------------------
    # Dimensions and energy
    # ------------------------------------------------------------------

    def width(self) -> int:
        return self._rgb.shape[0] if self._transposed else self._rgb.shape[1]

    def height(self) -> int:
        return self._rgb.shape[1] if self._transposed else self._rgb.shape[0]

    def energy_at(self, col: int, row: int) -> float:
        """Energy of the pixel at (col, row)."""
        if not 0 <= col < self.width():
            raise OutOfBoundsError(f"col {col} out of bounds for width {self.width()}")
        if not 0 <= row < self.height():
            raise OutOfBoundsError(f"row {row} out of bounds for height {self.height()}")

        if self._transposed:
            return self._energy[col, row].item()
        return self._energy[row, col].item()

    energy = energy_at

    def energy_map(self) -> torch.Tensor:
        """Copy of the energy map (H, W) in image orientation."""
        if self._transposed:
            return self._energy.t().clone()
        return self._energy.clone()

    # ------------------------------------------------------------------
    # Axis transform
    # ------------------------------------------------------------------

    def _transpose(self):
        self._rgb = self._rgb.t().contiguous()
        self._energy = self._energy.t().contiguous()
        self._transposed = not self._transposed
        logger.debug("Transposed grids (transposed=%s)", self._transposed)

    @contextmanager
    def _rows_as_columns(self):
        """Hold the grids transposed for the duration of a horizontal operation."""
        self._transpose()
        try:
            yield
        finally:
            self._transpose()

    # ------------------------------------------------------------------
    # Seams
    # ------------------------------------------------------------------

    def _find_seam(self) -> torch.Tensor:
        return dp_seam(self._energy)

    def _remove_seam(self, seam: torch.Tensor):
        """Remove a validated seam from the stored grids, top to bottom."""
        rgb = remove_seam(self._rgb, seam)
        energy = remove_seam(self._energy, seam)

        rows, cols = invalidated_pixels(seam, rgb.shape[1])
        energy[rows, cols] = pixel_energy(rgb, rows, cols)

        self._rgb, self._energy = rgb, energy

    def find_vertical_seam(self) -> List[int]:
        """Column index per row of a least-energy vertical seam."""
        return self._find_seam().tolist()

    def find_horizontal_seam(self) -> List[int]:
        """Row index per column of a least-energy horizontal seam."""
        with self._rows_as_columns():
            seam = self._find_seam()
        return seam.tolist()

    def remove_vertical_seam(self, seam):
        """
        Remove a vertical seam, narrowing the image by one column.

        Args:
            seam: Column index per row (length height())

        Raises:
            InvalidSeamError: If the seam cannot be removed; the image is
                left unchanged.
        """
        seam = validate_seam(seam, self.width(), self.height())
        self._remove_seam(seam)
        logger.debug("Removed vertical seam, size now %d x %d", self.width(), self.height())

    def remove_horizontal_seam(self, seam):
        """
        Remove a horizontal seam, shortening the image by one row.

        Args:
            seam: Row index per column (length width())

        Raises:
            InvalidSeamError: If the seam cannot be removed; the image is
                left unchanged.
        """
        seam = validate_seam(seam, self.height(), self.width())
        with self._rows_as_columns():
            self._remove_seam(seam)
        logger.debug("Removed horizontal seam, size now %d x %d", self.width(), self.height())

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_image(self) -> PixelGrid:
        """Current pixels as a new PixelGrid."""
        if self._transposed:
            self._transpose()
        return PixelGrid.from_packed(self._rgb)

    def __repr__(self):
        return f"SeamCarver(width={self.width()}, height={self.height()})"
