"""
Pixel storage and image I/O.

A PixelGrid is a rectangular grid of packed 24-bit RGB values
(R in bits 16-23, G in bits 8-15, B in bits 0-7) stored as an (H, W)
int32 tensor. It is the container images are passed in and out of the
carver with; the carver itself never decodes or encodes files.
"""

from typing import Tuple, Union
from pathlib import Path

import numpy as np
import torch
from PIL import Image

from .errors import OutOfBoundsError


RGB_MASK = 0xFFFFFF


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a single 24-bit RGB integer."""
    for value in (r, g, b):
        if not 0 <= value <= 255:
            raise ValueError(f"Channel value out of range: {value}")
    return (r << 16) | (g << 8) | b


def unpack_rgb(packed: torch.Tensor) -> torch.Tensor:
    """
    Split packed RGB values into channels.

    Args:
        packed: Integer tensor of any shape

    Returns:
        int64 tensor with a trailing axis of size 3 holding (R, G, B)
    """
    packed = packed.long()
    return torch.stack([(packed >> 16) & 0xFF,
                        (packed >> 8) & 0xFF,
                        packed & 0xFF], dim=-1)


class PixelGrid:
    """Mutable width x height grid of packed RGB pixels, addressed (col, row)."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Invalid grid size: {width} x {height}")
        self._packed = torch.zeros(height, width, dtype=torch.int32)

    @classmethod
    def from_packed(cls, packed: torch.Tensor) -> 'PixelGrid':
        """Build a grid from an (H, W) tensor of packed RGB integers."""
        if packed.dim() != 2:
            raise ValueError(f"Expected (H, W) tensor, got shape {tuple(packed.shape)}")
        H, W = packed.shape
        grid = cls(W, H)
        grid._packed = (packed.long() & RGB_MASK).to(torch.int32).cpu().clone()
        return grid

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PixelGrid':
        """Build a grid from an (H, W, 3) uint8 array, as returned by PIL."""
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected (H, W, 3) array, got shape {array.shape}")
        channels = torch.from_numpy(array.astype(np.int64))
        packed = (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]
        return cls.from_packed(packed)

    @classmethod
    def from_tensor(cls, image: torch.Tensor) -> 'PixelGrid':
        """Build a grid from an RGB float tensor (3, H, W) with values in [0, 1]."""
        if image.dim() != 3 or image.shape[0] != 3:
            raise ValueError(f"Expected (3, H, W) tensor, got shape {tuple(image.shape)}")
        array = (image.permute(1, 2, 0).cpu().numpy() * 255).round().clip(0, 255)
        return cls.from_array(array.astype(np.uint8))

    def width(self) -> int:
        return self._packed.shape[1]

    def height(self) -> int:
        return self._packed.shape[0]

    def _check(self, col: int, row: int):
        if not 0 <= col < self.width():
            raise OutOfBoundsError(f"col {col} out of bounds for width {self.width()}")
        if not 0 <= row < self.height():
            raise OutOfBoundsError(f"row {row} out of bounds for height {self.height()}")

    def get_rgb(self, col: int, row: int) -> int:
        self._check(col, row)
        return int(self._packed[row, col])

    def set_rgb(self, col: int, row: int, rgb: int):
        self._check(col, row)
        # Drop anything above 24 bits (e.g. an alpha byte)
        self._packed[row, col] = rgb & RGB_MASK

    def get_color(self, col: int, row: int) -> Tuple[int, int, int]:
        rgb = self.get_rgb(col, row)
        return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF

    def set_color(self, col: int, row: int, color: Tuple[int, int, int]):
        self.set_rgb(col, row, pack_rgb(*color))

    def packed(self) -> torch.Tensor:
        """Copy of the (H, W) packed RGB tensor."""
        return self._packed.clone()

    def to_array(self) -> np.ndarray:
        """(H, W, 3) uint8 array suitable for PIL."""
        return unpack_rgb(self._packed).numpy().astype(np.uint8)

    def to_tensor(self) -> torch.Tensor:
        """RGB float tensor (3, H, W) with values in [0, 1]."""
        return unpack_rgb(self._packed).permute(2, 0, 1).float() / 255.0

    def transposed(self) -> 'PixelGrid':
        """New grid with rows and columns swapped."""
        return PixelGrid.from_packed(self._packed.t())

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (self._packed.shape == other._packed.shape
                and torch.equal(self._packed, other._packed))

    __hash__ = None

    def __repr__(self):
        return f"PixelGrid(width={self.width()}, height={self.height()})"


def load_image(path: Union[str, Path]) -> PixelGrid:
    """Load an image file as a PixelGrid."""
    img = Image.open(path).convert('RGB')
    return PixelGrid.from_array(np.array(img, dtype=np.uint8))


def save_pixel_grid(grid: PixelGrid, path: Union[str, Path]) -> Union[str, Path]:
    """Save a PixelGrid to an image file; the format follows the extension."""
    Image.fromarray(grid.to_array()).save(path)
    return path
