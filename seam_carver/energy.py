"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual-gradient energy: for pixel (col, row),

    E = sqrt(Δx² + Δy²)

where Δx² is the sum over R, G, B of the squared difference between
the right and left neighbours, and Δy² the same for the up and down
neighbours. Neighbours that fall off the grid wrap to the opposite edge,
so border pixels get a finite energy like everything else.
"""

import torch

from .pixels import unpack_rgb


def _squared_gradient(right: torch.Tensor, left: torch.Tensor) -> torch.Tensor:
    diff = unpack_rgb(right) - unpack_rgb(left)
    return (diff * diff).sum(dim=-1)


def dual_gradient_energy(packed: torch.Tensor) -> torch.Tensor:
    """
    Compute the dual-gradient energy of every pixel.

    Args:
        packed: (H, W) tensor of packed RGB integers

    Returns:
        Energy map (H, W), float64
    """
    # roll(-1) brings the next element into place, roll(1) the previous one
    dx2 = _squared_gradient(torch.roll(packed, shifts=-1, dims=1),
                            torch.roll(packed, shifts=1, dims=1))
    dy2 = _squared_gradient(torch.roll(packed, shifts=-1, dims=0),
                            torch.roll(packed, shifts=1, dims=0))

    # Integer sums are exact, so the result does not depend on axis order
    return torch.sqrt((dx2 + dy2).double())


def pixel_energy(packed: torch.Tensor, rows: torch.Tensor,
                 cols: torch.Tensor) -> torch.Tensor:
    """
    Dual-gradient energy at selected pixels only.

    Gives the same values as dual_gradient_energy(packed)[rows, cols]
    without touching the rest of the grid.

    Args:
        packed: (H, W) tensor of packed RGB integers
        rows: Row indices (N,)
        cols: Column indices (N,)

    Returns:
        Energies (N,), float64
    """
    H, W = packed.shape
    rows = torch.as_tensor(rows, dtype=torch.long)
    cols = torch.as_tensor(cols, dtype=torch.long)

    dx2 = _squared_gradient(packed[rows, torch.remainder(cols + 1, W)],
                            packed[rows, torch.remainder(cols - 1, W)])
    dy2 = _squared_gradient(packed[torch.remainder(rows + 1, H), cols],
                            packed[torch.remainder(rows - 1, H), cols])

    return torch.sqrt((dx2 + dy2).double())


def normalize_energy(energy: torch.Tensor, eps: float = 1e-8) -> torch.Tensor:
    """Remap energy to [0, 1] range for display.

    This is a monotonic transform so seam positions are unchanged.

    Args:
        energy: Energy map (H, W)
        eps: Small value to avoid division by zero

    Returns:
        Normalized energy map in [0, 1]
    """
    e_min = energy.min()
    e_max = energy.max()
    return (energy - e_min) / (e_max - e_min + eps)
