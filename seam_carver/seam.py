"""
Seam computation and removal.

A vertical seam holds one column index per row, with adjacent entries
differing by at most 1. Horizontal seams are handled by transposing the
grid, so everything here works top to bottom.

Finding the cheapest seam is a shortest path in a DAG: pixel (c, r) has
edges to (c-1, r+1), (c, r+1) and (c+1, r+1), weighted by the energy of
the destination. A forward DP over rows solves it exactly.
"""

import torch
from typing import Tuple

from .errors import InvalidSeamError, SeamOutOfBoundsError, CannotShrinkFurtherError


def dp_seam(energy: torch.Tensor) -> torch.Tensor:
    """
    Compute the minimum total-energy vertical seam.

    Ties between predecessors go to the smallest source column, and
    ties between end points to the smallest column.

    Args:
        energy: Energy map (H, W)

    Returns:
        Seam indices (H,) with column index per row
    """
    H, W = energy.shape
    cols = torch.arange(W, device=energy.device)
    inf = torch.full((1,), float('inf'), dtype=energy.dtype, device=energy.device)

    dist = energy[0].clone()
    edge_to = torch.zeros(H, W, dtype=torch.long, device=energy.device)

    # Each row only reads the finished distances of the row above
    for i in range(1, H):
        from_left = torch.cat([inf, dist[:-1]])
        from_right = torch.cat([dist[1:], inf])

        # Candidate order is ascending source column: c-1, c, c+1
        candidates = torch.stack([from_left, dist, from_right]) + energy[i]
        offset = torch.argmin(candidates, dim=0)
        dist = candidates.gather(0, offset.unsqueeze(0)).squeeze(0)
        edge_to[i] = cols + offset - 1

    seam = torch.zeros(H, dtype=torch.long, device=energy.device)
    seam[-1] = torch.argmin(dist)
    for i in range(H - 1, 0, -1):
        seam[i - 1] = edge_to[i, seam[i]]

    return seam


def seam_energy(energy: torch.Tensor, seam: torch.Tensor) -> float:
    """Total energy along a vertical seam."""
    seam = torch.as_tensor(seam, dtype=torch.long)
    rows = torch.arange(energy.shape[0])
    return energy[rows, seam].sum().item()


def validate_seam(seam, width: int, height: int) -> torch.Tensor:
    """
    Check that a vertical seam can be removed from a width x height grid.

    Args:
        seam: Sequence of column indices, one per row
        width: Current number of columns
        height: Current number of rows

    Returns:
        The seam as a long tensor

    Raises:
        InvalidSeamError: seam is None, not a 1-D integer sequence, has the
            wrong length, or steps by more than one column
        CannotShrinkFurtherError: width is already 1
        SeamOutOfBoundsError: an entry lies outside [0, width - 1]
    """
    if seam is None:
        raise InvalidSeamError("seam is null")

    try:
        seam = torch.as_tensor(seam)
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidSeamError(f"seam is not a sequence of indices: {e}") from e

    if seam.dim() != 1:
        raise InvalidSeamError(f"seam must be one-dimensional, got shape {tuple(seam.shape)}")
    if seam.shape[0] != height:
        raise InvalidSeamError(f"seam has length {seam.shape[0]}, expected {height}")
    if seam.dtype.is_floating_point or seam.dtype.is_complex or seam.dtype == torch.bool:
        raise InvalidSeamError(f"seam entries must be integers, got {seam.dtype}")
    if width <= 1:
        raise CannotShrinkFurtherError(f"cannot remove a seam from a dimension of {width}")

    seam = seam.long().cpu()

    outside = (seam < 0) | (seam >= width)
    if outside.any():
        i = int(torch.nonzero(outside)[0])
        raise SeamOutOfBoundsError(
            f"seam[{i}] = {int(seam[i])} is outside [0, {width - 1}]")

    if height > 1:
        steps = torch.abs(seam[1:] - seam[:-1])
        if (steps > 1).any():
            i = int(torch.nonzero(steps > 1)[0]) + 1
            raise InvalidSeamError(
                f"seam jumps from {int(seam[i - 1])} to {int(seam[i])} at index {i}")

    return seam


def remove_seam(grid: torch.Tensor, seam: torch.Tensor,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam from a grid.

    Elements to the right of (below) the seam shift over by one.

    Args:
        grid: Tensor (H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        Grid with one column (vertical) or one row (horizontal) removed
    """
    if direction == 'horizontal':
        return remove_seam(grid.t(), seam, direction='vertical').t().contiguous()
    elif direction != 'vertical':
        raise ValueError(f"Invalid direction: {direction}")

    H, W = grid.shape
    keep = torch.ones(H, W, dtype=torch.bool, device=grid.device)
    keep[torch.arange(H, device=grid.device), seam.to(grid.device)] = False

    # Masked selection reads row-major, so each row just loses one entry
    return grid[keep].view(H, W - 1)


def invalidated_pixels(seam: torch.Tensor, width: int) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Pixels whose energy may have changed after removing a vertical seam.

    Args:
        seam: The removed seam (H,)
        width: Width of the grid after removal

    Returns:
        (rows, cols) index tensors into the shrunk grid
    """
    H = seam.shape[0]
    ends = sorted((int(seam[0]), int(seam[-1])))
    rows, cols = [], []

    for i in range(H):
        col = int(seam[i])
        # Neighbours across the removed pixel, plus the wrap-around columns
        stale = {col - 1, col, 0, width - 1}
        if i == 0 or i == H - 1:
            # First and last rows are vertical neighbours of each other
            stale.update(range(ends[0], ends[1]))
        for c in sorted(stale):
            if 0 <= c < width:
                rows.append(i)
                cols.append(c)

    return torch.tensor(rows, dtype=torch.long), torch.tensor(cols, dtype=torch.long)
