"""
Seam search and removal.

A vertical seam holds one column index per row, with adjacent rows
differing by at most one column. Seams are found by backtracking
through the cumulative energy grid from the cheapest bottom cell.
"""

import torch


def seam_start(energies: torch.Tensor) -> int:
    """
    Find the cheapest cell in the last row of a cumulative energy grid.

    Ties go to the leftmost column (first strict minimum in scan order).
    """
    last_row = energies[-1].tolist()
    column = 0
    for x in range(1, len(last_row)):
        if last_row[x] < last_row[column]:
            column = x
    return column


def find_seam(energies: torch.Tensor) -> torch.Tensor:
    """
    Backtrack the lowest-energy vertical seam through a cumulative energy grid.

    Starting from the cheapest bottom cell, each row above checks offsets
    -1, 0, +1 from the current column, in that order, and moves whenever the
    checked cell is strictly smaller than the current one. Offsets apply to
    the column as updated so far: once the seam steps left, the last check
    lands on the previous center, so a left move is never undone. Ties
    never move the seam.

    Args:
        energies: Cumulative energy grid (H, W)

    Returns:
        Seam indices (H,) with column index per row
    """
    H, W = energies.shape
    rows = energies.tolist()

    seam = torch.zeros(H, dtype=torch.long, device=energies.device)
    col = seam_start(energies)
    seam[H - 1] = col

    for i in range(H - 2, -1, -1):
        row = rows[i]
        for dx in (-1, 0, 1):
            x = col + dx
            if 0 <= x < W and row[x] < row[col]:
                col = x
        seam[i] = col

    return seam


def remove_seam(pixels: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from a pixel grid.

    Args:
        pixels: Pixel grid (H, W)
        seam: Column index per row (H,)

    Returns:
        Carved grid (H, W - 1); pixels right of the seam shift one column left
    """
    H, W = pixels.shape
    if seam.shape != (H,):
        raise ValueError(f"Seam has shape {tuple(seam.shape)}, expected ({H},)")

    keep = torch.ones(H, W, dtype=torch.bool, device=pixels.device)
    keep[torch.arange(H, device=pixels.device), seam.to(pixels.device)] = False

    return pixels[keep].view(H, W - 1)
