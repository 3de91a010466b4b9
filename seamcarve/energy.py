"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

Energy is the Sobel gradient magnitude of the luminance image, accumulated
top to bottom by dynamic programming so every cell holds the cost of the
cheapest seam ending there.
"""

import torch
import torch.nn.functional as F
from typing import Tuple

from .pixels import luminance_map

SOBEL_X = ((1.0, 0.0, -1.0),
           (2.0, 0.0, -2.0),
           (1.0, 0.0, -1.0))

SOBEL_Y = ((1.0, 2.0, 1.0),
           (0.0, 0.0, 0.0),
           (-1.0, -2.0, -1.0))

# Gradient magnitudes at or below this are floating-point noise
GRADIENT_EPSILON = 1e-6


def sobel_gradient(luminance: torch.Tensor) -> torch.Tensor:
    """
    Compute the Sobel gradient magnitude of a luminance grid.

    Each kernel is applied as a plain weighted sum over the 3x3
    neighborhood (cross-correlation, no kernel flip). Neighbors outside
    the grid contribute zero:
    E(i,j) = sqrt(Gx(i,j)^2 + Gy(i,j)^2)

    Args:
        luminance: Luminance grid (H, W)

    Returns:
        Gradient magnitude grid (H, W), float32, >= 0
    """
    gray = luminance.to(torch.float32).unsqueeze(0).unsqueeze(0)

    sobel_x = torch.tensor(SOBEL_X, dtype=gray.dtype, device=gray.device)
    sobel_x = sobel_x.view(1, 1, 3, 3)
    sobel_y = torch.tensor(SOBEL_Y, dtype=gray.dtype, device=gray.device)
    sobel_y = sobel_y.view(1, 1, 3, 3)

    # padding=1 pads with zeros, not edge values
    grad_x = F.conv2d(gray, sobel_x, padding=1)
    grad_y = F.conv2d(gray, sobel_y, padding=1)

    magnitude = torch.sqrt(grad_x * grad_x + grad_y * grad_y).squeeze(0).squeeze(0)
    return torch.where(magnitude > GRADIENT_EPSILON, magnitude,
                       torch.zeros_like(magnitude))


def cumulative_energy(gradient: torch.Tensor) -> torch.Tensor:
    """
    Accumulate minimum seam cost top to bottom.

    M(0, j) = E(0, j)
    M(i, j) = E(i, j) + min(M(i-1, j-1), M(i-1, j), M(i-1, j+1))

    Parents outside the grid are unavailable (+inf), never clamped.
    Each row depends only on the row above, so a whole row is computed
    at once.

    Args:
        gradient: Gradient magnitude grid (H, W)

    Returns:
        Cumulative energy grid (H, W)
    """
    H, W = gradient.shape

    M = torch.empty_like(gradient)
    M[0] = gradient[0]

    for i in range(1, H):
        M_prev = M[i - 1]
        M_left = torch.full((W,), float('inf'), device=gradient.device, dtype=gradient.dtype)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), float('inf'), device=gradient.device, dtype=gradient.dtype)
        M_right[:-1] = M_prev[1:]

        M[i] = gradient[i] + torch.min(torch.min(M_left, M_prev), M_right)

    return M


def energy_maps(pixels: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
    """
    Run the full energy pipeline on a packed pixel grid.

    Returns:
        (luminance, gradient, cumulative) grids, each (H, W)
    """
    luminance = luminance_map(pixels)
    gradient = sobel_gradient(luminance)
    return luminance, gradient, cumulative_energy(gradient)
