"""
High-level carving that orchestrates the energy and seam stages.

Each iteration recomputes energy on the current (already narrowed) grid,
finds one seam, and removes it. Iterations run strictly in sequence.
"""

import enum
import numbers
import torch
from typing import Callable, Optional

from .energy import energy_maps
from .errors import CarveConfigError, SeamCarveError
from .seam import find_seam, remove_seam


class CarveState(enum.Enum):
    IDLE = 'idle'
    CARVING = 'carving'
    DONE = 'done'
    FAILED = 'failed'


def validate_seam_count(n_seams: int, width: int) -> None:
    """
    Check that n_seams can be removed from an image of the given width.

    At least one column must survive, so n_seams must be in [1, width - 1].

    Raises:
        CarveConfigError: if the count is not a positive int below width
    """
    if isinstance(n_seams, bool) or not isinstance(n_seams, numbers.Integral):
        raise CarveConfigError(f"Number of seams must be an integer, got {n_seams!r}")
    if n_seams <= 0:
        raise CarveConfigError(f"Number of seams must be positive, got {n_seams}")
    if n_seams >= width:
        raise CarveConfigError(
            f"Cannot remove {n_seams} seams from an image {width} pixels wide")


class SeamCarver:
    """
    Removes vertical seams from a packed ARGB pixel grid.

    The carver keeps its own copy of the grid; height never changes and
    width drops by one per removed seam.
    """

    def __init__(self, pixels: torch.Tensor):
        if pixels.dim() != 2:
            raise ValueError(f"Expected pixel grid (H, W), got shape {tuple(pixels.shape)}")
        self.pixels = pixels.clone()
        self.height, self.width = pixels.shape
        self.state = CarveState.IDLE
        self.seams_removed = 0

    def run(self, n_seams: int,
            on_seam: Optional[Callable[[int], None]] = None) -> torch.Tensor:
        """
        Remove n_seams seams, one at a time.

        Args:
            n_seams: Number of seams to remove, 1 <= n_seams < width
            on_seam: Called with the 1-based index of each removed seam

        Returns:
            Carved pixel grid (H, W - n_seams)
        """
        if self.state is not CarveState.IDLE:
            raise CarveConfigError(f"Carver already used (state: {self.state.value})")
        validate_seam_count(n_seams, self.width)

        self.state = CarveState.CARVING
        try:
            for i in range(n_seams):
                _, _, energies = energy_maps(self.pixels)
                seam = find_seam(energies)
                self.pixels = remove_seam(self.pixels, seam)
                self.width -= 1
                self.seams_removed += 1
                if on_seam is not None:
                    on_seam(i + 1)
        except SeamCarveError:
            self.state = CarveState.FAILED
            raise
        except Exception as ex:
            self.state = CarveState.FAILED
            raise SeamCarveError(
                f"Failed removing seam {self.seams_removed + 1}: {ex}", stage='carve') from ex

        self.state = CarveState.DONE
        return self.pixels


def carve_image(pixels: torch.Tensor, n_seams: int,
                on_seam: Optional[Callable[[int], None]] = None) -> torch.Tensor:
    """
    Content-aware width reduction by vertical seam carving.

    Args:
        pixels: Packed ARGB pixel grid (H, W)
        n_seams: Number of seams to remove
        on_seam: Optional progress callback, see SeamCarver.run

    Returns:
        Carved pixel grid (H, W - n_seams)
    """
    return SeamCarver(pixels).run(n_seams, on_seam=on_seam)
