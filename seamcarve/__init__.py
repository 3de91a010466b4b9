"""
Content-aware image resizing by vertical seam carving.

Pixels are packed ARGB values; energy is the Sobel gradient of luminance,
accumulated by dynamic programming (Avidan & Shamir 2007).
"""

__version__ = "0.1.0"

from .errors import (SeamCarveError, CarveConfigError, ResourceError,
                     ImageLoadError, ImageSaveError)
from .pixels import (rgb_to_luminance, luminance_map, pack_argb, unpack_argb,
                     load_pixels, save_pixels)
from .energy import sobel_gradient, cumulative_energy, energy_maps
from .seam import seam_start, find_seam, remove_seam
from .carving import CarveState, SeamCarver, carve_image, validate_seam_count

__all__ = [
    'SeamCarveError',
    'CarveConfigError',
    'ResourceError',
    'ImageLoadError',
    'ImageSaveError',
    'rgb_to_luminance',
    'luminance_map',
    'pack_argb',
    'unpack_argb',
    'load_pixels',
    'save_pixels',
    'sobel_gradient',
    'cumulative_energy',
    'energy_maps',
    'seam_start',
    'find_seam',
    'remove_seam',
    'CarveState',
    'SeamCarver',
    'carve_image',
    'validate_seam_count',
]
