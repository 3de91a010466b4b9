"""
Pixel grids: packed ARGB storage, luminance, and image file I/O.

A pixel grid is an int64 tensor (H, W) where each cell holds a packed
32-bit 0xAARRGGBB value. int64 keeps opaque pixels (0xFF......) positive.
"""

import os
from pathlib import Path

import numpy as np
import torch
from PIL import Image

from .errors import ImageLoadError, ImageSaveError

# Rec. 709 luma weights
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722


def rgb_to_luminance(rgb: int) -> float:
    """Convert one packed ARGB value to normalized luminance in [0, 1]."""
    r = ((rgb >> 16) & 0xFF) / 255.0
    g = ((rgb >> 8) & 0xFF) / 255.0
    b = (rgb & 0xFF) / 255.0
    return LUMA_R * r + LUMA_G * g + LUMA_B * b


def luminance_map(pixels: torch.Tensor) -> torch.Tensor:
    """
    Compute the luminance of every pixel in a packed ARGB grid.

    Args:
        pixels: Packed pixel grid (H, W), integer dtype

    Returns:
        Luminance grid (H, W), float32 in [0, 1]
    """
    r = ((pixels >> 16) & 0xFF).to(torch.float32) / 255.0
    g = ((pixels >> 8) & 0xFF).to(torch.float32) / 255.0
    b = (pixels & 0xFF).to(torch.float32) / 255.0
    return LUMA_R * r + LUMA_G * g + LUMA_B * b


def pack_argb(rgba: np.ndarray) -> torch.Tensor:
    """Pack an (H, W, 4) uint8 RGBA array into an (H, W) ARGB grid."""
    if rgba.ndim != 3 or rgba.shape[2] != 4:
        raise ValueError(f"Expected (H, W, 4) RGBA array, got shape {rgba.shape}")
    channels = rgba.astype(np.int64)
    packed = ((channels[..., 3] << 24) | (channels[..., 0] << 16)
              | (channels[..., 1] << 8) | channels[..., 2])
    return torch.from_numpy(packed)


def unpack_argb(pixels: torch.Tensor) -> np.ndarray:
    """Unpack an (H, W) ARGB grid into an (H, W, 4) uint8 RGBA array."""
    packed = pixels.cpu().numpy().astype(np.int64)
    rgba = np.stack([
        (packed >> 16) & 0xFF,
        (packed >> 8) & 0xFF,
        packed & 0xFF,
        (packed >> 24) & 0xFF,
    ], axis=-1)
    return rgba.astype(np.uint8)


def load_pixels(path) -> torch.Tensor:
    """
    Decode an image file into a packed ARGB pixel grid.

    Images without an alpha channel come back fully opaque.

    Raises:
        ImageLoadError: if the file is missing or cannot be decoded
    """
    try:
        with Image.open(path) as img:
            rgba = np.array(img.convert('RGBA'), dtype=np.uint8)
    except FileNotFoundError as ex:
        raise ImageLoadError(f"Input not found: {path}") from ex
    except (OSError, ValueError) as ex:
        raise ImageLoadError(f"Failed to load image '{path}': {ex}") from ex

    if rgba.shape[0] == 0 or rgba.shape[1] == 0:
        raise ImageLoadError(f"Image '{path}' has no pixels")
    return pack_argb(rgba)


def save_pixels(pixels: torch.Tensor, path, image_format: str = None) -> Path:
    """
    Encode a packed ARGB pixel grid as an RGBA image file.

    The format is taken from the file suffix unless given explicitly;
    paths without a suffix are written as PNG. The image is written to a
    temporary file beside the target and moved into place only once
    encoding succeeds, so a failed save leaves any existing file untouched.

    Raises:
        ImageSaveError: if the image cannot be encoded or written
    """
    path = Path(path)
    if image_format is None and not path.suffix:
        image_format = 'PNG'
    # Keep the suffix so Pillow can still infer the format
    tmp_path = path.with_name(f".tmp-{path.name}")

    img = Image.fromarray(unpack_argb(pixels))
    try:
        img.save(tmp_path, format=image_format)
        os.replace(tmp_path, path)
    except (OSError, ValueError, KeyError) as ex:
        if tmp_path.exists():
            os.remove(tmp_path)
        raise ImageSaveError(f"Failed to save image '{path}': {ex}") from ex
    return path
