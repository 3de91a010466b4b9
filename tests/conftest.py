"""Shared test fixtures for the seamcarve test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest

GRAY = 0xFF808080
BLACK = 0xFF000000
WHITE = 0xFFFFFFFF


def make_uniform_pixels(H, W, value=GRAY):
    """Pixel grid filled with a single packed ARGB value."""
    return torch.full((H, W), value, dtype=torch.int64)


def make_edge_pixels(H, W, edge_col):
    """Black left of edge_col, white from edge_col onward."""
    pixels = make_uniform_pixels(H, W, BLACK)
    pixels[:, edge_col:] = WHITE
    return pixels


def make_column_index_pixels(H, W):
    """Each pixel's blue channel holds its column index (opaque)."""
    cols = torch.arange(W, dtype=torch.int64).unsqueeze(0).expand(H, W)
    return (0xFF000000 | cols).clone()


@pytest.fixture
def random_pixels():
    """Reproducible 12x16 grid of random opaque colors."""
    gen = torch.Generator().manual_seed(42)
    rgb = torch.randint(0, 1 << 24, (12, 16), generator=gen, dtype=torch.int64)
    return 0xFF000000 | rgb
