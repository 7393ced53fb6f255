"""Pytest configuration and fixtures."""

from typing import Callable, Dict, Tuple

import numpy as np
import pytest

from colour_thief.constants import SIG_BITS
from colour_thief.histogram import Histogram, index_of

Cells = Dict[Tuple[int, int, int], int]


def histogram_from_cells(cells: Cells, sig_bits: int = SIG_BITS) -> Histogram:
    """Histogram with the given counts at reduced (r, g, b) coordinates."""
    counts = np.zeros(1 << (3 * sig_bits), dtype=np.int64)
    for (r, g, b), n in cells.items():
        counts[index_of(r, g, b, sig_bits)] = n
    return Histogram(counts, sig_bits)


def solid_image(colour, height: int = 10, width: int = 10) -> np.ndarray:
    """uint8 image filled with one RGB or RGBA colour."""
    return np.tile(np.array(colour, dtype=np.uint8), (height, width, 1))


@pytest.fixture
def make_histogram() -> Callable[..., Histogram]:
    return histogram_from_cells


@pytest.fixture
def make_solid_image() -> Callable[..., np.ndarray]:
    return solid_image


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def random_image(rng) -> np.ndarray:
    """64x64 RGB noise."""
    return rng.integers(0, 256, (64, 64, 3), dtype=np.uint8)


@pytest.fixture
def black_white_image() -> np.ndarray:
    """10x10 image, left half black, right half white."""
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    image[:, 5:] = 255
    return image
