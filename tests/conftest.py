"""
Test configuration and fixtures for cloth color tests.
"""
import numpy as np
import pytest

from clothcolor.services.colors.classifier import PaletteClassifier
from clothcolor.services.colors.sampling import RegionSampler


class FixedIndexRng:
    """Stand-in generator returning preset initial centroid indices."""

    def __init__(self, indices):
        self.indices = np.asarray(indices)
        self.calls = []

    def integers(self, low, high, size=None):
        self.calls.append((low, high, size))
        return self.indices[:size]


def solid_image(width, height, rgb, channels=4):
    """Create an RGB(A) uint8 image filled with one color."""
    img = np.zeros((height, width, channels), dtype=np.uint8)
    img[:, :, :3] = rgb
    if channels == 4:
        img[:, :, 3] = 255
    return img


@pytest.fixture
def rng():
    """Seeded generator for reproducible clustering."""
    return np.random.default_rng(42)


@pytest.fixture
def classifier():
    return PaletteClassifier()


@pytest.fixture
def sampler():
    return RegionSampler()


@pytest.fixture
def sky_blue_image():
    """10x10 region of sky blue (135, 206, 235)."""
    return solid_image(10, 10, (135, 206, 235))


@pytest.fixture
def red_and_sky_image():
    """30x30 image: left half red, right half sky blue."""
    img = solid_image(30, 30, (255, 0, 0), channels=3)
    img[:, 15:] = (135, 206, 235)
    return img
