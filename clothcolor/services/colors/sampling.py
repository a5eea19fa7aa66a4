"""
Region Sampling

Collects pixels from a rectangular region of an image buffer, clipped to the
buffer bounds, either as a single mean color or as a population for clustering.
"""

from typing import Optional, Tuple, Union

import numpy as np

from clothcolor.config import Config, config
from clothcolor.schemas import RGB
from clothcolor.services.imaging import ImageBuffer, as_image_buffer


Region = Tuple[int, int, int, int]


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to nearest integer with .5 going up."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)


def clip_region(buffer: ImageBuffer, x: int, y: int, width: int, height: int) -> Optional[Region]:
    """
    Intersect a rectangle with the buffer.

    Returns:
        (x0, y0, x1, y1) with exclusive ends, or None when nothing is left
    """
    x0 = max(int(x), 0)
    y0 = max(int(y), 0)
    x1 = min(int(x) + int(width), buffer.width)
    y1 = min(int(y) + int(height), buffer.height)

    if x1 <= x0 or y1 <= y0:
        return None
    return x0, y0, x1, y1


class RegionSampler:
    """Strided pixel sampling over clipped regions."""

    def __init__(self, mean_stride: int = 2, cluster_stride: int = 3):
        """
        Args:
            mean_stride: Row/column step for the mean color
            cluster_stride: Row/column step for the clustering population
        """
        if not Config.validate_stride(mean_stride):
            raise ValueError(f"mean_stride must be >= 1, got {mean_stride}")
        if not Config.validate_stride(cluster_stride):
            raise ValueError(f"cluster_stride must be >= 1, got {cluster_stride}")

        self.mean_stride = mean_stride
        self.cluster_stride = cluster_stride

    @classmethod
    def from_config(cls, cfg: Config = config) -> "RegionSampler":
        return cls(mean_stride=cfg.MEAN_STRIDE, cluster_stride=cfg.CLUSTER_STRIDE)

    def _strided(self, buffer: ImageBuffer, x: int, y: int, width: int, height: int,
                 stride: int) -> np.ndarray:
        region = clip_region(buffer, x, y, width, height)
        if region is None:
            return np.empty((0, 3), dtype=np.uint8)

        x0, y0, x1, y1 = region
        return buffer.rgb[y0:y1:stride, x0:x1:stride].reshape(-1, 3)

    def sample_mean(self, buffer: Union[ImageBuffer, np.ndarray], x: int, y: int,
                    width: int, height: int) -> Tuple[RGB, int]:
        """
        Mean color of the region at ``mean_stride``.

        Returns:
            (rgb, sampled_count). An empty region gives RGB(0, 0, 0) and count 0.
        """
        buffer = as_image_buffer(buffer)
        pixels = self._strided(buffer, x, y, width, height, self.mean_stride)

        count = len(pixels)
        if count == 0:
            return RGB(r=0, g=0, b=0), 0

        totals = pixels.sum(axis=0, dtype=np.int64)
        r, g, b = (int(c) for c in round_half_up(totals / count))
        return RGB(r=r, g=g, b=b), count

    def sample_pixels(self, buffer: Union[ImageBuffer, np.ndarray], x: int, y: int,
                      width: int, height: int, stride: Optional[int] = None) -> np.ndarray:
        """
        Pixel population for clustering.

        Returns:
            ``(N, 3)`` uint8 RGB array, possibly empty
        """
        if stride is None:
            stride = self.cluster_stride
        if not Config.validate_stride(stride):
            raise ValueError(f"stride must be >= 1, got {stride}")

        buffer = as_image_buffer(buffer)
        return self._strided(buffer, x, y, width, height, stride).copy()
