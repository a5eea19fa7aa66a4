"""
Dominant color extraction for clothing regions.

This module clusters the pixels of a region with k-means and classifies each
cluster center against the palette, so that a patterned or multi-colored
garment yields several labels instead of one muddy average.
"""

from typing import List, Optional, Union

import numpy as np
from loguru import logger

from clothcolor.config import Config, config
from clothcolor.schemas import ColorResult, HSV, RGB
from clothcolor.services.imaging import ImageBuffer
from .analysis import analyze_region
from .classifier import PaletteClassifier
from .conversion import rgb_to_hsv
from .palette import ColorLabel
from .sampling import RegionSampler, round_half_up


# Shared generator for production use; tests inject a seeded one.
_process_rng = np.random.default_rng()


def kmeans_clustering(pixels_rgb: np.ndarray, k: int, iterations: int = 10,
                      rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Cluster RGB pixels with plain k-means.

    Centroids start at k pixels drawn with replacement. Each round assigns every
    pixel to its nearest centroid (Euclidean RGB, lowest index on ties) and moves
    non-empty clusters to the mean of their members; empty clusters keep their
    previous centroid. All rounds always run.

    Args:
        pixels_rgb: (N, 3) RGB pixels
        k: Number of clusters
        iterations: Number of refinement rounds
        rng: Random generator for initialization

    Returns:
        (k, 3) float64 centroids, or an empty (0, 3) array for an empty population
    """
    if rng is None:
        rng = _process_rng

    pixels = np.asarray(pixels_rgb, dtype=np.float64).reshape(-1, 3)
    n = len(pixels)
    if n == 0:
        return np.empty((0, 3), dtype=np.float64)

    centroids = pixels[rng.integers(0, n, size=k)].copy()

    for _ in range(iterations):
        # (N, 1, 3) - (1, k, 3) -> (N, k)
        distances = ((pixels[:, None, :] - centroids[None, :, :]) ** 2).sum(axis=2)
        assignments = distances.argmin(axis=1)

        for i in range(k):
            members = pixels[assignments == i]
            if len(members) > 0:
                centroids[i] = members.mean(axis=0)

    return centroids


class DominantColorExtractor:
    """
    Extract up to k labelled dominant colors from a region.

    Regions whose sampled population is smaller than k fall back to the mean
    color path. Centroids classified as unknown are dropped, so an empty list is
    a valid outcome for achromatic regions.
    """

    def __init__(self, classifier: PaletteClassifier, sampler: RegionSampler,
                 iterations: int = 10, rng: Optional[np.random.Generator] = None):
        if not Config.validate_iterations(iterations):
            raise ValueError(f"iterations must be >= 1, got {iterations}")

        self.classifier = classifier
        self.sampler = sampler
        self.iterations = iterations
        self.rng = rng if rng is not None else _process_rng

    @classmethod
    def from_config(cls, cfg: Config = config, classifier: Optional[PaletteClassifier] = None,
                    sampler: Optional[RegionSampler] = None,
                    rng: Optional[np.random.Generator] = None) -> "DominantColorExtractor":
        return cls(
            classifier=classifier or PaletteClassifier.from_config(cfg),
            sampler=sampler or RegionSampler.from_config(cfg),
            iterations=cfg.KMEANS_ITERATIONS,
            rng=rng,
        )

    def _centroid_result(self, centroid: np.ndarray) -> ColorResult:
        h, s, v = rgb_to_hsv(*(float(c) for c in centroid))
        label, confidence = self.classifier.classify(h, s, v)
        logger.debug(f"Dominant HSV: H={round(h)} => {label.value}")

        r, g, b = (int(c) for c in np.clip(round_half_up(centroid), 0, 255))
        return ColorResult(
            label=label,
            confidence=confidence,
            rgb=RGB(r=r, g=g, b=b),
            hsv=HSV(h=h, s=s, v=v),
        )

    def extract(self, buffer: Union[ImageBuffer, np.ndarray], x: int, y: int,
                width: int, height: int, k: int = 3) -> List[ColorResult]:
        """
        Dominant colors of a region.

        Args:
            buffer: Image buffer or RGB(A) array
            x, y, width, height: Region, clipped to the buffer
            k: Maximum number of colors

        Returns:
            Up to k results with the unknown label filtered out
        """
        if not Config.validate_k(k):
            raise ValueError(f"k must be >= 1, got {k}")

        pixels = self.sampler.sample_pixels(buffer, x, y, width, height)
        if len(pixels) < k:
            logger.debug(f"Population {len(pixels)} < k={k}, using mean color")
            return [analyze_region(buffer, x, y, width, height, self.classifier, self.sampler)]

        centroids = kmeans_clustering(pixels, k, self.iterations, self.rng)
        results = [self._centroid_result(c) for c in centroids]
        dominant = [r for r in results if r.label is not ColorLabel.UNKNOWN]

        logger.debug(f"Extracted {len(dominant)}/{k} labelled colors from {len(pixels)} pixels")
        return dominant
