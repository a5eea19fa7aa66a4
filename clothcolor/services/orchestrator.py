"""
Cloth Color Orchestrator
Wires classifier, sampler and extractor together from configuration and
exposes the operations host applications call per video frame.
"""
from typing import List, Optional, Union

import numpy as np

from clothcolor.config import Config, config
from clothcolor.schemas import ColorResult
from clothcolor.services.colors.analysis import (
    analyze_region,
    best_effort_result,
    classify_region,
)
from clothcolor.services.colors.classifier import PaletteClassifier
from clothcolor.services.colors.extraction import DominantColorExtractor
from clothcolor.services.colors.sampling import RegionSampler
from clothcolor.services.imaging import ImageBuffer
from clothcolor.utils.logging import get_logger

logger = get_logger("orchestrator")

BufferLike = Union[ImageBuffer, np.ndarray]


class ColorDetectionOrchestrator:
    """Main entry point for region color detection."""

    def __init__(self, classifier: PaletteClassifier, sampler: RegionSampler,
                 extractor: DominantColorExtractor, default_k: int = 3):
        if not Config.validate_k(default_k):
            raise ValueError(f"default_k must be >= 1, got {default_k}")

        self.classifier = classifier
        self.sampler = sampler
        self.extractor = extractor
        self.default_k = default_k

    def analyze_region(self, buffer: BufferLike, x: int, y: int,
                       width: int, height: int) -> ColorResult:
        """Classify the mean color of a region."""
        return analyze_region(buffer, x, y, width, height, self.classifier, self.sampler)

    def extract_dominant_colors(self, buffer: BufferLike, x: int, y: int, width: int,
                                height: int, k: Optional[int] = None) -> List[ColorResult]:
        """Up to k labelled dominant colors; may be empty for achromatic regions."""
        k = self.default_k if k is None else k
        results = self.extractor.extract(buffer, x, y, width, height, k)
        logger.debug(
            "Dominant colors extracted",
            extra={"region": [x, y, width, height], "k": k,
                   "labels": [r.label.value for r in results]},
        )
        return results

    def detect_label(self, buffer: BufferLike, x: int, y: int,
                     width: int, height: int) -> ColorResult:
        """
        Deterministic best-effort label for a region.

        Uses the mean color; when that is unknown the nearest palette label is
        forced so the caller always gets a color for a non-empty region.
        """
        result, count = classify_region(buffer, x, y, width, height,
                                        self.classifier, self.sampler)
        resolved = best_effort_result(result, self.classifier, count)
        if resolved is not result:
            logger.info(
                "Forced label for low-confidence region",
                extra={"region": [x, y, width, height], "label": resolved.label.value,
                       "confidence": round(resolved.confidence, 3)},
            )
        return resolved


def create_orchestrator(cfg: Config = config,
                        rng: Optional[np.random.Generator] = None) -> ColorDetectionOrchestrator:
    """Build an orchestrator from configuration."""
    classifier = PaletteClassifier.from_config(cfg)
    sampler = RegionSampler.from_config(cfg)
    extractor = DominantColorExtractor.from_config(cfg, classifier=classifier,
                                                   sampler=sampler, rng=rng)
    logger.debug(
        "Orchestrator created",
        extra={"palette_size": len(classifier.palette), "radius": classifier.confidence_radius,
               "reject_below_floor": classifier.reject_below_floor},
    )
    return ColorDetectionOrchestrator(classifier, sampler, extractor, default_k=cfg.DEFAULT_K)
