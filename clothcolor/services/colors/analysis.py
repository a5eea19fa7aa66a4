"""Single-mean region classification and best-effort labelling."""

from typing import Tuple, Union

import numpy as np
from loguru import logger

from clothcolor.schemas import EMPTY_RESULT, ColorResult
from clothcolor.services.imaging import ImageBuffer
from .classifier import PaletteClassifier
from .conversion import hsv_from_rgb
from .palette import ColorLabel
from .sampling import RegionSampler


def classify_region(
    buffer: Union[ImageBuffer, np.ndarray],
    x: int,
    y: int,
    width: int,
    height: int,
    classifier: PaletteClassifier,
    sampler: RegionSampler,
) -> Tuple[ColorResult, int]:
    """
    Classify the mean color of a region and report how many pixels it averaged.

    An empty (fully clipped) region yields the unknown label with zero
    confidence and zero RGB/HSV, and a sample count of 0.
    """
    rgb, count = sampler.sample_mean(buffer, x, y, width, height)
    if count == 0:
        logger.debug(f"Empty region at ({x}, {y}, {width}, {height})")
        return EMPTY_RESULT, 0

    hsv = hsv_from_rgb(rgb)
    logger.debug(f"Region HSV: H={round(hsv.h)}, S={round(hsv.s)}, V={round(hsv.v)} ({count} samples)")

    label, confidence = classifier.classify(hsv.h, hsv.s, hsv.v)
    return ColorResult(label=label, confidence=confidence, rgb=rgb, hsv=hsv), count


def analyze_region(
    buffer: Union[ImageBuffer, np.ndarray],
    x: int,
    y: int,
    width: int,
    height: int,
    classifier: PaletteClassifier,
    sampler: RegionSampler,
) -> ColorResult:
    """Classify the mean color of a region."""
    result, _ = classify_region(buffer, x, y, width, height, classifier, sampler)
    return result


def best_effort_result(result: ColorResult, classifier: PaletteClassifier,
                       sample_count: int) -> ColorResult:
    """
    Replace an unknown label with the nearest palette label.

    Confidence is kept as computed. Results averaged from zero samples are
    returned unchanged since they carry no hue at all.
    """
    if not result.is_unknown or sample_count == 0:
        return result

    label = classifier.force_classify(result.hsv.h)
    if label is ColorLabel.UNKNOWN:
        return result

    logger.debug(f"Forced H={result.hsv.h:.1f} to {label.value}")
    return result.model_copy(update={"label": label})
