"""
Palette Classifier

Maps an HSV color to the nearest label of a reference palette using circular
hue distance. Colors with too little saturation or value are rejected as
achromatic before any hue comparison is made.
"""

import math
from typing import Optional, Sequence, Tuple

from loguru import logger

from clothcolor.config import Config, config
from .palette import DEFAULT_PALETTE, ColorLabel, PaletteEntry, parse_palette


class PaletteClassifier:
    """
    Nearest-hue classifier over an ordered palette.

    Two low-confidence policies are supported. By default the nearest label is
    always returned once the achromatic gate passes. With
    ``reject_below_floor=True`` any match whose confidence is below
    ``confidence_floor`` is downgraded to ``ColorLabel.UNKNOWN``.
    """

    def __init__(
        self,
        palette: Sequence[PaletteEntry] = DEFAULT_PALETTE,
        saturation_threshold: float = 8.0,
        value_threshold: float = 15.0,
        confidence_radius: float = 60.0,
        achromatic_confidence: float = 0.5,
        reject_below_floor: bool = False,
        confidence_floor: float = 0.0,
        wrap_label: ColorLabel = ColorLabel.RED,
    ):
        """
        Initialize classifier.

        Args:
            palette: Ordered (label, hue) entries; order breaks distance ties
            saturation_threshold: Saturation % below which a color is achromatic
            value_threshold: Value % below which a color is achromatic
            confidence_radius: Hue distance (degrees) at which confidence reaches 0
            achromatic_confidence: Confidence reported for achromatic colors
            reject_below_floor: Downgrade matches below confidence_floor to unknown
            confidence_floor: Minimum confidence accepted when rejection is enabled
            wrap_label: Label whose entries also measure distance to 360 degrees

        Raises:
            ValueError: If a tunable is out of range
        """
        if not Config.validate_threshold(saturation_threshold):
            raise ValueError(f"saturation_threshold must be in [0, 100], got {saturation_threshold}")
        if not Config.validate_threshold(value_threshold):
            raise ValueError(f"value_threshold must be in [0, 100], got {value_threshold}")
        if not Config.validate_radius(confidence_radius):
            raise ValueError(f"confidence_radius must be in (0, 180], got {confidence_radius}")
        if not Config.validate_confidence(achromatic_confidence):
            raise ValueError(f"achromatic_confidence must be in [0, 1], got {achromatic_confidence}")
        if not Config.validate_confidence(confidence_floor):
            raise ValueError(f"confidence_floor must be in [0, 1], got {confidence_floor}")

        self.palette: Tuple[PaletteEntry, ...] = tuple(palette)
        self.saturation_threshold = saturation_threshold
        self.value_threshold = value_threshold
        self.confidence_radius = confidence_radius
        self.achromatic_confidence = achromatic_confidence
        self.reject_below_floor = reject_below_floor
        self.confidence_floor = confidence_floor
        self.wrap_label = wrap_label

    @classmethod
    def from_config(cls, cfg: Config = config) -> "PaletteClassifier":
        """Build a classifier from the environment-driven configuration."""
        return cls(
            palette=parse_palette(cfg.PALETTE),
            saturation_threshold=cfg.SATURATION_THRESHOLD,
            value_threshold=cfg.VALUE_THRESHOLD,
            confidence_radius=cfg.CONFIDENCE_RADIUS,
            achromatic_confidence=cfg.ACHROMATIC_CONFIDENCE,
            reject_below_floor=cfg.REJECT_BELOW_FLOOR,
            confidence_floor=cfg.CONFIDENCE_FLOOR,
        )

    def is_achromatic(self, s: float, v: float) -> bool:
        return s < self.saturation_threshold or v < self.value_threshold

    def hue_distance(self, h: float, entry: PaletteEntry) -> float:
        """Circular distance in degrees between a hue and a palette entry."""
        h = h % 360.0
        dist = abs(h - entry.hue)
        if dist > 180.0:
            dist = 360.0 - dist

        if entry.label == self.wrap_label:
            dist = min(dist, abs(h - 360.0))

        return dist

    def nearest(self, h: float) -> Tuple[ColorLabel, float]:
        """
        Nearest palette label for a hue.

        Returns:
            (label, distance). ``(UNKNOWN, inf)`` for an empty palette.
        """
        min_distance = math.inf
        closest = ColorLabel.UNKNOWN

        for entry in self.palette:
            dist = self.hue_distance(h, entry)
            if dist < min_distance:
                min_distance = dist
                closest = entry.label

        return closest, min_distance

    def classify(self, h: float, s: float, v: float) -> Tuple[ColorLabel, float]:
        """
        Classify an HSV color.

        Returns:
            (label, confidence) with confidence in [0, 1]
        """
        if self.is_achromatic(s, v):
            return ColorLabel.UNKNOWN, self.achromatic_confidence

        label, min_distance = self.nearest(h)
        confidence = max(0.0, 1.0 - min_distance / self.confidence_radius)

        if self.reject_below_floor and confidence < self.confidence_floor:
            logger.debug(f"Rejected {label.value} at H={h:.1f}: confidence {confidence:.3f} "
                         f"< floor {self.confidence_floor:.3f}")
            return ColorLabel.UNKNOWN, confidence

        return label, confidence

    def force_classify(self, h: float) -> ColorLabel:
        """Nearest label with no achromatic gate or confidence floor."""
        label, _ = self.nearest(h)
        return label


_default_classifier: Optional[PaletteClassifier] = None


def get_default_classifier() -> PaletteClassifier:
    """Get or create the classifier built from the global config."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = PaletteClassifier.from_config(config)
    return _default_classifier


def classify_color(h: float, s: float, v: float) -> Tuple[ColorLabel, float]:
    """Classify with the default classifier."""
    return get_default_classifier().classify(h, s, v)


def force_classify_color(h: float) -> ColorLabel:
    """Force-classify with the default classifier."""
    return get_default_classifier().force_classify(h)
