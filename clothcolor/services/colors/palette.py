"""
Color Labels and Reference Palette

Defines the closed set of color labels and the ordered (label, hue) palette
the classifier matches against. Several hue landmarks may share one label;
entry order is the tie-break order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class ColorLabel(str, Enum):
    """Supported cloth color labels."""
    SKY_BLUE = "sky_blue"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    PURPLE = "purple"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PaletteEntry:
    """A reference hue (degrees) and the label it maps to."""
    label: ColorLabel
    hue: float


Palette = Tuple[PaletteEntry, ...]


# Light blues stay sky blue; only deep blue and violet read as purple.
DEFAULT_PALETTE: Palette = (
    PaletteEntry(ColorLabel.RED, 0.0),
    PaletteEntry(ColorLabel.ORANGE, 25.0),
    PaletteEntry(ColorLabel.YELLOW, 50.0),
    PaletteEntry(ColorLabel.SKY_BLUE, 175.0),
    PaletteEntry(ColorLabel.SKY_BLUE, 200.0),
    PaletteEntry(ColorLabel.PURPLE, 250.0),
    PaletteEntry(ColorLabel.PURPLE, 290.0),
)

# Blue and indigo hues folded into purple; sky blue is strictly cyan.
PURPLE_FOLDED_PALETTE: Palette = (
    PaletteEntry(ColorLabel.RED, 0.0),
    PaletteEntry(ColorLabel.ORANGE, 25.0),
    PaletteEntry(ColorLabel.YELLOW, 50.0),
    PaletteEntry(ColorLabel.SKY_BLUE, 175.0),
    PaletteEntry(ColorLabel.PURPLE, 210.0),    # light blue
    PaletteEntry(ColorLabel.PURPLE, 250.0),    # blue
    PaletteEntry(ColorLabel.PURPLE, 290.0),
)

PALETTE_PRESETS: Dict[str, Palette] = {
    "default": DEFAULT_PALETTE,
    "purple_folded": PURPLE_FOLDED_PALETTE,
}


DISPLAY_NAMES: Dict[str, Dict[ColorLabel, str]] = {
    "en": {
        ColorLabel.SKY_BLUE: "Sky blue",
        ColorLabel.YELLOW: "Yellow",
        ColorLabel.ORANGE: "Orange",
        ColorLabel.RED: "Red",
        ColorLabel.PURPLE: "Purple",
        ColorLabel.UNKNOWN: "Unknown",
    },
    "ko": {
        ColorLabel.SKY_BLUE: "하늘색",
        ColorLabel.YELLOW: "노란색",
        ColorLabel.ORANGE: "주황색",
        ColorLabel.RED: "빨간색",
        ColorLabel.PURPLE: "보라색",
        ColorLabel.UNKNOWN: "알 수 없음",
    },
}


def display_name(label: ColorLabel, locale: str = "en") -> str:
    """Human-readable name of a label; unsupported locales fall back to English."""
    names = DISPLAY_NAMES.get(locale, DISPLAY_NAMES["en"])
    return names[ColorLabel(label)]


def parse_palette(text: str) -> Palette:
    """
    Parse a palette from a preset name or a ``label:hue`` list such as
    ``"red:0,purple:250"``.

    Args:
        text: Preset name from PALETTE_PRESETS, or comma-separated entries
            whose labels are ColorLabel values.

    Returns:
        Ordered palette tuple. An empty or blank string yields DEFAULT_PALETTE.

    Raises:
        ValueError: For unknown labels, the unknown sentinel, or bad hues.
    """
    if not text or not text.strip():
        return DEFAULT_PALETTE
    if text.strip().lower() in PALETTE_PRESETS:
        return PALETTE_PRESETS[text.strip().lower()]

    entries = []
    for raw in text.split(","):
        item = raw.strip()
        if not item:
            continue
        if ":" not in item:
            raise ValueError(f"Palette entry '{item}' must be 'label:hue'")

        label_text, hue_text = (part.strip() for part in item.split(":", 1))
        try:
            label = ColorLabel(label_text.lower())
        except ValueError:
            raise ValueError(f"Unknown color label '{label_text}'") from None
        if label is ColorLabel.UNKNOWN:
            raise ValueError("The unknown label cannot be a palette target")

        try:
            hue = float(hue_text)
        except ValueError:
            raise ValueError(f"Invalid hue '{hue_text}' for label '{label_text}'") from None
        if not 0.0 <= hue < 360.0:
            raise ValueError(f"Hue {hue} for label '{label_text}' must be in [0, 360)")

        entries.append(PaletteEntry(label, hue))

    return tuple(entries)
