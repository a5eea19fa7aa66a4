"""
Cloth Color

Region-based color classification for clothing in camera frames.
"""
from clothcolor.schemas import ColorResult, HSV, RGB
from clothcolor.services.colors.palette import ColorLabel, DEFAULT_PALETTE, PaletteEntry
from clothcolor.services.imaging import ImageBuffer
from clothcolor.services.orchestrator import ColorDetectionOrchestrator, create_orchestrator
from clothcolor.utils.logging import configure_logging

__version__ = "1.0.0"

__all__ = [
    "ColorDetectionOrchestrator",
    "ColorLabel",
    "ColorResult",
    "DEFAULT_PALETTE",
    "HSV",
    "ImageBuffer",
    "PaletteEntry",
    "RGB",
    "configure_logging",
    "create_orchestrator",
]
