"""
Cloth Color Schemas
Pydantic models for color values and classification results.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from clothcolor.services.colors.palette import ColorLabel


class RGB(BaseModel):
    """8-bit RGB color."""
    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255, description="Red channel")
    g: int = Field(..., ge=0, le=255, description="Green channel")
    b: int = Field(..., ge=0, le=255, description="Blue channel")

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


class HSV(BaseModel):
    """HSV color with hue in degrees and saturation/value as percentages."""
    model_config = ConfigDict(frozen=True)

    h: float = Field(..., ge=0.0, lt=360.0, description="Hue in degrees [0, 360)")
    s: float = Field(..., ge=0.0, le=100.0, description="Saturation percentage [0, 100]")
    v: float = Field(..., ge=0.0, le=100.0, description="Value percentage [0, 100]")


class ColorResult(BaseModel):
    """Outcome of classifying one aggregate color."""
    model_config = ConfigDict(frozen=True)

    label: ColorLabel = Field(..., description="Closest palette label or 'unknown'")
    confidence: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="1.0 at a palette reference hue, 0.0 at the confidence radius or for empty regions",
    )
    rgb: RGB = Field(..., description="Aggregate RGB color that was classified")
    hsv: HSV = Field(..., description="HSV form of the aggregate color")

    @property
    def is_unknown(self) -> bool:
        return self.label is ColorLabel.UNKNOWN


EMPTY_RESULT = ColorResult(
    label=ColorLabel.UNKNOWN,
    confidence=0.0,
    rgb=RGB(r=0, g=0, b=0),
    hsv=HSV(h=0.0, s=0.0, v=0.0),
)
