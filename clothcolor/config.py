"""
Cloth Color Configuration
Manages environment variables and defaults for the color classification engine.
"""
import os


class Config:
    """Configuration class for the color classification engine."""

    # Logging
    LOG_LEVEL: str = os.environ.get("CLOTHCOLOR_LOG_LEVEL", "INFO")

    # Achromatic gate (HSV percentages)
    SATURATION_THRESHOLD: float = float(os.environ.get("CLOTHCOLOR_SATURATION_THRESHOLD", "8"))
    VALUE_THRESHOLD: float = float(os.environ.get("CLOTHCOLOR_VALUE_THRESHOLD", "15"))
    ACHROMATIC_CONFIDENCE: float = float(os.environ.get("CLOTHCOLOR_ACHROMATIC_CONFIDENCE", "0.5"))

    # Hue distance (degrees) at which confidence reaches zero
    CONFIDENCE_RADIUS: float = float(os.environ.get("CLOTHCOLOR_CONFIDENCE_RADIUS", "60"))

    # Low-confidence rejection policy
    REJECT_BELOW_FLOOR: bool = bool(int(os.environ.get("CLOTHCOLOR_REJECT_BELOW_FLOOR", "0")))
    CONFIDENCE_FLOOR: float = float(os.environ.get("CLOTHCOLOR_CONFIDENCE_FLOOR", "0.0"))

    # Palette preset ("default", "purple_folded") or entries like "red:0,orange:25,purple:250"
    PALETTE: str = os.environ.get("CLOTHCOLOR_PALETTE", "")

    # Sampling and clustering
    MEAN_STRIDE: int = int(os.environ.get("CLOTHCOLOR_MEAN_STRIDE", "2"))
    CLUSTER_STRIDE: int = int(os.environ.get("CLOTHCOLOR_CLUSTER_STRIDE", "3"))
    DEFAULT_K: int = int(os.environ.get("CLOTHCOLOR_DEFAULT_K", "3"))
    KMEANS_ITERATIONS: int = int(os.environ.get("CLOTHCOLOR_KMEANS_ITERATIONS", "10"))

    @classmethod
    def validate_threshold(cls, value: float) -> bool:
        """Validate a saturation/value percentage threshold."""
        return 0.0 <= value <= 100.0

    @classmethod
    def validate_confidence(cls, value: float) -> bool:
        """Validate a confidence value or floor."""
        return 0.0 <= value <= 1.0

    @classmethod
    def validate_radius(cls, radius: float) -> bool:
        """Validate confidence radius in hue degrees."""
        return 0.0 < radius <= 180.0

    @classmethod
    def validate_stride(cls, stride: int) -> bool:
        """Validate a sampling stride."""
        return stride >= 1

    @classmethod
    def validate_k(cls, k: int) -> bool:
        """Validate cluster count."""
        return k >= 1

    @classmethod
    def validate_iterations(cls, iterations: int) -> bool:
        """Validate k-means refinement rounds."""
        return iterations >= 1


# Global config instance
config = Config()
