"""
Cloth Color Imaging Utilities
Pixel buffer abstraction and conversions from the frame formats hosts supply.
"""
from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np
from PIL import Image


class ImageBuffer:
    """
    Read-only view of an RGB or RGBA image.

    Pixels are stored as an ``(height, width, channels)`` uint8 array in RGB(A)
    order. The buffer is never modified; callers that overwrite frames in place
    must hand in a snapshot.
    """

    def __init__(self, pixels: np.ndarray):
        if pixels is None:
            raise ValueError("Image buffer is required")
        if not isinstance(pixels, np.ndarray):
            raise ValueError(f"Expected numpy array, got {type(pixels).__name__}")
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"Expected HxWx3 or HxWx4 array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")

        self._pixels = pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def channels(self) -> int:
        return self._pixels.shape[2]

    @property
    def rgb(self) -> np.ndarray:
        """RGB channels as an ``(H, W, 3)`` view; alpha is ignored."""
        return self._pixels[:, :, :3]

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        """RGB of one pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        r, g, b = self._pixels[y, x, :3]
        return int(r), int(g), int(b)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview], width: int, height: int,
                   channels: int = 4) -> "ImageBuffer":
        """
        Wrap a row-major byte buffer, e.g. canvas ImageData (RGBA).

        Raises:
            ValueError: If the byte length does not match the geometry
        """
        if data is None:
            raise ValueError("Image data is required")
        if channels not in (3, 4):
            raise ValueError(f"channels must be 3 or 4, got {channels}")
        if width < 0 or height < 0:
            raise ValueError(f"Invalid dimensions {width}x{height}")

        expected = width * height * channels
        if len(data) != expected:
            raise ValueError(
                f"Byte length {len(data)} does not match {width}x{height}x{channels} = {expected}"
            )

        pixels = np.frombuffer(data, dtype=np.uint8).reshape(height, width, channels)
        return cls(pixels)

    @classmethod
    def from_bgr(cls, frame: np.ndarray) -> "ImageBuffer":
        """Convert an OpenCV BGR or BGRA frame."""
        if frame is None:
            raise ValueError("Frame is required")
        if frame.ndim == 3 and frame.shape[2] == 4:
            return cls(cv2.cvtColor(frame, cv2.COLOR_BGRA2RGBA))
        if frame.ndim == 3 and frame.shape[2] == 3:
            return cls(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
        raise ValueError(f"Expected BGR or BGRA frame, got shape {frame.shape}")

    @classmethod
    def from_pil(cls, image: Image.Image) -> "ImageBuffer":
        """Convert a Pillow image; modes other than RGB/RGBA are converted to RGB."""
        if image is None:
            raise ValueError("Image is required")
        if image.mode not in ("RGB", "RGBA"):
            image = image.convert("RGB")
        return cls(np.array(image))

    @classmethod
    def open(cls, path: Union[str, Path]) -> "ImageBuffer":
        """Decode an image file with Pillow."""
        with Image.open(path) as image:
            image.load()
            return cls.from_pil(image)


def as_image_buffer(buffer: Union[ImageBuffer, np.ndarray]) -> ImageBuffer:
    """Accept either an ImageBuffer or an RGB(A) array."""
    if buffer is None:
        raise ValueError("Image buffer is required")
    if isinstance(buffer, ImageBuffer):
        return buffer
    return ImageBuffer(buffer)
