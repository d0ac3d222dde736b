"""
Pixel samplers that expose image rows to the split-line search.

The search never reads the image buffer directly; it asks a sampler for
one row segment at a time and receives RGBA values.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PIL import Image

from .base import SampleOutOfBoundsError

logger = logging.getLogger(__name__)


class PixelSampler(ABC):
    """Read-only access to rows of an RGBA image buffer."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Buffer width in pixels."""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """Buffer height in pixels."""
        pass

    @abstractmethod
    def sample_row(self, x: int, y: int, width: int) -> np.ndarray:
        """
        Read one row segment.

        Args:
            x: First column of the segment.
            y: Row index.
            width: Number of pixels to read.

        Returns:
            Array of shape (width, 4) with uint8 RGBA values.

        Raises:
            SampleOutOfBoundsError: If the segment is outside the buffer.
        """
        pass

    def _check_bounds(self, x: int, y: int, width: int) -> None:
        if y < 0 or y >= self.height:
            raise SampleOutOfBoundsError(
                f"Row {y} outside image of height {self.height}"
            )
        if x < 0 or width < 0 or x + width > self.width:
            raise SampleOutOfBoundsError(
                f"Columns [{x}, {x + width}) outside image of width {self.width}"
            )


class ArrayPixelSampler(PixelSampler):
    """
    Samples rows from an in-memory numpy array.

    Grayscale (H, W), RGB (H, W, 3) and RGBA (H, W, 4) arrays are
    accepted; anything without an alpha channel is converted to RGBA
    once, up front.
    """

    def __init__(self, image: np.ndarray):
        self._pixels = to_rgba(image)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        """The RGBA buffer backing this sampler."""
        return self._pixels

    def sample_row(self, x: int, y: int, width: int) -> np.ndarray:
        self._check_bounds(x, y, width)
        return self._pixels[y, x:x + width]


def to_rgba(image: np.ndarray) -> np.ndarray:
    """
    Convert a grayscale, RGB or RGBA array to uint8 RGBA.

    Raises:
        ValueError: If the array shape is not an image layout.
    """
    if image.dtype != np.uint8:
        image = np.clip(image, 0, 255).astype(np.uint8)

    if image.ndim in (2, 3) and image.size == 0:
        return np.zeros(image.shape[:2] + (4,), dtype=np.uint8)

    image = np.ascontiguousarray(image)

    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)

    if image.ndim == 3:
        channels = image.shape[2]
        if channels == 4:
            return image
        if channels == 3:
            return cv2.cvtColor(image, cv2.COLOR_RGB2RGBA)
        if channels == 1:
            return cv2.cvtColor(image[:, :, 0].copy(), cv2.COLOR_GRAY2RGBA)

    raise ValueError(f"Unsupported image array shape: {image.shape}")


def load_sampler(
    image: Union[PixelSampler, np.ndarray, Image.Image, Path, str],
) -> PixelSampler:
    """
    Build a sampler from the common image representations.

    Args:
        image: Existing sampler, numpy array, PIL Image, or path.

    Returns:
        A PixelSampler over the image.
    """
    if isinstance(image, PixelSampler):
        return image

    if isinstance(image, np.ndarray):
        return ArrayPixelSampler(image)

    if isinstance(image, (str, Path)):
        logger.debug(f"Loading image from {image}")
        with Image.open(image) as img:
            return ArrayPixelSampler(np.array(img.convert("RGBA")))

    if isinstance(image, Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return ArrayPixelSampler(np.array(image))

    raise TypeError(f"Unsupported image type: {type(image)}")
