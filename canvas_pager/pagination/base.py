"""
Base types for page splitting.
"""

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from PIL import Image


class PaginationError(Exception):
    """Base error for page splitting."""

    pass


class InvalidConfigurationError(PaginationError, ValueError):
    """Raised when scan parameters cannot produce a valid split."""

    pass


class SampleOutOfBoundsError(PaginationError, IndexError):
    """Raised when a row sample falls outside the image buffer."""

    pass


@dataclass(frozen=True)
class ScanConfig:
    """Parameters for the backward split-line scan."""

    page_height: int
    """Ideal (maximum) page height in pixels."""

    padding_left: int = 0
    """Pixels on the left edge excluded from colour comparison."""

    padding_right: int = 0
    """Pixels on the right edge excluded from colour comparison."""

    step: int = 2
    """Column stride used when sampling a row."""

    split_line_pixels: int = 6
    """Consecutive uniform rows required to accept a split band."""

    def __post_init__(self):
        if self.page_height <= 0:
            raise InvalidConfigurationError(
                f"page_height must be positive, got {self.page_height}"
            )
        if self.step < 1:
            raise InvalidConfigurationError(f"step must be >= 1, got {self.step}")
        if self.split_line_pixels < 1:
            raise InvalidConfigurationError(
                f"split_line_pixels must be >= 1, got {self.split_line_pixels}"
            )
        if self.padding_left < 0 or self.padding_right < 0:
            raise InvalidConfigurationError(
                f"Padding must be non-negative, got "
                f"left={self.padding_left} right={self.padding_right}"
            )

    def content_width(self, width: int) -> int:
        """
        Width of the compared region for an image of the given width.

        Raises:
            InvalidConfigurationError: If the padding leaves no content.
        """
        content_width = width - self.padding_left - self.padding_right
        if content_width <= 0:
            raise InvalidConfigurationError(
                f"Padding ({self.padding_left} + {self.padding_right}) "
                f"must be smaller than image width {width}"
            )
        return content_width


@dataclass
class PageChunk:
    """A single page cut from the source image."""

    image: np.ndarray
    """The page pixels as an RGBA numpy array."""

    index: int
    """Sequential page index."""

    y_offset: int
    """First row of the page in the source image."""

    height: int
    """Height of the page in pixels."""

    @property
    def bounds(self) -> tuple[int, int]:
        """Return (top, bottom) rows in the source image, bottom exclusive."""
        return (self.y_offset, self.y_offset + self.height)

    def to_pil(self) -> Image.Image:
        """Convert page to PIL Image."""
        return Image.fromarray(self.image)

    def save(self, path: Path) -> Path:
        """Save page to file."""
        self.to_pil().save(path)
        return path


@dataclass
class PaginationResult:
    """Result of paginating an image."""

    split_heights: list[int]
    """Raw split points; the last entry is always the image height."""

    pages: list[PageChunk]
    """Non-empty pages cut at the split points."""

    original_size: tuple[int, int]
    """Original image size (width, height)."""

    config: ScanConfig
    """Configuration the split was computed with."""

    metadata: dict = field(default_factory=dict)
    """Additional metadata about the split."""

    @property
    def num_pages(self) -> int:
        """Total number of non-empty pages."""
        return len(self.pages)
