"""
Backward split-line search and page-split orchestration.

Starting from the top of the image, each page boundary is placed inside
the blank band closest to (but not past) one page height below the
previous boundary. When no band is found the page is cut at exactly one
page height.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from .base import PageChunk, PaginationResult, ScanConfig
from .sampler import ArrayPixelSampler, PixelSampler, load_sampler
from .uniformity import is_line_same_color

logger = logging.getLogger(__name__)

ImageSource = Union[PixelSampler, np.ndarray, Image.Image, Path, str]


def find_split_band(
    sampler: PixelSampler,
    start_height: int,
    page_height: int,
    padding_left: int,
    content_width: int,
    step: int,
    split_line_pixels: int,
) -> Optional[int]:
    """
    Find the band-aligned boundary for the page starting at ``start_height``.

    Rows are probed from ``start_height + page_height - 1`` upward. Once
    ``split_line_pixels`` consecutive uniform rows are seen, the boundary
    is placed just below the lowest of them, so the page keeps as much of
    its height as possible.

    Returns:
        The split height, or None if no band exists within the page.
    """
    next_line_height = start_height + page_height - 1
    uniform_rows = 0

    while next_line_height > start_height:
        if is_line_same_color(
            sampler,
            offset_x=padding_left,
            offset_y=next_line_height,
            width=content_width,
            step=step,
        ):
            uniform_rows += 1
            if uniform_rows == split_line_pixels:
                return next_line_height + split_line_pixels
        else:
            uniform_rows = 0
        next_line_height -= 1

    return None


def find_next_split_line(
    sampler: PixelSampler,
    start_height: int,
    page_height: int,
    padding_left: int,
    content_width: int,
    step: int,
    split_line_pixels: int,
) -> int:
    """Next split height, cutting at exactly one page height when no band is found."""
    split_height, _ = _next_split(
        sampler,
        start_height=start_height,
        page_height=page_height,
        padding_left=padding_left,
        content_width=content_width,
        step=step,
        split_line_pixels=split_line_pixels,
    )
    return split_height


def _next_split(
    sampler: PixelSampler,
    start_height: int,
    page_height: int,
    padding_left: int,
    content_width: int,
    step: int,
    split_line_pixels: int,
) -> tuple[int, bool]:
    """Return (split height, found band) for the page starting at ``start_height``."""
    split_height = find_split_band(
        sampler,
        start_height=start_height,
        page_height=page_height,
        padding_left=padding_left,
        content_width=content_width,
        step=step,
        split_line_pixels=split_line_pixels,
    )
    if split_height is None:
        return start_height + page_height, False
    return split_height, True


def compute_split_heights(
    sampler: PixelSampler,
    config: ScanConfig,
) -> list[int]:
    """
    Compute page boundaries for the whole image.

    Args:
        sampler: Source of row pixels.
        config: Scan parameters.

    Returns:
        Increasing split heights. The last entry is always the image
        height and may repeat the previous entry.

    Raises:
        InvalidConfigurationError: If padding leaves no content columns.
    """
    boundaries = _scan_boundaries(sampler, config)
    split_heights = [height for height, _ in boundaries]

    # Last page
    split_heights.append(sampler.height)

    logger.info(
        f"Split {sampler.width}x{sampler.height} image into "
        f"{len(split_heights)} split points (page_height={config.page_height})"
    )
    return split_heights


def _scan_boundaries(
    sampler: PixelSampler,
    config: ScanConfig,
) -> list[tuple[int, bool]]:
    """Walk the image page by page, returning (split height, found band) pairs."""
    content_width = config.content_width(sampler.width)
    last_start_height = sampler.height - config.page_height

    boundaries = []
    start_height = 0

    while start_height < last_start_height:
        next_height, found_band = _next_split(
            sampler,
            start_height=start_height,
            page_height=config.page_height,
            padding_left=config.padding_left,
            content_width=content_width,
            step=config.step,
            split_line_pixels=config.split_line_pixels,
        )
        if found_band:
            logger.debug(f"Blank band found below {start_height}, cutting at {next_height}")
        else:
            logger.debug(f"No blank band below {start_height}, cutting at {next_height}")

        boundaries.append((next_height, found_band))
        start_height = next_height

    return boundaries


class PageSplitter:
    """
    Splits tall images into pages at blank horizontal bands.

    Wraps :func:`compute_split_heights` with image loading and cuts the
    resulting pages out of the source buffer.
    """

    def __init__(self, config: ScanConfig):
        """
        Initialize the splitter.

        Args:
            config: Scan parameters shared by every call.
        """
        self.config = config

    def split_heights(self, image: ImageSource) -> list[int]:
        """Compute split heights for an image."""
        return compute_split_heights(load_sampler(image), self.config)

    def paginate(self, image: ImageSource) -> PaginationResult:
        """
        Split an image into page chunks.

        Args:
            image: Sampler, numpy array, PIL Image, or path.

        Returns:
            PaginationResult with the raw split heights and the
            non-empty pages.
        """
        sampler = load_sampler(image)
        boundaries = _scan_boundaries(sampler, self.config)
        split_heights = [height for height, _ in boundaries] + [sampler.height]
        band_splits = sum(1 for _, found_band in boundaries if found_band)
        pixels = self._pixels(sampler)

        pages = []
        top = 0
        for bottom in split_heights:
            # Trailing page can be empty when the last boundary hits the bottom
            if bottom > top:
                pages.append(
                    PageChunk(
                        image=pixels[top:bottom].copy(),
                        index=len(pages),
                        y_offset=top,
                        height=bottom - top,
                    )
                )
            top = max(top, bottom)

        logger.info(
            f"Paginated {sampler.width}x{sampler.height} image into {len(pages)} pages "
            f"({band_splits} at blank bands)"
        )

        return PaginationResult(
            split_heights=split_heights,
            pages=pages,
            original_size=(sampler.width, sampler.height),
            config=self.config,
            metadata={
                "band_splits": band_splits,
                "fallback_splits": len(boundaries) - band_splits,
            },
        )

    def _pixels(self, sampler: PixelSampler) -> np.ndarray:
        """Full RGBA buffer, read row by row when the sampler has no array."""
        if isinstance(sampler, ArrayPixelSampler):
            return sampler.pixels

        if sampler.height == 0:
            return np.zeros((0, sampler.width, 4), dtype=np.uint8)

        return np.stack(
            [sampler.sample_row(0, y, sampler.width) for y in range(sampler.height)]
        )


def create_page_splitter(page_height: int, **kwargs) -> PageSplitter:
    """
    Factory function to create a configured PageSplitter.

    Args:
        page_height: Ideal page height in pixels.
        **kwargs: Additional ScanConfig options (step, split_line_pixels,
            padding_left, padding_right).

    Returns:
        Configured PageSplitter.
    """
    return PageSplitter(ScanConfig(page_height=page_height, **kwargs))
