"""
Page splitting for tall rendered images.

Finds horizontal bands of uniform colour near each page boundary so a long
image can be cut into fixed-height pages without slicing through content.
"""

from .base import (
    InvalidConfigurationError,
    PageChunk,
    PaginationError,
    PaginationResult,
    SampleOutOfBoundsError,
    ScanConfig,
)
from .sampler import ArrayPixelSampler, PixelSampler, load_sampler, to_rgba
from .uniformity import is_line_same_color
from .splitter import (
    PageSplitter,
    compute_split_heights,
    create_page_splitter,
    find_next_split_line,
    find_split_band,
)

__all__ = [
    "InvalidConfigurationError",
    "PageChunk",
    "PaginationError",
    "PaginationResult",
    "SampleOutOfBoundsError",
    "ScanConfig",
    "ArrayPixelSampler",
    "PixelSampler",
    "load_sampler",
    "to_rgba",
    "is_line_same_color",
    "PageSplitter",
    "compute_split_heights",
    "create_page_splitter",
    "find_next_split_line",
    "find_split_band",
]
