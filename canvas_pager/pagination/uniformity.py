"""
Row uniformity test used to find blank bands.
"""

import numpy as np

from .sampler import PixelSampler


def is_line_same_color(
    sampler: PixelSampler,
    offset_x: int,
    offset_y: int,
    width: int,
    step: int = 1,
) -> bool:
    """
    Check whether a row segment is a single colour.

    Every ``step``-th pixel after the first is compared against the first
    pixel on all four RGBA channels. With ``step > 1`` a feature narrower
    than ``step`` pixels can fall between samples and the row is reported
    as uniform anyway; a larger step scans faster at the cost of accuracy.

    Args:
        sampler: Source of row pixels.
        offset_x: First column of the compared region (left padding).
        offset_y: Row index.
        width: Width of the compared region.
        step: Column stride between compared pixels.

    Returns:
        True if all sampled pixels equal the first one.
    """
    row = sampler.sample_row(offset_x, offset_y, width)
    if len(row) <= 1:
        return True

    samples = row[1::step]
    return bool(np.all(samples == row[0]))
