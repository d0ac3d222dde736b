import numpy as np
import pytest


def make_content(height: int, width: int) -> np.ndarray:
    """RGBA image where every row varies across its columns."""
    ys, xs = np.mgrid[0:height, 0:width]
    image = np.full((height, width, 4), 255, dtype=np.uint8)
    image[:, :, 0] = (xs * 37 + ys) % 251
    image[:, :, 1] = (xs * 11) % 199
    return image


def add_blank_band(image: np.ndarray, top: int, bottom: int, color=(255, 255, 255, 255)) -> np.ndarray:
    """Paint rows [top, bottom) a single colour."""
    image[top:bottom] = color
    return image


@pytest.fixture
def content_image():
    return make_content


@pytest.fixture
def blank_band():
    return add_blank_band
