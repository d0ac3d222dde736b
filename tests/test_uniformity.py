import numpy as np

from canvas_pager.pagination import ArrayPixelSampler, is_line_same_color


def _row_sampler(row: np.ndarray) -> ArrayPixelSampler:
    return ArrayPixelSampler(row[np.newaxis, :, :])


def test_uniform_row_is_same_color():
    row = np.full((40, 4), (250, 250, 250, 255), dtype=np.uint8)
    sampler = _row_sampler(row)

    for step in (1, 2, 3, 7):
        assert is_line_same_color(sampler, 0, 0, 40, step=step)


def test_any_channel_difference_breaks_uniformity():
    for channel in range(4):
        row = np.full((10, 4), 255, dtype=np.uint8)
        row[5, channel] = 254
        sampler = _row_sampler(row)

        assert not is_line_same_color(sampler, 0, 0, 10, step=1)


def test_comparison_is_relative_to_first_pixel():
    row = np.full((12, 4), (20, 40, 60, 255), dtype=np.uint8)
    sampler = _row_sampler(row)

    assert is_line_same_color(sampler, 0, 0, 12, step=1)


def test_first_pixel_differing_breaks_uniformity():
    row = np.full((12, 4), 255, dtype=np.uint8)
    row[0] = (0, 0, 0, 255)
    sampler = _row_sampler(row)

    assert not is_line_same_color(sampler, 0, 0, 12, step=3)


def test_step_can_miss_narrow_feature():
    row = np.full((10, 4), 255, dtype=np.uint8)
    row[2] = (0, 0, 0, 255)
    sampler = _row_sampler(row)

    # Columns 1, 3, 5, 7, 9 are compared; column 2 is skipped.
    assert is_line_same_color(sampler, 0, 0, 10, step=2)
    assert not is_line_same_color(sampler, 0, 0, 10, step=1)


def test_padding_excludes_edge_columns():
    row = np.full((20, 4), 255, dtype=np.uint8)
    row[:3] = (0, 0, 0, 255)
    row[-2:] = (10, 200, 30, 255)
    sampler = _row_sampler(row)

    assert is_line_same_color(sampler, 3, 0, 15, step=1)
    assert not is_line_same_color(sampler, 0, 0, 20, step=1)


def test_single_pixel_and_empty_regions_are_uniform():
    row = np.zeros((5, 4), dtype=np.uint8)
    row[1] = (255, 255, 255, 255)
    sampler = _row_sampler(row)

    assert is_line_same_color(sampler, 1, 0, 1, step=1)
    assert is_line_same_color(sampler, 0, 0, 0, step=1)


def test_step_larger_than_row_compares_second_pixel_only():
    row = np.full((6, 4), 255, dtype=np.uint8)
    row[4] = (1, 2, 3, 4)
    sampler = _row_sampler(row)

    assert is_line_same_color(sampler, 0, 0, 6, step=10)

    row[1] = (1, 2, 3, 4)
    assert not is_line_same_color(_row_sampler(row), 0, 0, 6, step=10)


class CountingSampler(ArrayPixelSampler):
    def __init__(self, image):
        super().__init__(image)
        self.calls = 0

    def sample_row(self, x, y, width):
        self.calls += 1
        return super().sample_row(x, y, width)


def test_row_is_sampled_once_for_any_width():
    sampler = CountingSampler(np.zeros((1, 8, 4), dtype=np.uint8))

    for width in (0, 1, 8):
        assert is_line_same_color(sampler, 0, 0, width, step=2)

    assert sampler.calls == 3
