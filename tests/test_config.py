import pytest
from pydantic import ValidationError

from canvas_pager.config import PaginationConfig, Settings
from canvas_pager.pagination import ScanConfig


def test_defaults_match_scan_defaults():
    scan = PaginationConfig().to_scan_config()

    assert isinstance(scan, ScanConfig)
    assert scan.step == 2
    assert scan.split_line_pixels == 6
    assert scan.padding_left == 0
    assert scan.padding_right == 0


def test_overrides_replace_only_given_values():
    config = PaginationConfig(page_height=500, step=3)

    scan = config.to_scan_config(page_height=800, step=None, padding_left=10)

    assert scan.page_height == 800
    assert scan.step == 3
    assert scan.padding_left == 10


@pytest.mark.parametrize(
    "kwargs",
    [{"page_height": 0}, {"step": 0}, {"split_line_pixels": 0}, {"padding_right": -2}],
)
def test_pagination_config_constraints(kwargs):
    with pytest.raises(ValidationError):
        PaginationConfig(**kwargs)


def test_settings_read_nested_environment(monkeypatch):
    monkeypatch.setenv("PAGINATION__PAGE_HEIGHT", "640")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.pagination.page_height == 640
    assert settings.debug is True
