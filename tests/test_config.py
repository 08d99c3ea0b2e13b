"""
Tests for `Configuration` validation and normalization.
"""

import pytest

from hexline.classify import ControlSymbolMode
from hexline.config import Configuration
from hexline.errors import ConfigurationError, HexlineError


def test_defaults():
    config = Configuration()
    assert config.start_offset == 0
    assert config.end_offset is None
    assert config.max_rows is None
    assert config.row_width == 16
    assert config.group_size == 8
    assert not config.decimal_addresses
    assert config.color_enabled
    assert config.control_symbol_mode is ControlSymbolMode.UNICODE


def test_group_size_zero_means_row_width():
    assert Configuration(row_width=12, group_size=0).group_size == 12


def test_max_rows_zero_is_unlimited():
    config = Configuration(max_rows=0)
    assert config.max_rows is None
    assert not config.rows_limited


@pytest.mark.parametrize("start, end", [(0, 0), (10, 10), (10, 5)])
def test_end_must_exceed_start(start, end):
    with pytest.raises(ConfigurationError, match="end offset must be greater"):
        Configuration(start_offset=start, end_offset=end)


def test_end_after_start_is_accepted():
    config = Configuration(start_offset=4, end_offset=5)
    assert config.end_bounded


@pytest.mark.parametrize(
    "kwargs",
    [
        {"start_offset": -1},
        {"row_width": 0},
        {"group_size": -2},
        {"max_rows": -1},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ConfigurationError):
        Configuration(**kwargs)


def test_configuration_error_is_a_hexline_error():
    with pytest.raises(HexlineError):
        Configuration(row_width=0)


def test_frozen():
    config = Configuration()
    with pytest.raises(AttributeError):
        config.row_width = 8  # pyright: ignore[reportAttributeAccessIssue]
