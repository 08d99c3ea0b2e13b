"""
Tests for `RowState`.
"""

import pytest

from hexline.row import RowState


def test_values_track_column():
    row = RowState(4)
    assert row.empty
    row.push(0x41, 100)
    row.push(0x42, 101)
    assert row.address == 100
    assert row.column == 2
    assert bytes(row.values) == b"AB"
    assert len(row.values) == row.column


def test_buffer_is_reused():
    row = RowState(2)
    buffer = row.buffer
    row.push(1, 0)
    row.push(2, 1)
    assert row.full
    row.complete()
    assert row.row_index == 1
    assert row.empty
    assert bytes(row.values) == b""
    row.push(3, 2)
    assert row.buffer is buffer
    assert row.address == 2
    assert bytes(row.values) == b"\x03"


def test_row_width_must_be_positive():
    with pytest.raises(ValueError):
        RowState(0)
