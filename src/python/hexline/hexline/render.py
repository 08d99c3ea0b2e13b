# render.py
# -*- coding: utf-8 -*-
#

"""
Rendering of dump rows, one token at a time.

A full row with the default 16 byte width and groups of 8 looks like

    0x0010: 48 65 6c 6c 6f 2c 20 77 | 6f 72 6c 64 21 0a 00 ff  |Hello, world!␊␀.|

The address field has a fixed width (`0x` and 4 hex digits, or 6 decimal
digits); larger offsets overflow it.
"""

from typing import Iterable

from .classify import glyph, hex_token
from .config import Configuration
from .sink import ColorSink, Role

GROUP_SEPARATOR: str = "| "
"""written between the leading space and the first hex token of a group"""
PAD_GROUP_SEPARATOR: str = " |"
PAD: str = "   "
TEXT_OPEN: str = "  |"
TEXT_CLOSE: str = "|"


def address_label(addr: int, decimal: bool) -> str:
    if decimal:
        return f"{addr:06d}:"
    return f"0x{addr:04x}:"


class LineRenderer:
    """Writes the pieces of a row to a sink according to a `Configuration`."""

    def __init__(self, config: Configuration, sink: ColorSink):
        self.config = config
        self.sink = sink

    def address(self, addr: int) -> None:
        self.sink.emit(Role.ADDRESS, address_label(addr, self.config.decimal_addresses))

    def byte(self, column: int, value: int) -> None:
        """Write the hex token of `value` at `column`, with its leading space and group separator."""
        self.sink.write(" ")
        if column > 0 and column % self.config.group_size == 0:
            self.sink.emit(Role.SEPARATOR, GROUP_SEPARATOR)
        role, text = hex_token(value)
        self.sink.emit(role, text)

    def pad(self, column: int) -> None:
        """Pad the hex region of a partial row from `column` to the row width."""
        for i in range(column, self.config.row_width):
            if i % self.config.group_size == 0:
                self.sink.emit(Role.SEPARATOR, PAD_GROUP_SEPARATOR)
            self.sink.write(PAD)

    def text(self, values: Iterable[int]) -> None:
        mode = self.config.control_symbol_mode
        for value in values:
            role, text = glyph(value, mode)
            self.sink.emit(role, text)

    def close_row(self, values: Iterable[int]) -> None:
        """Write the textual column of `values` between separators and end the line."""
        self.sink.emit(Role.SEPARATOR, TEXT_OPEN)
        self.text(values)
        self.sink.emit(Role.SEPARATOR, TEXT_CLOSE)
        self.sink.write("\n")
