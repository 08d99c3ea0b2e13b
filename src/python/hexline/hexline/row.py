# row.py
# -*- coding: utf-8 -*-
#

"""
The in-progress row of the dump.
"""


class RowState:
    """
    Bytes collected for the row being drawn.

    One `bytearray` of `row_width` bytes is allocated up front and
    overwritten for every row. `values` only ever exposes the `column`
    bytes written to the current row.
    """

    def __init__(self, row_width: int, address: int = 0):
        if row_width < 1:
            raise ValueError(f"row_width must be positive, got {row_width}")
        self.row_width: int = row_width
        self.buffer: bytearray = bytearray(row_width)
        self.address: int = address
        """file offset of the first byte of this row"""
        self.column: int = 0
        """next write position in `buffer`"""
        self.row_index: int = 0
        """rows completed so far"""

    @property
    def values(self) -> memoryview:
        return memoryview(self.buffer)[:self.column]

    @property
    def empty(self) -> bool:
        return self.column == 0

    @property
    def full(self) -> bool:
        return self.column == self.row_width

    def push(self, value: int, addr: int) -> None:
        """Append byte `value` read at file offset `addr`."""
        if self.column == 0:
            self.address = addr
        self.buffer[self.column] = value
        self.column += 1

    def complete(self) -> None:
        """Count the current row as emitted and start a new one."""
        self.row_index += 1
        self.column = 0

    def __repr__(self) -> str:
        return (
            f"RowState(address={self.address}, column={self.column}/{self.row_width}, "
            f"row_index={self.row_index})"
        )
