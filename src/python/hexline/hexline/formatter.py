# formatter.py
# -*- coding: utf-8 -*-
#

"""
The streaming dump formatter.

`StreamFormatter` pulls chunks from a byte source and draws each byte as
soon as it is seen: the address at the start of a row, then one hex token
per byte, then the textual column once the row is full. At the end of the
source a partial last row is padded so its textual column lines up with
the full rows above it.

    STREAMING --(row full)--> FLUSHING --> STREAMING
    STREAMING --(row limit reached)--> DONE
    STREAMING --(end offset / end of source)--> DRAINING --> DONE
"""

import io
from enum import Enum
from typing import Optional, Protocol

from .config import Configuration
from .errors import SourceReadError
from .messages import printd
from .render import LineRenderer
from .row import RowState
from .sink import ColorSink, make_sink
from .source import FileByteSource

READ_SIZE: int = 4096
"""bytes requested from the source per chunk"""


class ByteSource(Protocol):
    def read(self, size: int) -> bytes: ...

    def skip(self, count: int) -> None: ...


class State(Enum):
    STREAMING = "streaming"
    FLUSHING = "flushing"
    DRAINING = "draining"
    DONE = "done"


class StreamFormatter:
    """
    Formats a stream of bytes starting at `config.start_offset`.

    Call `feed` for each chunk and `finish` at the end of the source, or
    let `run` do both.
    """

    def __init__(self, config: Configuration, sink: ColorSink):
        self.config = config
        self.sink = sink
        self.renderer = LineRenderer(config, sink)
        self.row = RowState(config.row_width, config.start_offset)
        self.state: State = State.STREAMING
        self.offset: int = config.start_offset
        """file offset of the next byte to process"""
        self.bytes_rendered: int = 0

    @property
    def rows_emitted(self) -> int:
        """full and partial rows written"""
        return self.row.row_index

    @property
    def accepting(self) -> bool:
        return self.state is State.STREAMING

    def feed(self, chunk: bytes) -> bool:
        """
        Process `chunk`, the bytes at `self.offset` onwards.

        Returns `True` while more bytes are wanted.
        """
        end = self.config.end_offset
        for value in chunk:
            if self.state is not State.STREAMING:
                break
            if end is not None and self.offset >= end:
                self.state = State.DRAINING
                break
            self._push(value)
        return self.accepting

    def _push(self, value: int) -> None:
        row = self.row
        addr = self.offset
        if row.empty:
            self.renderer.address(addr)
        self.renderer.byte(row.column, value)
        row.push(value, addr)
        self.offset = addr + 1
        self.bytes_rendered += 1
        if row.full:
            self.state = State.FLUSHING
            self.renderer.close_row(row.values)
            row.complete()
            max_rows = self.config.max_rows
            if max_rows is not None and row.row_index >= max_rows:
                printd(f"DEBUG: reached row limit {max_rows} at offset {self.offset}")
                self.state = State.DONE
            else:
                self.state = State.STREAMING

    def finish(self) -> None:
        """
        End of source: pad and write a partial last row, if any.
        """
        if self.state is State.DONE:
            return
        self.state = State.DRAINING
        row = self.row
        if not row.empty:
            self.renderer.pad(row.column)
            self.renderer.close_row(row.values)
            row.complete()
        self.state = State.DONE
        self.sink.flush()

    def abort(self) -> None:
        """Stop without drawing the partial row."""
        self.state = State.DONE
        self.sink.flush()

    def run(self, source: ByteSource, chunk_size: int = READ_SIZE) -> int:
        """
        Skip to the start offset, format the whole source and return the
        number of bytes rendered.

        Raises `SeekError` before any output if the start offset is past the
        end of the source, and `SourceReadError` if a read fails; in that
        case the current row is left unfinished.
        """
        try:
            source.skip(self.config.start_offset)
        except OSError as ex:
            self.abort()
            raise SourceReadError(f"failed to skip to offset {self.config.start_offset}: {ex}") from ex
        while self.accepting:
            try:
                chunk = source.read(chunk_size)
            except OSError as ex:
                self.abort()
                raise SourceReadError(f"read failed at offset {self.offset}: {ex}") from ex
            if not chunk:
                break
            self.feed(chunk)
        self.finish()
        printd(f"DEBUG: rendered {self.bytes_rendered} bytes in {self.rows_emitted} rows")
        return self.bytes_rendered


def format_bytes(
    data: bytes,
    config: Optional[Configuration] = None,
    chunk_size: int = READ_SIZE,
) -> str:
    """
    Return the dump of `data` as a string.

    `data` is treated as the whole file; `config.start_offset` is skipped.
    """
    if config is None:
        config = Configuration()
    out = io.StringIO()
    source = FileByteSource(io.BytesIO(data))
    formatter = StreamFormatter(config, make_sink(out, config.color_enabled))
    formatter.run(source, chunk_size)
    return out.getvalue()
