# source.py
# -*- coding: utf-8 -*-
#

"""
Byte sources read by the formatter.
"""

import io
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import SeekError
from .messages import printd

STDIN_PATH: str = "-"
"""path meaning standard input"""

SKIP_CHUNK: int = 1 << 16


class FileByteSource:
    """
    Byte source over a file path, an open binary file or standard input.

    Use as a context manager when constructed from a path; a file object
    passed in is not closed.
    """

    def __init__(self, file: Union[Path, str, BinaryIO]):
        self.path: Optional[Path] = None
        self.file: Optional[BinaryIO] = None
        self._owned: bool = False
        if isinstance(file, (str, Path)):
            if str(file) == STDIN_PATH:
                self.file = sys.stdin.buffer
            else:
                self.path = Path(file)
        else:
            self.file = file

    def __enter__(self):
        if self.file is None and self.path is not None:
            self.file = open(self.path, "rb")
            self._owned = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._owned and self.file:
            self.file.close()
            self.file = None
            self._owned = False

    def _require_open(self) -> BinaryIO:
        if self.file is None:
            raise RuntimeError("File not open. Use as context manager.")
        return self.file

    def read(self, size: int) -> bytes:
        """Read up to `size` bytes; `b""` at end of source."""
        return self._require_open().read(size)

    def _seekable(self, file: BinaryIO) -> bool:
        try:
            return file.seekable()
        except (OSError, ValueError):
            return False

    def _size(self, file: BinaryIO) -> Optional[int]:
        """
        Size of a seekable `file`, position unchanged. `None` when the size
        cannot be trusted: not seekable, seeking to the end fails, or the
        reported size is 0 (procfs and sysfs report 0 for files with content).
        """
        if not self._seekable(file):
            return None
        pos = file.tell()
        try:
            size = file.seek(0, io.SEEK_END)
        except OSError as ex:
            printd(f"DEBUG: cannot seek to end: {ex}")
            size = 0
        file.seek(pos)
        if size == 0:
            return None
        return size

    def skip(self, count: int) -> None:
        """
        Advance `count` bytes.

        Raises `SeekError` if fewer than `count` bytes remain. Skipping to
        exactly the end of the source succeeds.
        """
        if count <= 0:
            return
        file = self._require_open()
        size = self._size(file)
        if size is not None:
            pos = file.tell()
            if pos + count > size:
                raise SeekError("start offset is beyond the end of the file")
            file.seek(pos + count)
            printd(f"DEBUG: seeked to offset {pos + count} of {size}")
            return
        # pipes, terminals and files with no usable size (procfs); read and discard
        remaining = count
        while remaining > 0:
            data = file.read(min(remaining, SKIP_CHUNK))
            if not data:
                raise SeekError("start offset is beyond the end of the file")
            remaining -= len(data)
        printd(f"DEBUG: skipped {count} bytes")
