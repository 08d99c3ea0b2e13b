# sink.py
# -*- coding: utf-8 -*-
#

"""
Output sinks for the dump.

A sink accepts text segments tagged with a `Role` and writes them to a text
stream, wrapped in `colorist` escape sequences when color is enabled.
`PlainSink` writes the same text with no escape sequences, for piping the
dump to a file.

Write failures are not fatal: they are counted and reported once.
Characters the stream encoding cannot hold are written as `?`.
"""

import codecs
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterator, TextIO

from colorist import BrightColor, Color, Effect

from .messages import printd, printw


class Role(Enum):
    SEPARATOR = "separator"
    ADDRESS = "address"
    PRINTABLE = "printable"
    NON_PRINTABLE = "non_printable"
    NON_ASCII = "non_ascii"
    NULL = "null"


STYLES: Dict[Role, str] = {
    Role.SEPARATOR: f"{BrightColor.GREEN}",
    Role.ADDRESS: f"{Color.YELLOW}",
    Role.PRINTABLE: f"{Color.OFF}",
    Role.NON_PRINTABLE: f"{Color.RED}",
    Role.NON_ASCII: f"{Color.CYAN}",
    Role.NULL: f"{Effect.DIM}",
}
"""escape sequence written before a segment of each `Role`"""

RESET: str = f"{Color.OFF}"


class ColorSink:
    """Writes styled segments to `stream`."""

    def __init__(self, stream: TextIO, styles: Dict[Role, str] = STYLES):
        self.stream = stream
        self.styles = styles
        self.write_errors: int = 0

    def emit(self, role: Role, text: str) -> None:
        self.write(f"{self.styles[role]}{text}{RESET}")

    def write(self, text: str) -> None:
        """Write `text` unstyled."""
        try:
            self.stream.write(text)
        except UnicodeEncodeError as ex:
            self._write_replaced(text, ex)
        except OSError as ex:
            self._write_failed(ex)

    def _write_replaced(self, text: str, error: UnicodeEncodeError) -> None:
        """
        Write `text` with the characters the stream encoding cannot hold
        replaced by `?`, so a glyph still takes up one column.
        """
        encoding = getattr(self.stream, "encoding", None) or "ascii"
        printd(f"DEBUG: replacing characters not in {encoding!r}: {error}")
        replaced = text.encode(encoding, errors="replace").decode(encoding)
        try:
            self.stream.write(replaced)
        except (OSError, UnicodeEncodeError) as ex:
            self._write_failed(ex)

    def _write_failed(self, ex: Exception) -> None:
        self.write_errors += 1
        if self.write_errors == 1:
            printw(f"WARNING: writing output failed, continuing: {ex}")
        else:
            printd(f"DEBUG: write error {self.write_errors}: {ex}")

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as ex:
            self.write_errors += 1
            printd(f"DEBUG: flush failed: {ex}")


class PlainSink(ColorSink):
    """Same text as `ColorSink`, no escape sequences."""

    def emit(self, role: Role, text: str) -> None:
        self.write(text)


def make_sink(stream: TextIO, color_enabled: bool) -> ColorSink:
    if color_enabled:
        return ColorSink(stream)
    return PlainSink(stream)


def _is_utf8(encoding: str) -> bool:
    try:
        return codecs.lookup(encoding).name == "utf-8"
    except LookupError:
        return False


@contextmanager
def utf8_console(stream: TextIO, unicode_glyphs: bool) -> Iterator[TextIO]:
    """
    Switch `stream` to UTF-8 while the dump is written, then restore the
    original encoding.

    Control pictures (U+2400 block) cannot be encoded by legacy console
    code pages such as cp437 or cp1252. Streams that are already UTF-8,
    or that cannot be reconfigured (e.g. `io.StringIO`), are left as-is.
    """
    original = getattr(stream, "encoding", None)
    switch = (
        unicode_glyphs
        and original is not None
        and not _is_utf8(original)
        and hasattr(stream, "reconfigure")
    )
    if switch:
        printd(f"DEBUG: switching output encoding {original!r} to 'utf-8'")
        stream.flush()
        stream.reconfigure(encoding="utf-8")  # pyright: ignore[reportAttributeAccessIssue]
    try:
        yield stream
    finally:
        if switch:
            stream.flush()
            stream.reconfigure(encoding=original)  # pyright: ignore[reportAttributeAccessIssue]
