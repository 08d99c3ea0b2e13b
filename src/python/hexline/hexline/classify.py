# classify.py
# -*- coding: utf-8 -*-
#

"""
Byte classification and the glyphs drawn in the textual column.

Every byte value falls in exactly one `ByteCategory`:

    0           NULL
    1 - 31      CONTROL
    32 - 254    PRINTABLE
    255         NON_ASCII

Bytes 127-254 are drawn literally, only 255 is drawn as a dot.
"""

from enum import Enum
from typing import Dict, Tuple

from .sink import Role


class ByteCategory(Enum):
    NULL = "null"
    CONTROL = "control"
    PRINTABLE = "printable"
    NON_ASCII = "non_ascii"


class ControlSymbolMode(Enum):
    UNICODE = "unicode"
    """Control bytes drawn as Unicode control pictures U+2400 - U+241F"""
    ASCII_FALLBACK = "ascii_fallback"
    """Control bytes drawn as single code page 437 placeholders"""


CONTROL_PICTURES_BASE: int = 0x2400
"""Code point of the control picture for byte 0 (SYMBOL FOR NULL)"""

NON_ASCII_GLYPH: str = "."


def _cp437(value: int) -> str:
    return bytes((value,)).decode("cp437")


# code page 437 placeholders for control bytes
FALLBACK_NEWLINE: str = _cp437(191)  # ┐
FALLBACK_CARRIAGE_RETURN: str = _cp437(187)  # ╗
FALLBACK_TAB: str = _cp437(194)  # ┬
FALLBACK_NULL: str = _cp437(219)  # █
FALLBACK_OTHER: str = _cp437(250)  # ·

FALLBACK_GLYPHS: Dict[int, str] = {
    0: FALLBACK_NULL,
    9: FALLBACK_TAB,
    10: FALLBACK_NEWLINE,
    13: FALLBACK_CARRIAGE_RETURN,
}


def classify(value: int) -> ByteCategory:
    """Return the `ByteCategory` of byte `value` (0..255)."""
    if value == 0:
        return ByteCategory.NULL
    if value < 32:
        return ByteCategory.CONTROL
    if value < 255:
        return ByteCategory.PRINTABLE
    return ByteCategory.NON_ASCII


def glyph(value: int, mode: ControlSymbolMode) -> Tuple[Role, str]:
    """
    Return the role and the text drawn for byte `value` in the textual
    column.

    NULL is drawn like any other control byte here; only its hex token is
    styled differently.
    """
    if value < 32:
        if mode is ControlSymbolMode.UNICODE:
            return Role.NON_PRINTABLE, chr(CONTROL_PICTURES_BASE + value)
        return Role.NON_PRINTABLE, FALLBACK_GLYPHS.get(value, FALLBACK_OTHER)
    if value < 255:
        return Role.PRINTABLE, chr(value)
    return Role.NON_ASCII, NON_ASCII_GLYPH


def hex_token(value: int) -> Tuple[Role, str]:
    """two lower-case hex digits, dimmed for null bytes"""
    if classify(value) is ByteCategory.NULL:
        return Role.NULL, f"{value:02x}"
    return Role.PRINTABLE, f"{value:02x}"
