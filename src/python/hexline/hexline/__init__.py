# __init__.py
# -*- coding: utf-8 -*-
#

__version__ = "0.3.0"
"""
hexline version string
Must match pyproject.toml
"""

from .classify import ByteCategory, ControlSymbolMode, classify, glyph  # noqa: E402
from .config import Configuration  # noqa: E402
from .errors import (  # noqa: E402
    ConfigurationError,
    HexlineError,
    SeekError,
    SourceReadError,
)
from .formatter import READ_SIZE, StreamFormatter, format_bytes  # noqa: E402
from .sink import ColorSink, PlainSink, Role, make_sink  # noqa: E402
from .source import FileByteSource  # noqa: E402

__all__ = [
    "__version__",
    "ByteCategory",
    "ColorSink",
    "Configuration",
    "ConfigurationError",
    "ControlSymbolMode",
    "FileByteSource",
    "HexlineError",
    "PlainSink",
    "READ_SIZE",
    "Role",
    "SeekError",
    "SourceReadError",
    "StreamFormatter",
    "classify",
    "format_bytes",
    "glyph",
    "make_sink",
]
