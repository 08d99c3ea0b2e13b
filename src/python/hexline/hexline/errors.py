# errors.py
# -*- coding: utf-8 -*-
#

"""
Exceptions raised by hexline.

`ConfigurationError` and `SeekError` are raised before any dump output is
written. `SourceReadError` is raised mid-stream; output already written is
left as-is.
"""


class HexlineError(Exception):
    """Base class of all hexline errors."""


class ConfigurationError(HexlineError, ValueError):
    """Invalid option or combination of options, e.g. `end <= start`."""


class SeekError(HexlineError):
    """The start offset is beyond the end of the byte source."""


class SourceReadError(HexlineError):
    """Reading a chunk from the byte source failed."""
