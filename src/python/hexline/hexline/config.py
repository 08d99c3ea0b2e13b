# config.py
# -*- coding: utf-8 -*-
#

"""
Resolved dump configuration.

A `Configuration` is built once, from command-line options or by a library
caller, and is read-only afterwards. It is passed explicitly to the
formatter and renderer.
"""

from dataclasses import dataclass, field
from typing import Optional

from .classify import ControlSymbolMode
from .errors import ConfigurationError

ROW_WIDTH_DEFAULT: int = 16
GROUP_SIZE_DEFAULT: int = 8


@dataclass(frozen=True)
class Configuration:
    start_offset: int = 0
    end_offset: Optional[int] = None
    """exclusive; `None` is unbounded"""
    max_rows: Optional[int] = None
    """`None` or `0` is unlimited"""
    row_width: int = ROW_WIDTH_DEFAULT
    group_size: int = GROUP_SIZE_DEFAULT
    """`0` is normalized to `row_width` (no visible grouping)"""
    decimal_addresses: bool = False
    color_enabled: bool = True
    control_symbol_mode: ControlSymbolMode = field(default=ControlSymbolMode.UNICODE)

    def __post_init__(self):
        if self.start_offset < 0:
            raise ConfigurationError(f"start offset must not be negative, got {self.start_offset}")
        if self.end_offset is not None:
            if self.end_offset < 0:
                raise ConfigurationError(f"end offset must not be negative, got {self.end_offset}")
            if self.end_offset <= self.start_offset:
                raise ConfigurationError("end offset must be greater than start offset if defined")
        if self.row_width < 1:
            raise ConfigurationError(f"line length must be at least 1, got {self.row_width}")
        if self.group_size < 0:
            raise ConfigurationError(f"intermediate line size must not be negative, got {self.group_size}")
        if self.max_rows is not None and self.max_rows < 0:
            raise ConfigurationError(f"number of lines must not be negative, got {self.max_rows}")
        # frozen dataclass; normalize through object.__setattr__
        if self.group_size == 0:
            object.__setattr__(self, "group_size", self.row_width)
        if self.max_rows == 0:
            object.__setattr__(self, "max_rows", None)

    @property
    def rows_limited(self) -> bool:
        return self.max_rows is not None

    @property
    def end_bounded(self) -> bool:
        return self.end_offset is not None
