# messages.py
# -*- coding: utf-8 -*-
#

"""
Diagnostic messages printed to stderr.

The dump is written to stdout; everything printed here goes to stderr so
the two never mix when the dump is piped.
"""

import sys
from typing import LiteralString, Union

from colorist import Color

global PRINTS
PRINTS: bool = True
"""Set to `False` to disable warning and debug prints. Errors always print."""

global DEBUG
DEBUG: bool = False
"""Set to `True` to enable debug prints."""

global no_color
no_color: bool = False


def print_color(color: Union[str, LiteralString], *args, **kwargs):
    """
    Print to stderr with color.
    Wrapper for `print` to `stderr` and with color unless `no_color` is set.
    `args` and `kwargs` are passed to `print`.
    """
    global no_color
    if not no_color:
        print(f"{color}", end="", file=sys.stderr)
    # have to save `end` and print it later otherwise Color.OFF has no effect.
    end_val = "\n"
    if "end" in kwargs:
        end_val = kwargs["end"]
        del kwargs["end"]
    print(*args, end="", **kwargs, file=sys.stderr)
    if not no_color:
        print(f"{Color.OFF}", end=end_val, file=sys.stderr)
    else:
        print(end=end_val, file=sys.stderr)


def printe(*args, **kwargs):
    """
    Print Error.
    """
    print_color(Color.RED, *args, **kwargs)  # pyright: ignore[reportArgumentType]


def printw(*args, **kwargs):
    """
    Print Warning.
    """
    if PRINTS:
        print_color(Color.YELLOW, *args, **kwargs)  # pyright: ignore[reportArgumentType]


def printd(*args, **kwargs):
    """
    Print Debug.
    """
    if PRINTS and DEBUG:
        # Dark Gray
        print_color("\033[90m", *args, **kwargs)  # pyright: ignore[reportArgumentType]
