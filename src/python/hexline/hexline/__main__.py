# __main__.py
# -*- coding: utf-8 -*-
#

r"""
Print a file as rows of hex bytes with a textual column.

    0x0010: 48 65 6c 6c 6f 2c 20 77 | 6f 72 6c 64 21 0a 00 ff  |Hello, world!␊␀.|

Control bytes are drawn as Unicode control pictures, or with --utf8 as
single placeholder characters. Byte 0xff is drawn as a dot.

Numbers may be given in decimal or with a 0x prefix.
The dump stops after --nlines rows or at the --end offset, whichever
comes first.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__, messages
from .classify import ControlSymbolMode
from .config import GROUP_SIZE_DEFAULT, ROW_WIDTH_DEFAULT, Configuration
from .errors import ConfigurationError, SeekError, SourceReadError
from .formatter import StreamFormatter
from .messages import printd, printe, printw
from .sink import make_sink, utf8_console
from .source import STDIN_PATH, FileByteSource


def parse_int(value: str) -> int:
    """decimal or `0x` prefixed hexadecimal"""
    base = 10
    if value.lower().startswith("0x"):
        base = 16
    try:
        return int(value, base=base)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number {value!r}")


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexline",
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "file",
        type=str,
        action="store",
        help=f"File to read ({STDIN_PATH!r} for standard input)",
    )
    parser.add_argument(
        "-s",
        "--start",
        type=parse_int,
        action="append",
        default=None,
        help="Byte offset to start at. (default: 0)",
    )
    parser.add_argument(
        "-e",
        "--end",
        type=parse_int,
        action="append",
        default=None,
        help="Byte offset to end at. (default: end of file)",
    )
    parser.add_argument(
        "-n",
        "--nlines",
        type=parse_int,
        default=0,
        help="Number of lines to print. (default: no limit)",
    )
    parser.add_argument(
        "-l",
        "--line_length",
        type=parse_int,
        default=ROW_WIDTH_DEFAULT,
        help=f"Number of bytes to print per line. (default: {ROW_WIDTH_DEFAULT})",
    )
    parser.add_argument(
        "-i",
        "--intermed_line",
        type=parse_int,
        default=GROUP_SIZE_DEFAULT,
        help="Number of bytes to print between spacer lines, 0 for none. "
             f"(default: {GROUP_SIZE_DEFAULT})",
    )
    parser.add_argument(
        "-d",
        "--decimal_address",
        action="store_true",
        help="Print start-of-line address in decimal instead of hex.",
    )
    parser.add_argument(
        "-g",
        "--disable_color",
        action="store_true",
        help="Disable color output (useful for piping output to readable file).",
    )
    parser.add_argument(
        "-t",
        "--utf8",
        action="store_true",
        help="Don't display control characters as unicode control symbols.\n"
             "Useful for piping output to readable file.",
    )
    parser.add_argument(
        "--no-prints",
        action="store_true",
        help="Disable warning and informational prints to stderr",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug messages to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configuration_from_args(args: argparse.Namespace) -> Configuration:
    """
    Build the `Configuration` from parsed arguments.
    For repeated --start or --end options the last one wins.
    """
    mode = ControlSymbolMode.ASCII_FALLBACK if args.utf8 else ControlSymbolMode.UNICODE
    return Configuration(
        start_offset=args.start[-1] if args.start else 0,
        end_offset=args.end[-1] if args.end else None,
        max_rows=args.nlines,
        row_width=args.line_length,
        group_size=args.intermed_line,
        decimal_addresses=args.decimal_address,
        color_enabled=not args.disable_color,
        control_symbol_mode=mode,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    messages.no_color = args.disable_color
    messages.PRINTS = not args.no_prints
    messages.DEBUG = args.debug

    try:
        config = configuration_from_args(args)
    except ConfigurationError as ex:
        printe(f"ERROR: {ex}")
        return 1
    printd(f"DEBUG: {config}")

    if args.file != STDIN_PATH:
        path = Path(args.file)
        if not path.is_file():
            printe(f"ERROR: path '{path}' is not a file")
            return 1

    stdout = sys.stdout
    unicode_glyphs = config.control_symbol_mode is ControlSymbolMode.UNICODE
    sink = make_sink(stdout, config.color_enabled)
    try:
        with FileByteSource(args.file) as source, utf8_console(stdout, unicode_glyphs):
            formatter = StreamFormatter(config, sink)
            formatter.run(source)
    except SeekError as ex:
        printe(f"ERROR: {ex}")
        return 1
    except SourceReadError as ex:
        sink.flush()
        printe(f"ERROR: {ex}")
        return 1
    except OSError as ex:
        printe(f"ERROR: cannot open '{args.file}': {ex}")
        return 1

    if formatter.bytes_rendered == 0 and config.start_offset == 0:
        printw(f"WARNING: File is empty {args.file}")
    if sink.write_errors:
        printw(f"WARNING: {sink.write_errors} writes to stdout failed")
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
