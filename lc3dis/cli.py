"""Command line entry point: ``lc3dis [-x | -b] [-a] [-o OFFSET] <file>``."""

import argparse
import sys
from typing import List, Optional

from lc3dis import __version__
from lc3dis.constants import DEFAULT_ORIGIN, WORD_MASK
from lc3dis.listing import HEX, BINARY, ListingConfig, disassemble_lines, disassemble_text
from lc3dis.logging import ConsoleLogger

DESCRIPTION = """\
Convert hexadecimal or binary LC-3 machine code into readable, assembly-like
text. The output is meant for debugging and is not guaranteed to be valid
assembly.

The input may be standard input, given as a dash: '-'. Reading stops at the
first empty line in that case. Empty lines in a file are ignored."""


def _origin(value: str) -> int:
    text = value[1:] if value[:1] in ("x", "X") else value
    try:
        return int(text, 16) & WORD_MASK
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hexadecimal offset: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lc3dis",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-x",
        dest="radix",
        action="store_const",
        const=HEX,
        default=HEX,
        help="Hexadecimal input, one number per line (default)",
    )
    mode.add_argument(
        "-b",
        dest="radix",
        action="store_const",
        const=BINARY,
        help="Binary input, one number per line",
    )
    parser.add_argument(
        "-a",
        dest="assembly_only",
        action="store_true",
        help="Only print the assembly, not the address and machine code",
    )
    parser.add_argument(
        "-o",
        dest="origin",
        type=_origin,
        default=DEFAULT_ORIGIN,
        metavar="OFFSET",
        help="Address of the first instruction in hexadecimal (default: 3000)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while reading a file",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input", nargs="?", help="Input file, or '-' for standard input")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.verbose else "ERROR" if args.quiet else "WARNING"
    logger = ConsoleLogger(log_level=log_level)

    if args.input is None:
        logger.error("no input file")
        print(parser.format_usage(), end="", file=sys.stderr)
        print(f"Type '{parser.prog} -h' for help", file=sys.stderr)
        return 1

    config = ListingConfig(
        radix=args.radix,
        origin=args.origin,
        assembly_only=args.assembly_only,
        stop_on_blank=args.input == "-",
    )
    logger.debug(f"Listing origin x{config.origin:04X}, radix {config.radix}")

    if args.input == "-":
        for line in disassemble_lines(sys.stdin, config, logger):
            print(line, flush=True)
        return 0

    try:
        with open(args.input, "r") as f:
            output = disassemble_text(f, config, logger, show_progress=args.progress)
    except OSError as e:
        logger.error(f"cannot read {args.input}: {e.strerror or e}")
        return 1

    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
