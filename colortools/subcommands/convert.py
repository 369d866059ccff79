#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/subcommands/convert.py

import argparse
import sys

from colortools.core import config as c
from colortools.shared.logger import ColortoolsArgumentParser
from colortools.shared.sanitizer import INPUT_HANDLERS
from colortools.logic.convert import engine


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ColortoolsArgumentParser(
        prog="colortools convert",
        description="colortools convert: render a color value in another notation",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    formats_list = " ".join(c.FORMAT_KEYS)
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        choices=c.FORMAT_KEYS,
        metavar="FORMAT",
        help=f"the format to convert to\nall formats: {formats_list}",
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-c",
        "--color",
        type=INPUT_HANDLERS["color"],
        help=(
            "color value to convert, in quotes when it contains spaces\n"
            "examples:\n"
            '  -c "#ff000080"\n'
            '  -c "rgb(255, 0, 0)"\n'
            '  -c "hsla(0, 100%%, 50%%, 0.5)"'
        ),
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="convert a random color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
