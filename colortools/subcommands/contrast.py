#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/subcommands/contrast.py

import argparse
import sys

from colortools.core import config as c
from colortools.shared.logger import ColortoolsArgumentParser
from colortools.shared.sanitizer import INPUT_HANDLERS
from colortools.logic.contrast import engine


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ColortoolsArgumentParser(
        prog="colortools contrast",
        description=(
            "colortools contrast: check a foreground/background pair against WCAG\n"
            "exits with status 1 when the pair fails"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="text color; a translucent value is composited over the background",
    )
    parser.add_argument(
        "-bg",
        "--background",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="background color (alpha is ignored)",
    )
    parser.add_argument(
        "-L",
        "--level",
        default=c.WCAG_DEFAULT_LEVEL,
        type=INPUT_HANDLERS["level"],
        help="WCAG level: AA or AAA (default: AA)",
    )
    parser.add_argument(
        "-z",
        "--size",
        default=c.WCAG_DEFAULT_SIZE,
        type=INPUT_HANDLERS["size"],
        choices=c.WCAG_SIZES,
        help="text size: normal, large or ui (default: normal)",
    )
    parser.add_argument(
        "--opaque",
        action="store_true",
        help="ignore the foreground alpha instead of compositing it",
    )
    return parser


def main() -> None:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    engine.run(args)


if __name__ == "__main__":
    main()
