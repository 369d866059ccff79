#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/subcommands/mix.py

import argparse
import sys

from colortools.shared.logger import ColortoolsArgumentParser
from colortools.shared.sanitizer import INPUT_HANDLERS
from colortools.logic.blend.engine import run_mix


def get_mix_parser() -> argparse.ArgumentParser:
    """Create argument parser for mix command."""
    parser = ColortoolsArgumentParser(
        prog="colortools mix",
        description="colortools mix: interpolate between two colors in sRGB",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--color",
        action="append",
        type=INPUT_HANDLERS["color"],
        help="use -c COLOR twice for the two inputs",
    )
    parser.add_argument(
        "-R",
        "--ratio",
        type=INPUT_HANDLERS["ratio"],
        default=0.5,
        help="weight of the second color, 0 to 1 (default: 0.5)",
    )
    return parser


def main() -> None:
    """Main entry point for mix command."""
    parser = get_mix_parser()
    args = parser.parse_args(sys.argv[1:])
    run_mix(args)


if __name__ == "__main__":
    main()
