#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/subcommands/compose.py

import argparse
import sys

from colortools.shared.logger import ColortoolsArgumentParser
from colortools.shared.sanitizer import INPUT_HANDLERS
from colortools.logic.blend.engine import run_compose


def get_compose_parser() -> argparse.ArgumentParser:
    """Create argument parser for compose command."""
    parser = ColortoolsArgumentParser(
        prog="colortools compose",
        description="colortools compose: flatten a translucent color over a background",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="color to composite, e.g. '#ff000080' or 'rgba(255, 0, 0, 0.5)'",
    )
    parser.add_argument(
        "-bg",
        "--background",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="backdrop color (alpha is ignored)",
    )
    return parser


def main() -> None:
    """Main entry point for compose command."""
    parser = get_compose_parser()
    args = parser.parse_args(sys.argv[1:])
    run_compose(args)


if __name__ == "__main__":
    main()
