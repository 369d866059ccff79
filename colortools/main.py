#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/main.py

import argparse
import sys

from colortools import __version__
from colortools.logic.color import engine
from colortools.subcommands.command_registry import SUBCOMMANDS
from colortools.shared.logger import log, ColortoolsArgumentParser
from colortools.shared.preview import ensure_truecolor
from colortools.shared.sanitizer import INPUT_HANDLERS


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = ColortoolsArgumentParser(
        prog="colortools",
        description="colortools: parse, inspect and check the contrast of color values",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"colortools {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-c",
        "--color",
        type=INPUT_HANDLERS["color"],
        help=(
            "color value, quoted when it contains spaces\n"
            "examples: '#ff0000', '#f008', 'rgb(255, 0, 0)',\n"
            "          'rgba(100%%, 0, 0, 0.5)', 'hsl(0, 100%%, 50%%)', transparent"
        ),
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate a random color",
    )
    parser.add_argument(
        "--fancy",
        action="store_true",
        help="with -r, draw only the hue (fixed saturation and lightness)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )

    # Technical Information Flags
    info_group = parser.add_argument_group("technical information flags")
    info_group.add_argument(
        "-all",
        "--all-tech-infos",
        action="store_true",
        help="show all technical information",
    )
    info_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars",
    )
    info_group.add_argument(
        "-rgb",
        "--red-green-blue",
        action="store_true",
        dest="rgb",
        help="show RGB(A) values",
    )
    info_group.add_argument(
        "-hsl",
        "--hue-saturation-lightness",
        action="store_true",
        dest="hsl",
        help="show HSL values",
    )
    info_group.add_argument(
        "-l",
        "--luminance",
        action="store_true",
        help="show relative luminance",
    )
    info_group.add_argument(
        "-wcag",
        "--contrast",
        action="store_true",
        help="show WCAG contrast against white and black",
    )
    info_group.add_argument(
        "-t",
        "--best-text",
        action="store_true",
        dest="best_text",
        help="show the most readable text color (black or white)",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args)


def main() -> None:
    """Main entry point for colortools CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
