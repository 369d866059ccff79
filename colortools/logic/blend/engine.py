#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/blend/engine.py

import argparse
import sys

from colortools.core.compositing import compose
from colortools.core.mixing import mix
from colortools.shared.logger import log
from .renderer import render_blend


def run_mix(args: argparse.Namespace) -> None:
    """Mix exactly two colors at the requested ratio."""
    colors = args.color or []
    if len(colors) != 2:
        log("error", "exactly two colors are required for a mix")
        log("info", "use -c COLOR twice")
        sys.exit(2)

    color1, color2 = colors
    result = mix(color1, color2, args.ratio)
    render_blend(
        [("color 1", color1), ("color 2", color2)],
        (f"mix {args.ratio:g}", result),
    )


def run_compose(args: argparse.Namespace) -> None:
    """Flatten a translucent foreground over its background."""
    result = compose(args.foreground, args.background)
    render_blend(
        [("foreground", args.foreground), ("background", args.background)],
        ("composed", result),
    )
