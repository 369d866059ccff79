#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/contrast/engine.py

import argparse
import sys
from typing import Dict, Any

from colortools.core import contrast as wcag
from colortools.core.compositing import compose
from .renderer import render_contrast_info


def get_contrast_data(args: argparse.Namespace) -> Dict[str, Any]:
    """Ratio, threshold and verdict for one foreground/background pair."""
    fg, bg = args.foreground, args.background

    if args.opaque:
        ratio = wcag.contrast_ratio(fg, bg)
        effective = fg.with_alpha(1.0)
    else:
        ratio = wcag.contrast_ratio_with_alpha(fg, bg)
        effective = compose(fg, bg)

    threshold = wcag.get_threshold(args.level, args.size)

    return {
        "foreground": fg,
        "background": bg,
        "effective": effective,
        "ratio": ratio,
        "threshold": threshold,
        "level": args.level,
        "size": args.size,
        "passed": ratio >= threshold,
    }


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the contrast check; exits 1 when the pair fails."""
    data = get_contrast_data(args)
    render_contrast_info(data)
    if not data["passed"]:
        sys.exit(1)
