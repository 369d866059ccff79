#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/color/engine.py

import argparse
from typing import Dict, Any

from colortools.core import config as c
from colortools.core import conversions as conv
from colortools.core.color import Color
from colortools.core.contrast import best_text_color_with_alpha, get_wcag_report
from colortools.core.luminance import relative_luminance
from .resolver import resolve_color_input
from .renderer import render_color_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the color command"""

    # If --all-tech-infos is used, activate every key in TECH_INFO_KEYS
    if getattr(args, "all_tech_infos", False):
        for key in c.TECH_INFO_KEYS:
            setattr(args, key, True)

    color, title = resolve_color_input(args)

    render_color_info(
        color=color,
        title=title,
        args=args,
        tech_data=get_color_data(color, args),
    )


def get_color_data(color: Color, args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the technical values requested on the command line."""
    data = {}

    if getattr(args, "hsl", False):
        data["hsl"] = conv.rgb_to_hsl(*color.rgb)
    if getattr(args, "luminance", False):
        data["luminance"] = relative_luminance(color)
    if getattr(args, "contrast", False):
        data["wcag"] = get_wcag_report(color)
    if getattr(args, "best_text", False):
        data["best_text"] = best_text_color_with_alpha(color)

    return data
