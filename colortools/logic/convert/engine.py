#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/convert/engine.py

import argparse
import random

from colortools.core import config as c
from colortools.core.generator import random_color
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    if args.seed is not None:
        random.seed(args.seed)

    color = random_color() if args.random else args.color

    out = render_convert_info(color, args.to_format)

    if args.verbose:
        src = render_convert_info(color, "hexa")
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
    else:
        print(out)
