#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/blend/renderer.py

from typing import List, Tuple

from colortools.core import config as c
from colortools.core.color import Color
from colortools.shared.preview import print_color_block


def render_blend(inputs: List[Tuple[str, Color]], result: Tuple[str, Color]) -> None:
    """Print the input swatches followed by the blended result."""
    print()
    for label, color in inputs:
        print_color_block(color, f"{c.BOLD_WHITE}{label}{c.RESET}")
    print()
    label, color = result
    print_color_block(color, f"{c.MSG_BOLD_COLORS['success']}{label}{c.RESET}")
    print()
