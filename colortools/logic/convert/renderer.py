#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/convert/renderer.py

from colortools.core import config as c
from colortools.core.color import Color
from colortools.shared.formatting import format_color


def render_convert_info(color: Color, fmt: str) -> str:
    """Composes a color into a formatted output string."""
    text = format_color(color, fmt)
    return f"{c.BOLD_WHITE}{text}{c.RESET}" if text else ""
