#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/shared/preview.py

import os
import re
import sys

from colortools.core import config as c
from colortools.core.color import Color
from .formatting import normalize_color


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    hex_code = normalize_color(color, with_alpha=True)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{color.r};{color.g};{color.b}m                {c.RESET}  {c.BOLD_WHITE}{hex_code}{c.RESET}", end=end)


def ensure_truecolor() -> None:
    """Advertise 24-bit color support for the swatches (not needed on Windows)."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"
