#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/conversions.py

import math
from typing import Tuple

from . import config as c


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL to unrounded RGB channels on a 0-255 scale.

    Saturation and lightness above 1 are read as percentages.
    """
    h = math.fmod(float(h), c.HUE_MAX)
    if h < 0:
        h += c.HUE_MAX

    s = float(s)
    L = float(L)
    if s > 1:
        s = s / c.PERCENT_MAX
    if L > 1:
        L = L / c.PERCENT_MAX

    chroma = (1 - abs(2 * L - 1)) * s
    x = chroma * (1 - abs(math.fmod(h / c.HUE_SECTOR, 2) - 1))
    m = L - chroma / 2

    if h < 60:
        r_p, g_p, b_p = chroma, x, 0
    elif h < 120:
        r_p, g_p, b_p = x, chroma, 0
    elif h < 180:
        r_p, g_p, b_p = 0, chroma, x
    elif h < 240:
        r_p, g_p, b_p = 0, x, chroma
    elif h < 300:
        r_p, g_p, b_p = x, 0, chroma
    else:
        r_p, g_p, b_p = chroma, 0, x

    return (r_p + m) * c.RGB_MAX, (g_p + m) * c.RGB_MAX, (b_p + m) * c.RGB_MAX


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSL with hue in degrees and s/l in percent (2 decimals)."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / 2

    if cmax == cmin:
        h = s = 0.0
    else:
        delta = cmax - cmin
        s = delta / (2 - cmax - cmin) if L > 0.5 else delta / (cmax + cmin)
        if cmax == r_f:
            h = (g_f - b_f) / delta + (6 if g_f < b_f else 0)
        elif cmax == g_f:
            h = (b_f - r_f) / delta + 2
        else:
            h = (r_f - g_f) / delta + 4
        h = h * c.HUE_SECTOR

    return (
        round(h, c.HSL_DECIMALS),
        round(s * c.PERCENT_MAX, c.HSL_DECIMALS),
        round(L * c.PERCENT_MAX, c.HSL_DECIMALS),
    )


def channels_to_hex(r: int, g: int, b: int) -> str:
    """Two lowercase hex digits per channel, without the leading '#'."""
    return f"{r:02x}{g:02x}{b:02x}"
