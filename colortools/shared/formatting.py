#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/shared/formatting.py

from typing import Optional

from colortools.core.color import round_half_up
from colortools.core.conversions import channels_to_hex, rgb_to_hsl
from colortools.core.parser import as_color


def rgb_to_hex(value) -> Optional[str]:
    """Render a Color (or a color string, parsed first) as lowercase '#rrggbb'."""
    col = as_color(value)
    if col is None:
        return None
    return "#" + channels_to_hex(col.r, col.g, col.b)


def normalize_color(value, with_alpha: bool = False) -> Optional[str]:
    """
    Normalize any supported color string to '#rrggbb'.

    With with_alpha=True a translucent color gets a two-digit alpha suffix
    ('#rrggbbaa'); opaque colors never do.
    """
    col = as_color(value)
    if col is None:
        return None

    hex_code = "#" + channels_to_hex(col.r, col.g, col.b)
    if with_alpha and col.a < 1.0:
        hex_code += f"{round_half_up(col.a * 255):02x}"
    return hex_code


def format_colorspace(fmt: str, *args) -> str:
    """
    Format channel values into CSS-like text.

    Args:
        fmt (str): 'rgb', 'rgba' or 'hsl'.
        *args: r, g, b (and a) for rgb/rgba; h, s, l (s and l in percent) for hsl.

    Returns:
        str: The formatted text, or an empty string for an unknown format.
    """
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'rgba':
        return f"rgba({args[0]}, {args[1]}, {args[2]}, {args[3]:.2f})"
    elif fmt == 'hsl':
        h, s, l = (round_half_up(v) for v in args)
        return f"hsl({h}, {s}%, {l}%)"

    return ""


def format_color(value, fmt: str, alpha: Optional[float] = None) -> Optional[str]:
    """Parse `value` and render it as hex, hexa, rgb, rgba or hsl text."""
    col = as_color(value)
    if col is None:
        return None

    if fmt == 'hex':
        return normalize_color(col)
    if fmt == 'hexa':
        return normalize_color(col, with_alpha=True)
    if fmt == 'rgb':
        return format_colorspace('rgb', col.r, col.g, col.b)
    if fmt == 'rgba':
        a = col.a if alpha is None else max(0.0, min(1.0, float(alpha)))
        return format_colorspace('rgba', col.r, col.g, col.b, a)
    if fmt == 'hsl':
        return format_colorspace('hsl', *rgb_to_hsl(col.r, col.g, col.b))

    return None
