#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/filters.py

"""
String-in, string/float/bool-out helpers for template engines and other
callers that never handle Color objects directly.

Every helper returns None when a color argument cannot be parsed.

Registration example (Jinja2):

    env.filters.update(FILTERS)
    env.globals.update(FUNCTIONS)
"""

import math
from typing import Optional

from colortools.core import config as c
from colortools.core.compositing import compose
from colortools.core.contrast import (
    best_text_color_with_alpha,
    contrast_ratio_with_alpha,
    is_contrast_ok_with_alpha,
)
from colortools.core.generator import random_color
from colortools.core.luminance import relative_luminance
from colortools.core.mixing import mix
from colortools.shared.formatting import format_color, normalize_color, rgb_to_hex


def to_hex(color) -> Optional[str]:
    """'rgb(255,0,0)' -> '#ff0000'"""
    return normalize_color(color, with_alpha=False)


def to_rgb(color) -> Optional[str]:
    """'#ff0000' -> 'rgb(255, 0, 0)'"""
    return format_color(color, "rgb")


def to_rgba(color, alpha=None) -> Optional[str]:
    """
    '#ff0000' -> 'rgba(255, 0, 0, 1.00)'

    An explicit alpha (clamped to [0, 1]) overrides the color's own alpha.
    """
    if alpha is not None:
        try:
            alpha = float(alpha)
        except (TypeError, ValueError):
            return None
        if math.isnan(alpha):
            return None
    return format_color(color, "rgba", alpha=alpha)


def to_hsl(color) -> Optional[str]:
    """'#ff0000' -> 'hsl(0, 100%, 50%)'"""
    return format_color(color, "hsl")


def luminance(color) -> Optional[float]:
    return relative_luminance(color)


def contrast_ratio(foreground, background) -> Optional[float]:
    return contrast_ratio_with_alpha(foreground, background)


def best_text_color(background, underlying=c.DEFAULT_UNDERLYING) -> Optional[str]:
    return best_text_color_with_alpha(background, underlying)


def color_mix(color1, color2, ratio: float = 0.5) -> Optional[str]:
    return rgb_to_hex(mix(color1, color2, ratio))


def color_compose(foreground, background) -> Optional[str]:
    return rgb_to_hex(compose(foreground, background))


def is_contrast_ok(
    foreground,
    background,
    level: str = c.WCAG_DEFAULT_LEVEL,
    size: str = c.WCAG_DEFAULT_SIZE,
) -> Optional[bool]:
    return is_contrast_ok_with_alpha(foreground, background, level, size)


def color_random(fancy: bool = False, rng=None) -> str:
    return rgb_to_hex(random_color(fancy, rng=rng))


FILTERS = {
    "to_hex": to_hex,
    "to_rgb": to_rgb,
    "to_rgba": to_rgba,
    "to_hsl": to_hsl,
    "luminance": luminance,
    "contrast_ratio": contrast_ratio,
    "best_text_color": best_text_color,
}

FUNCTIONS = {
    "color_mix": color_mix,
    "color_compose": color_compose,
    "is_contrast_ok": is_contrast_ok,
    "color_random": color_random,
}
