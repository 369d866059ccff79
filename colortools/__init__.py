#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/__init__.py

__version__ = "1.0.0"

from colortools.core.color import Color
from colortools.core.parser import parse_color, hex_to_rgb
from colortools.core.conversions import hsl_to_rgb, rgb_to_hsl
from colortools.core.luminance import relative_luminance
from colortools.core.contrast import (
    best_text_color,
    best_text_color_with_alpha,
    contrast_ratio,
    contrast_ratio_with_alpha,
    get_threshold,
    is_contrast_ok,
    is_contrast_ok_with_alpha,
)
from colortools.core.compositing import compose
from colortools.core.mixing import mix
from colortools.core.generator import random_color
from colortools.shared.formatting import format_color, normalize_color, rgb_to_hex

__all__ = [
    "Color",
    "parse_color",
    "hex_to_rgb",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hex",
    "normalize_color",
    "format_color",
    "relative_luminance",
    "contrast_ratio",
    "contrast_ratio_with_alpha",
    "get_threshold",
    "is_contrast_ok",
    "is_contrast_ok_with_alpha",
    "best_text_color",
    "best_text_color_with_alpha",
    "compose",
    "mix",
    "random_color",
]
