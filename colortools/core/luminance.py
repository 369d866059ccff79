#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/luminance.py

from typing import Optional

from . import config as c
from .color import _clamp01
from .parser import as_color


def _srgb_to_linear(channel: int) -> float:
    """Linearize an 8-bit sRGB channel (WCAG 2.0 piecewise function)."""
    v = _clamp01(channel / c.RGB_MAX)
    if v <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * _srgb_to_linear(r) +
        c.LUMA_G * _srgb_to_linear(g) +
        c.LUMA_B * _srgb_to_linear(b)
    )


def relative_luminance(color) -> Optional[float]:
    """WCAG relative luminance in [0, 1], or None for an invalid color."""
    col = as_color(color)
    if col is None:
        return None
    return get_luminance(col.r, col.g, col.b)
