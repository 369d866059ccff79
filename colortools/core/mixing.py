#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/mixing.py

import math
from typing import Optional

from .color import Color
from .parser import as_color


def _lerp(a: float, b: float, t: float) -> float:
    if 0.0 <= t <= 1.0:
        # Weighted form: t == 0 yields a and t == 1 yields b exactly.
        return a * (1.0 - t) + b * t
    # Extrapolating: equal endpoints stay fixed, large ratios run to +-inf.
    return a + (b - a) * t


def mix(color1, color2, ratio: float = 0.5) -> Optional[Color]:
    """Linear interpolation in sRGB, alpha included (0 = color1, 1 = color2)."""
    c1 = as_color(color1)
    c2 = as_color(color2)
    if c1 is None or c2 is None:
        return None

    try:
        t = float(ratio)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(t):
        return None

    # Color clamps before rounding; ratios outside [0, 1] saturate.
    return Color(
        _lerp(c1.r, c2.r, t),
        _lerp(c1.g, c2.g, t),
        _lerp(c1.b, c2.b, t),
        _lerp(c1.a, c2.a, t),
    )
