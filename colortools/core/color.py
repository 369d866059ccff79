#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/color.py

"""Canonical color value shared by every engine module."""

import math
from dataclasses import dataclass

from . import config as c


def _clamp01(v: float) -> float:
    v = float(v)
    if v != v:
        return 0.0
    return max(0.0, min(c.ALPHA_MAX, v))


def _clamp255(v: float) -> int:
    v = float(v)
    if v != v:
        return 0
    return round_half_up(max(0.0, min(c.RGB_MAX, v)))


def round_half_up(v: float) -> int:
    """Round to the nearest integer, halves away from zero.

    The value is first rounded to 9 decimals so that float noise such as
    50 * 2.55 == 127.49999999999999 still counts as a half.
    """
    v = round(v, 9)
    if v < 0:
        return -int(math.floor(-v + 0.5))
    return int(math.floor(v + 0.5))


@dataclass(frozen=True)
class Color:
    """An sRGB color: integer channels in [0, 255], alpha in [0.0, 1.0].

    Channels are clamped when the instance is built, so a Color is never
    out of range.
    """

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "r", _clamp255(self.r))
        object.__setattr__(self, "g", _clamp255(self.g))
        object.__setattr__(self, "b", _clamp255(self.b))
        object.__setattr__(self, "a", _clamp01(self.a))

    @property
    def rgb(self):
        return self.r, self.g, self.b

    @property
    def is_opaque(self) -> bool:
        return self.a >= c.ALPHA_MAX

    def with_alpha(self, a: float) -> "Color":
        return Color(self.r, self.g, self.b, a)


TRANSPARENT = Color(0, 0, 0, 0.0)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
