#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/compositing.py

from typing import Optional

from .color import Color, round_half_up
from .parser import as_color


def compose(foreground, background) -> Optional[Color]:
    """
    Alpha-blend a translucent foreground over an opaque background.

    Formula: C = Cfg * a + Cbg * (1 - a), per channel, rounded.
    The background's own alpha is ignored. An opaque foreground is
    returned unchanged.
    """
    fg = as_color(foreground)
    bg = as_color(background)
    if fg is None or bg is None:
        return None

    alpha = fg.a
    if alpha >= 1.0:
        return fg

    def blend(top: int, bottom: int) -> int:
        return round_half_up(top * alpha + bottom * (1 - alpha))

    return Color(blend(fg.r, bg.r), blend(fg.g, bg.g), blend(fg.b, bg.b), 1.0)
