#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/generator.py

import random

from . import config as c
from .color import Color, round_half_up
from .conversions import hsl_to_rgb


def random_color(fancy: bool = False, rng=None) -> Color:
    """
    Generate an opaque random color.

    fancy=True keeps saturation and lightness fixed and only draws the hue,
    which gives vivid, balanced colors. Otherwise every channel is drawn
    independently, so black, white and greys are possible.

    `rng` is anything with the random.Random interface; the module-level
    generator is used when omitted (seed it with random.seed()).
    """
    if rng is None:
        rng = random

    if fancy:
        h = rng.random() * c.HUE_MAX
        r, g, b = hsl_to_rgb(h, c.FANCY_SATURATION, c.FANCY_LIGHTNESS)
        return Color(round_half_up(r), round_half_up(g), round_half_up(b))

    return Color(
        rng.randint(c.CHANNEL_MIN, c.CHANNEL_MAX),
        rng.randint(c.CHANNEL_MIN, c.CHANNEL_MAX),
        rng.randint(c.CHANNEL_MIN, c.CHANNEL_MAX),
    )
