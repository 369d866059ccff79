#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/parser.py

"""
String parsing for the color engine.

Accepted grammars (case-insensitive, surrounding whitespace ignored):

- transparent
- #rgb, #rgba, #rrggbb, #rrggbbaa
- rgb(r, g, b) / rgba(r, g, b, a), components as integers or percentages
- hsl(h, s, l) / hsla(h, s, l, a), s and l as percentages or fractions

Anything else yields None. Parsing never raises.
"""

import math
import re
from typing import List, Optional, Union

from . import config as c
from .color import Color, TRANSPARENT, round_half_up
from .conversions import hsl_to_rgb

ColorLike = Union[Color, str]

# Regex breakdown:
# #                -> Literal hash
# ([0-9a-f]{3,8})  -> 3 to 8 hex digits; lengths 5 and 7 are rejected later
_HEX_RE = re.compile(r"^#([0-9a-f]{3,8})$")

# rgb( ... ) or rgba( ... ) with everything between the parentheses captured
_RGB_RE = re.compile(r"^rgba?\s*\(\s*([^)]+?)\s*\)$")
_HSL_RE = re.compile(r"^hsla?\s*\(\s*([^)]+?)\s*\)$")

# [-+]?                -> Optional sign
# (?:\d+\.?\d*|\.\d+)  -> Integer ("12"), decimal ("0.5", ".5", "12.5")
# (?:[eE][-+]?\d+)?    -> Optional exponent
_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_NUMBER_RE = re.compile(rf"^{_NUMBER}$")
_PERCENT_RE = re.compile(rf"^({_NUMBER})\s*%$")


def _split_components(body: str) -> Optional[List[str]]:
    parts = [p.strip() for p in body.split(",")]
    if len(parts) not in (3, 4) or any(not p for p in parts):
        return None
    return parts


def _safe_float(s: str) -> Optional[float]:
    """Strict float conversion; None unless the whole token is a finite number."""
    if not _NUMBER_RE.match(s):
        return None
    v = float(s)
    if not math.isfinite(v):
        return None
    return v


def _parse_rgb_component(s: str) -> Optional[int]:
    """Integer channel, or percentage scaled by 2.55."""
    m = _PERCENT_RE.match(s)
    if m:
        v = _safe_float(m.group(1))
        if v is None:
            return None
        scaled = v * c.RGB_PERCENT_FACTOR
        if not math.isfinite(scaled):
            return None
        return round_half_up(scaled)
    v = _safe_float(s)
    if v is None:
        return None
    return int(v)


def _parse_percentage(s: str) -> Optional[float]:
    """Percentage divided by 100, or a bare fraction kept as is."""
    m = _PERCENT_RE.match(s)
    if m:
        v = _safe_float(m.group(1))
        return None if v is None else v / c.PERCENT_MAX
    return _safe_float(s)


def _parse_alpha(parts: List[str]) -> Optional[float]:
    if len(parts) < 4:
        return 1.0
    return _safe_float(parts[3])


def _parse_hex(body: str) -> Optional[Color]:
    n = len(body)
    if n in (3, 4):
        vals = [int(ch * 2, 16) for ch in body]
    elif n in (6, 8):
        vals = [int(body[i : i + 2], 16) for i in range(0, n, 2)]
    else:
        return None

    a = vals[3] / c.RGB_MAX if len(vals) == 4 else 1.0
    return Color(vals[0], vals[1], vals[2], a)


def _parse_rgb(body: str) -> Optional[Color]:
    parts = _split_components(body)
    if parts is None:
        return None
    channels = [_parse_rgb_component(p) for p in parts[:3]]
    a = _parse_alpha(parts)
    if any(ch is None for ch in channels) or a is None:
        return None
    return Color(channels[0], channels[1], channels[2], a)


def _parse_hsl(body: str) -> Optional[Color]:
    parts = _split_components(body)
    if parts is None:
        return None
    h = _safe_float(parts[0])
    s = _parse_percentage(parts[1])
    L = _parse_percentage(parts[2])
    a = _parse_alpha(parts)
    if h is None or s is None or L is None or a is None:
        return None

    r, g, b = hsl_to_rgb(h, s, L)
    if not all(math.isfinite(ch) for ch in (r, g, b)):
        return None
    return Color(round_half_up(r), round_half_up(g), round_half_up(b), a)


def parse_color(value) -> Optional[Color]:
    """Parse a color string into a Color, or None when it is not recognized."""
    if not isinstance(value, str):
        return None

    v = value.strip().lower()
    if not v:
        return None

    if v == "transparent":
        return TRANSPARENT

    m = _HEX_RE.match(v)
    if m:
        return _parse_hex(m.group(1))

    m = _RGB_RE.match(v)
    if m:
        return _parse_rgb(m.group(1))

    m = _HSL_RE.match(v)
    if m:
        return _parse_hsl(m.group(1))

    return None


def hex_to_rgb(hex_code: str) -> Optional[Color]:
    """Convert a hex string to a Color (alias of parse_color)."""
    return parse_color(hex_code)


def as_color(value: ColorLike) -> Optional[Color]:
    """Accept an already parsed Color or a raw string; anything else is invalid."""
    if isinstance(value, Color):
        return value
    return parse_color(value)
