#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/shared/sanitizer.py

import argparse
import math
import re
from typing import Optional

from colortools.core import config as c
from colortools.core.color import Color
from colortools.core.parser import parse_color

# First signed number in the string: "-12", "0.5", ".25", "3.", "1e-3"
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_INTEGER_RE = re.compile(r"^[-+]?\d+$")


def _sanitize_for_log(value) -> str:
    """Collapse whitespace and cap the length so raw input is safe to echo."""
    if value is None:
        return ""
    s = " ".join(str(value).split())
    if len(s) > 200:
        s = s[:197] + "..."
    return s


def _first_number(value) -> Optional[str]:
    m = _NUMBER_RE.search(str(value))
    return m.group(0) if m else None


def _letters_only(value) -> str:
    return "".join(re.findall(r"[a-z]", str(value).lower()))


def _reject(kind: str, value) -> argparse.ArgumentTypeError:
    return argparse.ArgumentTypeError(f"invalid {kind} value: '{_sanitize_for_log(value)}'")


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> Color:
    """Any color the engine parses: hex, rgb(a)(), hsl(a)() or transparent."""
    col = parse_color(v)
    if col is None:
        raise _reject("color", v)
    return col


def handle_keyword(v: str) -> str:
    """Lowercase keyword such as a format or size name; stray characters are dropped."""
    cleaned = _letters_only(v)
    if not cleaned:
        raise _reject("string", v)
    return cleaned


def handle_level(v: str) -> str:
    """WCAG level in any casing, returned as AA or AAA."""
    cleaned = _letters_only(v).upper()
    if cleaned not in c.WCAG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid WCAG level: '{_sanitize_for_log(v)}' (use {' or '.join(c.WCAG_LEVELS)})"
        )
    return cleaned


def handle_number_range(min_v: float, max_v: float, cast=float):
    """
    Factory returning a validator that reads the first number in the input,
    casts it and clamps it into [min_v, max_v].
    """
    def validator(v: str):
        num = _first_number(v)
        if num is None:
            raise _reject("integer" if cast is int else "float", v)
        if _INTEGER_RE.match(num):
            val = cast(num)
        else:
            f = float(num)
            if not math.isfinite(f):
                raise _reject("integer" if cast is int else "float", v)
            val = cast(f)
        return max(min_v, min(max_v, val))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color,
    "level": handle_level,
    "size": handle_keyword,
    "to_format": handle_keyword,
    "ratio": handle_number_range(0.0, 1.0),
    "seed": handle_number_range(0, c.MAX_SEED, cast=int),
}
