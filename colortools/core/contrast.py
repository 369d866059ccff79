#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/contrast.py

from typing import Optional

from . import config as c
from .color import BLACK, WHITE
from .compositing import compose
from .luminance import get_luminance
from .parser import as_color


def _ratio_from_luminance(l1: float, l2: float) -> float:
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    ratio = (lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET)
    return round(ratio, c.WCAG_RATIO_DECIMALS)


def contrast_ratio(color1, color2) -> Optional[float]:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors, in [1, 21].

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), L1 being the lighter luminance.
    Alpha is ignored.
    """
    c1 = as_color(color1)
    c2 = as_color(color2)
    if c1 is None or c2 is None:
        return None
    return _ratio_from_luminance(get_luminance(*c1.rgb), get_luminance(*c2.rgb))


def contrast_ratio_with_alpha(foreground, background) -> Optional[float]:
    """Contrast ratio after compositing a translucent foreground over the background."""
    fg = as_color(foreground)
    bg = as_color(background)
    if fg is None or bg is None:
        return None

    if fg.a < 1.0:
        fg = compose(fg, bg)

    return contrast_ratio(fg, bg)


def get_threshold(level: str = c.WCAG_DEFAULT_LEVEL, size: str = c.WCAG_DEFAULT_SIZE) -> float:
    """
    Minimum WCAG ratio for a level (AA, AAA) and a size (normal, large, ui).

    Both keys are case-insensitive. An unknown size falls back to the level's
    normal threshold; an unknown level falls back to 4.5.
    """
    level = str(level).strip().upper()
    size = str(size).strip().lower()

    if level not in c.WCAG_LEVELS:
        return c.WCAG_DEFAULT_THRESHOLD
    if size not in c.WCAG_SIZES:
        size = c.WCAG_DEFAULT_SIZE

    return c.WCAG_THRESHOLDS.get(f"{level}-{size}", c.WCAG_DEFAULT_THRESHOLD)


def is_contrast_ok(
    foreground,
    background,
    level: str = c.WCAG_DEFAULT_LEVEL,
    size: str = c.WCAG_DEFAULT_SIZE,
) -> Optional[bool]:
    ratio = contrast_ratio(foreground, background)
    if ratio is None:
        return None
    return ratio >= get_threshold(level, size)


def is_contrast_ok_with_alpha(
    foreground,
    background,
    level: str = c.WCAG_DEFAULT_LEVEL,
    size: str = c.WCAG_DEFAULT_SIZE,
) -> Optional[bool]:
    ratio = contrast_ratio_with_alpha(foreground, background)
    if ratio is None:
        return None
    return ratio >= get_threshold(level, size)


def best_text_color(background) -> Optional[str]:
    """Black or white, whichever contrasts more with the background. Ties go to black."""
    ratio_black = contrast_ratio(background, BLACK)
    ratio_white = contrast_ratio(background, WHITE)
    if ratio_black is None or ratio_white is None:
        return None
    return c.BLACK_HEX if ratio_black >= ratio_white else c.WHITE_HEX


def best_text_color_with_alpha(background, underlying=c.DEFAULT_UNDERLYING) -> Optional[str]:
    """Like best_text_color, compositing a translucent background over `underlying` first."""
    bg = as_color(background)
    if bg is None:
        return None

    if bg.a < 1.0:
        bg = compose(bg, underlying)
        if bg is None:
            return None

    return best_text_color(bg)


def get_wcag_report(color) -> Optional[dict]:
    """
    Contrast of a color against pure white and pure black, with a pass/fail
    entry for every level/size pair of the WCAG 2.x table.
    """
    col = as_color(color)
    if col is None:
        return None

    def get_pass_fail(ratio: float) -> dict:
        return {
            key: "Pass" if ratio >= threshold else "Fail"
            for key, threshold in c.WCAG_THRESHOLDS.items()
        }

    ratio_white = contrast_ratio(col, WHITE)
    ratio_black = contrast_ratio(col, BLACK)

    return {
        "white": {"ratio": ratio_white, "levels": get_pass_fail(ratio_white)},
        "black": {"ratio": ratio_black, "levels": get_pass_fail(ratio_black)},
    }
