#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/widget/contrast_info.py

"""
Live contrast preview for a color picker field.

This mirrors what the picker computes in the browser while the user drags
the color, so its contract is deliberately narrower than the engine's:
only #rgb, #rrggbb and #rrggbbaa are understood, and thresholds come from a
plain table lookup.
"""

import re
from typing import NamedTuple, Optional

from colortools.core import config as c
from colortools.core.color import Color
from colortools.core.compositing import compose
from colortools.core.luminance import get_luminance
from colortools.shared.formatting import rgb_to_hex

_HEX_LONG_RE = re.compile(r"^#([0-9a-f]{6})([0-9a-f]{2})?$")
_HEX_SHORT_RE = re.compile(r"^#([0-9a-f]{3})$")

STATUS_PASS = "pass"
STATUS_FAIL = "fail"
STATUS_WARNING = "warning"

_STATUS_ICONS = {
    STATUS_PASS: "icon-check-circle",
    STATUS_FAIL: "icon-times-circle",
    STATUS_WARNING: "icon-exclamation-circle",
}


class ContrastStatus(NamedTuple):
    ratio: float
    status: str
    required_ratio: float

    @property
    def icon(self) -> str:
        return _STATUS_ICONS[self.status]

    @property
    def text(self) -> str:
        return f"{self.ratio:g}:1"


def should_calculate_contrast(role, compare_to, contrast_with) -> bool:
    return role is not None and (compare_to is not None or contrast_with is not None)


def resolve_compare_color(role, compare_to=None, contrast_with=None, linked_value=None) -> Optional[str]:
    """
    The color the field is checked against: a fixed `compare_to`, else the
    linked field's current value, else a fallback chosen by role.
    """
    if compare_to:
        return compare_to

    if contrast_with:
        if linked_value:
            return linked_value
        return c.FOREGROUND_FALLBACK if role == c.ROLE_FOREGROUND else c.BACKGROUND_FALLBACK

    return None


class ContrastInfo:
    def __init__(
        self,
        role: Optional[str] = None,
        compare_to: Optional[str] = None,
        contrast_with: Optional[str] = None,
        contrast_level: str = c.WCAG_DEFAULT_LEVEL,
        contrast_size: str = c.WCAG_DEFAULT_SIZE,
        contrast_required: bool = False,
    ):
        self.role = role
        self.compare_to = compare_to
        self.contrast_with = contrast_with
        self.contrast_level = contrast_level or c.WCAG_DEFAULT_LEVEL
        self.contrast_size = contrast_size or c.WCAG_DEFAULT_SIZE
        self.contrast_required = contrast_required is True

    @property
    def threshold(self) -> float:
        key = f"{self.contrast_level.upper()}-{self.contrast_size.lower()}"
        return c.WCAG_THRESHOLDS.get(key, c.WCAG_DEFAULT_THRESHOLD)

    @property
    def target_label(self) -> str:
        return c.TARGET_RATIO.format(ratio=f"{self.threshold:g}")

    @staticmethod
    def parse_color(value) -> Optional[Color]:
        """Hex only: #rrggbb, #rrggbbaa or #rgb."""
        if not value or not isinstance(value, str):
            return None

        value = value.strip().lower()

        m = _HEX_LONG_RE.match(value)
        if m:
            body, alpha = m.groups()
            r, g, b = (int(body[i : i + 2], 16) for i in (0, 2, 4))
            a = int(alpha, 16) / c.RGB_MAX if alpha else 1.0
            return Color(r, g, b, a)

        m = _HEX_SHORT_RE.match(value)
        if m:
            r, g, b = (int(ch * 2, 16) for ch in m.group(1))
            return Color(r, g, b)

        return None

    def calculate_contrast_ratio(self, color1, color2) -> Optional[float]:
        c1 = self.parse_color(color1)
        c2 = self.parse_color(color2)
        if c1 is None or c2 is None:
            return None

        if self.role == c.ROLE_FOREGROUND and c1.a < 1.0:
            c1 = compose(c1, c2)

        l1 = get_luminance(*c1.rgb)
        l2 = get_luminance(*c2.rgb)
        lighter, darker = max(l1, l2), min(l1, l2)
        return round((lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET), 2)

    def get_compare_color(self, linked_value: Optional[str] = None) -> Optional[str]:
        return resolve_compare_color(self.role, self.compare_to, self.contrast_with, linked_value)

    def swatch_color(self, color: str) -> str:
        """Color shown in the compare swatch; a foreground field drops the alpha."""
        if self.role == c.ROLE_FOREGROUND:
            parsed = self.parse_color(color)
            if parsed is not None:
                return rgb_to_hex(parsed)
        return color

    def validate(self, current: Optional[str], linked_value: Optional[str] = None) -> Optional[ContrastStatus]:
        """Status badge for the current value, or None when the badge is hidden."""
        compare = self.get_compare_color(linked_value)
        if not current or not compare:
            return None

        ratio = self.calculate_contrast_ratio(current, compare)
        if ratio is None:
            return None

        required = self.threshold
        if ratio >= required:
            status = STATUS_PASS
        elif self.contrast_required:
            status = STATUS_FAIL
        else:
            status = STATUS_WARNING
        return ContrastStatus(ratio, status, required)
