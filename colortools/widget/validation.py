#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/widget/validation.py

from typing import Optional

from colortools.core import config as c
from colortools.core.contrast import (
    contrast_ratio,
    contrast_ratio_with_alpha,
    is_contrast_ok,
    is_contrast_ok_with_alpha,
)
from colortools.shared.logger import log


class ContrastValidationError(ValueError):
    """Raised when a required contrast check fails on save."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def validate_contrast(
    value,
    compare_color,
    role: Optional[str],
    level: str = c.WCAG_DEFAULT_LEVEL,
    size: str = c.WCAG_DEFAULT_SIZE,
    required: bool = False,
    label: str = "color",
    field: Optional[str] = None,
) -> Optional[str]:
    """
    Check a submitted color against its compare color.

    A foreground keeps its alpha (composited over the compare color); any
    other role is treated as opaque. Returns the warning message when the
    check fails and is not required, None when it passes or cannot be
    computed. Raises ContrastValidationError when it fails and is required.
    """
    if not compare_color:
        return None

    if role == c.ROLE_FOREGROUND:
        is_valid = is_contrast_ok_with_alpha(value, compare_color, level, size)
        ratio = contrast_ratio_with_alpha(value, compare_color)
    else:
        is_valid = is_contrast_ok(value, compare_color, level, size)
        ratio = contrast_ratio(value, compare_color)

    if is_valid or ratio is None:
        return None

    message = c.CONTRAST_INSUFFICIENT.format(label=label, ratio=f"{ratio:g}")
    if required:
        raise ContrastValidationError(field or label, message)

    log("warning", message)
    return message
