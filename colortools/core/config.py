#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Standard Scaling Constants
RGB_MAX = 255.0                    # 8-bit color depth limit
ALPHA_MAX = 1.0                    # Fully opaque
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
PERCENT_MAX = 100.0                # Divisor for percentage components
RGB_PERCENT_FACTOR = 2.55          # "50%" -> round(50 * 2.55) for rgb() components
HSL_DECIMALS = 2                   # Precision of rgb_to_hsl output

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# sRGB Transfer Function Constants (Source: https://www.w3.org/TR/WCAG20/#relativeluminancedef)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.03928        # WCAG 2.0 threshold for switching to the power segment

# WCAG Contrast (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_RATIO_DECIMALS = 2            # Contrast ratios are reported with 2 decimals
WCAG_DEFAULT_THRESHOLD = 4.5       # Used for unknown level/size combinations
WCAG_DEFAULT_LEVEL = "AA"
WCAG_DEFAULT_SIZE = "normal"

WCAG_LEVELS = ("AA", "AAA")
WCAG_SIZES = ("normal", "large", "ui")

WCAG_THRESHOLDS = {
    "AA-normal": 4.5,              # Minimum contrast for normal text
    "AA-large": 3.0,               # Minimum contrast for large text
    "AA-ui": 3.0,                  # Graphical objects and UI components
    "AAA-normal": 7.0,             # Enhanced contrast for normal text
    "AAA-large": 4.5,              # Enhanced contrast for large text
    "AAA-ui": 3.0,                 # AAA defines nothing stricter for UI
}

# Reference colors
BLACK_HEX = "#000000"
WHITE_HEX = "#ffffff"
DEFAULT_UNDERLYING = WHITE_HEX     # Backdrop for translucent backgrounds

# Random generation ("fancy" mode keeps a fixed, pleasant saturation/lightness band)
FANCY_SATURATION = 0.7
FANCY_LIGHTNESS = 0.6
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# ==========================================
# Widget Defaults
# ==========================================

ROLE_FOREGROUND = "foreground"
FOREGROUND_FALLBACK = WHITE_HEX    # Compare color when a foreground field has no linked value
BACKGROUND_FALLBACK = BLACK_HEX    # Compare color when a background field has no linked value
CONTRAST_INSUFFICIENT = 'Contrast for field "{label}" is insufficient ({ratio}:1).'
TARGET_RATIO = "(>= {ratio}:1)"

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Output formats accepted by `colortools convert`
FORMAT_KEYS = ["hex", "hexa", "rgb", "rgba", "hsl"]

# Keys toggled by --all-tech-infos
TECH_INFO_KEYS = ["rgb", "hsl", "luminance", "contrast", "best_text"]

MAX_SEED = 999_999_999_999_999_999

# Standard ANSI Escape Codes for UI
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
