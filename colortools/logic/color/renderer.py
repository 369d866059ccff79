#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/color/renderer.py

import argparse
from typing import Optional, Dict, Any

from colortools.core import config as c
from colortools.core.color import Color
from colortools.core.parser import parse_color
from colortools.shared.formatting import format_colorspace
from colortools.shared.preview import print_color_block


def _label(name: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{name}{c.RESET}{' ' * max(0, 18 - len(name))}"


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    percent = min(abs(val), max_val) / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = "\033[90m"

    return f"{color_ansi}{'█' * filled}{c.RESET}{empty_ansi}{'░' * empty}{c.RESET}"


def _render_wcag(wcag_data: Dict[str, Any]) -> None:
    for against in ("white", "black"):
        entry = wcag_data[against]
        print(f"\n{_label(f'on {against}')}{c.BOLD_WHITE}: {entry['ratio']:.2f}:1{c.RESET}")
        for key, verdict in entry["levels"].items():
            tone = "success" if verdict == "Pass" else "error"
            print(f"                    {key:<12}{c.MSG_BOLD_COLORS[tone]}{verdict}{c.RESET}")


def render_color_info(
    color: Color,
    title: str,
    args: argparse.Namespace,
    tech_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    print()
    print_color_block(color, f"{c.BOLD_WHITE}{title}{c.RESET}")

    hide_bars = getattr(args, "hide_bars", False)
    r, g, b = color.rgb
    data = tech_data or {}

    if "luminance" in data:
        luminance = data["luminance"]
        print(f"\n{_label('luminance')}{c.BOLD_WHITE}: {luminance:.6f}{c.RESET}")
        if not hide_bars:
            print(f"                    {c.BOLD_WHITE}L{c.RESET} {_draw_bar(luminance, 1.0, 200, 200, 200)}")

    if getattr(args, "rgb", False):
        if color.is_opaque:
            text = format_colorspace("rgb", r, g, b)
        else:
            text = format_colorspace("rgba", r, g, b, color.a)
        print(f"\n{_label('rgb')}{c.BOLD_WHITE}: {text}{c.RESET}")
        if not hide_bars:
            print(f"                    {c.BOLD_WHITE}R{c.RESET} {_draw_bar(r, 255, 255, 60, 60)} {c.BOLD_WHITE}{(r / 255) * 100:6.2f}%{c.RESET}")
            print(f"                    {c.BOLD_WHITE}G{c.RESET} {_draw_bar(g, 255, 60, 255, 60)} {c.BOLD_WHITE}{(g / 255) * 100:6.2f}%{c.RESET}")
            print(f"                    {c.BOLD_WHITE}B{c.RESET} {_draw_bar(b, 255, 60, 80, 255)} {c.BOLD_WHITE}{(b / 255) * 100:6.2f}%{c.RESET}")
            if not color.is_opaque:
                print(f"                    {c.BOLD_WHITE}A{c.RESET} {_draw_bar(color.a, 1.0, 200, 200, 200)} {c.BOLD_WHITE}{color.a * 100:6.2f}%{c.RESET}")

    if "hsl" in data:
        h, s, l_hsl = data["hsl"]
        print(f"\n{_label('hsl')}{c.BOLD_WHITE}: {format_colorspace('hsl', h, s, l_hsl)}{c.RESET}")
        if not hide_bars:
            print(f"                    {c.BOLD_WHITE}H{c.RESET} {_draw_bar(h, 360, 255, 200, 0)}")
            print(f"                    {c.BOLD_WHITE}S{c.RESET} {_draw_bar(s, 100, 0, 200, 255)}")
            print(f"                    {c.BOLD_WHITE}L{c.RESET} {_draw_bar(l_hsl, 100, 200, 200, 200)}")

    if data.get("wcag"):
        _render_wcag(data["wcag"])

    if data.get("best_text"):
        print()
        print_color_block(parse_color(data["best_text"]), _label("best text").rstrip())

    print()
