#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/contrast/renderer.py

from typing import Dict, Any

from colortools.core import config as c
from colortools.shared.logger import log
from colortools.shared.preview import print_color_block


def render_contrast_info(data: Dict[str, Any]) -> None:
    """Print both swatches, the ratio and the verdict."""
    print()
    print_color_block(data["foreground"], f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(data["background"], f"{c.BOLD_WHITE}background{c.RESET}")
    if not data["foreground"].is_opaque:
        print_color_block(data["effective"], f"{c.MSG_BOLD_COLORS['info']}effective{c.RESET}")

    print(f"\n{c.MSG_BOLD_COLORS['info']}ratio{c.RESET}             {c.BOLD_WHITE}: {data['ratio']:.2f}:1{c.RESET}")
    print(f"{c.MSG_BOLD_COLORS['info']}required{c.RESET}          {c.BOLD_WHITE}: {data['threshold']:.2f}:1 ({data['level']} {data['size']}){c.RESET}")
    print()

    if data["passed"]:
        log("success", f"contrast passes {data['level']} {data['size']}")
    else:
        log("warning", f"contrast fails {data['level']} {data['size']}")
