#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/logic/color/resolver.py

import argparse
import random
import sys
from typing import Tuple

from colortools.core.color import Color
from colortools.core.generator import random_color
from colortools.shared.logger import log


def resolve_color_input(args: argparse.Namespace) -> Tuple[Color, str]:
    """Resolve raw CLI input into a base color and a title"""

    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        return random_color(fancy=args.fancy), "random"

    if args.color is not None:
        return args.color, "current"

    log("error", "one of the arguments -c/--color -r/--random is required")
    log("info", "use 'colortools --help' for more information")
    sys.exit(2)
