#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/shared/logger.py

import sys
import argparse

from colortools.core import config as c

_STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    """Print a leveled message; info/success go to stdout, everything else to stderr."""
    level = str(level).lower()
    stream = sys.stdout if level in _STDOUT_LEVELS else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class ColortoolsArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Report a usage error through the color-coded logger with a pointer to
        the command's help, then exit with the standard CLI error code 2.
        """
        log("error", message)
        log("info", f"use '{self.prog} --help' for more information")
        sys.exit(2)
