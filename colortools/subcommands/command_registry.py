#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/subcommands/command_registry.py

from . import (
    convert,
    contrast,
    mix,
    compose
)

SUBCOMMANDS = {
    'convert': convert,
    'contrast': contrast,
    'mix': mix,
    'compose': compose
}
