#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colortools/__main__.py

from colortools.main import main

if __name__ == "__main__":
    main()
