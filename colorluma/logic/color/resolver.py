#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/logic/color/resolver.py

import argparse
import sys
from typing import Tuple

from colorluma.core import config as c
from colorluma.core.parser import Color
from colorluma.shared.logger import log


def resolve_mode(args: argparse.Namespace) -> str:
    return c.MODE_PERCEIVED if getattr(args, "perceived", False) else c.MODE_RELATIVE


def resolve_color_input(args: argparse.Namespace) -> Tuple[Color, str]:
    """Resolve raw CLI input into a library color and a display title"""

    color = getattr(args, "color", None)
    if color is None:
        log("error", "the argument -c/--color is required")
        log("info", "use 'colorluma --help' for more information")
        sys.exit(2)

    title = color if isinstance(color, str) else "current"
    return color, title
