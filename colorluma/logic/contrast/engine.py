#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/logic/contrast/engine.py

import argparse
import sys

from colorluma.core import config as c
from colorluma.core.contrast import contrast, get_pass_fail
from colorluma.core.errors import ColorError
from colorluma.core.parser import parse_color
from colorluma.logic.color.resolver import resolve_mode
from colorluma.shared.logger import log
from .renderer import render_contrast_info


def run(args: argparse.Namespace) -> int:
    """Main execution engine for the contrast command. Returns the exit code."""
    mode = resolve_mode(args)
    background = args.background if args.background is not None else c.DEFAULT_LIGHT_BACKGROUND

    try:
        fg_rgb = parse_color(args.color)
        bg_rgb = parse_color(background)
        ratio = contrast(args.color, background, mode)
    except ColorError as e:
        log("error", str(e))
        sys.exit(2)

    levels = get_pass_fail(ratio)
    if args.level:
        levels = {args.level: levels[args.level]}

    render_contrast_info(fg_rgb, bg_rgb, ratio, levels, mode)

    if args.level and levels[args.level] != "Pass":
        return 1
    return 0
