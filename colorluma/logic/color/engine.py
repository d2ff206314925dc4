#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/logic/color/engine.py

import argparse
import sys

from colorluma.core import config as c
from colorluma.core.contrast import get_wcag_contrast
from colorluma.core.errors import ColorError
from colorluma.core.luminance import luminance
from colorluma.core.parser import parse_color
from colorluma.shared.logger import log
from .resolver import resolve_color_input, resolve_mode
from .renderer import render_color_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the color command"""
    color, title = resolve_color_input(args)
    mode = resolve_mode(args)

    threshold = args.threshold if args.threshold is not None else c.DEFAULT_DARK_THRESHOLD

    try:
        rgb = parse_color(color)
        lum = luminance(color, mode)
        # WCAG ratios are defined on relative luminance only
        rel_lum = lum if mode == c.MODE_RELATIVE else luminance(color)
    except ColorError as e:
        log("error", str(e))
        sys.exit(2)

    wcag_data = None
    if getattr(args, "contrast", False):
        wcag_data = get_wcag_contrast(rel_lum)

    render_color_info(
        title=title,
        args=args,
        rgb=rgb,
        luminance=lum,
        mode=mode,
        dark=lum < threshold,
        threshold=threshold,
        wcag_data=wcag_data,
    )
