#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/logic/contrast/renderer.py

from typing import Dict, Tuple

from colorluma.core import config as c
from colorluma.shared.formatting import format_value, format_verdict
from colorluma.shared.preview import print_color_block


def render_contrast_info(
    fg_rgb: Tuple[float, float, float],
    bg_rgb: Tuple[float, float, float],
    ratio: float,
    levels: Dict[str, str],
    mode: str,
) -> None:
    info_c = c.MSG_BOLD_COLORS["info"]

    print()
    print_color_block(fg_rgb, f"{c.BOLD_WHITE}color{c.RESET}")
    print_color_block(bg_rgb, f"{c.BOLD_WHITE}background{c.RESET}")

    suffix = "" if mode == c.MODE_RELATIVE else f" ({mode})"
    print(f"\n{info_c}ratio{c.RESET}             {c.BOLD_WHITE}: {format_value('ratio', ratio)}{suffix}{c.RESET}")

    for name, status in levels.items():
        print(f"{info_c}{name:<18}{c.RESET}{c.BOLD_WHITE}:{c.RESET} {format_verdict(status == 'Pass')}")
    print()
