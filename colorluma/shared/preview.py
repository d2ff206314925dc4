#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/shared/preview.py

import os
import re
import sys
from typing import Tuple

from colorluma.core import config as c


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to an uppercase 6-digit hex string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(round(r))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(round(g))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(round(b))))
    return f"{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def print_color_block(rgb: Tuple[float, float, float], title: str = "color", end: str = "\n") -> None:
    r, g, b = (int(round(v)) for v in rgb)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}#{rgb_to_hex(r, g, b)}{c.RESET}", end=end)
