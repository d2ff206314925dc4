#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/logic/color/renderer.py

import argparse
from typing import Optional, Dict, Any

from colorluma.core import config as c
from colorluma.shared.formatting import format_value
from colorluma.shared.preview import print_color_block


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    abs_val = min(abs(val), max_val)
    percent = abs_val / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    reset_ansi = "\033[0m"
    empty_ansi = "\033[90m"

    return (
        f"{color_ansi}{'█' * filled}{reset_ansi}"
        f"{empty_ansi}{'░' * empty}{reset_ansi}"
    )


def render_color_info(
    title: str,
    args: argparse.Namespace,
    rgb: tuple,
    luminance: float,
    mode: str,
    dark: bool,
    threshold: float,
    wcag_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    hide_bars = getattr(args, "hide_bars", False)
    info_c = c.MSG_BOLD_COLORS['info']
    r, g, b = rgb

    print()
    # 1. Main color block
    print_color_block(rgb, f"{c.BOLD_WHITE}{title}{c.RESET}")

    # 2. RGB
    print(f"\n{info_c}rgb{c.RESET}               {c.BOLD_WHITE}: {format_value('rgb', r, g, b)}{c.RESET}")
    if not hide_bars:
        print(f"                    {c.BOLD_WHITE}R{c.RESET} {_draw_bar(r, 255, 255, 60, 60)} {c.BOLD_WHITE}{(r / 255) * 100:6.2f}%{c.RESET}")
        print(f"                    {c.BOLD_WHITE}G{c.RESET} {_draw_bar(g, 255, 60, 255, 60)} {c.BOLD_WHITE}{(g / 255) * 100:6.2f}%{c.RESET}")
        print(f"                    {c.BOLD_WHITE}B{c.RESET} {_draw_bar(b, 255, 60, 80, 255)} {c.BOLD_WHITE}{(b / 255) * 100:6.2f}%{c.RESET}")

    # 3. Luminance
    print(f"\n{info_c}luminance{c.RESET}         {c.BOLD_WHITE}: {format_value('luminance', luminance)} ({mode}){c.RESET}")
    if not hide_bars:
        print(f"                    {c.BOLD_WHITE}L{c.RESET} {_draw_bar(luminance, 1.0, 200, 200, 200)}")

    tone = "dark" if dark else "light"
    print(f"\n{info_c}tone{c.RESET}              {c.BOLD_WHITE}: {tone} (threshold {threshold:g}){c.RESET}")

    # 4. Contrast (Using pre-calculated wcag_data)
    if wcag_data:
        r_i, g_i, b_i = (int(round(v)) for v in rgb)
        bg_ansi = f"\033[48;2;{r_i};{g_i};{b_i}m"
        reset = c.RESET
        succ_c, err_c = c.MSG_BOLD_COLORS["success"], c.MSG_BOLD_COLORS["error"]

        line_1_block = f"{bg_ansi}\033[1;38;2;255;255;255m{'white':^16}{reset}"
        line_2_block = f"{bg_ansi}{' ' * 16}{reset}"
        line_3_block = f"{bg_ansi}\033[1;38;2;0;0;0m{'black':^16}{reset}"

        def fmt_status(status: str) -> str:
            return f"{succ_c}Pass{info_c}" if status == "Pass" else f"{err_c}Fail{info_c}"

        def fmt_line(side: str) -> str:
            levels = wcag_data[side]["levels"]
            statuses = ", ".join(f"{name}:{fmt_status(levels[name])}" for name in c.WCAG_LEVELS)
            return f"{wcag_data[side]['ratio']:5.2f}:1 {info_c}({statuses}){c.RESET}"

        print(f"\n                      {line_1_block}  {c.BOLD_WHITE}{fmt_line('white')}{c.RESET}")
        print(f"{info_c}contrast{c.RESET}          {c.BOLD_WHITE}:{c.RESET}   {line_2_block}")
        print(f"                      {line_3_block}  {c.BOLD_WHITE}{fmt_line('black')}{c.RESET}")

    print()
