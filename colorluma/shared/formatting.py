#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/shared/formatting.py

from colorluma.core import config as c


def format_value(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]:g}, {args[1]:g}, {args[2]:g})"
    elif fmt == 'luminance':
        return f"{args[0]:.4f}"
    elif fmt == 'ratio':
        return f"{args[0]:.2f}:1"

    return ""


def format_verdict(passed: bool) -> str:
    if passed:
        return f"{c.MSG_BOLD_COLORS['success']}Pass{c.RESET}"
    return f"{c.MSG_BOLD_COLORS['error']}Fail{c.RESET}"
