#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/shared/sanitizer.py

import argparse
import re

from colorluma.core import config as c
from colorluma.core.errors import ColorError
from colorluma.core.parser import parse_color


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _strip_quotes(value: str) -> str:
    s = str(value).strip()
    # Remove matching surrounding quotes or backticks
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


def _to_number(token: str):
    value = float(token)
    return int(value) if value.is_integer() and "." not in token else value


def _split_numeric_list(value: str):
    """
    Turns '255,0,0' or '[255, 0, 0, 1]' into a list of numbers.
    Returns None when the value is not a bare numeric list.
    """
    s = value.strip()
    if s.startswith("[") and s.endswith("]"):
        s = s[1:-1]

    # Regex: comma-separated unsigned integers or decimals, nothing else
    if not re.fullmatch(r"\s*\d*\.?\d+(\s*,\s*\d*\.?\d+)*\s*", s):
        return None
    return [_to_number(tok.strip()) for tok in s.split(",")]


def _extract_alpha_only(value: str) -> str:
    """Lowercased letters of a string, used to clean up option names."""
    if value is None:
        return ""
    return "".join(re.findall(r"[a-z]", str(value).lower()))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str):
    """
    Validator for color arguments. Returns the value in the form the library
    takes (the string itself, or a list for numeric input) after checking
    that it parses to an opaque color.
    """
    s = _strip_quotes(v)
    numbers = _split_numeric_list(s)
    color = numbers if numbers is not None else s

    try:
        parse_color(color)
    except ColorError as e:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color '{raw}': {e.kind.value.replace('_', ' ')}")
    return color


def handle_level(v: str) -> str:
    """Validator for WCAG level names (aa, aaa, aa-large, aaa-large)."""
    key = _extract_alpha_only(v)
    if key not in c.LEVEL_ALIASES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid level: '{raw}' (choose from aa, aaa, aa-large, aaa-large)"
        )
    return c.LEVEL_ALIASES[key]


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that rejects floats
    outside of the [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        try:
            val = float(str(v).strip())
        except ValueError:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if not min_v <= val <= max_v:
            raise argparse.ArgumentTypeError(
                f"value {val:g} out of range [{min_v:g}, {max_v:g}]"
            )
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color,
    "level": handle_level,
    "float_0_1": handle_float_range(0.0, 1.0),
}
