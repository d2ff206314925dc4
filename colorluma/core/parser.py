#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/core/parser.py

import math
import numbers
from typing import List, Optional, Sequence, Tuple, Union

from . import config as c
from .errors import ColorError, format_sequence

Color = Union[str, Sequence[float]]
RGB = Tuple[float, float, float]

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
DEC_DIGITS = frozenset("0123456789")


def hex_to_byte(pair: str) -> int:
    """Convert a 2-character hex substring into a byte (0-255)."""
    return int(pair, 16)


def parse_color(color: Color) -> RGB:
    """
    Normalize a color into an opaque (r, g, b) triple.

    Channels are ints, except fractional values given in a sequence, which
    are passed through unchanged.

    Accepts '#rgb', '#rrggbb', '#rrggbbFF', 'rgb(r, g, b)', 'rgba(r, g, b, 1)'
    and sequences [r, g, b] or [r, g, b, 1] with channels in 0..255.
    Raises ColorError for anything else, or for colors that are not opaque.
    """
    if isinstance(color, str):
        if color.startswith("#"):
            return _parse_hex(color)
        return _parse_functional(color)

    if isinstance(color, (list, tuple)):
        return _parse_sequence(color)

    raise ColorError.unsupported_format(str(color))


def _parse_hex(color: str) -> Tuple[int, int, int]:
    digits = color[1:]

    if len(digits) not in c.HEX_LENGTHS or not all(ch in HEX_DIGITS for ch in digits):
        raise ColorError.unsupported_format(color)

    if len(digits) == 3:
        # e.g., 'A52' becomes 'AA5522'
        digits = "".join(ch * 2 for ch in digits)

    if len(digits) == 8:
        alpha = hex_to_byte(digits[6:8])
        if alpha != c.OPAQUE_ALPHA_BYTE:
            raise ColorError.needs_alpha_blending(color, alpha)
        digits = digits[:6]

    return tuple(hex_to_byte(digits[i : i + 2]) for i in (0, 2, 4))


class _Scanner:
    """Cursor over a space-stripped 'rgb(...)' / 'rgba(...)' string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def accept(self, literal: str) -> bool:
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def digits(self) -> str:
        start = self.pos
        while self.peek() in DEC_DIGITS:
            self.pos += 1
        return self.text[start : self.pos]


def _scan_alpha(scanner: _Scanner) -> Optional[str]:
    """
    Match the alpha token: '1', '0', '0.' followed by digits, or '.' followed
    by digits. Returns the raw token or None when no alpha form matches.
    """
    start = scanner.pos
    if scanner.accept("1"):
        return "1"
    if scanner.accept("0"):
        if scanner.accept("."):
            scanner.digits()
        return scanner.text[start : scanner.pos]
    if scanner.accept("."):
        if scanner.digits():
            return scanner.text[start : scanner.pos]
    scanner.pos = start
    return None


def _tokenize_functional(text: str) -> Optional[Tuple[List[str], Optional[str]]]:
    """Split 'rgb(N,N,N)' / 'rgba(N,N,N,A)' into its channel and alpha tokens."""
    scanner = _Scanner(text)

    if not scanner.accept("rgb"):
        return None
    scanner.accept("a")
    if not scanner.accept("("):
        return None

    channels = []
    for index in range(3):
        if index and not scanner.accept(","):
            return None
        token = scanner.digits()
        if not token:
            return None
        channels.append(token)

    alpha = None
    if scanner.accept(","):
        alpha = _scan_alpha(scanner)
        if alpha is None:
            return None

    if not scanner.accept(")") or not scanner.at_end():
        return None

    return channels, alpha


def _parse_functional(color: str) -> Tuple[int, int, int]:
    tokens = _tokenize_functional(color.replace(" ", ""))
    if tokens is None:
        raise ColorError.unsupported_format(color)

    channels, alpha = tokens
    if alpha is not None and alpha != "1":
        raise ColorError.needs_alpha_blending(color, float(alpha))

    # More than three significant digits cannot fit a byte
    if any(len(token.lstrip("0")) > 3 for token in channels):
        raise ColorError.unsupported_format(color)

    r, g, b = (int(token) for token in channels)
    if max(r, g, b) > c.RGB_MAX:
        raise ColorError.unsupported_format(color)
    return r, g, b


def _is_channel(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if not math.isfinite(value):
        return False
    return 0 <= value <= c.RGB_MAX


def _parse_sequence(color: Sequence[float]) -> RGB:
    if not 3 <= len(color) <= 4 or not all(_is_channel(v) for v in color):
        raise ColorError.unsupported_format(format_sequence(color))

    if len(color) == 4 and color[3] != c.OPAQUE_ALPHA:
        raise ColorError.needs_alpha_blending(format_sequence(color), color[3])

    return tuple(int(v) if float(v).is_integer() else v for v in color[:3])
