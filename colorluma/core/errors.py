#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/core/errors.py

import enum
from typing import Optional


SUPPORTED_FORMATS = """\
Supported formats for string input are:

- #rgb
- #rrggbb
- #rrggbbFF
- rgb(r, g, b)      (0 <= rgb <= 255)
- rgba(r, g, b, 1)  (0 <= rgb <= 255)

Supported formats for array input are:

 - [r, g, b]         (0 <= rgb <= 255)
 - [r, g, b, 1]      (0 <= rgb <= 255)

Keyword/system colors are not supported (nor consistent across environments)."""


class ErrorKind(enum.Enum):
    UNSUPPORTED_FORMAT = "unsupported_format"
    NEEDS_ALPHA_BLENDING = "needs_alpha_blending"


class ColorError(ValueError):
    """
    Raised when a color cannot be turned into an opaque RGB triple.

    Callers tell the two failure modes apart through ``kind`` rather than
    through subclasses. ``color`` is the offending literal (strings as given,
    sequences rendered as ``[a, b, c]``) and ``alpha`` is the parsed alpha for
    translucent input.
    """

    def __init__(self, kind: ErrorKind, color: str, alpha: Optional[float] = None):
        self.kind = kind
        self.color = color
        self.alpha = alpha
        super().__init__(self._render())

    @classmethod
    def unsupported_format(cls, color: str) -> "ColorError":
        return cls(ErrorKind.UNSUPPORTED_FORMAT, color)

    @classmethod
    def needs_alpha_blending(cls, color: str, alpha: float) -> "ColorError":
        return cls(ErrorKind.NEEDS_ALPHA_BLENDING, color, alpha)

    def _render(self) -> str:
        if self.kind is ErrorKind.NEEDS_ALPHA_BLENDING:
            return (
                f"Expected a fully opaque color, actual: {self.color}, with alpha: {format_number(self.alpha)}.\n"
                "\n"
                "Colors that are (semi-)translucent need to be alpha-blended, which means\n"
                "that you need to know the background color(s) in order to calculate the color\n"
                "that will show on screen.\n"
                "\n"
                "Blend the color onto its background with an alpha-blending utility first,\n"
                "then pass the resulting opaque color:\n"
                "\n"
                f"  opaque = alpha_blend({self.color}, '#<background-color>')\n"
                "  lum = luminance(opaque)"
            )
        return (
            f"Expected color to be in a supported format, actual: {self.color}.\n"
            "\n"
            f"{SUPPORTED_FORMATS}"
        )


def format_number(value) -> str:
    """Render a number the way it was most likely written: 255, not 255.0."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_sequence(values) -> str:
    return "[" + ", ".join(format_number(v) for v in values) + "]"
