#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/core/predicates.py

from . import config as c
from .contrast import contrast
from .luminance import luminance
from .parser import Color

# Thresholds callers can hand to has_contrast_on_light / has_contrast_on_dark
AA_THRESHOLD_CONTRAST = c.WCAG_AA_NORMAL
AAA_THRESHOLD_CONTRAST = c.WCAG_AAA_NORMAL
AA_LARGE_SIZE_THRESHOLD_CONTRAST = c.WCAG_AA_LARGE
AAA_LARGE_SIZE_THRESHOLD_CONTRAST = c.WCAG_AAA_LARGE


def is_dark(
    color: Color,
    threshold: float = c.DEFAULT_DARK_THRESHOLD,
    mode: str = c.MODE_RELATIVE,
) -> bool:
    """
    Returns True if the given color is dark, False otherwise.

    Example:
        is_dark('#333')  ->  True
    """
    return luminance(color, mode) < threshold


def has_contrast_on_light(
    color: Color,
    background: Color = c.DEFAULT_LIGHT_BACKGROUND,
    threshold: float = AA_THRESHOLD_CONTRAST,
) -> bool:
    """True if color is legible on a light background (white by default)."""
    return contrast(color, background) > threshold


def has_contrast_on_dark(
    color: Color,
    background: Color = c.DEFAULT_DARK_BACKGROUND,
    threshold: float = AA_THRESHOLD_CONTRAST,
) -> bool:
    """True if color is legible on a dark background (black by default)."""
    return contrast(color, background) > threshold
