#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/core/contrast.py

from . import config as c
from .luminance import luminance
from .parser import Color


def contrast_ratio(lum_a: float, lum_b: float) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two luminance values.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    l1, l2 = (lum_a, lum_b) if lum_a > lum_b else (lum_b, lum_a)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def contrast(color_a: Color, color_b: Color, mode: str = c.MODE_RELATIVE) -> float:
    """Contrast ratio between two colors, in [1, 21] for relative luminance."""
    return contrast_ratio(luminance(color_a, mode), luminance(color_b, mode))


def get_pass_fail(ratio: float) -> dict:
    return {
        level: "Pass" if ratio >= threshold else "Fail"
        for level, threshold in c.WCAG_LEVELS.items()
    }


def get_wcag_contrast(lum: float) -> dict:
    """
    Calculate WCAG contrast ratios against pure white and pure black.

    Source: Web Content Accessibility Guidelines (WCAG) 2.1
    Formula: (L1 + 0.05) / (L2 + 0.05), where L is the relative luminance.
    """
    contrast_white = contrast_ratio(c.UNIT, lum)
    contrast_black = contrast_ratio(lum, c.LUM_MIN)

    return {
        "white": {
            "ratio": round(contrast_white, c.EXP_2),
            "levels": get_pass_fail(contrast_white)
        },
        "black": {
            "ratio": round(contrast_black, c.EXP_2),
            "levels": get_pass_fail(contrast_black)
        },
    }
