#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/core/luminance.py

from typing import Optional

from . import config as c
from .cache import DEFAULT_CACHE, LuminanceCache
from .parser import Color, parse_color


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize one gamma-encoded channel already scaled to [0, 1]."""
    if color_comp <= c.SRGB_TO_LINEAR_TH:
        return color_comp / c.SRGB_SLOPE
    return ((color_comp + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: float, g: float, b: float, perceived: bool = False) -> float:
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX

    if perceived:
        return c.PERCEIVED_R * r_f + c.PERCEIVED_G * g_f + c.PERCEIVED_B * b_f

    return (
        c.LUMA_R * _srgb_to_linear(r_f) +
        c.LUMA_G * _srgb_to_linear(g_f) +
        c.LUMA_B * _srgb_to_linear(b_f)
    )


def _check_mode(mode: str) -> None:
    if mode not in c.LUMINANCE_MODES:
        raise ValueError(
            f"unknown luminance mode '{mode}', expected one of: {', '.join(c.LUMINANCE_MODES)}"
        )


def luminance(
    color: Color,
    mode: str = c.MODE_RELATIVE,
    cache: Optional[LuminanceCache] = DEFAULT_CACHE,
) -> float:
    """
    Calculate the luminance of a color.

    mode is 'relative' (sRGB relative luminance, the WCAG definition) or
    'perceived' (weighted sum without gamma correction). String colors are
    looked up in, and stored into, cache; pass cache=None to skip it.
    """
    _check_mode(mode)

    use_cache = cache is not None and isinstance(color, str)
    if use_cache:
        hit = cache.get(color, mode)
        if hit is not None:
            return hit

    value = get_luminance(*parse_color(color), perceived=mode == c.MODE_PERCEIVED)

    if use_cache:
        return cache.set_if_absent(color, mode, value)
    return value
