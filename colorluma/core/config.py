#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# Perceived Luminance Coefficients (Source: https://www.w3.org/TR/AERT/#color-contrast)
PERCEIVED_R = 0.299                # Red weight on the gamma-encoded channel
PERCEIVED_G = 0.587                # Green weight on the gamma-encoded channel
PERCEIVED_B = 0.114                # Blue weight on the gamma-encoded channel

# sRGB Transfer Function Constants (Source: WCAG 2.x relative luminance definition)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.03928        # Threshold for switching from linear to non-linear sRGB

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
LUM_MIN = 0.0                      # Luminance of pure black
EXP_2 = 2                          # Decimal places for reported ratios

# ==========================================
# Application Defaults
# ==========================================

MODE_RELATIVE = "relative"         # sRGB relative luminance (gamma corrected)
MODE_PERCEIVED = "perceived"       # Weighted sum on gamma-encoded channels
LUMINANCE_MODES = (MODE_RELATIVE, MODE_PERCEIVED)

DEFAULT_DARK_THRESHOLD = 0.35      # Luminance below which a color counts as dark
DEFAULT_LIGHT_BACKGROUND = "#ffffff"
DEFAULT_DARK_BACKGROUND = "#000000"

HEX_LENGTHS = (3, 6, 8)            # Accepted digit counts after '#'
OPAQUE_ALPHA_BYTE = 255            # Alpha byte of a fully opaque #rrggbbaa color
OPAQUE_ALPHA = 1                   # Alpha of a fully opaque rgba() or sequence color

# WCAG level keys, as reported by get_wcag_contrast
WCAG_LEVELS = {
    "AA-Large": WCAG_AA_LARGE,
    "AA": WCAG_AA_NORMAL,
    "AAA-Large": WCAG_AAA_LARGE,
    "AAA": WCAG_AAA_NORMAL,
}

# CLI spellings for --level
LEVEL_ALIASES = {
    "aa": "AA",
    "aaa": "AAA",
    "aalarge": "AA-Large",
    "aaalarge": "AAA-Large",
}

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
