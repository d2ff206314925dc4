#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/__init__.py

__version__ = "1.0.0"

from colorluma.core.cache import DEFAULT_CACHE, LuminanceCache
from colorluma.core.contrast import contrast, contrast_ratio, get_wcag_contrast
from colorluma.core.errors import ColorError, ErrorKind
from colorluma.core.luminance import get_luminance, luminance
from colorluma.core.parser import parse_color
from colorluma.core.predicates import (
    AA_LARGE_SIZE_THRESHOLD_CONTRAST,
    AA_THRESHOLD_CONTRAST,
    AAA_LARGE_SIZE_THRESHOLD_CONTRAST,
    AAA_THRESHOLD_CONTRAST,
    has_contrast_on_dark,
    has_contrast_on_light,
    is_dark,
)
