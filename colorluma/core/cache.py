#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/core/cache.py

import threading
from typing import Dict, Optional, Tuple


class LuminanceCache:
    """
    String-keyed store of computed luminance values.

    Keys are the literal color string exactly as the caller wrote it, paired
    with the luminance mode. Entries are never evicted: colors in UI code are
    constants, so the key space stays small.
    """

    def __init__(self):
        self._values: Dict[Tuple[str, str], float] = {}
        self._lock = threading.Lock()

    def get(self, color: str, mode: str) -> Optional[float]:
        return self._values.get((color, mode))

    def set_if_absent(self, color: str, mode: str, value: float) -> float:
        """Store value unless the key is already present; return the stored value."""
        with self._lock:
            return self._values.setdefault((color, mode), value)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)


# Process-wide cache, created on import and kept for the life of the interpreter
DEFAULT_CACHE = LuminanceCache()
