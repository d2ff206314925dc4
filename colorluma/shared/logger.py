#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/shared/logger.py

import os
import sys
import argparse

from colorluma.core import config as c

# Levels that belong on stdout; warnings and errors go to stderr
STDOUT_LEVELS = ("info", "success", "dim")


def _styled(text: str, style: str) -> str:
    # https://no-color.org
    if "NO_COLOR" in os.environ:
        return text
    return f"{style}{text}{c.RESET}"


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    tag = _styled(f"[{level}]", c.MSG_BOLD_COLORS.get(level, c.RESET))
    body = _styled(message, c.MSG_COLORS.get(level, c.RESET))
    print(f"{tag} {body}", file=stream)


class ColorlumaArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Log the argument error with a pointer to --help, then exit 2."""
        log("error", message)
        log("info", f"use '{self.prog} --help' for more information")
        sys.exit(2)
