#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/subcommands/command_registry.py

from . import contrast

SUBCOMMANDS = {
    'contrast': contrast,
}
