#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/subcommands/contrast.py

import argparse
import sys

from colorluma.shared.logger import ColorlumaArgumentParser
from colorluma.shared.preview import ensure_truecolor
from colorluma.shared.sanitizer import INPUT_HANDLERS
from colorluma.logic.contrast import engine


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ColorlumaArgumentParser(
        prog="colorluma contrast",
        description="colorluma contrast: WCAG contrast ratio between a color and a background",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--color",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="foreground color: #rgb, #rrggbb, #rrggbbFF, rgb(r, g, b) or r,g,b"
    )
    parser.add_argument(
        "-b",
        "--background",
        type=INPUT_HANDLERS["color"],
        default=None,
        help="background color (default: #ffffff)"
    )
    parser.add_argument(
        "-l",
        "--level",
        type=INPUT_HANDLERS["level"],
        default=None,
        help="only check one level: aa, aaa, aa-large, aaa-large\n"
             "exits with status 1 when the level is not met"
    )
    parser.add_argument(
        "-p",
        "--perceived",
        action="store_true",
        help="use perceived luminance instead of relative luminance"
    )
    return parser


def main() -> int:
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    return engine.run(args)


if __name__ == "__main__":
    sys.exit(main())
