#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorluma/main.py

import argparse
import sys

from colorluma import __version__
from colorluma.core import config as c
from colorluma.logic.color import engine
from colorluma.subcommands.command_registry import SUBCOMMANDS
from colorluma.shared.logger import log, ColorlumaArgumentParser
from colorluma.shared.preview import ensure_truecolor
from colorluma.shared.sanitizer import INPUT_HANDLERS


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = ColorlumaArgumentParser(
        prog="colorluma",
        description="colorluma: luminance, darkness and WCAG contrast of opaque colors",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"colorluma {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    parser.add_argument(
        "-c",
        "--color",
        type=INPUT_HANDLERS["color"],
        default=None,
        help="#rgb, #rrggbb, #rrggbbFF, rgb(r, g, b), rgba(r, g, b, 1) or r,g,b",
    )

    lum_group = parser.add_argument_group("luminance options")
    lum_group.add_argument(
        "-p",
        "--perceived",
        action="store_true",
        help="use perceived luminance (no gamma correction)",
    )
    lum_group.add_argument(
        "-t",
        "--threshold",
        type=INPUT_HANDLERS["float_0_1"],
        default=None,
        help=f"luminance below which the color counts as dark (default: {c.DEFAULT_DARK_THRESHOLD})",
    )

    info_group = parser.add_argument_group("technical information flags")
    info_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars",
    )
    info_group.add_argument(
        "-wcag",
        "--contrast",
        action="store_true",
        help="show WCAG contrast ratio against white and black",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    # Execution
    engine.run(args)


def main() -> None:
    """Main entry point for colorluma CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            sys.exit(SUBCOMMANDS[cmd].main())

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
