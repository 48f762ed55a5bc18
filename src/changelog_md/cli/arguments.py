"""Command line argument parsing."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from changelog_md import __version__
from changelog_md.config import get_setting, load_config


@dataclass
class CLIOptions:
    output: str
    remote: str
    config: Optional[str] = None
    check: bool = False
    stdout: bool = False
    show_config: bool = False
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="changelog-md",
        description="Generate CHANGELOG.md from conventional commit subjects",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Path to write the changelog to (default: CHANGELOG.md)",
    )
    parser.add_argument(
        "-r",
        "--remote",
        help="Git remote used for comparison and release links (default: origin)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file (default: .changelog.yml)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with a non-zero status if the output file is not up to date",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the changelog instead of writing it",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show the resolved configuration and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> CLIOptions:
    """Parse arguments, filling unset options from the config file."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    return CLIOptions(
        output=args.output or get_setting(config, "output"),
        remote=args.remote or get_setting(config, "remote"),
        config=args.config,
        check=args.check,
        stdout=args.stdout,
        show_config=args.show_config,
        debug=args.debug or bool(get_setting(config, "debug")),
    )
