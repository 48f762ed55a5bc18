"""Command line interface for changelog-md."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from changelog_md.errors import ChangelogError

from . import commands
from .arguments import CLIOptions, parse_args

logger = logging.getLogger("changelog_md")


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Synchronous entry point for the CLI."""
    try:
        options = parse_args(argv)
    except ChangelogError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    setup_logging(options.debug)
    if options.debug:
        logger.debug("Debug logging enabled")

    try:
        if options.show_config:
            return commands.show_config(options)
        if options.check:
            return commands.check(options)
        return commands.write(options)
    except ChangelogError as e:
        logger.error(str(e), exc_info=options.debug)
        return 1
    except KeyboardInterrupt:
        print("Operation cancelled by user")
        return 1


__all__ = ["main", "parse_args", "setup_logging", "CLIOptions", "commands"]
