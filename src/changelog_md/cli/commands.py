"""Implementation of CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

from changelog_md.core import build_changelog
from changelog_md.git import git_log, git_remote_url

from .arguments import CLIOptions

logger = logging.getLogger(__name__)


def generate(options: CLIOptions) -> str:
    """Read the git history and return the rendered changelog.

    Both git calls happen before rendering, so a failing call leaves the
    output file untouched.
    """
    url = git_remote_url(options.remote)
    log_text = git_log()
    return build_changelog(log_text, url) + "\n"


def write(options: CLIOptions) -> int:
    changelog = generate(options)
    if options.stdout:
        print(changelog, end="")
        return 0
    output = Path(options.output)
    output.write_text(changelog, encoding="utf-8")
    logger.info(f"Wrote changelog to {output}")
    return 0


def check(options: CLIOptions) -> int:
    changelog = generate(options)
    output = Path(options.output)
    if not output.exists():
        logger.error(f"{output} is missing; regenerate the changelog.")
        return 1
    if output.read_text(encoding="utf-8") != changelog:
        logger.error(f"{output} is out of date. Run changelog-md to refresh it.")
        return 1
    logger.info(f"{output} is up to date")
    return 0


def show_config(options: CLIOptions) -> int:
    logger.info(f"Configuration file: {options.config or '.changelog.yml'}")
    logger.info(f"Output: {options.output}")
    logger.info(f"Remote: {options.remote}")
    logger.info(f"Debug: {options.debug}")
    return 0
