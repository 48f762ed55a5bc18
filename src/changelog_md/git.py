"""Thin wrappers around the ``git`` binary."""

from __future__ import annotations

import logging
import re
import subprocess
from typing import Sequence

from .errors import GitError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%cs %d %s"
SSH_REMOTE_RE = re.compile(r"^[\w.-]+@(?P<host>[^:/]+):(?P<path>.+)$")


def run_git(args: Sequence[str]) -> str:
    """Run a git command and return its stdout as text."""
    logger.debug(f"Running git {' '.join(args)}")
    try:
        result = subprocess.run(
            ["git", *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )
    except FileNotFoundError as exc:
        raise GitError(f"`git` must be installed: {exc}") from exc
    if result.returncode != 0:
        raise GitError(f"git {' '.join(args)} failed: {result.stderr.strip()}")
    return result.stdout


def git_log() -> str:
    """Return one ``<date> <refs> <subject>`` line per commit, newest first."""
    return run_git(["log", f"--pretty={LOG_FORMAT}"])


def normalize_remote_url(url: str) -> str:
    """Turn a remote URL into a browsable base URL."""
    url = url.strip()
    if url.endswith(".git"):
        url = url[:-4]
    match = SSH_REMOTE_RE.match(url)
    if match and "://" not in url:
        url = f"https://{match.group('host')}/{match.group('path')}"
    return url.rstrip("/")


def git_remote_url(remote: str = "origin") -> str:
    """Return the base URL used for comparison and release links."""
    return normalize_remote_url(run_git(["remote", "get-url", remote]))
