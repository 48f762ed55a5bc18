"""Parsing of ``git log --pretty='%cs %d %s'`` output lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

# Keywords accepted as a scope prefix; only some of them end up in the changelog.
SCOPE_KEYWORDS = (
    "feat",
    "fix",
    "refactor",
    "perf",
    "docs",
    "style",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
)

LINE_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})(?:\s+|$)"
    r"(?:\((?P<refs>.*?)\)(?:\s+|$))?"
    r"(?:(?P<scope>" + "|".join(SCOPE_KEYWORDS) + r"): )?"
    r"(?P<message>.*)$"
)
TAG_RE = re.compile(r"tag: (?P<version>v?\d+(?:\.\d+)*)(?=,|$)")


@dataclass(frozen=True)
class LogLine:
    """Fields extracted from one log line; unmatched fields are ``None``."""

    date: Optional[str] = None
    refs: Optional[str] = None
    scope: Optional[str] = None
    message: Optional[str] = None

    @property
    def version(self) -> Optional[str]:
        return extract_version(self.refs)


def extract_version(refs: Optional[str]) -> Optional[str]:
    """Return the first release tag found in a refs annotation."""
    if not refs:
        return None
    match = TAG_RE.search(refs.strip())
    if not match:
        return None
    return match.group("version")


def parse_line(line: str) -> LogLine:
    """Parse a single log line.

    Lines that do not follow the ``<date> [(<refs>)] [<scope>: ]<message>``
    layout, including blank ones, give an empty :class:`LogLine`.
    """
    match = LINE_RE.match(line.rstrip())
    if not match:
        return LogLine()
    message = match.group("message").strip()
    return LogLine(
        date=match.group("date"),
        refs=match.group("refs"),
        scope=match.group("scope"),
        message=message or None,
    )


def parse_log(text: str) -> List[LogLine]:
    """Parse ``git log`` output, keeping the original (newest-first) order."""
    return [parse_line(line) for line in text.split("\n")]
