import logging

from .grouper import (
    SECTIONS,
    UNRELEASED,
    BucketBuilder,
    VersionBucket,
    VersionSequence,
    group_versions,
)
from .parser import LogLine, extract_version, parse_line, parse_log
from .render import format_bullet, format_heading, render_changelog

logger = logging.getLogger(__name__)


def build_changelog(log_text: str, url: str) -> str:
    """Build the changelog document from ``git log`` output and a base URL."""
    lines = parse_log(log_text)
    versions = group_versions(lines)
    logger.debug(f"Parsed {len(lines)} log lines into {len(versions)} versions")
    return render_changelog(versions, url)


__all__ = [
    "SECTIONS",
    "UNRELEASED",
    "BucketBuilder",
    "LogLine",
    "VersionBucket",
    "VersionSequence",
    "build_changelog",
    "extract_version",
    "format_bullet",
    "format_heading",
    "group_versions",
    "parse_line",
    "parse_log",
    "render_changelog",
]
