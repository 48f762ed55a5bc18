"""Markdown rendering of the version sequence."""

from __future__ import annotations

from typing import List, Optional

from .grouper import SECTIONS, UNRELEASED, VersionBucket, VersionSequence

TITLE = "# Changelog"


def format_bullet(message: str) -> str:
    """Capitalize the first letter of a message and format it as a bullet."""
    return f"* {message[:1].upper()}{message[1:]}"


def format_heading(
    label: str, url: str, date: str, previous: Optional[str] = None
) -> str:
    text = "Unreleased" if label == UNRELEASED else label
    if previous is not None:
        link = f"{url}/compare/{previous}...{label}"
    else:
        link = f"{url}/releases/tag/{label}"
    return f"## [{text}]({link}) - {date}"


def render_bucket(
    bucket: VersionBucket, url: str, previous: Optional[str] = None
) -> List[str]:
    lines = [format_heading(bucket.label, url, bucket.date, previous), ""]
    for scope, title in SECTIONS:
        messages = bucket.entries.get(scope)
        if not messages:
            continue
        lines.extend([f"### {title}", ""])
        lines.extend(format_bullet(message) for message in reversed(messages))
        lines.append("")
    return lines


def render_changelog(versions: VersionSequence, url: str) -> str:
    """Render buckets newest first, skipping the ones without entries."""
    lines = [TITLE, ""]
    for bucket in versions.newest_first():
        if not bucket.has_entries:
            continue
        lines.extend(render_bucket(bucket, url, versions.previous(bucket.label)))
    return "\n".join(lines).rstrip()
