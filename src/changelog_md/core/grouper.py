"""Grouping of parsed log lines into per-version buckets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .parser import LogLine

logger = logging.getLogger(__name__)

UNRELEASED = "unreleased"
FIRST_RELEASES = ("v1.0.0", "1.0.0")
INITIAL_RELEASE_MESSAGE = "initial release"

# Scopes shown in the changelog, in section order, with their section titles.
SECTIONS: Tuple[Tuple[str, str], ...] = (
    ("feat", "Added"),
    ("refactor", "Changed"),
    ("fix", "Fixed"),
)
RECOGNIZED_SCOPES = tuple(scope for scope, _title in SECTIONS)


@dataclass(frozen=True)
class VersionBucket:
    """Changelog entries of one release, or of the unreleased head."""

    label: str
    date: str = ""
    entries: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def has_entries(self) -> bool:
        return any(self.entries.get(scope) for scope in RECOGNIZED_SCOPES)


class BucketBuilder:
    """Accumulate entries for the bucket currently being filled."""

    def __init__(self) -> None:
        self.date = ""
        self._entries: Dict[str, List[str]] = {}

    def observe_date(self, date: str) -> None:
        # The last date seen before sealing wins.
        self.date = date

    def add(self, scope: str, message: str) -> bool:
        """Add a message; returns ``False`` when the scope is not shown."""
        if scope not in RECOGNIZED_SCOPES:
            return False
        self._entries.setdefault(scope, []).append(message)
        return True

    def has_entries(self) -> bool:
        return any(self._entries.get(scope) for scope in RECOGNIZED_SCOPES)

    def seal(self, label: str) -> VersionBucket:
        """Snapshot the accumulated entries under ``label`` and start afresh.

        The date is kept so that an empty follow-up bucket still carries the
        most recent date seen.
        """
        if label in FIRST_RELEASES and not self.has_entries():
            self._entries.setdefault("feat", []).append(INITIAL_RELEASE_MESSAGE)
        entries = MappingProxyType(
            {scope: tuple(messages) for scope, messages in self._entries.items()}
        )
        self._entries = {}
        return VersionBucket(label=label, date=self.date, entries=entries)


class VersionSequence:
    """Sealed buckets in discovery order, oldest first."""

    def __init__(self, buckets: Iterable[VersionBucket] = ()) -> None:
        self._buckets: Dict[str, VersionBucket] = {}
        for bucket in buckets:
            self.add(bucket)

    def add(self, bucket: VersionBucket) -> None:
        # An existing label keeps its position.
        self._buckets[bucket.label] = bucket

    def __iter__(self) -> Iterator[VersionBucket]:
        return iter(self._buckets.values())

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, label: object) -> bool:
        return label in self._buckets

    def __getitem__(self, label: str) -> VersionBucket:
        return self._buckets[label]

    @property
    def labels(self) -> List[str]:
        return list(self._buckets)

    def previous(self, label: str) -> Optional[str]:
        """Return the label immediately preceding ``label``, if any."""
        labels = self.labels
        index = labels.index(label)
        if index == 0:
            return None
        return labels[index - 1]

    def newest_first(self) -> List[VersionBucket]:
        return list(reversed(self._buckets.values()))


def group_versions(lines: Iterable[LogLine]) -> VersionSequence:
    """Split newest-first log lines into buckets sealed at release tags."""
    versions = VersionSequence()
    builder = BucketBuilder()

    for line in reversed(list(lines)):
        if line.date:
            builder.observe_date(line.date)
        if line.scope and line.message:
            if not builder.add(line.scope, line.message):
                logger.debug(f"Skipping '{line.scope}' commit: {line.message}")
        version = line.version
        if version:
            versions.add(builder.seal(version))
            logger.debug(f"Sealed {version} ({builder.date})")

    versions.add(builder.seal(UNRELEASED))
    return versions
