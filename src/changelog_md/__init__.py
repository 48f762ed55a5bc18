"""Generate a CHANGELOG.md from conventional commit subjects."""

__version__ = "0.1.0"
