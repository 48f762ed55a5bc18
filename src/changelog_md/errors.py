"""Exceptions raised by changelog-md."""


class ChangelogError(RuntimeError):
    """Raised when the changelog cannot be generated."""


class GitError(ChangelogError):
    """Raised when a git command cannot be run or exits with an error."""


class ConfigError(ChangelogError):
    """Raised when the configuration file cannot be loaded."""
