import textwrap

import pytest

URL = "https://example.com/org/repo"

SAMPLE_LOG = (
    "2024-03-05  (HEAD -> main, origin/main) fix: crash on empty input\n"
    "2024-03-04  feat: add export command\n"
    "2024-03-01  (tag: v1.1.0) feat: add login button\n"
    "2024-02-20  docs: update readme\n"
    "2024-02-15  refactor: split parser module\n"
    "2024-02-10  fix: handle missing config\n"
    "2024-02-01  (tag: v1.0.0) chore: release 1.0.0\n"
    "2024-01-15  Initial commit\n"
)

SAMPLE_CHANGELOG = textwrap.dedent(
    """\
    # Changelog

    ## [Unreleased](https://example.com/org/repo/compare/v1.1.0...unreleased) - 2024-03-05

    ### Added

    * Add export command

    ### Fixed

    * Crash on empty input

    ## [v1.1.0](https://example.com/org/repo/compare/v1.0.0...v1.1.0) - 2024-03-01

    ### Added

    * Add login button

    ### Changed

    * Split parser module

    ### Fixed

    * Handle missing config

    ## [v1.0.0](https://example.com/org/repo/releases/tag/v1.0.0) - 2024-02-01

    ### Added

    * Initial release"""
)


@pytest.fixture
def sample_log():
    return SAMPLE_LOG


@pytest.fixture
def sample_changelog():
    return SAMPLE_CHANGELOG
