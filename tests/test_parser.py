import pytest

from changelog_md.core.parser import LogLine, extract_version, parse_line, parse_log


def test_parse_line_with_refs_and_scope():
    line = parse_line("2024-03-01  (tag: v1.1.0, origin/main) feat: add login button")
    assert line == LogLine(
        date="2024-03-01",
        refs="tag: v1.1.0, origin/main",
        scope="feat",
        message="add login button",
    )
    assert line.version == "v1.1.0"


def test_parse_line_without_refs():
    line = parse_line("2024-02-15  refactor: split parser module")
    assert line.date == "2024-02-15"
    assert line.refs is None
    assert line.scope == "refactor"
    assert line.message == "split parser module"
    assert line.version is None


def test_parse_line_without_scope_keeps_whole_subject():
    line = parse_line("2024-01-15  Merge branch 'feature/x'")
    assert line.scope is None
    assert line.message == "Merge branch 'feature/x'"


def test_scope_requires_colon_and_space():
    line = parse_line("2024-01-15  feature: not a scope")
    assert line.scope is None
    assert line.message == "feature: not a scope"

    line = parse_line("2024-01-15  fix:no space")
    assert line.scope is None
    assert line.message == "fix:no space"


def test_scope_not_matched_inside_message():
    line = parse_line("2024-01-15  update docs, fix: typo")
    assert line.scope is None
    assert line.message == "update docs, fix: typo"


def test_other_conventional_scopes_are_parsed():
    line = parse_line("2024-02-20  docs: update readme")
    assert line.scope == "docs"
    assert line.message == "update readme"


@pytest.mark.parametrize(
    "text",
    [
        "2024-01-02  (tag: v0.2.0) ",
        "2024-01-02  (tag: v0.2.0)",
        "2024-01-02 (tag: v0.2.0)\n",
    ],
)
def test_refs_with_empty_subject(text):
    line = parse_line(text)
    assert line == LogLine(date="2024-01-02", refs="tag: v0.2.0")
    assert line.version == "v0.2.0"


def test_refs_containing_parenthesis():
    line = parse_line("2024-01-02  (HEAD -> fix/(x), tag: v0.2.0) feat: thing")
    assert line.refs == "HEAD -> fix/(x), tag: v0.2.0"
    assert line.scope == "feat"
    assert line.message == "thing"
    assert line.version == "v0.2.0"


def test_parenthesis_in_subject_stays_in_message():
    line = parse_line("2024-01-02  (tag: v0.2.0) fix: handle (foo) bar")
    assert line.refs == "tag: v0.2.0"
    assert line.scope == "fix"
    assert line.message == "handle (foo) bar"


@pytest.mark.parametrize("text", ["", "   ", "not a log line", "24-01-01 feat: x"])
def test_malformed_lines_give_empty_record(text):
    assert parse_line(text) == LogLine()


def test_date_only_line():
    line = parse_line("2024-01-15  ")
    assert line.date == "2024-01-15"
    assert line.message is None


@pytest.mark.parametrize(
    "refs, expected",
    [
        ("tag: v1.2.0", "v1.2.0"),
        ("tag: 1.2.0", "1.2.0"),
        ("HEAD -> main, tag: v2.0.0, origin/main", "v2.0.0"),
        ("tag: v1.0.0-rc1, tag: v1.0.0", "v1.0.0"),
        ("tag: release-1", None),
        ("tag: v1.0.0-rc1", None),
        ("HEAD -> main, origin/main", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_version(refs, expected):
    assert extract_version(refs) == expected


def test_parse_log_keeps_order_and_trailing_blank(sample_log):
    lines = parse_log(sample_log)
    assert len(lines) == 9
    assert lines[0].date == "2024-03-05"
    assert lines[-2].message == "Initial commit"
    assert lines[-1] == LogLine()
