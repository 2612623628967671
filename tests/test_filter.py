"""Tests for the filter chain (prefix / suffix filters and their AND combination)."""

from pathlib import Path

import pytest

from rotire import DirectoryEntry, Filter, FilterKind, InvalidEntryError, satisfies_all


def _entry(name: str) -> DirectoryEntry:
    return DirectoryEntry(path=Path("/var/log/app") / name, size=1, modified_at=0.0)


@pytest.mark.parametrize(
    "kind, value, name, expected",
    [
        (FilterKind.PREFIX, "app", "app.log", True),
        (FilterKind.PREFIX, "app", "myapp.log", False),
        (FilterKind.PREFIX, "App", "app.log", False),  # case-sensitive
        (FilterKind.SUFFIX, ".log", "app.log", True),
        (FilterKind.SUFFIX, ".log", "app.log.1", False),
        (FilterKind.SUFFIX, ".LOG", "app.log", False),
        (FilterKind.PREFIX, "", "anything", True),
    ],
)
def test_filter_satisfies(kind: FilterKind, value: str, name: str, expected: bool) -> None:
    assert Filter(kind, value).satisfies(_entry(name)) is expected


def test_filter_matches_file_name_only() -> None:
    """The directory part of the path must not be considered by a prefix filter."""
    assert not Filter(FilterKind.PREFIX, "/var").satisfies(_entry("var.log"))
    assert Filter(FilterKind.PREFIX, "var").satisfies(_entry("var.log"))


def test_empty_filter_list_admits_everything() -> None:
    for name in ["a", "b.log", ".hidden", "rotire-archive-1.tar.gz"]:
        assert satisfies_all([], _entry(name))


def test_filters_are_combined_with_and() -> None:
    filters = [Filter(FilterKind.PREFIX, "app"), Filter(FilterKind.SUFFIX, ".log")]
    names = ["app.log", "app.txt", "db.log", "db.txt", "app-2025.log"]
    for name in names:
        entry = _entry(name)
        assert satisfies_all(filters, entry) == all(f.satisfies(entry) for f in filters)
    assert [n for n in names if satisfies_all(filters, _entry(n))] == ["app.log", "app-2025.log"]


def test_entry_without_file_name_is_an_error() -> None:
    """A root-like path has no file name; this is malformed input, not a simple non-match."""
    entry = DirectoryEntry(path=Path("/"), size=0, modified_at=None)
    with pytest.raises(InvalidEntryError):
        Filter(FilterKind.SUFFIX, ".log").satisfies(entry)


def test_filter_str() -> None:
    assert str(Filter(FilterKind.SUFFIX, ".log")) == "suffix '.log'"
