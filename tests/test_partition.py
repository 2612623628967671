"""Tests for sort_entries and partition_entries."""

from pathlib import Path
from typing import Optional

import pytest

from rotire import DirectoryEntry, PartitionResult, partition_entries, sort_entries


def _entry(name: str, modified_at: Optional[float], size: int = 1) -> DirectoryEntry:
    return DirectoryEntry(path=Path("/data") / name, size=size, modified_at=modified_at)


def _names(entries: list[DirectoryEntry]) -> list[str]:
    return [e.name for e in entries]


def test_sort_entries_oldest_first() -> None:
    entries = [_entry("c", 300.0), _entry("a", 100.0), _entry("b", 200.0)]
    assert _names(sort_entries(entries)) == ["a", "b", "c"]


def test_sort_entries_unavailable_timestamp_counts_as_oldest() -> None:
    entries = [_entry("new", 300.0), _entry("unknown", None), _entry("old", 0.0)]
    assert _names(sort_entries(entries)) == ["unknown", "old", "new"]


def test_sort_entries_is_stable_for_equal_times() -> None:
    entries = [_entry("x", 5.0), _entry("y", 5.0), _entry("n1", None), _entry("z", 5.0), _entry("n2", None)]
    assert _names(sort_entries(entries)) == ["n1", "n2", "x", "y", "z"]


def test_sort_entries_is_monotonic() -> None:
    times = [7.0, None, 3.0, 3.0, 9.5, None, 1.0, 8.0]
    ordered = sort_entries(_entry(f"f{i}", t) for i, t in enumerate(times))
    for earlier, later in zip(ordered, ordered[1:]):
        assert earlier.modified_at_unavailable or (not later.modified_at_unavailable and earlier.modified_at <= later.modified_at)


@pytest.mark.parametrize("count", [0, 1, 5, 10])
@pytest.mark.parametrize("keep", [-3, 0, 1, 4, 10, 12])
def test_partition_sizes_and_permutation(count: int, keep: int) -> None:
    entries = [_entry(f"f{i}", float((i * 7) % 11)) for i in range(count)]

    result = partition_entries(entries, keep)

    assert len(result.rotate) == max(0, count - min(max(keep, 0), count))
    assert len(result.kept) == count - len(result.rotate)
    assert sorted(_names(result.kept + result.rotate)) == sorted(_names(entries))
    assert not set(_names(result.kept)) & set(_names(result.rotate))


def test_partition_keeps_newest() -> None:
    entries = [_entry(f"f{i}", float(i)) for i in range(10)]

    result = partition_entries(entries, 4)

    assert _names(result.kept) == ["f6", "f7", "f8", "f9"]
    assert _names(result.rotate) == ["f0", "f1", "f2", "f3", "f4", "f5"]


def test_partition_rotates_unavailable_timestamps_first() -> None:
    entries = [_entry("a", 1.0), _entry("b", None), _entry("c", 2.0)]

    result = partition_entries(entries, 2)

    assert result == PartitionResult(kept=[entries[0], entries[2]], rotate=[entries[1]])


def test_partition_negative_keep_rotates_everything() -> None:
    entries = [_entry("a", 1.0), _entry("b", 2.0)]
    assert _names(partition_entries(entries, -1).rotate) == ["a", "b"]


def test_partition_empty() -> None:
    assert partition_entries([], 4) == PartitionResult(kept=[], rotate=[])
