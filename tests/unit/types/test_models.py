"""Test suite for data models and outcome types."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path

import pytest

from fscan.types.models import AggregationResult, EntryKind, FileEntry, WalkEntry, display_path
from fscan.types.outcome import Err, Ok, Outcome


class TestEntryKind:
    """Test the EntryKind enum."""

    def test_entry_kind_values(self) -> None:
        assert EntryKind.FILE.value == "File"
        assert EntryKind.DIRECTORY.value == "Directory"

    def test_entry_kind_string_representation(self) -> None:
        assert str(EntryKind.FILE) == "File"
        assert f"[{EntryKind.DIRECTORY}]" == "[Directory]"


class TestFileEntry:
    """Test the FileEntry model."""

    def test_from_size_derives_human_size(self) -> None:
        entry = FileEntry.from_size(Path("/data/movie.mkv"), 1536, EntryKind.FILE)

        assert entry.path == "/data/movie.mkv"
        assert entry.size_bytes == 1536
        assert entry.size_human == "1.50 KB"
        assert entry.kind is EntryKind.FILE
        assert entry.is_directory is False

    def test_directory_entry(self) -> None:
        entry = FileEntry.from_size("/data", 0, EntryKind.DIRECTORY)

        assert entry.is_directory is True
        assert entry.size_human == "0.00 B"

    def test_undecodable_path_is_replaced(self) -> None:
        raw = Path("/data") / os.fsdecode(b"bad\xff.txt")

        entry = FileEntry.from_size(raw, 1, EntryKind.FILE)

        assert entry.path == "/data/bad\ufffd.txt"
        _ = entry.path.encode("utf-8")

    def test_display_path_keeps_valid_names(self) -> None:
        assert display_path(Path("/data/caf\u00e9.txt")) == "/data/caf\u00e9.txt"

    def test_file_entry_is_immutable(self) -> None:
        entry = FileEntry.from_size("/data", 1, EntryKind.FILE)

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.size_bytes = 2  # pyright: ignore[reportAttributeAccessIssue]


class TestWalkEntry:
    """Test the WalkEntry model."""

    def test_walk_entry_is_hashable_value(self) -> None:
        first = WalkEntry(Path("a"), EntryKind.FILE)

        assert first == WalkEntry(Path("a"), EntryKind.FILE)
        assert len({first, WalkEntry(Path("a"), EntryKind.DIRECTORY)}) == 2


class TestAggregationResult:
    """Test the AggregationResult model."""

    def test_totals_double_count_nested_content(self) -> None:
        result = AggregationResult(
            root=Path("/r"),
            file_sizes={Path("/r/a"): 100, Path("/r/s/b"): 200},
            dir_sizes={Path("/r"): 300, Path("/r/s"): 200},
        )

        assert result.total_files == 2
        assert result.total_dirs == 2
        assert result.total_size == 800
        assert result.is_empty is False

    def test_empty_result(self) -> None:
        result = AggregationResult(root=Path("/r"))

        assert result.total_size == 0
        assert result.is_empty is True


class TestOutcome:
    """Test Ok / Err outcome types."""

    def _describe(self, outcome: Outcome[int]) -> str:
        match outcome:
            case Ok(value=value):
                return f"ok:{value}"
            case Err(message=message):
                return f"err:{message}"

    def test_pattern_matching(self) -> None:
        assert self._describe(Ok(5)) == "ok:5"
        assert self._describe(Err(ValueError("bad"), "bad")) == "err:bad"

    def test_err_from_exception_prefixes_context(self) -> None:
        error = PermissionError(13, "Permission denied")
        err = Err.from_exception(error, "Cannot read size of /x")

        assert err.error is error
        assert err.message.startswith("Cannot read size of /x: ")
        assert "Permission denied" in err.message

    @pytest.mark.parametrize("outcome", [Ok(1), Err(ValueError("x"), "x")])
    def test_outcomes_are_frozen_and_slotted(self, outcome: Outcome[int]) -> None:
        assert not hasattr(outcome, "__dict__")
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.message = "changed"  # pyright: ignore[reportAttributeAccessIssue]

    def test_ok_generic_subscription(self) -> None:
        assert Ok[int](3) == Ok(3)
