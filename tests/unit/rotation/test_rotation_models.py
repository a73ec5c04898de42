"""Tests for rotation domain models."""

import os
import time
from pathlib import Path

import pytest
from logsweep.rotation.models import (
    CandidateFile,
    CompressionOutcome,
    RetentionOutcome,
    RunSummary,
    TimestampType,
)


class TestTimestampType:
    """Tests for TimestampType enum."""

    def test_timestamp_type_values(self) -> None:
        """Verify the three selectors and their stat fields."""
        assert TimestampType("mtime").stat_field == "st_mtime"
        assert TimestampType("ctime").stat_field == "st_ctime"
        assert TimestampType("atime").stat_field == "st_atime"
        assert len(TimestampType) == 3

    def test_unknown_selector_rejected(self) -> None:
        """Unknown selectors are not enum members."""
        with pytest.raises(ValueError):
            TimestampType("btime")


class TestCandidateFile:
    """Tests for CandidateFile frozen dataclass."""

    def test_basename(self) -> None:
        """basename is the final path component."""
        assert CandidateFile("/var/log/app/a.log").basename == "a.log"
        assert CandidateFile("a.log").basename == "a.log"

    def test_empty_path_raises(self) -> None:
        """Empty path raises ValueError."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            CandidateFile("")

    def test_timestamp_reads_selected_field(self, tmp_path: Path) -> None:
        """timestamp returns the requested stat time."""
        target = tmp_path / "a.log"
        target.write_text("x")
        os.utime(target, (1_000_000, 2_000_000))

        file = CandidateFile(str(target))

        assert file.timestamp(TimestampType.ATIME) == 1_000_000
        assert file.timestamp(TimestampType.MTIME) == 2_000_000
        assert file.timestamp(TimestampType.CTIME) <= time.time()

    def test_timestamp_missing_file_raises(self, tmp_path: Path) -> None:
        """Reading a timestamp of a vanished file raises OSError."""
        with pytest.raises(OSError):
            CandidateFile(str(tmp_path / "gone.log")).timestamp(TimestampType.MTIME)


class TestRunSummary:
    """Tests for RunSummary counters."""

    def test_starts_at_zero(self) -> None:
        """A new summary has every counter at zero."""
        summary = RunSummary()

        assert set(summary.compression) == set(CompressionOutcome)
        assert set(summary.retention) == set(RetentionOutcome)
        assert summary.total == 0
        assert summary.has_errors is False

    def test_record_and_merge(self) -> None:
        """Merging adds counters and leaves the other summary unchanged."""
        first = RunSummary()
        first.record_compression(CompressionOutcome.COMPRESSED)
        second = RunSummary()
        second.record_compression(CompressionOutcome.COMPRESSED)
        second.record_compression(CompressionOutcome.SKIPPED_RECENT)
        second.record_retention(RetentionOutcome.DELETED)

        first.merge(second)

        assert first.compression[CompressionOutcome.COMPRESSED] == 2
        assert first.compression[CompressionOutcome.SKIPPED_RECENT] == 1
        assert first.retention[RetentionOutcome.DELETED] == 1
        assert first.total == 4
        assert second.total == 3

    def test_has_errors(self) -> None:
        """has_errors reflects failures of either phase."""
        compression_failure = RunSummary()
        compression_failure.record_compression(CompressionOutcome.ERROR)
        deletion_failure = RunSummary()
        deletion_failure.record_retention(RetentionOutcome.ERROR)

        assert compression_failure.has_errors is True
        assert deletion_failure.has_errors is True

    def test_summaries_do_not_share_counters(self) -> None:
        """Each summary owns its own counter dictionaries."""
        first = RunSummary()
        second = RunSummary()

        first.record_retention(RetentionOutcome.DELETED)

        assert second.retention[RetentionOutcome.DELETED] == 0
