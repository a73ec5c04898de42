"""Rotation domain models.

This module defines the data structures shared by the compression and
retention phases: the timestamp selector, per-file outcomes, the
candidate file wrapper and the run summary counters.
"""

import os
from dataclasses import dataclass, field
from enum import Enum

# Suffix of every compressed artifact produced by logsweep
COMPRESSED_SUFFIX = ".gz"


class TimestampType(str, Enum):
    """File timestamp used to compute ages.

    Attributes:
        MTIME: Last modification time.
        CTIME: Last status change time.
        ATIME: Last access time.
    """

    MTIME = "mtime"
    CTIME = "ctime"
    ATIME = "atime"

    @property
    def stat_field(self) -> str:
        """Name of the matching ``os.stat_result`` attribute."""
        return f"st_{self.value}"


class CompressionOutcome(str, Enum):
    """Outcome of the compression phase for one candidate file."""

    COMPRESSED = "compressed"
    ALREADY_COMPRESSED = "already_compressed"
    SKIPPED_OPEN = "skipped_open"
    SKIPPED_RECENT = "skipped_recent"
    SKIPPED_BLACKLISTED = "skipped_blacklisted"
    ERROR = "error"


class RetentionOutcome(str, Enum):
    """Outcome of the retention phase for one stale compressed file."""

    DELETED = "deleted"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """A regular file matched by a pattern at expansion time.

    Attributes:
        path: Path as discovered by the expander (absolute or relative).
    """

    path: str

    def __post_init__(self) -> None:
        """Validate candidate data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def basename(self) -> str:
        """Final path component, compared against the blacklist."""
        return os.path.basename(self.path)

    def timestamp(self, timestamp_type: TimestampType) -> float:
        """Read the selected timestamp from the filesystem.

        Args:
            timestamp_type: Which stat time to read.

        Returns:
            Seconds since the epoch.

        Raises:
            OSError: If the file cannot be stat'ed.
        """
        return getattr(os.stat(self.path), timestamp_type.stat_field)


@dataclass(slots=True)
class RunSummary:
    """Outcome counters for one run, or for one phase of one pattern.

    Engines return a fresh summary per invocation; the orchestrator
    merges them into the run summary it owns.
    """

    compression: dict[CompressionOutcome, int] = field(
        default_factory=lambda: dict.fromkeys(CompressionOutcome, 0)
    )
    retention: dict[RetentionOutcome, int] = field(
        default_factory=lambda: dict.fromkeys(RetentionOutcome, 0)
    )

    def record_compression(self, outcome: CompressionOutcome) -> None:
        """Count one compression outcome."""
        self.compression[outcome] += 1

    def record_retention(self, outcome: RetentionOutcome) -> None:
        """Count one retention outcome."""
        self.retention[outcome] += 1

    def merge(self, other: "RunSummary") -> None:
        """Add all counters of another summary to this one.

        Args:
            other: Summary to fold in; left unchanged.
        """
        for compression_outcome, count in other.compression.items():
            self.compression[compression_outcome] += count
        for retention_outcome, count in other.retention.items():
            self.retention[retention_outcome] += count

    @property
    def total(self) -> int:
        """Number of outcomes recorded across both phases."""
        return sum(self.compression.values()) + sum(self.retention.values())

    @property
    def has_errors(self) -> bool:
        """Check if any file failed to compress or delete."""
        return bool(
            self.compression[CompressionOutcome.ERROR] or self.retention[RetentionOutcome.ERROR]
        )
