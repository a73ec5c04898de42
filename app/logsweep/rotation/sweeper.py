"""Retention phase: delete compressed artifacts past the retention window.

Search roots come from the directory portion of the compressed-file
pattern; each root is walked recursively, like ``find <root> -type f
-name <basename>``, without following directory symlinks.
"""

import fnmatch
import logging
import os
import time
from collections.abc import Callable, Iterator

from logsweep.core.config import RotationConfig
from logsweep.rotation.expander import expand_dirs
from logsweep.rotation.gate import resolve_timestamp_type
from logsweep.rotation.models import (
    COMPRESSED_SUFFIX,
    CandidateFile,
    RetentionOutcome,
    RunSummary,
)

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def retention_pattern(pattern: str, config: RotationConfig) -> str:
    """Derive the compressed-artifact pattern swept for a file pattern.

    With timestamp suffixes every ``*.*.gz`` file in the pattern's
    directory is targeted, which may include archives produced for
    other patterns sharing that directory.

    Args:
        pattern: Configured file pattern.
        config: Rotation configuration.

    Returns:
        Glob pattern of the compressed artifacts to sweep.
    """
    if config.use_timestamp_suffix:
        return os.path.join(os.path.dirname(pattern), f"*.*{COMPRESSED_SUFFIX}")
    return pattern + COMPRESSED_SUFFIX


class RetentionSweeper:
    """Deletes compressed files older than max_keep_days.

    Args:
        config: Rotation configuration.
        clock: Returns the current time in seconds since the epoch.
    """

    def __init__(
        self,
        config: RotationConfig,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._clock = clock

    def run(self, compressed_pattern: str) -> RunSummary:
        """Sweep the directories of a compressed-file pattern.

        Args:
            compressed_pattern: Pattern produced by retention_pattern().

        Returns:
            Summary holding the retention outcomes of this pattern.

        Raises:
            ConfigurationError: If the timestamp selector is invalid.
        """
        summary = RunSummary()
        logger.info(
            "Cleaning compressed files older than %s days for pattern: %s",
            self._config.max_keep_days,
            compressed_pattern,
        )

        basename = os.path.basename(compressed_pattern)
        for directory in expand_dirs(compressed_pattern):
            for path in self.find_stale(directory, basename):
                summary.record_retention(self._delete(path))

        return summary

    def find_stale(self, directory: str, basename: str) -> Iterator[str]:
        """Yield files below directory that are past the retention window.

        Args:
            directory: Search root, walked recursively.
            basename: Glob matched against each file's basename.

        Yields:
            Paths of regular files whose age in whole days exceeds
            max_keep_days, as with ``find -mtime +N``.
        """
        timestamp_type = resolve_timestamp_type(self._config.file_timestamp_type)
        now = self._clock()

        for root, dirs, files in os.walk(directory):
            dirs.sort()
            for name in sorted(files):
                if not fnmatch.fnmatchcase(name, basename):
                    continue
                path = os.path.join(root, name)
                if os.path.islink(path) or not os.path.isfile(path):
                    continue
                try:
                    file_age = now - CandidateFile(path).timestamp(timestamp_type)
                except OSError:
                    continue
                if file_age // SECONDS_PER_DAY > self._config.max_keep_days:
                    yield path

    def _delete(self, path: str) -> RetentionOutcome:
        """Delete one stale file, or simulate it in dry-run mode."""
        if self._config.dry_run:
            logger.info("[DRY-RUN] Would delete: %s", path)
            return RetentionOutcome.DELETED

        try:
            os.unlink(path)
        except OSError as e:
            logger.error("Deletion error: %s (%s)", path, e)
            return RetentionOutcome.ERROR

        logger.info("Deleted: %s", path)
        return RetentionOutcome.DELETED
