"""Compression phase: gate candidate files and gzip the eligible ones.

The compressed artifact replaces its source. It is written to a hidden
temporary file next to the target and renamed into place before the
source is removed, so an interrupted run leaves either the untouched
source or a complete archive, never a truncated one.
"""

import gzip
import logging
import os
import shutil
import time
from collections.abc import Callable
from datetime import datetime
from tempfile import NamedTemporaryFile

from logsweep.core.config import RotationConfig
from logsweep.rotation.expander import expand
from logsweep.rotation.gate import check_eligibility
from logsweep.rotation.models import (
    COMPRESSED_SUFFIX,
    CandidateFile,
    CompressionOutcome,
    RunSummary,
)
from logsweep.rotation.probe import OpenFileProbe

logger = logging.getLogger(__name__)

CompressFn = Callable[[str, str], bool]


def _discard(path: str) -> None:
    """Remove a file if present, ignoring a concurrent removal."""
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


def gzip_file(source: str, suffix: str = COMPRESSED_SUFFIX) -> bool:
    """Compress source into ``source + suffix`` and remove source.

    The source mode is copied onto the archive and its mtime is kept in
    the gzip header. The archive itself carries fresh timestamps, so
    retention ages count from the moment of compression.

    Args:
        source: Path of the file to compress.
        suffix: Suffix appended to form the archive name.

    Returns:
        True on success. False on any I/O failure, in which case the
        source is left in place and no archive is left behind.
    """
    target = source + suffix
    directory, name = os.path.split(target)
    tmp_path: str | None = None

    try:
        source_stat = os.stat(source)
        with NamedTemporaryFile(
            mode="wb",
            dir=directory or os.curdir,
            prefix=f".{name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = tmp.name
            with (
                open(source, "rb") as src,
                gzip.GzipFile(
                    filename=os.path.basename(source),
                    mode="wb",
                    fileobj=tmp,
                    mtime=int(source_stat.st_mtime),
                ) as dst,
            ):
                shutil.copyfileobj(src, dst)
            tmp.flush()
            os.fsync(tmp.fileno())
        shutil.copymode(source, tmp_path)
        os.replace(tmp_path, target)
        tmp_path = None
    except OSError as e:
        logger.error("Compression failed for %s: %s", source, e)
        if tmp_path is not None:
            _discard(tmp_path)
        return False

    try:
        os.unlink(source)
    except OSError as e:
        logger.error("Cannot remove %s after compression, discarding %s: %s", source, target, e)
        _discard(target)
        return False

    return True


class CompressionEngine:
    """Compresses the eligible files matched by a pattern.

    Args:
        config: Rotation configuration.
        probe: Open-file probe consulted before compressing.
        compress: Compression capability, ``compress(source, suffix) -> bool``.
        clock: Returns the current time in seconds since the epoch.
    """

    def __init__(
        self,
        config: RotationConfig,
        probe: OpenFileProbe,
        *,
        compress: CompressFn = gzip_file,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._probe = probe
        self._compress = compress
        self._clock = clock

    def run(self, pattern: str) -> RunSummary:
        """Process every file matched by a pattern.

        Paths already ending in the compressed suffix are never
        candidates. Files are handled one at a time in discovery order.

        Args:
            pattern: Glob pattern of the files to compress.

        Returns:
            Summary holding the compression outcomes of this pattern.

        Raises:
            ConfigurationError: If the timestamp selector is invalid.
        """
        summary = RunSummary()
        candidates = [
            CandidateFile(path)
            for path in expand(pattern)
            if not path.endswith(COMPRESSED_SUFFIX)
        ]

        if not candidates:
            logger.info("No files to process for pattern: %s", pattern)
            return summary

        for file in candidates:
            outcome = self._process(file)
            if outcome is not None:
                summary.record_compression(outcome)

        return summary

    def suffix(self) -> str:
        """Build the archive suffix for a compression happening now."""
        if self._config.use_timestamp_suffix:
            stamp = datetime.fromtimestamp(self._clock()).strftime(
                self._config.timestamp_suffix_format
            )
            return f".{stamp}{COMPRESSED_SUFFIX}"
        return COMPRESSED_SUFFIX

    def _process(self, file: CandidateFile) -> CompressionOutcome | None:
        """Gate and compress a single file.

        Returns:
            The recorded outcome, or None if the file vanished since
            expansion.
        """
        if not os.path.isfile(file.path):
            return None

        try:
            skip = check_eligibility(file, self._config, self._probe, self._clock())
        except OSError as e:
            logger.error("Cannot read timestamps of %s: %s", file.path, e)
            return CompressionOutcome.ERROR

        if skip is CompressionOutcome.SKIPPED_BLACKLISTED:
            logger.info("Skipping blacklisted file: %s", file.path)
            return skip
        if skip is CompressionOutcome.SKIPPED_OPEN:
            logger.info("Skipping open file: %s", file.path)
            return skip
        if skip is CompressionOutcome.SKIPPED_RECENT:
            logger.info(
                "Skipping recent file (younger than %ss): %s", self._config.max_age, file.path
            )
            return skip

        suffix = self.suffix()
        target = file.path + suffix

        if os.path.lexists(target):
            logger.info("Already compressed: %s", target)
            return CompressionOutcome.ALREADY_COMPRESSED

        if self._config.dry_run:
            logger.info("[DRY-RUN] Would compress: %s -> %s", file.path, target)
            return CompressionOutcome.COMPRESSED

        if self._compress(file.path, suffix):
            logger.info("Compressed: %s -> %s", file.path, target)
            return CompressionOutcome.COMPRESSED

        logger.error("Compression error: %s", file.path)
        return CompressionOutcome.ERROR
