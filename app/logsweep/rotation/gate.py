"""Eligibility predicates for compression.

Each predicate is independent and side-effect free apart from reading
file metadata. ``check_eligibility`` applies them in a fixed order
(blacklist, open, age) and stops at the first one that trips.
"""

from logsweep.core.config import ConfigurationError, RotationConfig
from logsweep.rotation.models import CandidateFile, CompressionOutcome, TimestampType
from logsweep.rotation.probe import OpenFileProbe


def resolve_timestamp_type(value: str) -> TimestampType:
    """Parse a timestamp selector.

    Args:
        value: One of "mtime", "ctime" or "atime".

    Returns:
        The matching TimestampType.

    Raises:
        ConfigurationError: If the selector is not recognised.
    """
    try:
        return TimestampType(value)
    except ValueError:
        msg = f"Invalid file timestamp type: {value!r} (expected mtime, ctime or atime)"
        raise ConfigurationError(msg) from None


def is_blacklisted(file: CandidateFile, config: RotationConfig) -> bool:
    """Check if the file's basename is exactly a blacklist entry."""
    return file.basename in config.blacklist


def is_open(file: CandidateFile, probe: OpenFileProbe) -> bool:
    """Check if the probe reports the file as held open."""
    return probe.is_open(file.path)


def age(file: CandidateFile, config: RotationConfig, now: float) -> float:
    """Compute seconds elapsed since the file's selected timestamp.

    Args:
        file: Candidate file.
        config: Rotation configuration (timestamp selector).
        now: Current time in seconds since the epoch.

    Returns:
        Age in seconds; negative for timestamps in the future.

    Raises:
        ConfigurationError: If the timestamp selector is invalid.
        OSError: If the file cannot be stat'ed.
    """
    timestamp_type = resolve_timestamp_type(config.file_timestamp_type)
    return now - file.timestamp(timestamp_type)


def is_recent(file: CandidateFile, config: RotationConfig, now: float) -> bool:
    """Check if the file is younger than the configured max_age."""
    return age(file, config, now) < config.max_age


def check_eligibility(
    file: CandidateFile,
    config: RotationConfig,
    probe: OpenFileProbe,
    now: float,
) -> CompressionOutcome | None:
    """Run the compression gate on one file.

    Args:
        file: Candidate file.
        config: Rotation configuration.
        probe: Open-file probe.
        now: Current time in seconds since the epoch.

    Returns:
        The skip outcome of the first failing predicate, or None if the
        file may be compressed.

    Raises:
        ConfigurationError: If the timestamp selector is invalid.
    """
    if is_blacklisted(file, config):
        return CompressionOutcome.SKIPPED_BLACKLISTED
    if is_open(file, probe):
        return CompressionOutcome.SKIPPED_OPEN
    if is_recent(file, config, now):
        return CompressionOutcome.SKIPPED_RECENT
    return None
