"""Run orchestration across all configured patterns.

Patterns are processed sequentially in configuration order: first the
compression phase, then the retention sweep derived from the same
pattern. The orchestrator owns the run summary and merges the partial
summaries returned by each phase.
"""

import logging

from logsweep.core.config import RotationConfig
from logsweep.rotation.compressor import CompressionEngine
from logsweep.rotation.gate import resolve_timestamp_type
from logsweep.rotation.models import RunSummary
from logsweep.rotation.probe import OpenFileProbe, default_probe
from logsweep.rotation.sweeper import RetentionSweeper, retention_pattern

logger = logging.getLogger(__name__)


def run_all(
    config: RotationConfig,
    probe: OpenFileProbe | None = None,
    *,
    compression: CompressionEngine | None = None,
    retention: RetentionSweeper | None = None,
) -> RunSummary:
    """Compress and sweep every configured pattern.

    The timestamp selector is checked before any file is touched, so an
    invalid selector aborts the run with nothing recorded.

    Args:
        config: Rotation configuration.
        probe: Open-file probe. If None, uses default_probe().
        compression: Compression engine override (defaults built from config).
        retention: Retention sweeper override (defaults built from config).

    Returns:
        Summary of all outcomes of the run.

    Raises:
        ConfigurationError: If the timestamp selector is invalid.
    """
    resolve_timestamp_type(config.file_timestamp_type)

    if config.dry_run:
        logger.info("DRY-RUN mode enabled: no changes will be applied")

    engine = compression or CompressionEngine(config, probe or default_probe())
    sweeper = retention or RetentionSweeper(config)

    summary = RunSummary()
    for pattern in config.patterns:
        summary.merge(engine.run(pattern))
        summary.merge(sweeper.run(retention_pattern(pattern, config)))

    return summary
