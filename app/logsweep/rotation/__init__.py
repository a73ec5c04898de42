"""Log compression and retention engine.

This module provides pattern expansion, the compression eligibility
gate, open-file probes, the compression engine, the retention sweeper
and the orchestrator tying them together.
"""

from logsweep.rotation.compressor import CompressionEngine, gzip_file
from logsweep.rotation.expander import expand, expand_dirs
from logsweep.rotation.models import (
    COMPRESSED_SUFFIX,
    CandidateFile,
    CompressionOutcome,
    RetentionOutcome,
    RunSummary,
    TimestampType,
)
from logsweep.rotation.orchestrator import run_all
from logsweep.rotation.probe import LsofProbe, NullProbe, OpenFileProbe, default_probe
from logsweep.rotation.sweeper import RetentionSweeper, retention_pattern

__all__ = [
    "COMPRESSED_SUFFIX",
    "CandidateFile",
    "CompressionEngine",
    "CompressionOutcome",
    "LsofProbe",
    "NullProbe",
    "OpenFileProbe",
    "RetentionOutcome",
    "RetentionSweeper",
    "RunSummary",
    "TimestampType",
    "default_probe",
    "expand",
    "expand_dirs",
    "gzip_file",
    "retention_pattern",
    "run_all",
]
