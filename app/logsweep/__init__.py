"""logsweep - compress and expire already-rotated log files."""

__version__ = "0.1.0"
