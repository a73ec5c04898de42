"""Open-file probes.

A probe answers whether any process currently holds a file open. The
answer is best-effort: when the probing tool is missing or fails, the
file is reported as not open so compression is never blocked by the
probe itself.
"""

import logging
import shutil
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)

LSOF_TIMEOUT_SECONDS = 10.0


class OpenFileProbe(Protocol):
    """Capability that checks whether a path is held open."""

    def is_open(self, path: str) -> bool:
        """Check if any process holds the path open."""
        ...


class NullProbe:
    """Probe used when no open-file table is available.

    Every path is reported as not open.
    """

    def is_open(self, path: str) -> bool:
        """Report the path as not open."""
        return False


class LsofProbe:
    """Probe backed by ``lsof <path>``.

    lsof exits 0 when at least one process has the file open and 1
    otherwise.

    Args:
        executable: lsof binary name or path.
        timeout: Maximum time in seconds to wait for lsof.
    """

    def __init__(self, executable: str = "lsof", timeout: float = LSOF_TIMEOUT_SECONDS) -> None:
        self._executable = executable
        self._timeout = timeout

    def is_available(self) -> bool:
        """Check if the lsof binary is on PATH."""
        return shutil.which(self._executable) is not None

    def is_open(self, path: str) -> bool:
        """Check if any process holds the path open.

        Args:
            path: File path to look up.

        Returns:
            True if lsof reports the file open; False if it does not,
            or if lsof cannot be run.
        """
        try:
            result = subprocess.run(
                [self._executable, path],
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("lsof timed out for %s, assuming not open", path)
            return False
        except (FileNotFoundError, OSError) as e:
            logger.debug("lsof unavailable (%s), assuming not open", e)
            return False
        return result.returncode == 0


def default_probe() -> OpenFileProbe:
    """Select the probe for the current environment.

    Returns:
        An LsofProbe when lsof is installed, a NullProbe otherwise.
    """
    probe = LsofProbe()
    if probe.is_available():
        return probe
    logger.debug("lsof not found on PATH, open-file checks disabled")
    return NullProbe()
