"""Logging setup for a logsweep run.

Every module logs through ``logging.getLogger(__name__)``; this module
wires the ``logsweep`` logger to stdout and, when enabled, to the
append-only run log. Each line is ``[<timestamp>] <message>``.
"""

import logging
import logging.config
import sys

from logsweep.core.config import RotationConfig

LOGGER_NAME = "logsweep"


def configure_logging(config: RotationConfig) -> None:
    """Configure the package logger for one run.

    Replaces any handlers installed by a previous call, so repeated runs
    in one process never duplicate lines.

    Args:
        config: Rotation configuration carrying the log settings.

    Raises:
        OSError: If the log file or its directory cannot be created or opened.
    """
    handlers: dict[str, dict[str, object]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "timestamped",
            "stream": sys.stdout,
        },
    }
    if config.log_enabled:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        # dictConfig reports open failures as ValueError; surface the OSError here
        with open(config.log_file, "a", encoding="utf-8"):
            pass
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "timestamped",
            "filename": str(config.log_file),
            "mode": "a",
            "encoding": "utf-8",
        }

    for handler in list(logging.getLogger(LOGGER_NAME).handlers):
        handler.close()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "timestamped": {
                    "format": "[%(asctime)s] %(message)s",
                    "datefmt": config.output_date_format,
                },
            },
            "handlers": handlers,
            "loggers": {
                LOGGER_NAME: {
                    "handlers": list(handlers),
                    "level": "INFO",
                },
            },
        }
    )
