"""Rotation configuration model and loading.

The configuration is a flat TOML mapping validated by Pydantic. It is
loaded once per run and never mutated afterwards; the CLI derives a
dry-run copy with ``model_copy`` when ``--dry`` is given.

Example config.toml::

    patterns = ["/var/log/app/*.log*"]
    blacklist = ["access_log"]
    max_keep_days = 30
    max_age = 600
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from logsweep.core.paths import get_config_path, get_default_log_path


class ConfigurationError(Exception):
    """Fatal configuration problem that aborts the whole run."""


class ConfigNotFoundError(ConfigurationError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigurationError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration content is invalid."""


class RotationConfig(BaseModel):
    """Settings for one compression and retention run.

    Attributes:
        patterns: Glob patterns of the files to manage, processed in order.
        blacklist: Basenames that are never compressed (exact match).
        max_keep_days: Retention window for compressed files, in days.
        max_age: Minimum idle time before a file is compressed, in seconds.
        use_timestamp_suffix: Embed the compression time in the archive name.
        timestamp_suffix_format: strftime format of the embedded timestamp.
        file_timestamp_type: Stat field used for ages (mtime, ctime or atime).
            Checked when a run starts, not at load time.
        dry_run: Report planned actions without touching the filesystem.
        log_enabled: Also append log lines to log_file.
        log_file: Path of the run log.
        output_date_format: strftime format of the log line timestamps.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    patterns: Annotated[
        list[str],
        Field(default_factory=list, description="Glob patterns of managed files"),
    ]
    blacklist: Annotated[
        list[str],
        Field(default_factory=list, description="Basenames excluded from compression"),
    ]
    max_keep_days: Annotated[
        int,
        Field(ge=0, description="Retention window for compressed files (days)"),
    ] = 30
    max_age: Annotated[
        int,
        Field(ge=0, description="Minimum idle time before compression (seconds)"),
    ] = 600
    use_timestamp_suffix: Annotated[
        bool,
        Field(description="Embed the compression timestamp in archive names"),
    ] = True
    timestamp_suffix_format: Annotated[
        str,
        Field(min_length=1, description="strftime format of the archive timestamp"),
    ] = "%Y%m%d-%H%M%S"
    file_timestamp_type: Annotated[
        str,
        Field(description="Stat field used for file ages: mtime, ctime or atime"),
    ] = "mtime"
    dry_run: Annotated[
        bool,
        Field(description="Simulate actions without modifying the filesystem"),
    ] = False
    log_enabled: Annotated[
        bool,
        Field(description="Append log lines to log_file"),
    ] = True
    log_file: Annotated[
        Path,
        Field(default_factory=get_default_log_path, description="Run log path"),
    ]
    output_date_format: Annotated[
        str,
        Field(min_length=1, description="strftime format of log timestamps"),
    ] = "%Y-%m-%d %H:%M:%S"


def load_config(path: Path | None = None) -> RotationConfig:
    """Load and validate the rotation configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RotationConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigurationError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read config: {e}") from e

    try:
        return RotationConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e
