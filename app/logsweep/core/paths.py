"""XDG-compliant path management for logsweep.

This module provides standardized paths following the XDG Base Directory
Specification for the configuration file and the run log.

XDG defaults:
- Config: ~/.config/logsweep/config.toml
- State: ~/.local/state/logsweep/logsweep.log
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "logsweep"

# Environment variable overriding the configuration file location
CONFIG_ENV_VAR = "LOGSWEEP_CONFIG"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/logsweep/ (or XDG_CONFIG_HOME/logsweep/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    Returns:
        Path to ~/.local/state/logsweep/ (or XDG_STATE_HOME/logsweep/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the configuration file path.

    LOGSWEEP_CONFIG takes precedence over the XDG location.

    Returns:
        Path to the TOML configuration file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / "config.toml"


def get_default_log_path() -> Path:
    """Get the default run log path.

    Returns:
        Path to ~/.local/state/logsweep/logsweep.log.
    """
    return get_state_dir() / "logsweep.log"
