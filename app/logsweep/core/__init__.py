"""Configuration, paths and logging setup for logsweep."""
