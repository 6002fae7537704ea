"""Shared constants for the RangeLink home directory."""

RANGELINK_HOME_EXT = ".rangelink"  # user-level state/config directory suffix

# Environment variable overriding the home directory
RANGELINK_HOME_ENV = "RANGELINK_HOME"
