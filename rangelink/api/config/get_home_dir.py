"""Get RangeLink home directory path or path under it."""

import os
from pathlib import Path

from ...constants import RANGELINK_HOME_ENV, RANGELINK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get RangeLink home directory path or path under it.

    Checks the RANGELINK_HOME environment variable first, defaults to
    ~/.rangelink if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.rangelink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.rangelink/config.json")
    """
    home_env = os.environ.get(RANGELINK_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / RANGELINK_HOME_EXT

    return home / Path(*parts) if parts else home
