"""Configure logging from the configuration file."""

from rangelink.api.config.get_home_dir import get_home_dir
from rangelink.api.config.RangeLinkConfig import RangeLinkConfig
from rangelink.logging_config import setup_logging


def _configure_logging() -> None:
    """Set up logging with the configured level and file.

    An unreadable configuration falls back to the defaults; the command that
    runs next reports the configuration error itself.
    """
    try:
        log_config = RangeLinkConfig.load().log
    except ValueError:
        log_config = RangeLinkConfig().log
    setup_logging(level=log_config.numeric_level, log_file=get_home_dir(log_config.file))
