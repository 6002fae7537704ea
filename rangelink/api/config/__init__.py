"""Config API module."""

from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .LogConfig import LogConfig
from .RangeLinkConfig import RangeLinkConfig

__all__ = ["LogConfig", "RangeLinkConfig", "get_config_path", "get_home_dir", "get_package_version"]
