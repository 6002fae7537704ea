"""Load delimiters and notation for the link commands."""

from .DelimiterConfig import DelimiterConfig
from .RangeNotation import RangeNotation


def _load_link_settings() -> tuple[DelimiterConfig, RangeNotation, list[str]]:
    """Return configured delimiters and notation, falling back to defaults.

    Returns:
        (delimiters, notation, errors); errors holds the configuration problem
        when the file could not be loaded
    """
    from ..config.RangeLinkConfig import RangeLinkConfig

    try:
        config = RangeLinkConfig.load()
    except ValueError as e:
        return DelimiterConfig(), RangeNotation.AUTO, [str(e)]
    return config.delimiters, config.notation, []
