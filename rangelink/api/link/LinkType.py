"""Link type enum."""

from enum import Enum


class LinkType(str, Enum):
    """Encoding flavour of a link.

    REGULAR and RECTANGULAR use a single or doubled hash. PORTABLE links
    also carry their delimiters as trailing metadata; their selection type
    still records whether the hash was doubled.
    """

    REGULAR = "Regular"
    RECTANGULAR = "Rectangular"
    PORTABLE = "Portable"
