"""Selection shape enum."""

from enum import Enum


class SelectionType(str, Enum):
    """Shape of the editor selection a link was made from."""

    NORMAL = "Normal"
    RECTANGULAR = "Rectangular"
