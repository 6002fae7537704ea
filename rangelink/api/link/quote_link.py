"""Single-quote a link when its path needs it (UNO: single function)."""

from .needs_quoting import needs_quoting


def quote_link(link: str, path: str) -> str:
    """Wrap the whole link in single quotes when ``path`` needs quoting.

    Quoting is decided on the path alone since the anchor only ever holds
    delimiters and digits.
    """
    if not needs_quoting(path):
        return link
    return "'" + link.replace("'", "'\\''") + "'"
