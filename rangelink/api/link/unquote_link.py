"""Undo quote_link (UNO: single function)."""

_ESCAPED_QUOTE = "'\\''"


def unquote_link(text: str) -> str:
    """Strip the single quotes around a fully quoted link.

    Text that is not entirely wrapped in one pair of single quotes is returned
    unchanged.
    """
    if len(text) < 2 or not (text.startswith("'") and text.endswith("'")):
        return text
    inner = text[1:-1]
    if "'" in inner.replace(_ESCAPED_QUOTE, ""):
        return text
    return inner.replace(_ESCAPED_QUOTE, "'")
