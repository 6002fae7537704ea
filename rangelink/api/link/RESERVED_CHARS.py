"""Characters a delimiter may not contain."""

# Path separators, URL/scheme punctuation and shell-special characters.
RESERVED_CHARS = ("~", "|", "/", "\\", ":", ",", "@")
