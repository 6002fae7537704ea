"""Upper bound on the length of a link accepted by the parser."""

MAX_LINK_LENGTH = 3000
