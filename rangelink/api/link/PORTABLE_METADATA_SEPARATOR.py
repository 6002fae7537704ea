"""Separator between the fields of portable link metadata."""

# Reserved for delimiters, so it can never collide with one.
PORTABLE_METADATA_SEPARATOR = "~"
