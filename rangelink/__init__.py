"""RangeLink - portable links to line/column ranges in source files."""
