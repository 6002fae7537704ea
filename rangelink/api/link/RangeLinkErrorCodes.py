"""Error codes for RangeLink errors.

Values equal their names so log lines are readable without a lookup table.
"""

from enum import Enum


class RangeLinkErrorCodes(str, Enum):
    # Configuration errors
    CONFIG_DELIMITER_DIGITS = "CONFIG_DELIMITER_DIGITS"
    CONFIG_DELIMITER_EMPTY = "CONFIG_DELIMITER_EMPTY"
    CONFIG_DELIMITER_NOT_UNIQUE = "CONFIG_DELIMITER_NOT_UNIQUE"
    CONFIG_DELIMITER_RESERVED = "CONFIG_DELIMITER_RESERVED"
    CONFIG_DELIMITER_SUBSTRING_CONFLICT = "CONFIG_DELIMITER_SUBSTRING_CONFLICT"
    CONFIG_DELIMITER_WHITESPACE = "CONFIG_DELIMITER_WHITESPACE"
    CONFIG_HASH_NOT_SINGLE_CHAR = "CONFIG_HASH_NOT_SINGLE_CHAR"

    # Link parsing errors
    PARSE_CHAR_BACKWARD_SAME_LINE = "PARSE_CHAR_BACKWARD_SAME_LINE"
    PARSE_CHAR_BELOW_MINIMUM = "PARSE_CHAR_BELOW_MINIMUM"
    PARSE_EMPTY_LINK = "PARSE_EMPTY_LINK"
    PARSE_EMPTY_PATH = "PARSE_EMPTY_PATH"
    PARSE_INVALID_RANGE_FORMAT = "PARSE_INVALID_RANGE_FORMAT"
    PARSE_LINE_BACKWARD = "PARSE_LINE_BACKWARD"
    PARSE_LINE_BELOW_MINIMUM = "PARSE_LINE_BELOW_MINIMUM"
    PARSE_LINK_TOO_LONG = "PARSE_LINK_TOO_LONG"
    PARSE_NO_HASH_SEPARATOR = "PARSE_NO_HASH_SEPARATOR"
    PARSE_URL_NOT_SUPPORTED = "PARSE_URL_NOT_SUPPORTED"

    # Result type errors
    RESULT_ERROR_ACCESS_ON_SUCCESS = "RESULT_ERROR_ACCESS_ON_SUCCESS"
    RESULT_VALUE_ACCESS_ON_ERROR = "RESULT_VALUE_ACCESS_ON_ERROR"

    # Selection validation errors
    SELECTION_BACKWARD_CHARACTER = "SELECTION_BACKWARD_CHARACTER"
    SELECTION_BACKWARD_LINE = "SELECTION_BACKWARD_LINE"
    SELECTION_EMPTY = "SELECTION_EMPTY"
    SELECTION_NEGATIVE_COORDINATES = "SELECTION_NEGATIVE_COORDINATES"
    SELECTION_RECTANGULAR_MISMATCHED_COLUMNS = "SELECTION_RECTANGULAR_MISMATCHED_COLUMNS"
    SELECTION_RECTANGULAR_MULTILINE = "SELECTION_RECTANGULAR_MULTILINE"
    SELECTION_RECTANGULAR_NON_CONTIGUOUS = "SELECTION_RECTANGULAR_NON_CONTIGUOUS"
    SELECTION_RECTANGULAR_UNSORTED = "SELECTION_RECTANGULAR_UNSORTED"
    SELECTION_UNKNOWN_TYPE = "SELECTION_UNKNOWN_TYPE"
