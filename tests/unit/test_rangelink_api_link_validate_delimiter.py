"""Unit tests for validate_delimiter and validate_delimiter_config."""

import pytest

from rangelink.api.link.DelimiterConfig import DEFAULT_DELIMITERS, DelimiterConfig
from rangelink.api.link.RangeLinkErrorCodes import RangeLinkErrorCodes
from rangelink.api.link.validate_delimiter import validate_delimiter
from rangelink.api.link.validate_delimiter_config import validate_delimiter_config

pytestmark = pytest.mark.link


@pytest.mark.parametrize("value", ["L", "C", "-", "#", "line", ">>", "$"])
def test_valid_delimiters(value):
    assert validate_delimiter(value).success is True


@pytest.mark.parametrize(
    ("value", "is_hash", "code"),
    [
        ("", False, RangeLinkErrorCodes.CONFIG_DELIMITER_EMPTY),
        ("  ", False, RangeLinkErrorCodes.CONFIG_DELIMITER_EMPTY),
        ("##", True, RangeLinkErrorCodes.CONFIG_HASH_NOT_SINGLE_CHAR),
        ("L1", False, RangeLinkErrorCodes.CONFIG_DELIMITER_DIGITS),
        ("a b", False, RangeLinkErrorCodes.CONFIG_DELIMITER_WHITESPACE),
        ("~", False, RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED),
        ("|", False, RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED),
        ("/", False, RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED),
        ("\\", False, RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED),
        (":", False, RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED),
        (",", False, RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED),
        ("x@", False, RangeLinkErrorCodes.CONFIG_DELIMITER_RESERVED),
    ],
)
def test_invalid_delimiters(value, is_hash, code):
    result = validate_delimiter(value, is_hash=is_hash)
    assert result.success is False
    assert result.error.code == code


def test_reserved_char_is_reported():
    assert validate_delimiter("a:b").error.details["reserved_char"] == ":"


def test_default_config_is_valid():
    assert validate_delimiter_config(DEFAULT_DELIMITERS).success is True


def test_config_reports_field():
    result = validate_delimiter_config(DelimiterConfig(position="C1"))
    assert result.error.code == RangeLinkErrorCodes.CONFIG_DELIMITER_DIGITS
    assert result.error.details["field"] == "position"


def test_config_hash_must_be_single_char():
    result = validate_delimiter_config(DelimiterConfig(hash=">>"))
    assert result.error.code == RangeLinkErrorCodes.CONFIG_HASH_NOT_SINGLE_CHAR


def test_config_uniqueness_is_case_insensitive():
    result = validate_delimiter_config(DelimiterConfig(line="L", position="l"))
    assert result.error.code == RangeLinkErrorCodes.CONFIG_DELIMITER_NOT_UNIQUE


def test_config_substring_conflict():
    result = validate_delimiter_config(DelimiterConfig(line="L", position="LC"))
    assert result.error.code == RangeLinkErrorCodes.CONFIG_DELIMITER_SUBSTRING_CONFLICT
