"""Unit tests for rangelink.api.link.compose_portable_metadata."""

import pytest

from rangelink.api.link.compose_portable_metadata import compose_portable_metadata
from rangelink.api.link.DelimiterConfig import DEFAULT_DELIMITERS, DelimiterConfig
from rangelink.api.link.format_link import format_link
from rangelink.api.link.LinkType import LinkType
from rangelink.api.link.SelectionType import SelectionType
from tests.unit.conftest import normal, rectangular, sel

pytestmark = pytest.mark.link


def test_line_only_metadata():
    assert compose_portable_metadata(DEFAULT_DELIMITERS, include_position=False) == "~#~L~-~"


def test_metadata_with_position():
    assert compose_portable_metadata(DEFAULT_DELIMITERS, include_position=True) == "~#~L~-~C~"


def test_custom_multi_char_delimiters():
    delimiters = DelimiterConfig(line="LINE", position="COL", range="TO", hash="!")
    assert compose_portable_metadata(delimiters, include_position=True) == "~!~LINE~TO~COL~"


class TestPortableFormat:
    def test_line_range(self):
        result = format_link("src/a.ts", normal(sel(9, 0, 19, 0, whole_line=True)), DEFAULT_DELIMITERS, portable=True)
        assert result.value.link == "src/a.ts#L10-L20~#~L~-~"
        assert result.value.link_type == LinkType.PORTABLE

    def test_columns_add_position_field(self):
        result = format_link("src/a.ts", normal(sel(9, 4, 19, 14)), DEFAULT_DELIMITERS, portable=True)
        assert result.value.link == "src/a.ts#L10C5-L20C15~#~L~-~C~"

    def test_rectangular_keeps_doubled_hash(self):
        block = rectangular(sel(2, 0, 2, 4), sel(3, 0, 3, 4))
        formatted = format_link("a.py", block, DEFAULT_DELIMITERS, portable=True).value
        assert formatted.link == "a.py##L3C1-L4C5~#~L~-~C~"
        assert formatted.link_type == LinkType.PORTABLE
        assert formatted.selection_type == SelectionType.RECTANGULAR

    def test_quoted_path_wraps_whole_link(self):
        selection = normal(sel(0, 0, 0, 0, whole_line=True))
        formatted = format_link("My Folder/a.py", selection, DEFAULT_DELIMITERS, portable=True).value
        assert formatted.raw_link == "My Folder/a.py#L1~#~L~-~"
        assert formatted.link == "'My Folder/a.py#L1~#~L~-~'"

    def test_regular_link_has_no_metadata(self):
        formatted = format_link("a.py", normal(sel(0, 0, 0, 0, whole_line=True)), DEFAULT_DELIMITERS).value
        assert formatted.link == "a.py#L1"
        assert formatted.link_type == LinkType.REGULAR
