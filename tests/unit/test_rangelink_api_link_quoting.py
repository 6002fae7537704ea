"""Unit tests for path and link quoting."""

import pytest

from rangelink.api.link.needs_quoting import needs_quoting
from rangelink.api.link.quote_link import quote_link
from rangelink.api.link.quote_path import quote_path
from rangelink.api.link.unquote_link import unquote_link

pytestmark = pytest.mark.link


@pytest.mark.parametrize("path", ["src/file.ts", "C:/dev/a_b-c.py", "file:///tmp/x.md", "a.b.c"])
def test_safe_paths(path):
    assert needs_quoting(path) is False


@pytest.mark.parametrize("path", ["My Folder/file.ts", "it's.py", "a(b).ts", "a#b.ts", "naïve.py"])
def test_unsafe_paths(path):
    assert needs_quoting(path) is True


def test_empty_path_needs_no_quoting():
    assert needs_quoting("") is False


def test_quote_link_only_when_path_needs_it():
    assert quote_link("src/a.ts#L1", "src/a.ts") == "src/a.ts#L1"
    assert quote_link("my dir/a.ts#L1", "my dir/a.ts") == "'my dir/a.ts#L1'"


def test_quote_escapes_single_quotes():
    assert quote_path("it's.py") == "'it'\\''s.py'"
    assert quote_link("it's.py#L1", "it's.py") == "'it'\\''s.py#L1'"


def test_unquote_inverts_quote():
    link = "it's a.py#L1"
    assert unquote_link(quote_link(link, "it's a.py")) == link


def test_unquote_leaves_partial_quotes_alone():
    assert unquote_link("'a' b 'c'") == "'a' b 'c'"
    assert unquote_link("'abc") == "'abc"
    assert unquote_link("plain#L1") == "plain#L1"
