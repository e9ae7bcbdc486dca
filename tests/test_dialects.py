"""Tests for delimiter dialects."""

import pytest

from fdoc import (
    DefaultDialect,
    MarkerKind,
    UnknownDialectError,
    XmlDialect,
    get_dialect,
)
from validator import ErrorCode


class TestMarkers:
    def test_default_markers(self):
        d = DefaultDialect()
        assert d.open("description") == ":description+:"
        assert d.close("description") == ":description-:"

    def test_xml_markers(self):
        d = XmlDialect()
        assert d.open("description") == "<description>"
        assert d.close("description") == "</description>"

    def test_markers_are_lower_case(self):
        assert DefaultDialect().open("Author") == ":author+:"
        assert XmlDialect().close("HISTORY") == "</history>"

    def test_invalid_tag_name_rejected(self):
        with pytest.raises(ValueError):
            DefaultDialect().open("not a tag")


class TestMatch:
    def test_default_open_and_close(self):
        d = DefaultDialect()
        m = d.match(":description+:")
        assert m.kind is MarkerKind.OPEN
        assert m.tag == "description"
        m = d.match(":description-:")
        assert m.kind is MarkerKind.CLOSE

    def test_xml_open_and_close(self):
        d = XmlDialect()
        assert d.match("<author>").kind is MarkerKind.OPEN
        assert d.match("</author>").kind is MarkerKind.CLOSE

    def test_surrounding_text_is_ignored(self):
        """Marker inside a Fortran comment with leading whitespace."""
        m = DefaultDialect().match("   !:Description+:  trailing words")
        assert m is not None
        assert m.tag == "description"
        assert m.column == 4

    def test_plain_code_does_not_match(self):
        assert DefaultDialect().match("  s = SUM(x)") is None
        assert XmlDialect().match("  IF (a < b) c = d") is None

    def test_dialects_ignore_each_other(self):
        assert DefaultDialect().match("<description>") is None
        assert XmlDialect().match(":description+:") is None

    def test_only_first_marker_counts(self):
        m = XmlDialect().match("<author> Paul </author>")
        assert m.kind is MarkerKind.OPEN
        assert m.column == 0


class TestGetDialect:
    def test_by_name(self):
        assert isinstance(get_dialect("default"), DefaultDialect)
        assert isinstance(get_dialect("XML"), XmlDialect)

    def test_passthrough_instance(self):
        d = XmlDialect()
        assert get_dialect(d) is d

    def test_unknown_dialect(self):
        with pytest.raises(UnknownDialectError) as exc:
            get_dialect("markdown")
        assert exc.value.code == ErrorCode.UNKNOWN_DIALECT
        assert "markdown" in str(exc.value)
