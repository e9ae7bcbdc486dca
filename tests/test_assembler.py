"""Tests for grouping fields into document entries."""

import pytest

from data_model import Field
from fdoc import DocumentAssembler, start_on_tags
from validator import ErrorCode, check_required


def fields(*tags):
    return [Field(tag, f"{tag} text", i + 1) for i, tag in enumerate(tags)]


def assemble(tags, **kwargs):
    asm = DocumentAssembler("sum.f90", **kwargs)
    for f in fields(*tags):
        asm.add(f)
    return asm.seal()


class TestGrouping:
    def test_empty_document_is_valid(self):
        doc = DocumentAssembler("empty.f90").seal()
        assert doc.is_empty
        assert doc.is_valid
        assert doc.entries == ()

    def test_new_entry_per_start_tag(self):
        doc = assemble(["description", "author", "description", "history"])
        assert [e.tags for e in doc.entries] == [
            ("description", "author"),
            ("description", "history"),
        ]
        assert [e.index for e in doc.entries] == [0, 1]
        assert [e.line_no for e in doc.entries] == [1, 3]

    def test_leading_fields_join_first_entry(self):
        doc = assemble(["author", "description", "description"])
        assert [e.tags for e in doc.entries] == [("author", "description"), ("description",)]

    def test_entry_count_equals_start_tags(self):
        tags = ["description", "author", "history", "description", "description"]
        doc = assemble(tags)
        assert len(doc.entries) == tags.count("description")

    def test_fields_without_start_tag_form_one_entry(self):
        doc = assemble(["author", "history"])
        assert len(doc.entries) == 1

    def test_custom_boundary_predicate(self):
        """Every field starts its own entry."""
        doc = assemble(["a", "b", "c"], boundary=lambda tag, current: True)
        assert len(doc.entries) == 3

    def test_custom_start_tags(self):
        doc = assemble(["sdoc", "x", "sdoc", "x"], boundary=start_on_tags({"SDOC"}))
        assert len(doc.entries) == 2

    def test_dialect_name_recorded(self):
        asm = DocumentAssembler("a.f90", dialect="xml")
        assert asm.seal().dialect == "xml"


class TestSealing:
    def test_add_after_seal_fails(self):
        asm = DocumentAssembler("a.f90")
        asm.seal()
        assert asm.sealed
        with pytest.raises(RuntimeError):
            asm.add(Field("description", "x", 1))

    def test_double_seal_fails(self):
        asm = DocumentAssembler("a.f90")
        asm.seal()
        with pytest.raises(RuntimeError):
            asm.seal()

    def test_document_is_frozen(self):
        doc = assemble(["description"])
        with pytest.raises(AttributeError):
            doc.name = "other"


class TestRequiredFields:
    def test_missing_required_field_reported_per_entry(self):
        doc = assemble(
            ["description", "author", "description"],
            required_tags={"author"},
        )
        assert len(doc.entries) == 2
        assert not doc.is_valid
        assert len(doc.issues) == 1
        issue = doc.issues[0]
        assert issue.code == ErrorCode.MISSING_REQUIRED_FIELD
        assert issue.entry_index == 1
        assert issue.tag == "author"
        assert doc.issues_for(doc.entries[1]) == [issue]
        assert doc.issues_for(doc.entries[0]) == []

    def test_required_tags_case_insensitive(self):
        doc = assemble(["description"], required_tags={"Description"})
        assert doc.is_valid

    def test_check_required_sorted(self):
        doc = assemble(["description"])
        issues = check_required(doc.entries[0], ["history", "author"])
        assert [i.tag for i in issues] == ["author", "history"]
