"""Tests for LaTeX and HTML rendering."""

import pytest
from bs4 import BeautifulSoup

from data_model import Document, DocumentEntry, Field
from generator import Generator, latex_escape, render_html, render_latex


@pytest.fixture
def document():
    return Document(
        name="sum_module.f90",
        entries=(
            DocumentEntry(0, 5, (
                Field("description", "Computes sums & means.\n  x_i < 100%", 5),
                Field("author", "Paul van Delst", 10),
            )),
            DocumentEntry(1, 19, (Field("description", "", 19),)),
        ),
    )


class TestLatex:
    def test_escape(self):
        assert latex_escape("a_b & 50%") == r"a\_b \& 50\%"
        assert latex_escape("\\x") == r"\textbackslash{}x"

    def test_structure(self, document):
        tex = render_latex(document)
        assert tex.startswith(r"\documentclass")
        assert r"\title{sum\_module.f90}" in tex
        assert r"\section{Computes sums \& means.}" in tex
        assert r"\paragraph{AUTHOR}" in tex
        assert "x_i < 100%" in tex  # treść w verbatim bez escapowania
        assert tex.rstrip().endswith(r"\end{document}")

    def test_verbatim_end_in_body_neutralised(self):
        doc = Document("a.f90", entries=(
            DocumentEntry(0, 1, (Field("note", "see \\end{verbatim} here", 1),)),
        ))
        tex = render_latex(doc)
        assert tex.count(r"\end{verbatim}") == 1

    def test_empty_document(self):
        assert "Brak dokumentacji" in render_latex(Document("empty.f90"))


class TestHtml:
    def test_structure_and_escaping(self, document):
        html = render_html(document)
        soup = BeautifulSoup(html, "html.parser")
        assert soup.title.string == "sum_module.f90"
        sections = soup.find_all("section")
        assert [s["id"] for s in sections] == ["entry-1", "entry-2"]
        assert sections[0].h2.string == "Computes sums & means."
        assert [dt.string for dt in sections[0].find_all("dt")] == ["DESCRIPTION", "AUTHOR"]
        assert sections[0].find("pre").string == "Computes sums & means.\n  x_i < 100%"
        assert "&lt; 100%" in html

    def test_toc_for_multiple_entries(self, document):
        soup = BeautifulSoup(render_html(document), "html.parser")
        links = [a["href"] for a in soup.select("ul.toc a")]
        assert links == ["#entry-1", "#entry-2"]

    def test_empty_document(self):
        assert "Brak dokumentacji" in render_html(Document("empty.f90"))


class TestGenerator:
    def test_writes_both_formats(self, document, tmp_path):
        written = Generator(tmp_path / "out").generate(document)
        assert [p.name for p in written] == ["sum_module.tex", "sum_module.html"]
        assert all(p.exists() for p in written)

    def test_single_format(self, document, tmp_path):
        written = Generator(tmp_path, ["html"]).generate(document)
        assert [p.suffix for p in written] == [".html"]

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            Generator(tmp_path, ["pdf"])

    def test_output_paths_depend_only_on_stem(self, tmp_path):
        gen = Generator(tmp_path, ["latex"])
        a = Document("src/m.f90")
        b = Document("lib/m.f90")
        assert gen.output_paths(a) == gen.output_paths(b) == [tmp_path / "m.tex"]
        assert not (tmp_path / "m.tex").exists()
