"""
generator — renderery Document do LaTeX i HTML.

Renderery zależą wyłącznie od data_model (nigdy od wnętrza skanera),
dokument traktują tylko do odczytu.

Publiczne API:
  render_latex(document)             → str
  render_html(document)              → str
  Generator(output_dir, formats).generate(document) → list[Path]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from data_model.documents import Document

from .html import render_html
from .latex import latex_escape, render_latex

FORMATS: dict[str, tuple[str, Callable[[Document], str]]] = {
    "latex": (".tex",  render_latex),
    "html":  (".html", render_html),
}


class Generator:
    """Zapisuje wyrenderowane pliki <stem>.tex / <stem>.html do output_dir."""

    def __init__(
        self,
        output_dir: str | Path = ".",
        formats: Iterable[str] = ("latex", "html"),
    ) -> None:
        self.output_dir = Path(output_dir)
        self.formats = list(formats)
        unknown = [f for f in self.formats if f not in FORMATS]
        if unknown:
            raise ValueError(
                f"Nieznany format: {', '.join(unknown)} (dostępne: {', '.join(FORMATS)})"
            )

    def output_paths(self, document: Document) -> list[Path]:
        """Ścieżki plików, które generate() zapisze dla dokumentu."""
        stem = Path(document.name).stem or "document"
        return [self.output_dir / f"{stem}{FORMATS[fmt][0]}" for fmt in self.formats]

    def generate(self, document: Document) -> list[Path]:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for fmt, out in zip(self.formats, self.output_paths(document)):
            out.write_text(FORMATS[fmt][1](document), encoding="utf-8")
            written.append(out)
        return written


__all__ = [
    "FORMATS",
    "Generator",
    "latex_escape",
    "render_html",
    "render_latex",
]
