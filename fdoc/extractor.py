"""
fdoc/extractor.py — budowa wartości pola z linii treści tagu.

Normalizacja:
  - końcowe białe znaki usuwane z każdej linii
  - puste linie na początku i końcu bloku usuwane
  - wewnętrzne \\n (także puste linie w środku) zachowane
  - pusta treść → Field z value == ""

Opcjonalnie (comment_prefix, np. "!"): z każdej linii zaczynającej się
(po wcięciu) od prefiksu komentarza usuwany jest prefiks, a następnie
wspólne wcięcie całego bloku (textwrap.dedent).
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable

from data_model.documents import Field


def _strip_prefix(line: str, prefix: str) -> str:
    stripped = line.lstrip()
    if stripped.startswith(prefix):
        return stripped[len(prefix):]
    return line


def normalize_body(
    body_lines: Iterable[str],
    comment_prefix: str | None = None,
) -> list[str]:
    """Zwraca znormalizowane linie treści (bez pustych linii na brzegach)."""
    lines = [line.rstrip() for line in body_lines]

    if comment_prefix:
        lines = [_strip_prefix(line, comment_prefix).rstrip() for line in lines]
        lines = textwrap.dedent("\n".join(lines)).split("\n") if lines else []

    start = 0
    while start < len(lines) and not lines[start]:
        start += 1
    end = len(lines)
    while end > start and not lines[end - 1]:
        end -= 1
    return lines[start:end]


def extract_field(
    tag: str,
    body_lines: Iterable[str],
    line_no: int = 0,
    comment_prefix: str | None = None,
) -> Field:
    """Tworzy Field z linii pomiędzy markerem otwierającym i zamykającym."""
    return Field(
        tag=tag.lower(),
        value="\n".join(normalize_body(body_lines, comment_prefix)),
        line_no=line_no,
    )


class FieldExtractor:
    """
    Akumulator linii BODY dla jednego otwartego tagu.

    Użycie:
        ex = FieldExtractor("description", line_no=3)
        ex.append("Computes sums.")
        field = ex.build()
    """

    __slots__ = ("tag", "line_no", "_lines", "_comment_prefix")

    def __init__(self, tag: str, line_no: int, comment_prefix: str | None = None) -> None:
        self.tag = tag
        self.line_no = line_no
        self._lines: list[str] = []
        self._comment_prefix = comment_prefix

    def append(self, line: str) -> None:
        self._lines.append(line)

    def build(self) -> Field:
        return extract_field(self.tag, self._lines, self.line_no, self._comment_prefix)
