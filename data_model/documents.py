"""
data_model/documents.py — model dokumentu wyekstrahowanego z pliku Fortran.

Document odpowiada jednemu plikowi źródłowemu; składa się z uporządkowanej
listy DocumentEntry (jednostek dokumentacji, np. nagłówka podprogramu),
a każdy wpis z uporządkowanej listy Field (tag + treść).

Wszystkie struktury są niemutowalne (frozen, krotki zamiast list) — generator
dostaje dokument tylko do odczytu.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .common import LineNo, Tag

if TYPE_CHECKING:
    from validator.types import ValidationIssue


@dataclass(frozen=True, slots=True)
class Field:
    """
    Pole dokumentacji: treść pomiędzy markerem otwierającym i zamykającym.

    - tag:     znormalizowana nazwa tagu
    - value:   połączone linie treści (z zachowaniem \\n), bez pustych linii
               na początku i końcu; pusta treść → ""
    - line_no: numer linii markera otwierającego (1-based)
    """
    tag:     Tag
    value:   str
    line_no: LineNo = 0

    @property
    def lines(self) -> list[str]:
        return self.value.split("\n") if self.value else []


@dataclass(frozen=True, slots=True)
class DocumentEntry:
    """
    Jedna udokumentowana jednostka (np. podprogram, moduł, typ).

    - index:   pozycja wpisu w dokumencie (0-based, kolejność w źródle)
    - line_no: linia pierwszego pola wpisu
    - fields:  pola w kolejności wystąpienia
    """
    index:   int
    line_no: LineNo
    fields:  tuple[Field, ...] = ()

    @property
    def tags(self) -> tuple[Tag, ...]:
        return tuple(f.tag for f in self.fields)

    def get(self, tag: Tag, default: str | None = None) -> str | None:
        """Treść pierwszego pola o podanym tagu (lub default)."""
        tag = tag.lower()
        for f in self.fields:
            if f.tag == tag:
                return f.value
        return default

    def values(self, tag: Tag) -> list[str]:
        """Treści wszystkich pól o podanym tagu (tag może się powtarzać)."""
        tag = tag.lower()
        return [f.value for f in self.fields if f.tag == tag]

    @property
    def title(self) -> str:
        """Pierwsza niepusta linia pierwszego pola — nagłówek wpisu."""
        for f in self.fields:
            for line in f.lines:
                if line.strip():
                    return line.strip()
        return f"Wpis {self.index + 1}"


@dataclass(frozen=True, slots=True)
class Document:
    """
    Pełny wynik parsowania jednego pliku.

    - name:    identyfikator pliku (nazwa ścieżki)
    - dialect: nazwa dialektu użytego przy parsowaniu ("default" | "xml")
    - entries: wpisy w kolejności pierwszego wystąpienia w źródle
    - issues:  problemy walidacji (np. brak wymaganego pola) — nie przerywają
               parsowania, dokument nadal jest kompletny
    """
    name:    str
    dialect: str = "default"
    entries: tuple[DocumentEntry, ...] = ()
    issues:  tuple[ValidationIssue, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def field_count(self) -> int:
        return sum(len(e.fields) for e in self.entries)

    def issues_for(self, entry: DocumentEntry) -> list[ValidationIssue]:
        return [i for i in self.issues if i.entry_index == entry.index]

    def to_dict(self) -> dict[str, Any]:
        """Reprezentacja JSON-owalna (eksport `fdc show --json`)."""
        return {
            "name":    self.name,
            "dialect": self.dialect,
            "entries": [
                {
                    "index":   e.index,
                    "line_no": e.line_no,
                    "fields":  [
                        {"tag": f.tag, "value": f.value, "line_no": f.line_no}
                        for f in e.fields
                    ],
                }
                for e in self.entries
            ],
            "issues": [
                {
                    "code":        str(i.code),
                    "entry_index": i.entry_index,
                    "line_no":     i.line_no,
                    "tag":         i.tag,
                    "message":     i.message,
                }
                for i in self.issues
            ],
        }
