"""
fdoc/assembler.py — grupowanie pól w wpisy i budowa Document.

DocumentAssembler przyjmuje kolejne Field (w kolejności źródła) i dzieli je
na DocumentEntry według wstrzykniętej reguły granicy wpisu (EntryBoundary).
Po końcu pliku seal() zamyka ostatni wpis, uruchamia walidację pól
wymaganych i zwraca niemutowalny Document.

Reguła granicy:
  boundary(tag, current_tags) -> bool
    tag          — tag właśnie dodawanego pola
    current_tags — tagi pól już zebranych w bieżącym wpisie ("()" gdy brak)
  True → pole rozpoczyna nowy wpis.
Pole przychodzące bez otwartego wpisu zawsze otwiera nowy wpis.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from data_model.documents import Document, DocumentEntry, Field
from validator import ValidationIssue, check_required

logger = logging.getLogger(__name__)

type EntryBoundary = Callable[[str, tuple[str, ...]], bool]

DEFAULT_ENTRY_TAGS: frozenset[str] = frozenset({"description"})


def start_on_tags(tags: Iterable[str] = DEFAULT_ENTRY_TAGS) -> EntryBoundary:
    """
    Domyślna reguła: nowy wpis zaczyna tag z zestawu `tags`, chyba że
    bieżący wpis nie ma jeszcze żadnego tagu startowego — wtedy pola
    poprzedzające (np. "author" przed "description") należą do tego samego
    wpisu. Liczba wpisów = liczba wystąpień tagów startowych (o ile jakiś
    tag startowy wystąpił).
    """
    start_tags = frozenset(t.lower() for t in tags)

    def boundary(tag: str, current_tags: tuple[str, ...]) -> bool:
        if tag not in start_tags:
            return False
        return any(t in start_tags for t in current_tags)

    return boundary


class DocumentAssembler:
    """
    Budowniczy dokumentu dla jednego pliku; jedyny właściciel Document aż
    do seal().
    """

    def __init__(
        self,
        name: str,
        boundary: EntryBoundary | None = None,
        required_tags: Iterable[str] = (),
        dialect: str = "default",
    ) -> None:
        self._name = name
        self._dialect = dialect
        self._boundary = boundary or start_on_tags()
        self._required = frozenset(t.lower() for t in required_tags)
        self._entries: list[DocumentEntry] = []
        self._issues: list[ValidationIssue] = []
        self._current: list[Field] | None = None
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def add(self, field: Field) -> None:
        if self._sealed:
            raise RuntimeError(f"Dokument '{self._name}' jest już zamknięty (seal).")

        current_tags = tuple(f.tag for f in self._current) if self._current else ()
        if self._current is None or self._boundary(field.tag, current_tags):
            self._close_entry()
            self._current = []
        self._current.append(field)

    def seal(self) -> Document:
        if self._sealed:
            raise RuntimeError(f"Dokument '{self._name}' jest już zamknięty (seal).")
        self._close_entry()
        self._sealed = True
        logger.debug(
            "%s: %d wpisów, %d problemów walidacji",
            self._name, len(self._entries), len(self._issues),
        )
        return Document(
            name=self._name,
            dialect=self._dialect,
            entries=tuple(self._entries),
            issues=tuple(self._issues),
        )

    def _close_entry(self) -> None:
        if not self._current:
            return
        entry = DocumentEntry(
            index=len(self._entries),
            line_no=self._current[0].line_no,
            fields=tuple(self._current),
        )
        self._entries.append(entry)
        if self._required:
            self._issues.extend(check_required(entry, self._required))
        self._current = None
