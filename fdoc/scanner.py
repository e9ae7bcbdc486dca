"""
fdoc/scanner.py — liniowy skaner znaczników dokumentacji.

Architektura:
  linie → TagScanner.feed(line) → ScanEvent (PLAIN | OPEN | BODY | CLOSE)
  → (na końcu) TagScanner.finish()

Automat stanów:
  Idle          --open(t)-->   InTag(t)
  InTag(t)      --close(t)-->  Idle
  InTag(t)      --inna linia-> InTag(t)   (emituje BODY)
  InTag(t)      --open(u)-->   NestedTagError
  InTag(t)      --close(u)-->  MismatchedCloseError   (u != t)
  Idle          --close(u)-->  MismatchedCloseError   (brak otwartego tagu)
  koniec w InTag(t)        -->  UnterminatedTagError

Linia z markerem jest w całości linią markera: rozpoznawany jest tylko
pierwszy marker, a otaczający tekst (np. "!" komentarza Fortran) jest
ignorowany. Linia nigdy nie wnosi jednocześnie markera i treści.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from .dialects import DelimiterDialect, MarkerKind
from .errors import MismatchedCloseError, NestedTagError, UnterminatedTagError

logger = logging.getLogger(__name__)


class LineKind(StrEnum):
    PLAIN = "plain"
    OPEN  = "open"
    BODY  = "body"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class ScanEvent:
    kind:    LineKind
    line_no: int            # 1-based
    text:    str            # linia bez znaku końca linii
    tag:     str | None = None


class TagScanner:
    """
    Skaner jednego pliku. Stan (kursor, otwarty tag) należy wyłącznie do
    instancji — dla każdego pliku tworzymy nowy skaner.
    """

    __slots__ = ("_dialect", "_line_no", "_open_tag", "_open_line_no")

    def __init__(self, dialect: DelimiterDialect) -> None:
        self._dialect = dialect
        self._line_no = 0
        self._open_tag: str | None = None
        self._open_line_no = 0

    @property
    def line_no(self) -> int:
        return self._line_no

    @property
    def open_tag(self) -> str | None:
        return self._open_tag

    def feed(self, line: str) -> ScanEvent:
        """Klasyfikuje kolejną linię wejścia."""
        self._line_no += 1
        text = line.rstrip("\r\n")
        marker = self._dialect.match(text)

        if self._open_tag is None:
            if marker is None:
                return ScanEvent(LineKind.PLAIN, self._line_no, text)
            if marker.kind is MarkerKind.CLOSE:
                raise MismatchedCloseError(marker.tag, self._line_no, None)
            self._open_tag = marker.tag
            self._open_line_no = self._line_no
            logger.debug("linia %d: otwarcie tagu '%s'", self._line_no, marker.tag)
            return ScanEvent(LineKind.OPEN, self._line_no, text, marker.tag)

        # InTag
        if marker is None:
            return ScanEvent(LineKind.BODY, self._line_no, text, self._open_tag)
        if marker.kind is MarkerKind.OPEN:
            raise NestedTagError(
                marker.tag, self._line_no, self._open_tag, self._open_line_no
            )
        if marker.tag != self._open_tag:
            raise MismatchedCloseError(
                marker.tag, self._line_no, self._open_tag, self._open_line_no
            )
        tag = self._open_tag
        self._open_tag = None
        logger.debug("linia %d: zamknięcie tagu '%s'", self._line_no, tag)
        return ScanEvent(LineKind.CLOSE, self._line_no, text, tag)

    def finish(self) -> None:
        """Koniec wejścia — stan końcowy musi być Idle."""
        if self._open_tag is not None:
            raise UnterminatedTagError(self._open_tag, self._open_line_no)


def scan(lines: Iterable[str], dialect: DelimiterDialect) -> Iterator[ScanEvent]:
    """Generator zdarzeń dla całego wejścia; błędy strukturalne jako wyjątki."""
    scanner = TagScanner(dialect)
    for line in lines:
        yield scanner.feed(line)
    scanner.finish()
