"""
fdoc/dialects.py — dialekty znaczników dokumentacji.

Dwa warianty składni granic tagu:
  default : :tag+:   …   :tag-:
  xml     : <tag>    …   </tag>

Dialekt wybierany jest raz na uruchomienie (przed skanowaniem) i jest
niemutowalny, więc może być współdzielony przez wątki.

Każdy dialekt zawiera:
  - open(tag) / close(tag) : dokładny tekst markera
  - match(line)            : pierwszy marker w linii (MarkerMatch) lub None
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum

from data_model.common import TAG_PATTERN, normalize_tag

from .errors import UnknownDialectError

DEFAULT_DIALECT = "default"


class MarkerKind(StrEnum):
    OPEN  = "open"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class MarkerMatch:
    kind:   MarkerKind
    tag:    str   # znormalizowany (małe litery)
    column: int   # 0-based pozycja markera w linii


class DelimiterDialect(ABC):
    """Składnia markerów otwierających i zamykających tag."""

    name: str
    _regex: re.Pattern[str]

    @abstractmethod
    def open(self, tag: str) -> str:
        """Marker otwierający tag; nazwa spoza TAG_PATTERN → ValueError."""

    @abstractmethod
    def close(self, tag: str) -> str:
        """Marker zamykający tag; nazwa spoza TAG_PATTERN → ValueError."""

    @abstractmethod
    def _kind(self, m: re.Match[str]) -> MarkerKind: ...

    def match(self, line: str) -> MarkerMatch | None:
        """Szuka pierwszego markera w linii; reszta linii jest ignorowana."""
        m = self._regex.search(line)
        if m is None:
            return None
        return MarkerMatch(
            kind=self._kind(m),
            tag=m.group("tag").lower(),
            column=m.start(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DefaultDialect(DelimiterDialect):
    """Natywne znaczniki FDoc: `:tag+:` i `:tag-:`."""

    name = "default"
    _regex = re.compile(rf":(?P<tag>{TAG_PATTERN})(?P<sign>[+-]):")

    def open(self, tag: str) -> str:
        return f":{normalize_tag(tag)}+:"

    def close(self, tag: str) -> str:
        return f":{normalize_tag(tag)}-:"

    def _kind(self, m: re.Match[str]) -> MarkerKind:
        return MarkerKind.OPEN if m.group("sign") == "+" else MarkerKind.CLOSE


class XmlDialect(DelimiterDialect):
    """Znaczniki w stylu XML: `<tag>` i `</tag>` (bez atrybutów)."""

    name = "xml"
    _regex = re.compile(rf"<(?P<slash>/?)(?P<tag>{TAG_PATTERN})>")

    def open(self, tag: str) -> str:
        return f"<{normalize_tag(tag)}>"

    def close(self, tag: str) -> str:
        return f"</{normalize_tag(tag)}>"

    def _kind(self, m: re.Match[str]) -> MarkerKind:
        return MarkerKind.CLOSE if m.group("slash") else MarkerKind.OPEN


DIALECTS: dict[str, DelimiterDialect] = {
    d.name: d for d in (DefaultDialect(), XmlDialect())
}


def get_dialect(name: str | DelimiterDialect = DEFAULT_DIALECT) -> DelimiterDialect:
    """Zwraca dialekt po nazwie ("default" | "xml", bez względu na wielkość liter)."""
    if isinstance(name, DelimiterDialect):
        return name
    dialect = DIALECTS.get(name.strip().lower())
    if dialect is None:
        raise UnknownDialectError(name, sorted(DIALECTS))
    return dialect
