"""
fdoc/config.py — jawna konfiguracja parsowania.

ParseConfig zastępuje globalny stan skryptu: CLI buduje jedną instancję na
uruchomienie i przekazuje ją do rdzenia. Instancja jest niemutowalna
i współdzielona (tylko do odczytu) przez wątki przetwarzające pliki.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .assembler import DEFAULT_ENTRY_TAGS, EntryBoundary, start_on_tags
from .dialects import DEFAULT_DIALECT, DelimiterDialect, get_dialect


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """
    - dialect:        aktywny dialekt znaczników
    - boundary:       reguła granicy wpisu (predykat po tagu)
    - required_tags:  tagi wymagane w każdym wpisie (walidacja)
    - comment_prefix: prefiks komentarza usuwany z linii treści (np. "!")
    """
    dialect:        DelimiterDialect = field(default_factory=lambda: get_dialect(DEFAULT_DIALECT))
    boundary:       EntryBoundary = field(default_factory=start_on_tags)
    required_tags:  frozenset[str] = frozenset()
    comment_prefix: str | None = None

    @classmethod
    def create(
        cls,
        dialect: str | DelimiterDialect = DEFAULT_DIALECT,
        entry_tags: Iterable[str] = DEFAULT_ENTRY_TAGS,
        required_tags: Iterable[str] = (),
        comment_prefix: str | None = None,
        boundary: EntryBoundary | None = None,
    ) -> ParseConfig:
        """Buduje konfigurację; nieznany dialekt → UnknownDialectError."""
        return cls(
            dialect=get_dialect(dialect),
            boundary=boundary or start_on_tags(entry_tags),
            required_tags=frozenset(t.lower() for t in required_tags),
            comment_prefix=comment_prefix or None,
        )
