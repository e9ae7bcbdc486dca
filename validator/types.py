"""
validator/types.py — kody błędów i struktury raportu walidacji.

ErrorCode — stałe kody wszystkich rodzajów błędów FDoc (strukturalnych
    i walidacyjnych); te same kody wypisuje CLI.
ValidationIssue — pojedynczy problem walidacji wpisu (np. brak wymaganego
    pola); dołączany do Document, nie przerywa parsowania.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów."""

    # Błędy strukturalne — przerywają parsowanie pliku
    NESTED_TAG             = "E_NESTED_TAG"
    MISMATCHED_CLOSE       = "E_MISMATCHED_CLOSE"
    UNTERMINATED_TAG       = "E_UNTERMINATED_TAG"

    # Konfiguracja
    UNKNOWN_DIALECT        = "E_UNKNOWN_DIALECT"

    # Walidacja wpisu — nie przerywa parsowania
    MISSING_REQUIRED_FIELD = "E_MISSING_REQUIRED_FIELD"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """
    Pojedynczy problem walidacji.

    - code:        stały identyfikator klasy problemu (ErrorCode)
    - entry_index: indeks wpisu w dokumencie (0-based)
    - line_no:     linia pierwszego pola wpisu
    - tag:         tag, którego dotyczy problem
    - message:     czytelny opis
    """

    code:        ErrorCode
    entry_index: int
    line_no:     int
    tag:         str
    message:     str
