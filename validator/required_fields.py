"""
validator/required_fields.py — sprawdzanie pól wymaganych we wpisie.

check_required(entry, required_tags) -> list[ValidationIssue]

Brak pola wymaganego to błąd walidacji (E_MISSING_REQUIRED_FIELD), a nie
błąd parsowania: wpis zostaje w dokumencie, problem trafia do Document.issues.
Pusta treść pola nie jest brakiem — liczy się obecność tagu.
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model.documents import DocumentEntry

from .types import ErrorCode, ValidationIssue


def check_required(
    entry: DocumentEntry,
    required_tags: Iterable[str],
) -> list[ValidationIssue]:
    """Zwraca problemy dla każdego wymaganego tagu, którego nie ma we wpisie."""
    present = set(entry.tags)
    issues: list[ValidationIssue] = []

    # sorted → deterministyczna kolejność niezależnie od typu kolekcji
    for tag in sorted({t.lower() for t in required_tags}):
        if tag in present:
            continue
        issues.append(ValidationIssue(
            code=ErrorCode.MISSING_REQUIRED_FIELD,
            entry_index=entry.index,
            line_no=entry.line_no,
            tag=tag,
            message=(
                f"Wpis {entry.index + 1} (linia {entry.line_no}) "
                f"nie zawiera wymaganego pola '{tag}'."
            ),
        ))
    return issues
