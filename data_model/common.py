"""
Wspólne typy pierwotne modelu dokumentacji FDoc.

Tag to nazwa pola dokumentacji (np. "description", "author", "history").
Nazwy tagów są niewrażliwe na wielkość liter — w modelu zawsze trzymamy
postać znormalizowaną (małe litery).
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Wzorzec: ^[a-z][a-z0-9_]*$  np. "description", "sdoc"
type Tag = str

# Numer linii w pliku źródłowym, 1-based.
type LineNo = int

TAG_PATTERN = r"[A-Za-z][A-Za-z0-9_]*"

_TAG_RE = re.compile(rf"^{TAG_PATTERN}$")


def normalize_tag(name: str) -> Tag:
    """Zwraca znormalizowaną nazwę tagu (małe litery, bez białych znaków)."""
    tag = name.strip().lower()
    if not _TAG_RE.match(tag):
        raise ValueError(f"Nieprawidłowa nazwa tagu: '{name}'")
    return tag
