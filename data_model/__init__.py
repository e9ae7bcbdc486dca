"""
data_model — struktury danych modelu dokumentacji FDoc.

Użycie:
  from data_model import Document, DocumentEntry, Field

Moduły:
  common    — Tag, LineNo, normalize_tag
  documents — Field, DocumentEntry, Document

Hierarchia:
  Document (jeden plik źródłowy)
    └─ DocumentEntry (jednostka: podprogram / moduł / typ)
         └─ Field (tag + treść)
"""

from .common import (
    Tag,
    LineNo,
    TAG_PATTERN,
    normalize_tag,
)
from .documents import (
    Field,
    DocumentEntry,
    Document,
)

__all__ = [
    # common
    "Tag",
    "LineNo",
    "TAG_PATTERN",
    "normalize_tag",
    # documents
    "Field",
    "DocumentEntry",
    "Document",
]
