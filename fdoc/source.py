"""
fdoc/source.py — parsowanie źródeł Fortran do Document.

Architektura:
  plik → _read_text() (UTF-8 / chardet) → linie
  → scan() (TagScanner) → FieldExtractor (per otwarty tag)
  → DocumentAssembler → Document (zamknięty, niemutowalny)

Kluczowe funkcje publiczne:
  parse_lines(lines, config, name) -> Document
  parse_text(text, config, name)   -> Document
  load_source(path, config)        -> Document

Błędy strukturalne (FDocSyntaxError) przerywają parsowanie pliku i niosą
nazwę pliku oraz numer linii. Plik bez żadnych znaczników daje poprawny,
pusty Document.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path

import chardet

from data_model.documents import Document

from .assembler import DocumentAssembler
from .config import ParseConfig
from .errors import FDocSyntaxError
from .extractor import FieldExtractor
from .scanner import LineKind, scan

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_lines(
    lines: Iterable[str],
    config: ParseConfig | None = None,
    name: str = "<string>",
) -> Document:
    """Parsuje uporządkowaną sekwencję linii tekstu."""
    config = config or ParseConfig()
    assembler = DocumentAssembler(
        name,
        boundary=config.boundary,
        required_tags=config.required_tags,
        dialect=config.dialect.name,
    )
    extractor: FieldExtractor | None = None

    try:
        for event in scan(lines, config.dialect):
            match event.kind:
                case LineKind.OPEN:
                    extractor = FieldExtractor(
                        event.tag, event.line_no, config.comment_prefix
                    )
                case LineKind.BODY:
                    extractor.append(event.text)
                case LineKind.CLOSE:
                    assembler.add(extractor.build())
                    extractor = None
                case LineKind.PLAIN:
                    pass
    except FDocSyntaxError as e:
        e.with_source(name)
        raise

    return assembler.seal()


def parse_text(
    text: str,
    config: ParseConfig | None = None,
    name: str = "<string>",
) -> Document:
    """Dzieli tekst tylko na znakach końca linii (\\n, \\r\\n, \\r); \\f i \\v zostają w linii."""
    return parse_lines(io.StringIO(text, newline=None), config, name)


def load_source(path: str | Path, config: ParseConfig | None = None) -> Document:
    """Wczytuje plik źródłowy i parsuje go; Document.name = ścieżka pliku."""
    path = Path(path)
    text = _read_text(path)
    document = parse_text(text, config, str(path))
    logger.debug("%s: %d wpisów, %d pól", path, len(document.entries), document.field_count)
    return document


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _read_text(path: Path) -> str:
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    # Kodowanie natywne pliku (np. latin-1 w starszych źródłach Fortran)
    encoding = chardet.detect(raw).get("encoding") or "latin-1"
    logger.debug("%s: nie UTF-8, wykryte kodowanie %s", path, encoding)
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        return raw.decode("latin-1")
