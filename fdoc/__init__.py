"""
fdoc — ekstrakcja dokumentacji z instrumentowanych źródeł Fortran.

Publiczne API:
  ParseConfig.create(dialect, entry_tags, required_tags, comment_prefix)
  parse_lines(lines, config, name)     → Document
  parse_text(text, config, name)       → Document
  load_source(path, config)            → Document
  process_files(paths, config, jobs)   → list[FileResult]
  get_dialect(name)                    → DelimiterDialect ("default" | "xml")
  TagScanner, scan, extract_field, DocumentAssembler, start_on_tags

Wyjątki:
  FDocError, UnknownDialectError, FDocSyntaxError,
  NestedTagError, MismatchedCloseError, UnterminatedTagError
"""

from .dialects import (
    DEFAULT_DIALECT,
    DIALECTS,
    DefaultDialect,
    DelimiterDialect,
    MarkerKind,
    MarkerMatch,
    XmlDialect,
    get_dialect,
)
from .errors import (
    FDocError,
    FDocSyntaxError,
    MismatchedCloseError,
    NestedTagError,
    UnknownDialectError,
    UnterminatedTagError,
)
from .scanner import LineKind, ScanEvent, TagScanner, scan
from .extractor import FieldExtractor, extract_field, normalize_body
from .assembler import (
    DEFAULT_ENTRY_TAGS,
    DocumentAssembler,
    EntryBoundary,
    start_on_tags,
)
from .config import ParseConfig
from .source import load_source, parse_lines, parse_text
from .batch import FileResult, process_file, process_files

__all__ = [
    # dialects
    "DEFAULT_DIALECT",
    "DIALECTS",
    "DefaultDialect",
    "DelimiterDialect",
    "MarkerKind",
    "MarkerMatch",
    "XmlDialect",
    "get_dialect",
    # errors
    "FDocError",
    "FDocSyntaxError",
    "MismatchedCloseError",
    "NestedTagError",
    "UnknownDialectError",
    "UnterminatedTagError",
    # scanner / extractor / assembler
    "LineKind",
    "ScanEvent",
    "TagScanner",
    "scan",
    "FieldExtractor",
    "extract_field",
    "normalize_body",
    "DEFAULT_ENTRY_TAGS",
    "DocumentAssembler",
    "EntryBoundary",
    "start_on_tags",
    # entry points
    "ParseConfig",
    "load_source",
    "parse_lines",
    "parse_text",
    "FileResult",
    "process_file",
    "process_files",
]
