"""
fdoc/batch.py — przetwarzanie wielu plików źródłowych.

Pliki są od siebie niezależne: każdy daje własny Document albo własny błąd.
Błąd w jednym pliku nie wpływa na pozostałe. Przy jobs > 1 pliki parsowane
są w ThreadPoolExecutor; współdzielona jest tylko niemutowalna ParseConfig.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from data_model.documents import Document

from .config import ParseConfig
from .errors import FDocError
from .source import load_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileResult:
    """Wynik dla jednego pliku: dokładnie jedno z (document, error) jest ustawione."""
    path:     Path
    document: Document | None = None
    error:    Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def process_file(path: str | Path, config: ParseConfig) -> FileResult:
    path = Path(path)
    try:
        return FileResult(path=path, document=load_source(path, config))
    except (FDocError, OSError) as e:
        logger.debug("%s: %s", path, e)
        return FileResult(path=path, error=e)


def process_files(
    paths: Iterable[str | Path],
    config: ParseConfig,
    jobs: int = 1,
    on_done: Callable[[FileResult], None] | None = None,
) -> list[FileResult]:
    """
    Parsuje pliki i zwraca wyniki w kolejności wejścia.

    on_done — opcjonalny callback wywoływany po każdym pliku (np. postęp).
    """
    paths = [Path(p) for p in paths]

    def work(p: Path) -> FileResult:
        result = process_file(p, config)
        if on_done is not None:
            on_done(result)
        return result

    if jobs <= 1 or len(paths) <= 1:
        return [work(p) for p in paths]

    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(pool.map(work, paths))
