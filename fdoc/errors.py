"""
fdoc/errors.py — wyjątki parsera FDoc.

Hierarchia:
  FDocError
    ├─ UnknownDialectError      (konfiguracja — przed skanowaniem)
    └─ FDocSyntaxError          (strukturalne — przerywają parsowanie pliku)
         ├─ NestedTagError
         ├─ MismatchedCloseError
         └─ UnterminatedTagError

Każdy błąd strukturalny niesie numer linii i (po przejściu przez
fdoc.source) nazwę pliku źródłowego.
"""

from __future__ import annotations

from validator.types import ErrorCode


class FDocError(Exception):
    """Bazowy wyjątek FDoc."""

    code: ErrorCode


class UnknownDialectError(FDocError, ValueError):
    code = ErrorCode.UNKNOWN_DIALECT

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(
            f"Nieznany dialekt '{name}' (dostępne: {', '.join(known)})."
        )


class FDocSyntaxError(FDocError):
    """Błąd strukturalny w pliku źródłowym."""

    def __init__(
        self,
        message: str,
        line_no: int,
        tag: str,
        source: str | None = None,
    ) -> None:
        self.message = message
        self.line_no = line_no
        self.tag = tag
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        where = f"{self.source}:{self.line_no}" if self.source else f"linia {self.line_no}"
        return f"{where}: {self.message}"

    def with_source(self, source: str) -> FDocSyntaxError:
        self.source = source
        return self


class NestedTagError(FDocSyntaxError):
    code = ErrorCode.NESTED_TAG

    def __init__(
        self,
        tag: str,
        line_no: int,
        open_tag: str,
        open_line_no: int,
        source: str | None = None,
    ) -> None:
        self.open_tag = open_tag
        self.open_line_no = open_line_no
        super().__init__(
            f"Tag '{tag}' otwarty wewnątrz tagu '{open_tag}' "
            f"(otwartego w linii {open_line_no}); zagnieżdżanie nie jest dozwolone.",
            line_no,
            tag,
            source,
        )


class MismatchedCloseError(FDocSyntaxError):
    code = ErrorCode.MISMATCHED_CLOSE

    def __init__(
        self,
        tag: str,
        line_no: int,
        open_tag: str | None,
        open_line_no: int | None = None,
        source: str | None = None,
    ) -> None:
        self.open_tag = open_tag
        self.open_line_no = open_line_no
        if open_tag is None:
            message = f"Zamknięcie tagu '{tag}' bez wcześniejszego otwarcia."
        else:
            message = (
                f"Zamknięcie tagu '{tag}' nie pasuje do otwartego tagu "
                f"'{open_tag}' (linia {open_line_no})."
            )
        super().__init__(message, line_no, tag, source)


class UnterminatedTagError(FDocSyntaxError):
    """Koniec wejścia przy wciąż otwartym tagu; line_no = linia otwarcia."""

    code = ErrorCode.UNTERMINATED_TAG

    def __init__(self, tag: str, line_no: int, source: str | None = None) -> None:
        super().__init__(
            f"Tag '{tag}' otwarty w linii {line_no} nie został zamknięty "
            f"przed końcem pliku.",
            line_no,
            tag,
            source,
        )
