"""generator/latex.py — render Document do samodzielnego dokumentu LaTeX."""

from __future__ import annotations

import re

from data_model.documents import Document, DocumentEntry, Field

_LATEX_SPECIAL: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "&":  r"\&",
    "%":  r"\%",
    "$":  r"\$",
    "#":  r"\#",
    "_":  r"\_",
    "{":  r"\{",
    "}":  r"\}",
    "~":  r"\textasciitilde{}",
    "^":  r"\textasciicircum{}",
}
_LATEX_SPECIAL_RE = re.compile("|".join(re.escape(c) for c in _LATEX_SPECIAL))

# "\end{verbatim}" w treści zamknęłoby środowisko przedwcześnie
_VERBATIM_END_RE = re.compile(r"\\end\s*\{verbatim\}")

_PREAMBLE = r"""\documentclass[10pt]{article}
\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\usepackage[margin=2.5cm]{geometry}
\setlength{\parindent}{0pt}
"""


def latex_escape(text: str) -> str:
    """Escapuje znaki specjalne LaTeX w zwykłym tekście (tytuły, nazwy)."""
    return _LATEX_SPECIAL_RE.sub(lambda m: _LATEX_SPECIAL[m.group()], text)


def _render_field(f: Field) -> list[str]:
    out = [rf"\paragraph{{{latex_escape(f.tag.upper())}}}"]
    if not f.value:
        out.append(r"\textit{(brak treści)}")
        return out
    body = _VERBATIM_END_RE.sub(r"\\end {verbatim}", f.value)
    out += [r"\begin{verbatim}", body, r"\end{verbatim}"]
    return out


def _render_entry(entry: DocumentEntry) -> list[str]:
    out = [rf"\section{{{latex_escape(entry.title)}}}"]
    for f in entry.fields:
        out += _render_field(f)
    out.append("")
    return out


def render_latex(document: Document) -> str:
    lines = [
        _PREAMBLE,
        rf"\title{{{latex_escape(document.name)}}}",
        r"\date{}",
        r"\begin{document}",
        r"\maketitle",
        "",
    ]
    if document.is_empty:
        lines.append(r"\textit{Brak dokumentacji w pliku źródłowym.}")
    for entry in document.entries:
        lines += _render_entry(entry)
    lines.append(r"\end{document}")
    return "\n".join(lines) + "\n"
