"""Komenda: fdc show — podgląd wpisów i pól dokumentacji jednego pliku."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich import box
from rich.markup import escape
from rich.table import Table

from fdc._options import (
    add_parse_arguments,
    config_from_args,
    console,
    describe_error,
    setup_logging,
)
from fdoc import FDocError, load_source
from data_model.documents import Document


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _preview(value: str, max_len: int = 70) -> str:
    first = value.split("\n", 1)[0]
    more = "…" if len(first) > max_len or "\n" in value else ""
    return escape(first[:max_len]) + more


def _show_table(document: Document) -> None:
    if document.is_empty:
        console.print("[yellow]Brak dokumentacji w pliku.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("WPIS",  justify="right", no_wrap=True, style="dim")
    table.add_column("LINIA", justify="right", no_wrap=True)
    table.add_column("TAG",   no_wrap=True, style="bold cyan")
    table.add_column("LINII", justify="right", no_wrap=True)
    table.add_column("TREŚĆ", no_wrap=False, max_width=70)

    for entry in document.entries:
        for i, f in enumerate(entry.fields):
            table.add_row(
                str(entry.index + 1) if i == 0 else "",
                str(f.line_no),
                f.tag,
                str(len(f.lines)),
                _preview(f.value),
            )

    console.print()
    console.print(table)
    console.print(
        f"  [dim]{len(document.entries)} wpisów, {document.field_count} pól[/dim]\n"
    )
    for issue in document.issues:
        console.print(f"  [yellow]{issue.code}[/yellow] {escape(issue.message)}")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    setup_logging(args)
    path = Path(args.file)
    if not path.is_file():
        console.print(f"[red]Plik nie istnieje lub nie jest plikiem:[/red] {path}")
        raise SystemExit(1)

    config = config_from_args(args)
    try:
        document = load_source(path, config)
    except FDocError as e:
        console.print(f"[red]Błąd parsowania:[/red] {describe_error(e)}")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Błąd odczytu:[/red] {describe_error(e)}")
        raise SystemExit(1)

    if args.json:
        print(json.dumps(document.to_dict(), ensure_ascii=False, indent=2))
        return

    console.print(
        f"Plik [bold]{path}[/bold] (dialekt=[cyan]{document.dialect}[/cyan])"
    )
    _show_table(document)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Wyświetla wpisy i pola dokumentacji jednego pliku.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje plik źródłowy i wyświetla tabelę wpisów/pól (lub JSON).

Przykłady:
  fdc show Sum_Module.f90
  fdc show Sum_Module.f90 --xml
  fdc show Sum_Module.f90 --json > Sum_Module.json
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Plik źródłowy Fortran.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz dokument jako JSON zamiast tabeli.",
    )
    add_parse_arguments(p)
    p.set_defaults(func=run)
