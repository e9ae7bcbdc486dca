"""Komenda: fdc check — walidacja struktury i pól wymaganych bez generowania plików."""

from __future__ import annotations

import argparse

from rich import box
from rich.markup import escape
from rich.table import Table

from fdc import _config
from fdc._options import (
    add_parse_arguments,
    config_from_args,
    console,
    setup_logging,
)
from fdoc import FDocSyntaxError, process_files


def run(args: argparse.Namespace) -> None:
    setup_logging(args)

    if not args.files:
        console.print("[yellow]Nie podano plików, nic do sprawdzenia.[/yellow]")
        raise SystemExit(0)

    config = config_from_args(args)
    results = process_files(args.files, config, jobs=args.jobs)

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("PLIK",  style="cyan", no_wrap=True)
    table.add_column("LINIA", justify="right", style="dim")
    table.add_column("KOD",   no_wrap=True)
    table.add_column("KOMUNIKAT", max_width=70)

    errors = 0
    warnings = 0
    for result in results:
        if not result.ok:
            errors += 1
            err = result.error
            line = str(err.line_no) if isinstance(err, FDocSyntaxError) else "-"
            message = err.message if isinstance(err, FDocSyntaxError) else str(err)
            table.add_row(
                str(result.path), line,
                f"[red]{getattr(err, 'code', 'E_IO')}[/red]", escape(message),
            )
            continue
        for issue in result.document.issues:
            warnings += 1
            table.add_row(
                str(result.path), str(issue.line_no),
                f"[yellow]{issue.code}[/yellow]", escape(issue.message),
            )

    if errors or warnings:
        console.print(table)

    status = (
        "[green]OK[/green]" if not (errors or warnings)
        else f"[red]{errors} błędów[/red], [yellow]{warnings} ostrzeżeń[/yellow]"
    )
    console.print(f"{status} — sprawdzono {len(results)} plików")

    if errors or (warnings and args.strict):
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Sprawdza poprawność znaczników i pola wymagane.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Sprawdza pliki bez generowania dokumentacji. Błędy strukturalne (zagnieżdżony
tag, niepasujące zamknięcie, niezamknięty tag) kończą się kodem 1; brak pól
wymaganych tylko z --strict.

Przykłady:
  fdc check src/*.f90
  fdc check src/*.f90 --require description --require author --strict
        """,
    )
    p.add_argument(
        "files",
        nargs="*",
        metavar="PLIK",
        help="Pliki źródłowe Fortran.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Traktuj brak pól wymaganych jako błąd (kod wyjścia 1).",
    )
    p.add_argument(
        "--jobs", "-j",
        type=int,
        default=_config.env_jobs(),
        metavar="N",
        help="Liczba wątków (domyślnie: FDOC_JOBS lub 1).",
    )
    add_parse_arguments(p)
    p.set_defaults(func=run)
