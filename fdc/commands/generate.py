"""Komenda: fdc generate — dokumentacja LaTeX / HTML z plików źródłowych Fortran."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from fdc import _config
from fdc._options import (
    add_parse_arguments,
    config_from_args,
    console,
    describe_error,
    setup_logging,
)
from fdoc import FileResult, process_files
from generator import FORMATS, Generator


# ---------------------------------------------------------------------------
# Raport jednego pliku
# ---------------------------------------------------------------------------

def _report(result: FileResult, written: list[Path]) -> None:
    if not result.ok:
        console.print(f"  [red]✗[/red] {result.path}  {describe_error(result.error)}")
        return

    doc = result.document
    outs = ", ".join(str(p) for p in written)
    if doc.is_empty:
        console.print(f"  [yellow]•[/yellow] {result.path}  [dim]brak dokumentacji[/dim] → {outs}")
    else:
        console.print(
            f"  [green]✓[/green] {result.path}  "
            f"{len(doc.entries)} wpisów, {doc.field_count} pól → {outs}"
        )
    for issue in doc.issues:
        console.print(f"      [yellow]{issue.code}[/yellow] {issue.message}")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    setup_logging(args)

    if not args.files:
        console.print("\n  fdc generate: nie podano plików źródłowych Fortran, nic do zrobienia.\n")
        raise SystemExit(0)

    config = config_from_args(args)
    formats = list(FORMATS) if args.format == "both" else [args.format]
    generator = Generator(args.output_dir, formats)

    console.print(
        f"Dialekt [cyan]{config.dialect.name}[/cyan]  "
        f"formaty=[cyan]{', '.join(formats)}[/cyan]  "
        f"plików: [bold]{len(args.files)}[/bold]"
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Parsowanie", total=len(args.files))
        results = process_files(
            args.files,
            config,
            jobs=args.jobs,
            on_done=lambda _r: progress.advance(task),
        )

    failed = 0
    # ścieżka wyjściowa → plik źródłowy, który ją zajął
    claimed: dict[Path, Path] = {}
    for result in results:
        written: list[Path] = []
        if result.ok:
            outs = generator.output_paths(result.document)
            taken = [claimed[p] for p in outs if p in claimed]
            if taken:
                console.print(
                    f"  [red]✗[/red] {result.path}  [red]E_OUTPUT_COLLISION[/red] "
                    f"pliki wyjściowe zajęte już przez {taken[0]} — pominięto"
                )
                failed += 1
                continue
            claimed.update((p, result.path) for p in outs)
            try:
                written = generator.generate(result.document)
            except OSError as e:
                console.print(f"  [red]✗[/red] {result.path}  błąd zapisu: {e}")
                failed += 1
                continue
        else:
            failed += 1
        _report(result, written)

    console.print()
    if failed:
        console.print(f"[yellow]Gotowe z {failed} błędami[/yellow] ({len(results)} plików)")
        raise SystemExit(1)
    console.print(f"[green]Gotowe[/green] ({len(results)} plików)")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "generate",
        help="Tworzy dokumentację LaTeX i HTML z instrumentowanych źródeł Fortran.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga bloki dokumentacji z plików źródłowych Fortran i zapisuje je jako
<plik>.tex i <plik>.html. Błąd w jednym pliku jest raportowany, a pozostałe
pliki są przetwarzane dalej.

Znaczniki domyślne:  :tag+:  …  :tag-:
Znaczniki XML (-x):  <tag>   …  </tag>

Przykłady:
  fdc generate Sum_Module.f90
  fdc generate --xml *.f90 --output-dir doc
  fdc generate src/*.f90 --format html --jobs 4 --require description
        """,
    )
    p.add_argument(
        "files",
        nargs="*",
        metavar="PLIK",
        help="Pliki źródłowe Fortran.",
    )
    p.add_argument(
        "--output-dir", "-o",
        metavar="KATALOG",
        default=_config.env_output_dir(),
        help="Katalog wyjściowy (domyślnie: FDOC_OUTPUT_DIR lub bieżący).",
    )
    p.add_argument(
        "--format", "-f",
        choices=["latex", "html", "both"],
        default="both",
        help="Format wyjściowy (domyślnie: both).",
    )
    p.add_argument(
        "--jobs", "-j",
        type=int,
        default=_config.env_jobs(),
        metavar="N",
        help="Liczba wątków przetwarzających pliki (domyślnie: FDOC_JOBS lub 1).",
    )
    add_parse_arguments(p)
    p.set_defaults(func=run)
