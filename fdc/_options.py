"""Wspólne opcje parsowania dla komend fdc i budowa ParseConfig z argumentów."""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from fdc import _config
from fdoc import FDocError, ParseConfig, UnknownDialectError

console = Console()


def add_parse_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--xml", "-x",
        action="store_const",
        const="xml",
        dest="dialect",
        default=_config.env_dialect(),
        help="Użyj znaczników w stylu XML: <tag> i </tag> "
             "(domyślnie: :tag+: i :tag-:).",
    )
    p.add_argument(
        "--entry-tag",
        action="append",
        metavar="TAG",
        dest="entry_tags",
        help="Tag rozpoczynający nowy wpis (można powtarzać; "
             "domyślnie: FDOC_ENTRY_TAGS lub 'description').",
    )
    p.add_argument(
        "--require", "-r",
        action="append",
        metavar="TAG",
        dest="required_tags",
        help="Tag wymagany w każdym wpisie (można powtarzać; "
             "domyślnie: FDOC_REQUIRED_TAGS).",
    )
    p.add_argument(
        "--comment-prefix",
        metavar="P",
        default=_config.env_comment_prefix(),
        help="Prefiks komentarza usuwany z linii treści (domyślnie: '!'; "
             "pusty napis wyłącza).",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Wypisuj komunikaty diagnostyczne (logging DEBUG).",
    )


def setup_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def config_from_args(args: argparse.Namespace) -> ParseConfig:
    """Buduje ParseConfig; nieznany dialekt kończy program z kodem 1."""
    try:
        return ParseConfig.create(
            dialect=args.dialect,
            entry_tags=args.entry_tags or _config.env_entry_tags(),
            required_tags=args.required_tags or _config.env_required_tags(),
            comment_prefix=args.comment_prefix,
        )
    except UnknownDialectError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)


def describe_error(err: Exception) -> str:
    """Jednoliniowy opis błędu pliku: kod + komunikat (z linią dla błędów składni)."""
    if isinstance(err, FDocError):
        return f"[red]{err.code}[/red] {escape(str(err))}"
    return f"[red]E_IO[/red] {escape(str(err))}"
