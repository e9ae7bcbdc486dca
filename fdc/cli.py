"""
fdc — narzędzie CLI dla FDoc.

Użycie:
  fdc <komenda> [opcje]

Komendy:
  generate  Tworzy dokumentację LaTeX i HTML z instrumentowanych źródeł Fortran.
  show      Wyświetla wpisy i pola dokumentacji jednego pliku (tabela / JSON).
  check     Sprawdza poprawność znaczników i pola wymagane.

Znaczniki dokumentacji:
  domyślne  :tag+:  …  :tag-:
  --xml     <tag>   …  </tag>
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from fdc.commands import generate as cmd_generate
from fdc.commands import show as cmd_show
from fdc.commands import check as cmd_check

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fdc",
        description="FDoc — dokumentacja LaTeX/HTML z komentarzy w źródłach Fortran.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"fdc {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_generate.add_parser(subparsers)
    cmd_show.add_parser(subparsers)
    cmd_check.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
