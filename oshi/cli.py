"""
oshi — narzędzie CLI do profili MyOshi.

Użycie:
  oshi <komenda> [opcje]

Komendy:
  update    Wypełnia profile.html danymi z outerHTML i pobiera obrazki.
  extract   Wyciąga pola profilu z outerHTML do JSON / tabeli.
  card      Wypisuje kartę HTML z nagłówkiem pasującym do wzorca.
  minify    Minifikuje custom.css / custom.html i raportuje limit znaków.
  analyze   Analizuje arkusz CSS pod kątem skracania.
  shorten   Skraca nazwy animacji/zmiennych CSS (wersja -v3).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252; wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from oshi.commands import update as cmd_update
from oshi.commands import extract as cmd_extract
from oshi.commands import card as cmd_card
from oshi.commands import minify as cmd_minify
from oshi.commands import analyze as cmd_analyze
from oshi.commands import shorten as cmd_shorten


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oshi",
        description="oshi — narzędzia profilu MyOshi.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="oshi 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_update.add_parser(subparsers)
    cmd_extract.add_parser(subparsers)
    cmd_card.add_parser(subparsers)
    cmd_minify.add_parser(subparsers)
    cmd_analyze.add_parser(subparsers)
    cmd_shorten.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
