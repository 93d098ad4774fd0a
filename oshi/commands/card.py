"""Komenda: oshi card — wypisuje kartę (kontener) z nagłówkiem pasującym do wzorca."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

from rich.console import Console

from html_parser.cards import find_block

console = Console()


def run(args: argparse.Namespace) -> None:
    source_path = Path(args.source)
    if not source_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {source_path}")
        raise SystemExit(1)

    try:
        pattern = re.compile(args.pattern, re.IGNORECASE)
    except re.error as e:
        console.print(f"[red]Niepoprawny wzorzec:[/red] {e}")
        raise SystemExit(1)

    document = source_path.read_text(encoding="utf-8")
    span = find_block(
        document,
        pattern,
        container=args.container,
        heading=args.heading,
        tag=args.tag,
    )
    if span is None:
        console.print(f"[yellow]Nie znaleziono karty dla wzorca[/yellow] '{args.pattern}'")
        raise SystemExit(2)

    console.print(
        f"[green]Znaleziono:[/green] offset {span.start}–{span.end} ({len(span)} znaków)",
        highlight=False,
    )
    # surowy markup, bez interpretacji znaczników rich
    console.print(span.text, markup=False, highlight=False, soft_wrap=True)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "card",
        help="Wypisuje kartę HTML z nagłówkiem pasującym do wzorca.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Szuka pierwszego nagłówka (klasa zaczynająca się od --heading), którego tekst
pasuje do wzorca (regex, bez rozróżniania wielkości liter), i wypisuje cały
obejmujący go kontener (klasa --container, z kontrolą granicy prefiksu).

Kod wyjścia 2 oznacza brak karty.

Przykłady:
  oshi card source.html "Top 8"
  oshi card source.html "Friend Comments"
  oshi card strona.html "Photos" --container panel --heading panel-title
        """,
    )
    p.add_argument("source", metavar="SOURCE", help="Plik HTML.")
    p.add_argument("pattern", metavar="WZORZEC", help="Wzorzec tekstu nagłówka (regex).")
    p.add_argument(
        "--container",
        default="card",
        help="Klasa kontenera (domyślnie: card).",
    )
    p.add_argument(
        "--heading",
        default="card-header",
        help="Prefiks klasy nagłówka (domyślnie: card-header).",
    )
    p.add_argument(
        "--tag",
        default="div",
        help="Nazwa tagu kontenera (domyślnie: div).",
    )
    p.set_defaults(func=run)
