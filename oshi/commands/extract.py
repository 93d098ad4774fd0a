"""Komenda: oshi extract — wyciąga pola profilu z outerHTML (bez zapisu szablonu)."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape
from rich.text import Text

from data_model.profile import ProfileData
from html_parser.profile import extract_profile_data

console = Console()


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(data: ProfileData, json_path: Path) -> None:
    json_path.write_text(
        json.dumps(data.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
    )
    console.print(f"[green]JSON:[/green] {json_path}")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(data: ProfileData) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("POLE",    no_wrap=True, style="bold cyan")
    table.add_column("WARTOŚĆ", no_wrap=False, max_width=80)

    scalars = [
        ("display_name",  data.display_name),
        ("username",      "@" + data.username),
        ("tagline",       data.tagline),
        ("theme",         data.theme),
        ("mood",          data.mood),
        ("online_status", data.online_status),
        ("boops",         data.boop_count),
        ("generation",    data.generation or "-"),
        ("affiliation",   data.affiliation),
        ("model_type",    data.model_type),
        ("song_url",      data.song_url or "-"),
    ]
    for name, value in scalars:
        table.add_row(name, Text(value))

    counts = [
        ("friends",      len(data.friends)),
        ("albums",       len(data.albums)),
        ("groups",       len(data.groups)),
        ("badges",       len(data.badges)),
        ("social_links", len(data.social_links)),
        ("comments",     len(data.comments)),
        ("collab_rows",  len(data.collab_grid)),
        ("interests",    len(data.interests)),
    ]
    for name, n in counts:
        table.add_row(name, f"[dim]{n}[/dim]" if n == 0 else str(n))

    console.print()
    console.print(table)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    source_path = Path(args.source)
    if not source_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {source_path}")
        raise SystemExit(1)

    source = source_path.read_text(encoding="utf-8")
    if not source.strip():
        console.print(f"[red]Plik jest pusty:[/red] {source_path}")
        raise SystemExit(1)

    data = extract_profile_data(source)
    console.print(
        f"Wyciągnięto profil [bold]{escape(data.display_name)}[/bold] (@{escape(data.username)}) "
        f"z [bold]{source_path}[/bold]"
    )

    if args.json:
        _write_json(data, Path(args.json))

    if args.show or not args.json:
        _show_table(data)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Wyciąga pola profilu z outerHTML do JSON / tabeli.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga pola profilu (nazwa, znajomi, komentarze, grafik itp.) z pliku
outerHTML i wyświetla je w tabeli lub zapisuje do JSON.

Przykłady:
  oshi extract source.html
  oshi extract source.html --json profil.json
  oshi extract source.html --json profil.json --show
        """,
    )
    p.add_argument(
        "source",
        metavar="SOURCE",
        help="Plik z outerHTML strony profilu.",
    )
    p.add_argument(
        "--json",
        metavar="PLIK",
        default=None,
        help="Zapisz wyciągnięte dane do pliku JSON.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę pól (domyślnie, gdy nie podano --json).",
    )
    p.set_defaults(func=run)
