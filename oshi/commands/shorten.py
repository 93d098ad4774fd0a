"""Komenda: oshi shorten — skraca nazwy w CSS i przepina animacje na @property."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from assets.shorten import shorten_bundle
from oshi._config import get_budget

console = Console()


def run(args: argparse.Namespace) -> None:
    css_path = Path(args.css_file)
    html_path = Path(args.html_file)
    for p in (css_path, html_path):
        if not p.exists():
            console.print(f"[red]Plik nie istnieje:[/red] {p}")
            raise SystemExit(1)

    try:
        budget = get_budget()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    out_dir = Path(args.out_dir) if args.out_dir else css_path.parent
    result = shorten_bundle(
        css_path.read_text(encoding="utf-8"),
        html_path.read_text(encoding="utf-8"),
    )

    css_out = out_dir / f"{css_path.stem}-v3.css"
    html_out = out_dir / f"{html_path.stem}-v3.html"
    legend_out = out_dir / "shortening-legend.md"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        css_out.write_text(result.css, encoding="utf-8")
        html_out.write_text(result.html, encoding="utf-8")
        legend_out.write_text(result.legend, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Błąd zapisu:[/red] {e}")
        raise SystemExit(1)

    console.print("[bold]=== CSS ===[/bold]")
    console.print(f"  Oryginał: {result.original_css_len} znaków")
    console.print(f"  Wynik:    {len(result.css)} znaków")
    console.print(f"  Limit:    {budget - len(result.css)} pozostało")
    console.print("[bold]=== HTML ===[/bold]")
    console.print(f"  Oryginał: {result.original_html_len} znaków")
    console.print(f"  Wynik:    {len(result.html)} znaków")
    console.print(f"  Limit:    {budget - len(result.html)} pozostało")
    console.print("[bold]=== Zapisane pliki ===[/bold]")
    for p in (css_out, html_out, legend_out):
        console.print(f"  [green]{p}[/green]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "shorten",
        help="Skraca nazwy animacji/zmiennych w CSS i zapisuje wersję -v3.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Skraca nazwy animacji i zmiennych CSS według wbudowanych map, zastępuje
animacje dryfu/tickerów animacjami własności @property na .card-body
i przepisuje inline'owe animacje oraz <marquee> w HTML.

Zapisuje <css>-v3.css, <html>-v3.html i shortening-legend.md.

Przykłady:
  oshi shorten wired-new/custom.css wired-new/custom.html
  oshi shorten custom.css custom.html --out-dir build
        """,
    )
    p.add_argument("css_file", metavar="PLIK.css", help="Arkusz CSS (zminifikowany).")
    p.add_argument("html_file", metavar="PLIK.html", help="Fragment custom.html.")
    p.add_argument(
        "--out-dir",
        metavar="DIR",
        default=None,
        help="Katalog wyjściowy (domyślnie: katalog pliku CSS).",
    )
    p.set_defaults(func=run)
