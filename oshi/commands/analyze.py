"""Komenda: oshi analyze — raport rozmiaru arkusza CSS (kandydaci do skrócenia)."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from assets.analyze import CssReport, NameStat, analyze_css
from oshi._config import get_budget

console = Console()


def _stat_table(title: str, stats: list[NameStat], savings: bool = False) -> Table:
    table = Table(
        title=title,
        title_justify="left",
        box=box.SIMPLE_HEAD,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NAZWA", no_wrap=True, style="bold cyan")
    table.add_column("LEN",   justify="right", no_wrap=True)
    table.add_column("ILE",   justify="right", no_wrap=True)
    table.add_column("OSZCZ." if savings else "ZNAKI", justify="right", no_wrap=True)
    for s in stats:
        table.add_row(s.name, str(s.length), f"{s.count}x", str(s.savings if savings else s.weight))
    return table


def _show_report(report: CssReport) -> None:
    console.print()
    console.print(_stat_table("@keyframes", report.keyframes, savings=True))
    console.print(_stat_table("Powtarzające się wzorce", report.patterns))
    console.print(_stat_table("Zmienne CSS", [
        NameStat("--" + s.name, s.count) for s in report.variables
    ]))
    style = "green" if report.remaining >= 0 else "red"
    console.print(f"Rozmiar: [bold]{report.total_len}[/bold] znaków")
    console.print(f"Limit:   [{style}]{report.remaining}[/{style}] pozostało\n")


def run(args: argparse.Namespace) -> None:
    css_path = Path(args.css_file)
    if not css_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {css_path}")
        raise SystemExit(1)
    try:
        budget = get_budget()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    report = analyze_css(css_path.read_text(encoding="utf-8"), budget)
    _show_report(report)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "analyze",
        help="Analizuje arkusz CSS: keyframes, powtórzenia, zmienne, limit.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wypisuje nazwy @keyframes (z szacowaną oszczędnością po skróceniu do 3 znaków),
długie powtarzające się wzorce, zmienne CSS posortowane po zajmowanym miejscu
oraz całkowity rozmiar i zapas do limitu.

Przykłady:
  oshi analyze wired-new/custom.css
        """,
    )
    p.add_argument("css_file", metavar="PLIK.css", help="Ścieżka do arkusza CSS.")
    p.set_defaults(func=run)
