"""Komenda: oshi minify — minifikacja custom.css i custom.html folderu profilu."""

from __future__ import annotations

import argparse

from rich.console import Console

from assets.minify import AssetKind, MinifyResult, minify_file
from oshi._config import get_budget, get_paths

console = Console()


def _report(result: MinifyResult) -> None:
    style = "green" if result.remaining >= 0 else "red"
    console.print(f"[bold]=== {result.kind.upper()} ===[/bold]")
    console.print(f"  Źródło:        {result.source_len} znaków")
    console.print(f"  Po minifikacji: {result.minified_len} znaków (oszczędność {result.saved})")
    console.print(f"  Limit:         [{style}]{result.remaining}[/{style}] pozostało")


def run(args: argparse.Namespace) -> None:
    paths = get_paths(args.profile_dir)
    try:
        budget = get_budget()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    jobs = [
        (paths.custom_css, paths.root / "custom.min.css", AssetKind.CSS),
        (paths.custom_html, paths.root / "custom.min.html", AssetKind.HTML),
    ]

    any_work = False
    for src, dst, kind in jobs:
        if not src.exists():
            continue
        any_work = True
        try:
            result = minify_file(src, dst, kind, budget)
        except OSError as e:
            console.print(f"[red]Błąd minifikacji {src.name}:[/red] {e}")
            raise SystemExit(1)
        if result is None:
            console.print(f"[yellow]=== {kind.upper()} === (pusty, pominięto)[/yellow]")
        else:
            _report(result)

    if not any_work:
        console.print(
            "[yellow]Nic do minifikacji.[/yellow] "
            "Umieść custom.css i/lub custom.html w folderze profilu."
        )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "minify",
        help="Minifikuje custom.css / custom.html do *.min.* i raportuje limit.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyta custom.css i custom.html z folderu profilu, zapisuje custom.min.css
i custom.min.html oraz podaje liczbę znaków i zapas do limitu ($OSHI_BUDGET).

Przykłady:
  oshi minify
  oshi minify --profile-dir profiles/lady
        """,
    )
    p.add_argument(
        "--profile-dir",
        metavar="DIR",
        default=None,
        help="Folder profilu (domyślnie: $OSHI_PROFILE_DIR lub bieżący katalog).",
    )
    p.set_defaults(func=run)
