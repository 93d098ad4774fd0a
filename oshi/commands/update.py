"""Komenda: oshi update — wypełnia profile.html danymi z wklejonego outerHTML."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from data_model.profile import ProfileData
from html_parser.profile import extract_profile_data
from oshi._config import ProfilePaths, get_download_timeout, get_paths
from oshi.commands.extract import _show_table
from templating.images import download_all, localize_images
from templating.render import inline_custom_html, render_profile

console = Console()


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _read_optional(path: Path) -> str | None:
    return path.read_text(encoding="utf-8") if path.exists() else None


def _resolve_source(paths: ProfilePaths, source_arg: str | None) -> Path:
    """Argument CLI (względem folderu profilu) > .tools/source.html."""
    if source_arg:
        return (paths.root / source_arg).resolve()
    return paths.source


def _inline_only(paths: ProfilePaths) -> None:
    """Tryb bez źródła: tylko wstawienie custom.html do profile.html."""
    console.print("[yellow]Brak źródłowego HTML.[/yellow]")
    console.print("  1. Wklej outerHTML z DevTools do .tools/source.html w folderze profilu")
    console.print("  2. Uruchom: oshi update")
    console.print("  Alternatywnie: oshi update <ścieżka-do-source.html>")

    custom_html = _read_optional(paths.custom_html)
    if custom_html is None or not paths.profile.exists():
        return
    html = paths.profile.read_text(encoding="utf-8")
    paths.profile.write_text(inline_custom_html(html, custom_html), encoding="utf-8")
    console.print("[green]Wstawiono custom.html do profile.html[/green]")


def _summary(paths: ProfilePaths, data: ProfileData, localized: int, inlined: bool) -> None:
    console.print(f"[green]Zaktualizowano:[/green] {paths.profile}")
    console.print(f"  Nazwa:          [bold]{escape(data.display_name)}[/bold]")
    console.print(f"  Użytkownik:     @{escape(data.username)}")
    console.print(f"  Znajomi:        {len(data.friends)}")
    console.print(f"  Albumy:         {len(data.albums)}")
    console.print(f"  Grupy:          {len(data.groups)}")
    console.print(f"  Komentarze:     {len(data.comments)}")
    console.print(f"  Linki:          {len(data.social_links)}")
    console.print(f"  Odznaki:        {len(data.badges)}")
    console.print(f"  Obrazki:        {localized} lokalnie")
    if inlined:
        console.print("  custom.html:    wstawiony")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    paths = get_paths(args.profile_dir)
    if not paths.profile.exists():
        console.print(f"[red]Brak szablonu profilu:[/red] {paths.profile}")
        raise SystemExit(1)

    source_path = _resolve_source(paths, args.source)
    source = ""
    if source_path.exists():
        source = source_path.read_text(encoding="utf-8")
        console.print(f"Źródło: [bold]{source_path}[/bold]")

    if not source.strip():
        _inline_only(paths)
        return

    data = extract_profile_data(source)
    custom_html = _read_optional(paths.custom_html)

    try:
        template = paths.profile.read_text(encoding="utf-8")
        html = render_profile(template, data, custom_html)

        url_map: dict[str, str] = {}
        if not args.no_images:
            urls = data.image_urls()
            if urls:
                console.print(f"  Pobieranie {len(urls)} obrazków …")
            url_map = download_all(urls, paths.images, timeout=get_download_timeout())
            html = localize_images(html, url_map)

        paths.profile.write_text(html, encoding="utf-8")
    except (OSError, ValueError) as e:
        console.print(f"[red]Błąd aktualizacji profilu:[/red] {e}")
        raise SystemExit(1)

    _summary(paths, data, len(set(url_map.values())), custom_html is not None)

    if args.show:
        _show_table(data)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "update",
        help="Wypełnia profile.html danymi z outerHTML i pobiera obrazki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga dane profilu z outerHTML (kopia z DevTools, NIE "View Page Source"),
podstawia je do profile.html, pobiera obrazki do images/ i wstawia custom.html.

Bez źródła (lub gdy jest puste) tylko wstawia custom.html do profile.html.

Przykłady:
  oshi update
  oshi update zrzut.html --show
  oshi update --profile-dir profiles/lady --no-images
        """,
    )
    p.add_argument(
        "source",
        metavar="SOURCE",
        nargs="?",
        default=None,
        help="Plik z outerHTML (względem folderu profilu; domyślnie .tools/source.html).",
    )
    p.add_argument(
        "--profile-dir",
        metavar="DIR",
        default=None,
        help="Folder profilu (domyślnie: $OSHI_PROFILE_DIR lub bieżący katalog).",
    )
    p.add_argument(
        "--no-images",
        action="store_true",
        help="Nie pobieraj obrazków (URL-e zostają zdalne).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę wyciągniętych pól po zapisie.",
    )
    p.set_defaults(func=run)
