"""
Konfiguracja narzędzi profilu — zmienne środowiskowe z wartościami domyślnymi.

Zmienne środowiskowe (opcjonalnie w pliku .env w katalogu głównym projektu):
  OSHI_PROFILE_DIR        folder profilu (domyślnie: bieżący katalog)
  OSHI_BUDGET             limit znaków custom.css / custom.html (domyślnie 50000)
  OSHI_DOWNLOAD_TIMEOUT   timeout pobierania obrazka w sekundach (domyślnie 30)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_ENV_PROFILE_DIR = "OSHI_PROFILE_DIR"
_ENV_BUDGET      = "OSHI_BUDGET"
_ENV_TIMEOUT     = "OSHI_DOWNLOAD_TIMEOUT"


@dataclass(frozen=True, slots=True)
class ProfilePaths:
    """Ścieżki plików w folderze profilu."""

    root: Path
    profile: Path        # szablon/wynik profile.html
    custom_html: Path
    custom_css: Path
    source: Path         # .tools/source.html, wklejony outerHTML
    images: Path

    @classmethod
    def from_dir(cls, root: str | Path) -> ProfilePaths:
        root = Path(root).resolve()
        return cls(
            root=root,
            profile=root / "profile.html",
            custom_html=root / "custom.html",
            custom_css=root / "custom.css",
            source=root / ".tools" / "source.html",
            images=root / "images",
        )


def _env_number(name: str, default: str, cast: type[int] | type[float]) -> int | float:
    raw = os.getenv(name, default)
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"Zmienna {name} musi być liczbą, otrzymano {raw!r}") from None
    if value <= 0:
        raise ValueError(f"Zmienna {name} musi być dodatnia, otrzymano {raw!r}")
    return value


def profile_dir(override: str | None = None) -> Path:
    return Path(override or os.getenv(_ENV_PROFILE_DIR, "."))


def get_paths(override: str | None = None) -> ProfilePaths:
    return ProfilePaths.from_dir(profile_dir(override))


def get_budget() -> int:
    return int(_env_number(_ENV_BUDGET, "50000", int))


def get_download_timeout() -> float:
    return float(_env_number(_ENV_TIMEOUT, "30", float))
