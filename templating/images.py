"""
templating/images.py — pobieranie obrazków profilu i podmiana URL-i na lokalne.

Nazwa pliku: pierwsze 10 znaków MD5 z URL + rozszerzenie ze ścieżki
(domyślnie .jpg). Plik już obecny w images/ nie jest pobierany ponownie.
Błędy pobierania nie przerywają pracy — [warn] na stderr i dalej.

Publiczne API:
  url_to_filename(url)                                  -> str
  download_image(url, images_dir, session, timeout)     -> str | None
  download_all(urls, images_dir, batch_size, timeout)   -> dict[str, str]
  localize_images(html, url_map)                        -> str
"""

from __future__ import annotations

import hashlib
import re
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import requests

DEFAULT_BATCH_SIZE = 5
DEFAULT_TIMEOUT = 30.0
LOCAL_PREFIX = "./images/"

_HTTP_RE = re.compile(r"^https?://")
# '&' które nie jest już początkiem encji &amp;
_BARE_AMP_RE = re.compile(r"&(?!amp;)")


def url_to_filename(url: str) -> str:
    digest = hashlib.md5(url.encode("utf-8")).hexdigest()[:10]
    ext = PurePosixPath(urlparse(url).path).suffix or ".jpg"
    return digest + ext


def download_image(
    url: str,
    images_dir: Path,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str | None:
    """
    Pobiera jeden obrazek do images_dir.

    Returns:
        Ścieżka względna './images/<plik>' albo None przy błędzie.
    """
    # Kopia z DevTools koduje '&' w URL-ach jako &amp;
    clean_url = url.replace("&amp;", "&")
    filename = url_to_filename(clean_url)
    local_path = images_dir / filename
    relative = LOCAL_PREFIX + filename
    if local_path.exists():
        return relative

    http = session or requests
    try:
        resp = http.get(clean_url, timeout=timeout)
    except requests.RequestException as e:
        print(f"[warn] Nie udało się pobrać {url[:80]}: {e}", file=sys.stderr)
        return None
    if not resp.ok:
        print(f"[warn] HTTP {resp.status_code} dla {url[:80]}", file=sys.stderr)
        return None

    local_path.write_bytes(resp.content)
    return relative


def download_all(
    urls: list[str],
    images_dir: Path,
    batch_size: int = DEFAULT_BATCH_SIZE,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, str]:
    """
    Pobiera obrazki partiami (maks. batch_size równolegle).

    Zwraca mapę URL → ścieżka lokalna; dla każdego URL-a mapowane są też
    warianty z odkodowanym i zakodowanym '&', żeby localize_images()
    trafiło w obie postaci występujące w HTML.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size musi być >= 1, otrzymano {batch_size}")

    http_urls = [u for u in dict.fromkeys(urls) if _HTTP_RE.match(u)]
    if not http_urls:
        return {}

    images_dir.mkdir(parents=True, exist_ok=True)
    url_map: dict[str, str] = {}

    with requests.Session() as session, ThreadPoolExecutor(max_workers=batch_size) as pool:
        for i in range(0, len(http_urls), batch_size):
            batch = http_urls[i:i + batch_size]
            results = pool.map(
                lambda u: download_image(u, images_dir, session, timeout), batch
            )
            for url, local in zip(batch, results):
                if not local:
                    continue
                url_map[url] = local
                url_map.setdefault(url.replace("&amp;", "&"), local)
                url_map.setdefault(_BARE_AMP_RE.sub("&amp;", url), local)

    return url_map


def localize_images(html: str, url_map: dict[str, str]) -> str:
    """Podmienia każdy URL z mapy na ścieżkę lokalną (dosłownie, wszystkie wystąpienia)."""
    # dłuższe URL-e najpierw, żeby prefiks nie zjadł dłuższego wariantu
    for url in sorted(url_map, key=len, reverse=True):
        html = html.replace(url, url_map[url])
    return html
