"""
assets/minify.py — minifikacja custom.css i custom.html profilu.

Limit platformy: 50 000 znaków na każdy z plików; raport podaje, ile
zostało do limitu.

Publiczne API:
  minify_css(css)                     -> str
  minify_html(html)                   -> str
  minify_file(src, dst, kind, budget) -> MinifyResult | None
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

DEFAULT_BUDGET = 50_000

_CSS_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_CSS_PUNCT_RE = re.compile(r"\s*([{}:;,>~+])\s*")
# komentarze warunkowe <!--[if ...]> zostają
_HTML_COMMENT_RE = re.compile(r"<!--(?!\[if)[\s\S]*?-->")
_BETWEEN_TAGS_RE = re.compile(r">\s+<")
_WS_RE = re.compile(r"\s+")


class AssetKind(StrEnum):
    CSS  = "css"
    HTML = "html"


@dataclass(slots=True)
class MinifyResult:
    kind: AssetKind
    source_len: int
    minified_len: int
    budget: int = DEFAULT_BUDGET

    @property
    def saved(self) -> int:
        return self.source_len - self.minified_len

    @property
    def remaining(self) -> int:
        return self.budget - self.minified_len


def minify_css(css: str) -> str:
    css = _CSS_COMMENT_RE.sub("", css)
    css = _WS_RE.sub(" ", css)
    css = _CSS_PUNCT_RE.sub(r"\1", css)
    css = css.replace(";}", "}")
    return css.strip()


def minify_html(html: str) -> str:
    html = _HTML_COMMENT_RE.sub("", html)
    html = _BETWEEN_TAGS_RE.sub("><", html)
    html = _WS_RE.sub(" ", html)
    return html.strip()


_MINIFIERS = {
    AssetKind.CSS: minify_css,
    AssetKind.HTML: minify_html,
}


def minify_file(
    src: Path,
    dst: Path,
    kind: AssetKind | str,
    budget: int = DEFAULT_BUDGET,
) -> MinifyResult | None:
    """
    Minifikuje plik src do dst.

    Returns:
        MinifyResult albo None gdy źródło jest puste (dst nie powstaje).

    Raises:
        ValueError: nieznany rodzaj pliku.
    """
    try:
        kind = AssetKind(kind)
    except ValueError:
        raise ValueError(f"Nieznany rodzaj pliku: {kind!r} (dozwolone: css, html)") from None

    raw = src.read_text(encoding="utf-8")
    if not raw.strip():
        return None
    minified = _MINIFIERS[kind](raw)
    dst.write_text(minified, encoding="utf-8")
    return MinifyResult(kind, len(raw), len(minified), budget)
