"""html_parser/text.py — wyciąganie widocznego tekstu z fragmentów HTML."""

from __future__ import annotations

import re
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

_EMPTY_COMMENT_RE = re.compile(r"<!--\s*-->")
# Spany edytora Lexical (obecne tylko w kopii outerHTML z DevTools)
_LEXICAL_RE = re.compile(r'data-lexical-text="true">([^<]*)', re.IGNORECASE)
_WS_RE = re.compile(r"\s+")


def strip_comments(s: str) -> str:
    """Usuwa puste komentarze `<!-- -->` wstawiane przez React i przycina."""
    return _EMPTY_COMMENT_RE.sub("", s).strip()


def strip_tags(html: str) -> str:
    """Widoczny tekst fragmentu, białe znaki zwinięte do pojedynczej spacji."""
    if not html:
        return ""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(html, "html.parser")
    return _WS_RE.sub(" ", soup.get_text(" ")).strip()


def extract_rich_text(html: str) -> str:
    """
    Tekst z fragmentu rich-text.

    Najpierw spany Lexical (kopia z DevTools), w przeciwnym razie cały
    widoczny tekst. Pojedynczy znak traktujemy jako szum → "".
    """
    if not html:
        return ""
    lexical = _LEXICAL_RE.findall(html)
    if lexical:
        return " ".join(lexical).strip()
    text = strip_tags(html)
    return strip_comments(text) if len(text) > 1 else ""


def extract_text(html: str, css_class: str) -> str:
    """Treść pierwszego elementu z class="<css_class>" do pierwszego </div>."""
    m = re.search(
        rf'class="{css_class}"[^>]*>([\s\S]*?)</div>', html, re.IGNORECASE
    )
    return strip_comments(m.group(1)) if m else ""


def extract_attr(tag: str, attr: str) -> str:
    m = re.search(rf'{attr}="([^"]*)"', tag, re.IGNORECASE)
    return m.group(1) if m else ""
