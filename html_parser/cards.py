"""
html_parser/cards.py — wyszukiwanie zrównoważonych kontenerów (kart) w HTML.

Architektura:
  dokument → _tokenize() → lista tagów z pozycjami (bez komentarzy)
  → skan nagłówków (class zaczyna się od markera nagłówka)
  → dopasowanie widocznego tekstu nagłówka do wzorca
  → najbliższy obejmujący kontener (stos otwartych tagów kontenera)
  → licznik głębokości do zamykającego tagu → BlockSpan

To nie jest parser DOM: liczymy wyłącznie pary tagów o tej samej nazwie.
Niepoprawny markup (tagi samozamykające kontenera, różna wielkość liter
w nazwie tagu, tagi wewnątrz komentarzy/skryptów) daje wynik nieokreślony.

Publiczne API:
  find_block(document, heading_pattern, container, heading, tag) -> BlockSpan | None
  find_card(document, heading_pattern, **markers)                -> str | None
  iter_blocks(document, opener, tag)                             -> Iterator[str]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from data_model.documents import BlockSpan

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# Tag otwierający lub zamykający; wartości atrybutów w cudzysłowach mogą
# zawierać '>'.
_TAG_RE = re.compile(
    r"""<(/?)([A-Za-z][\w:-]*)((?:[^>"']|"[^"]*"|'[^']*')*)>"""
)
_CLASS_RE = re.compile(r"""\bclass\s*=\s*(?:"([^"]*)"|'([^']*)')""", re.IGNORECASE)
_EMPTY_COMMENT_RE = re.compile(r"<!--\s*-->")
_ANY_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")

# Ile znaków bierzemy jako treść nagłówka bez tagu zamykającego.
_UNCLOSED_HEADING_CHARS = 200


# ---------------------------------------------------------------------------
# Typy wewnętrzne
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class _Token:
    start: int           # pozycja '<'
    end: int             # pozycja za '>'
    name: str
    closing: bool
    css_class: str | None


def _tokenize(document: str) -> list[_Token]:
    tokens: list[_Token] = []
    for m in _TAG_RE.finditer(document):
        closing = m.group(1) == "/"
        css_class = None
        if not closing:
            cm = _CLASS_RE.search(m.group(3))
            if cm:
                css_class = cm.group(1) if cm.group(1) is not None else cm.group(2)
        tokens.append(_Token(m.start(), m.end(), m.group(2), closing, css_class))
    return tokens


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE)


def _is_container(token: _Token, tag: str, marker: str) -> bool:
    """Sprawdza klasę z granicą prefiksu: "card" i "card x" tak, "card-wide" nie."""
    if token.closing or token.name != tag or token.css_class is None:
        return False
    value = token.css_class
    if not value.startswith(marker):
        return False
    rest = value[len(marker):]
    return rest == "" or rest[0].isspace()


def _is_heading(token: _Token, marker: str) -> bool:
    return not token.closing and token.css_class is not None and token.css_class.startswith(marker)


def _matching_close(tokens: list[_Token], open_idx: int) -> int | None:
    """Indeks tokenu zamykającego dla tokenu otwierającego (licznik głębokości)."""
    name = tokens[open_idx].name
    depth = 0
    for i in range(open_idx, len(tokens)):
        tok = tokens[i]
        if tok.name != name:
            continue
        if tok.closing:
            depth -= 1
            if depth == 0:
                return i
        else:
            depth += 1
    return None


def _visible_text(fragment: str) -> str:
    text = _EMPTY_COMMENT_RE.sub("", fragment)
    text = _ANY_TAG_RE.sub(" ", text)
    return _WS_RE.sub(" ", text).strip()


def _heading_text(document: str, tokens: list[_Token], idx: int) -> str:
    close_idx = _matching_close(tokens, idx)
    start = tokens[idx].end
    if close_idx is None:
        end = min(start + _UNCLOSED_HEADING_CHARS, len(document))
    else:
        end = tokens[close_idx].start
    return _visible_text(document[start:end])


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def find_block(
    document: str,
    heading_pattern: str | re.Pattern[str],
    *,
    container: str = "card",
    heading: str = "card-header",
    tag: str = "div",
) -> BlockSpan | None:
    """
    Zwraca najmniejszy kontener `tag` o klasie `container`, który obejmuje
    nagłówek (klasa zaczyna się od `heading`) pasujący do `heading_pattern`.

    Wzorzec jako str jest wyrażeniem regularnym dopasowywanym bez względu na
    wielkość liter (re.search). Kandydaci bez kontenera lub z kontenerem bez
    pary zamykającej są pomijani — wygrywa pierwszy poprawny.

    Returns:
        BlockSpan z pełnym markupem kontenera albo None (sekcja nieobecna).
    """
    rx = _compile(heading_pattern)
    tokens = _tokenize(document)
    # stos indeksów otwartych tagów kontenera (tylko nazwa `tag`)
    stack: list[int] = []

    for i, tok in enumerate(tokens):
        if tok.name == tag:
            if tok.closing:
                if stack:
                    stack.pop()
            else:
                stack.append(i)

        if not _is_heading(tok, heading):
            continue
        if not rx.search(_heading_text(document, tokens, i)):
            continue

        # Najbliższy obejmujący kontener; nagłówek sam w sobie nim nie jest.
        for open_idx in reversed(stack):
            if open_idx == i:
                continue
            if _is_container(tokens[open_idx], tag, container):
                break
        else:
            continue

        close_idx = _matching_close(tokens, open_idx)
        if close_idx is None:
            continue
        start, end = tokens[open_idx].start, tokens[close_idx].end
        return BlockSpan(start=start, end=end, text=document[start:end])

    return None


def find_card(
    document: str,
    heading_pattern: str | re.Pattern[str],
    **markers: str,
) -> str | None:
    """Skrót: tekst karty z nagłówkiem pasującym do wzorca albo None."""
    span = find_block(document, heading_pattern, **markers)
    return span.text if span else None


def iter_blocks(document: str, opener: str, tag: str = "div") -> Iterator[str]:
    """
    Zwraca wewnętrzny markup każdego elementu, którego tag otwierający jest
    dokładnie równy `opener` (np. '<div class="profile-comment">').

    Element bez pary zamykającej daje treść do końca dokumentu.
    """
    tokens = _tokenize(document)
    for i, tok in enumerate(tokens):
        if tok.closing or tok.name != tag:
            continue
        if document[tok.start:tok.end] != opener:
            continue
        close_idx = _matching_close(tokens, i)
        end = tokens[close_idx].start if close_idx is not None else len(document)
        yield document[tok.end:end]
