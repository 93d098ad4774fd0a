"""
html_parser/profile.py — ekstrakcja pól profilu z migawki strony (outerHTML).

Źródłem musi być kopia z DevTools (Elements → Copy outerHTML), nie
"View Page Source" — treści Lexical renderują się dopiero po hydracji Reacta,
więc w surowym źródle komentarze, zainteresowania i blurby są puste.

Każda sekcja jest lokalizowana przez find_card() po tekście nagłówka karty;
brak karty zostawia wartości domyślne ProfileData.

Publiczne API:
  extract_profile_data(source) -> ProfileData
"""

from __future__ import annotations

import re

from data_model.profile import (
    Album,
    Badge,
    Comment,
    Friend,
    Group,
    ProfileData,
    Reply,
    SocialLink,
)
from html_parser.cards import find_card, iter_blocks
from html_parser.text import extract_attr, extract_rich_text, extract_text, strip_comments

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

_I = re.IGNORECASE

INTEREST_CATEGORIES = ("Music", "Movies", "Shows", "Books", "Games", "Heroes")

# Maks. długość fragmentu kategorii zainteresowań bez następnej sekcji.
_INTEREST_CHUNK_CHARS = 1500

_BG_URL_RE = re.compile(r"""background:\s*url\(["']?([^"')]+)["']?\)""", _I)
_BOLD_TEXT_RE = re.compile(r"font-weight:\s*600[^>]*>([^<]+)", _I)
_OPT_COMMENT = r"(?:<!--\s*-->)?"


def _search(pattern: str, text: str, flags: int = _I) -> re.Match[str] | None:
    return re.search(pattern, text, flags)


# ---------------------------------------------------------------------------
# Nagłówek profilu
# ---------------------------------------------------------------------------

def _extract_header(source: str, data: ProfileData) -> None:
    m = re.search(r'class="profile-page\s+profile-custom-css\s+(theme-\w+)', source)
    if m:
        data.theme = m.group(1)

    if v := extract_text(source, "profile-display-name"):
        data.display_name = v
    if v := extract_text(source, "profile-username"):
        data.username = v.removeprefix("@")
    if v := extract_text(source, "profile-tagline"):
        data.tagline = re.sub(r'^["“]|["”]$', "", v).strip()
    if v := extract_text(source, "profile-oshi-mark"):
        data.oshi_mark = v
    if v := extract_text(source, "mood-text"):
        data.mood = v

    # src może stać przed albo po class w <img>
    m = (
        _search(r'class="user-avatar\s+profile-avatar"[^>]*src="([^"]+)"', source)
        or _search(r'src="([^"]+)"[^>]*class="user-avatar\s+profile-avatar"', source)
    )
    if m:
        data.avatar_url = m.group(1)

    if v := extract_text(source, "profile-online-status"):
        data.online_status = v

    m = _search(r'class="profile-boop-stats"[^>]*>([\s\S]*?)</div>', source)
    if m:
        boops = _search(r"(\d+)\s*boop", m.group(1))
        data.boop_count = boops.group(1) if boops else "0"
        viewer = _search(r"booped\s+(\d+)x", m.group(1))
        data.viewer_boops = viewer.group(1) if viewer else None

    m = _search(
        r'class="profile-page[^"]*"[^>]*style="[^"]*background-image:\s*url\(([^)]+)\)',
        source,
    )
    if m:
        data.background_image = m.group(1)


# ---------------------------------------------------------------------------
# Karty z listami
# ---------------------------------------------------------------------------

def _extract_friends(card: str) -> list[Friend]:
    items = list(re.finditer(
        r'<a\s[^>]*class="friend-item"[^>]*href="([^"]+)"[^>]*>([\s\S]*?)</a>', card, _I
    ))
    if not items:
        items = list(re.finditer(
            r'<a\s[^>]*href="([^"]+)"[^>]*class="friend-item"[^>]*>([\s\S]*?)</a>', card, _I
        ))

    friends: list[Friend] = []
    for m in items:
        inner = m.group(2)
        alt = extract_attr(inner, "alt")
        name = _search(r'class="friend-name"[^>]*>([\s\S]*?)</span>', inner)
        friends.append(Friend(
            href=m.group(1),
            avatar_url=extract_attr(inner, "src"),
            name=strip_comments(name.group(1)) if name else alt,
            alt=alt,
        ))
    return friends


def _extract_albums(card: str) -> list[Album]:
    albums: list[Album] = []
    for m in re.finditer(r'<a\s[^>]*href="([^"]*/photos/[^"]+)"[^>]*>([\s\S]*?)</a>', card, _I):
        inner = m.group(2)
        bg = _BG_URL_RE.search(inner)
        title = _BOLD_TEXT_RE.search(inner)
        count = _search(r"(\d+)\s*photos?", inner)
        albums.append(Album(
            href=m.group(1),
            cover_url=bg.group(1) if bg else "",
            title=title.group(1).strip() if title else "Album",
            count=count.group(1) if count else "0",
        ))
    return albums


def _extract_groups(card: str) -> list[Group]:
    groups: list[Group] = []
    for m in re.finditer(r'<a\s[^>]*href="(/groups/[^"]+)"[^>]*>([\s\S]*?)</a>', card, _I):
        if "/top" in m.group(1):
            continue  # link "Edit Top Groups"
        inner = m.group(2)
        bg = _BG_URL_RE.search(inner)
        name = _BOLD_TEXT_RE.search(inner)
        count = _search(r"(\d+)\s*members?", inner)
        groups.append(Group(
            href=m.group(1),
            cover_url=bg.group(1) if bg else "",
            name=name.group(1).strip() if name else "Group",
            members=count.group(1) if count else "0",
        ))
    return groups


def _extract_collab(card: str, data: ProfileData) -> None:
    for row in re.finditer(r"<tr>([\s\S]*?)</tr>", card, _I):
        if "<td" not in row.group(1):
            continue  # wiersz nagłówka tabeli
        cells = re.findall(
            r'<td[^>]*style="[^"]*background:\s*var\(([^)]+)\)[^"]*"[^>]*>', row.group(1), _I
        )
        slots = [1 if "--vs-blue" in c else 0 for c in cells]
        if slots:
            data.collab_grid.append(slots)

    data.collab_tags = [t.strip() for t in re.findall(r"border-radius:\s*3px[^>]*>([^<]+)<", card, _I)]

    # Opis: tekst po tabeli, a bez tabeli pierwszy span Lexical
    desc = _search(r"card-body[\s\S]*?</table>([\s\S]*?)$", card)
    if desc:
        data.collab_description = extract_rich_text(desc.group(1))
    else:
        lex = _search(r'data-lexical-text="true">([^<]+)', card)
        data.collab_description = lex.group(1) if lex else ""


def _extract_details(card: str, data: ProfileData) -> None:
    m = _search(rf'Generation[\s\S]*?title="([^"]*)"[\s\S]*?Gen\s*{_OPT_COMMENT}\s*(\d+)', card)
    if m:
        data.gen_title = m.group(1)
        data.generation = m.group(2)
    m = _search(r"Friends[\s\S]*?<a[^>]*>(\d+)</a>", card)
    if m:
        data.friends_count = m.group(1)
    m = _search(r"Comments[\s\S]*?<a[^>]*>(\d+)</a>", card)
    if m:
        data.comments_count = m.group(1)
    m = _search(r"Affiliation[\s\S]*?<td>([^<]+)</td>", card)
    if m:
        data.affiliation = strip_comments(m.group(1))


def _extract_badges(card: str) -> list[Badge]:
    return [
        Badge(title=m.group(1), svg=m.group(2))
        for m in re.finditer(
            r'<div\s+title="([^"]+)"[^>]*>\s*(<svg[\s\S]*?</svg>)\s*</div>', card, _I
        )
    ]


def _extract_social_links(card: str) -> list[SocialLink]:
    anchors = list(re.finditer(r'<a\s[^>]*class="social-link-item"[^>]*>([\s\S]*?)</a>', card, _I))
    if not anchors:
        anchors = list(re.finditer(r"<a\s[^>]*social-link-item[^>]*>([\s\S]*?)</a>", card, _I))

    links: list[SocialLink] = []
    for m in anchors:
        tag = m.group(0)
        href = _search(r'href="([^"]*)"', tag)
        platform = _search(r'class="social-link-platform"[^>]*>([^<]+)', tag)
        name = _search(r'class="social-link-name"[^>]*>([^<]+)', tag)
        if href and platform:
            links.append(SocialLink(
                href=href.group(1),
                platform=platform.group(1).strip(),
                name=name.group(1).strip() if name else platform.group(1).strip(),
            ))
    return links


# ---------------------------------------------------------------------------
# Karty tekstowe
# ---------------------------------------------------------------------------

def _extract_blurbs(card: str, data: ProfileData) -> None:
    m = _search(r'About Me[\s\S]*?<div class="blurb-content">([\s\S]*?)</div>', card)
    if m:
        data.about_me = extract_rich_text(m.group(1))
    m = _search(r'Who I[^<]*Like to Meet[\s\S]*?<div class="blurb-content">([\s\S]*?)</div>', card)
    if m:
        data.who_to_meet = extract_rich_text(m.group(1))


def _extract_interests(card: str) -> dict[str, str]:
    interests: dict[str, str] = {}
    for cat in INTEREST_CATEGORIES:
        cat_idx = card.find(cat + ":")
        if cat_idx == -1:
            continue
        content_idx = card.find("interest-content", cat_idx)
        if content_idx == -1:
            continue
        # fragment kończy się na następnej sekcji
        next_section = card.find("interest-section", content_idx + len("interest-content"))
        chunk_end = (
            next_section if next_section > -1
            else min(content_idx + _INTEREST_CHUNK_CHARS, len(card))
        )
        # pomijamy resztę tagu '...interest-content">'
        chunk = card[content_idx:chunk_end]
        chunk = chunk[chunk.find(">") + 1:] if ">" in chunk else chunk
        interests[cat] = extract_rich_text(chunk)
    return interests


def _extract_song(card: str) -> str:
    m = (
        _search(r'src="([^"]+\.(?:mp3|wav|ogg|m4a|webm)[^"]*)"', card)
        or _search(r'<source\s+src="([^"]+)"', card)
        or _search(r'<audio[^>]+src="([^"]+)"', card)
    )
    return m.group(1) if m else ""


# ---------------------------------------------------------------------------
# Komentarze
# ---------------------------------------------------------------------------

def _extract_reply(inner: str) -> Reply | None:
    m = _search(r'margin-top:\s*8px;\s*margin-left:\s*10px([\s\S]*?)(?=<div class="comment-actions"|$)', inner)
    if not m:
        return None
    block = m.group(1)
    author = _search(r'font-weight:\s*600[^>]*href="([^"]+)"[^>]*>([^<]+)', block)
    avatar = _search(r'src="([^"]+)"', block)
    time = _search(rf"font-size:\s*9px[^>]*>([^<]*{_OPT_COMMENT}[^<]*)", block)
    return Reply(
        author_href=author.group(1) if author else "",
        author_name=author.group(2) if author else "",
        avatar_url=avatar.group(1) if avatar else "",
        time=strip_comments(time.group(1)) if time else "",
        text=extract_rich_text(block),
    )


def _extract_comment(inner: str) -> Comment | None:
    author = (
        _search(r'class="comment-author-name"[^>]*href="([^"]+)"[^>]*>([^<]+)', inner)
        or _search(r'href="([^"]+)"[^>]*class="comment-author-name"[^>]*>([^<]+)', inner)
    )
    if not author:
        return None
    avatar = (
        _search(r'comment-avatar"[^>]*src="([^"]+)"', inner)
        or _search(r'src="([^"]+)"[^>]*class="[^"]*comment-avatar', inner)
    )
    time = _search(rf'class="comment-time"[^>]*>([^<]*{_OPT_COMMENT}[^<]*)<', inner)
    body = _search(
        r'class="comment-body"[^>]*>([\s\S]*?)(?=<div style="margin-top:\s*8px|<div class="comment-actions"|$)',
        inner,
    )
    return Comment(
        author_href=author.group(1),
        author_name=author.group(2),
        avatar_url=avatar.group(1) if avatar else "",
        time=strip_comments(time.group(1)) if time else "",
        body=extract_rich_text(body.group(1)) if body else "",
        reply=_extract_reply(inner),
    )


def _extract_comments(card: str, data: ProfileData) -> None:
    m = _search(rf"View All[^(]*\({_OPT_COMMENT}\s*(\d+)", card)
    if m:
        data.comment_total = m.group(1)
    for inner in iter_blocks(card, '<div class="profile-comment">'):
        comment = _extract_comment(inner)
        if comment:
            data.comments.append(comment)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def extract_profile_data(source: str) -> ProfileData:
    """
    Wyciąga pola profilu z pełnego outerHTML strony.

    Nieobecne sekcje nie są błędem — pola zostają z wartościami domyślnymi.
    """
    data = ProfileData()
    _extract_header(source, data)

    if card := find_card(source, "Top 8"):
        data.friends = _extract_friends(card)
    if card := find_card(source, "Photos"):
        data.albums = _extract_albums(card)
    if card := find_card(source, "Groups"):
        data.groups = _extract_groups(card)
    if card := find_card(source, "Collab Schedule"):
        _extract_collab(card, data)
    if card := find_card(source, "Details"):
        _extract_details(card, data)
    if card := find_card(source, "Badges"):
        data.badges = _extract_badges(card)
    if card := find_card(source, "Links"):
        data.social_links = _extract_social_links(card)
    if card := find_card(source, "Avatar Info"):
        m = _search(r"Model[\s\S]*?<td>([^<]+)</td>", card)
        if m:
            data.model_type = m.group(1).strip()
    if card := find_card(source, "Lore"):
        m = _search(r'class="card-body"[^>]*>([\s\S]*)', card)
        data.lore = extract_rich_text(m.group(1)) if m else ""
    if card := find_card(source, "Blurbs"):
        _extract_blurbs(card, data)
    if card := find_card(source, "Interests"):
        data.interests = _extract_interests(card)
    if card := find_card(source, "Profile Song"):
        data.song_url = _extract_song(card)
    if card := find_card(source, "Friend Comments"):
        _extract_comments(card, data)

    return data
