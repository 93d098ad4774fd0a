"""
templating/render.py — wstawianie danych profilu do szablonu profile.html.

Szablon zawiera placeholdery ("Username", "Headline", "Mood", …) oraz
komentarze-separatory sekcji (<!-- ==== Photos ==== -->), po których
lokalizujemy fragmenty do podmiany. Funkcje są czyste: tekst → tekst.

Publiczne API:
  render_profile(template, data, custom_html) -> str
  inline_custom_html(html, custom_html)       -> str
"""

from __future__ import annotations

import re
from typing import Callable

from data_model.profile import ProfileData
from templating.builders import (
    build_albums,
    build_badges,
    build_collab_grid,
    build_collab_tags,
    build_comments,
    build_friends_grid,
    build_groups,
    build_social_links,
)

# Placeholdery kategorii zainteresowań w szablonie
INTEREST_PLACEHOLDERS: dict[str, str] = {
    "Music": "Genre, Artist, Album",
    "Movies": "Movie1, Movie2",
    "Shows": "Show1, Show2",
    "Books": "Book1, Book2",
    "Games": "Game1, Game2",
    "Heroes": "Hero1, Hero2",
}

_CUSTOM_HTML_RE = re.compile(r'<div class="blurb-content profile-custom-html">[\s\S]*?</div>')

_EDIT_TOP_GROUPS = (
    "<!-- HOST ONLY: Edit Top Groups link -->\n"
    '                        <div style="text-align:center;margin-top:6px">'
    '<a href="/groups/top" style="font-size:9px;color:var(--vs-text-medium)">Edit Top Groups</a></div>'
)

_Repl = str | Callable[[re.Match[str]], str]


def _sub(pattern: str, repl: _Repl, html: str, count: int = 1) -> str:
    """re.sub z literalnym tekstem zastępczym (dane profilu mogą zawierać '\\')."""
    fn = repl if callable(repl) else (lambda _m, _s=repl: _s)
    return re.sub(pattern, fn, html, count=count)


def _sub_all(pattern: str, repl: _Repl, html: str) -> str:
    return _sub(pattern, repl, html, count=0)


# ---------------------------------------------------------------------------
# Sekcje
# ---------------------------------------------------------------------------

def _render_identity(html: str, data: ProfileData) -> str:
    name, user = data.display_name, data.username

    html = _sub_all(r"Username's ", f"{name}'s ", html)
    html = _sub_all(r">Username<", f">{name}<", html)
    html = _sub_all(r"<strong>Username</strong>", f"<strong>{name}</strong>", html)
    html = _sub_all(r"@username", f"@{user}", html)
    html = _sub_all(r"myoshi\.co/username", f"myoshi.co/{user}", html)
    html = _sub_all(r"/username/", f"/{user}/", html)
    html = _sub_all(r"to=username", f"to={user}", html)
    html = _sub_all(r">Display Name</div>", f">{name}</div>", html)
    html = _sub_all(r'"Headline"', f'"{data.tagline}"', html)

    html = _sub(
        r'<div class="profile-oshi-mark">X</div>',
        f'<div class="profile-oshi-mark">{data.oshi_mark}</div>',
        html,
    )
    html = _sub(r'<div class="mood-text">Mood</div>', f'<div class="mood-text">{data.mood}</div>', html)

    if data.avatar_url:
        html = _sub(
            r'src="data:image/svg\+xml[^"]*"(\s+style="width:100px)',
            lambda m: f'src="{data.avatar_url}"{m.group(1)}',
            html,
        )
        html = _sub_all(r'alt="Username"', f'alt="{name}"', html)

    html = _sub(r">Last online just now<", f">{data.online_status}<", html)
    html = _sub(r"14 boops received", f"{data.boop_count} boops received", html)
    if data.viewer_boops:
        html = _sub(r"You've booped 9x", f"You've booped {data.viewer_boops}x", html)

    html = _sub(r"profile-custom-css theme-dark", f"profile-custom-css {data.theme}", html)
    if data.background_image:
        html = _sub(
            r'class="profile-page profile-custom-css',
            f'style="background-image:url({data.background_image});background-size:cover;'
            "background-position:center top;background-attachment:fixed;background-repeat:no-repeat\" "
            'class="profile-page profile-custom-css',
            html,
        )
    return html


def _render_lists(html: str, data: ProfileData) -> str:
    html = _sub(
        r'<div class="friends-grid">[\s\S]*?</div>\s*(?=</div>\s*</div>\s*\n\s*<!--\s*={10,}\s*Photos)',
        build_friends_grid(data.friends) + "\n                        ",
        html,
    )

    albums_html = build_albums(data.albums)
    html = _sub(
        r'(<div class="card">\s*<div class="card-header hearted"[^>]*>\s*<span>[^<]*Photos</span>'
        r'[\s\S]*?<div class="card-body">\s*)([\s\S]*?)(\s*</div>\s*</div>\s*\n\s*<!--\s*={10,}\s*Groups)',
        lambda m: f"{m.group(1)}{albums_html}{m.group(3)}",
        html,
    )

    groups_html = build_groups(data.groups)
    html = _sub(
        r'(<div class="card">\s*<div class="card-header hearted"[^>]*>\s*<span>[^<]*Groups</span>'
        r'[\s\S]*?<div class="card-body">\s*)([\s\S]*?)'
        r'(<!-- HOST ONLY: Edit Top Groups[\s\S]*?</div>\s*</div>\s*</div>\s*\n\s*<!--\s*={10,}\s*Collab)',
        lambda m: (
            f"{m.group(1)}{groups_html}\n                        {_EDIT_TOP_GROUPS}"
            "\n                     </div>\n                  </div>\n\n                  <!-- ==================== Collab"
        ),
        html,
    )
    return html


def _render_collab(html: str, data: ProfileData) -> str:
    if data.collab_grid:
        html = _sub(
            r'<table style="width:100%;border-collapse:collapse;font-size:9px">[\s\S]*?</table>',
            build_collab_grid(data.collab_grid),
            html,
        )
    if data.collab_tags:
        html = _sub(
            r'<div style="display:flex;flex-wrap:wrap;gap:3px">[\s\S]*?</div>\s*'
            r"(?=</div>\s*</div>\s*\n\s*<!--\s*={5,}\s*(?:Details|Badges))",
            build_collab_tags(data.collab_tags),
            html,
        )
    if data.collab_description:
        html = _sub(r"Collab description here", data.collab_description, html)
    return html


def _render_details(html: str, data: ProfileData) -> str:
    html = _sub(r'title="N invites from founding"', f'title="{data.gen_title}"', html)
    html = _sub(r">Gen 1<", f">Gen {data.generation or '1'}<", html)
    html = _sub(
        r'(<td><a href="/)[^"]*/friends">(\d+)</a></td>',
        lambda m: f'{m.group(1)}{data.username}/friends">{data.friends_count}</a></td>',
        html,
    )
    html = _sub(
        r'(<td><a href="#comments">)\d+(</a></td>)',
        lambda m: f"{m.group(1)}{data.comments_count}{m.group(2)}",
        html,
    )
    html = _sub(r"<td>Affiliation</td>", f"<td>{data.affiliation}</td>", html)

    if data.badges:
        html = _sub(
            r'<div style="display:flex;flex-wrap:wrap;gap:8px">[\s\S]*?</div>\s*</div>\s*</div>\s*'
            r"(?=\n\s*<!--\s*={5,}\s*Details)",
            f'<div style="display:flex;flex-wrap:wrap;gap:8px">{build_badges(data.badges)}\n'
            "                        </div>\n                     </div>\n                  </div>\n",
            html,
        )

    if data.social_links:
        html = _sub(
            r'<div class="social-links-list">[\s\S]*?</div>\s*'
            r"(?=</div>\s*</div>\s*\n\s*<!--\s*={5,}\s*Avatar Info)",
            '<div class="social-links-list">\n                           '
            f"{build_social_links(data.social_links)}\n                        </div>\n                     ",
            html,
        )

    html = _sub(r"<td>3d</td>", f"<td>{data.model_type}</td>", html)
    return html


def _render_texts(html: str, data: ProfileData) -> str:
    if data.lore:
        html = _sub(r"Lore content goes here\.", data.lore, html)
    if data.about_me:
        html = _sub(r"About me text goes here\.", data.about_me, html)
    if data.who_to_meet:
        html = _sub(r"Who I'd like to meet text goes here\.", data.who_to_meet, html)

    for cat, placeholder in INTEREST_PLACEHOLDERS.items():
        value = data.interests.get(cat)
        if value:
            html = html.replace(f">{placeholder}<", f">{value}<", 1)

    if data.song_url:
        html = _sub(r'src="about:blank"', f'src="{data.song_url}"', html)
    return html


def _render_comments(html: str, data: ProfileData) -> str:
    if not data.comments:
        return html
    html = _sub(r"View All \(\d+\)", f"View All ({data.comment_total})", html)
    html = _sub(r"Leave a comment for [^.]*\.\.\.", f"Leave a comment for {data.display_name}...", html)
    comments_html = build_comments(data.comments, data.username)
    return _sub(
        r"(Post Comment</button>\s*</div>)[\s\S]*?(\s*</div>\s*</div>\s*\n\s*</div><!-- /profile-right -->)",
        lambda m: f"{m.group(1)}{comments_html}{m.group(2)}",
        html,
    )


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def inline_custom_html(html: str, custom_html: str) -> str:
    """Wstawia zawartość custom.html do sekcji blurb (pierwsze wystąpienie)."""
    return _CUSTOM_HTML_RE.sub(
        lambda _m: f'<div class="blurb-content profile-custom-html">{custom_html}</div>',
        html,
        count=1,
    )


def render_profile(template: str, data: ProfileData, custom_html: str | None = None) -> str:
    """
    Zwraca szablon z podstawionymi danymi profilu.

    Sekcje bez danych (puste listy, puste teksty) zostawiają placeholder
    szablonu; listy znajomych, albumów i grup są zawsze przebudowywane
    (także na puste).
    """
    html = _render_identity(template, data)
    html = _render_lists(html, data)
    html = _render_collab(html, data)
    html = _render_details(html, data)
    html = _render_texts(html, data)
    html = _render_comments(html, data)
    if custom_html is not None:
        html = inline_custom_html(html, custom_html)
    return html
