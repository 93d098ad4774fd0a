"""
templating/builders.py — fragmenty HTML sekcji profilu.

Markup i style inline odpowiadają szablonowi profile.html; wcięcia są
zachowane, żeby wynikowy plik dało się czytać i diffować.
"""

from __future__ import annotations

from data_model.profile import Album, Badge, Comment, Friend, Group, SocialLink

DAYS = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")
SLOTS_PER_DAY = 24

# Etykiety kolumn godzinowych (pozostałe nagłówki są puste)
_HOUR_LABELS = {0: "12a", 6: "6a", 12: "12p", 18: "6p"}

_ROW_INDENT = "\n" + " " * 33
_CELL_INDENT = "\n" + " " * 36


def build_friends_grid(friends: list[Friend]) -> str:
    if not friends:
        return '<div class="friends-grid"></div>'
    items = "".join(
        f"""
                           <a class="friend-item" href="{f.href}">
                              <img src="{f.avatar_url}" alt="{f.alt or f.name}" class="user-avatar friend-avatar" style="width:48px;height:48px;display:flex;align-items:center;justify-content:center;flex-shrink:0;overflow:hidden;object-fit:cover">
                              <span class="friend-name">{f.name}</span>
                           </a>"""
        for f in friends
    )
    return f'<div class="friends-grid">{items}\n                        </div>'


def _tile_grid(items: str) -> str:
    return f'<div style="display:grid;grid-template-columns:1fr 1fr;gap:8px">{items}\n                        </div>'


def build_albums(albums: list[Album]) -> str:
    if not albums:
        return ""
    items = "".join(
        f"""
                           <a style="display:block;border:1px solid var(--vs-border);background:var(--vs-bg-white);transition:all 0.2s" href="{a.href}">
                              <div style="aspect-ratio:1;background:url({a.cover_url}) center/cover;display:flex;align-items:center;justify-content:center"></div>
                              <div style="padding:4px 6px">
                                 <div style="font-size:10px;font-weight:600;overflow:hidden;text-overflow:ellipsis;white-space:nowrap">{a.title}</div>
                                 <div style="font-size:9px;color:var(--vs-text-light)">{a.count} photos</div>
                              </div>
                           </a>"""
        for a in albums
    )
    return _tile_grid(items)


def build_groups(groups: list[Group]) -> str:
    if not groups:
        return ""
    items = "".join(
        f"""
                           <a style="display:flex;flex-direction:column;aspect-ratio:1;overflow:hidden;border:1px solid var(--vs-border);background:var(--vs-bg-white);transition:all 0.2s" href="{g.href}">
                              <div style="flex:1;min-height:0;background:url({g.cover_url}) center/cover;display:flex;align-items:center;justify-content:center"></div>
                              <div style="padding:4px 6px;flex-shrink:0">
                                 <div style="font-size:10px;font-weight:600;overflow:hidden;text-overflow:ellipsis;white-space:nowrap">{g.name}</div>
                                 <div style="font-size:9px;color:var(--vs-text-light)">{g.members} members</div>
                              </div>
                           </a>"""
        for g in groups
    )
    return _tile_grid(items)


def build_collab_grid(grid: list[list[int]]) -> str:
    """
    Tabela grafiku współpracy: 7 wierszy (MO..SU) × 24 sloty godzinowe.

    Brakujące wiersze są w całości puste; slot 1 → --vs-blue, 0 → --vs-bg-muted.
    """
    header_cells = ['<th style="width:24px"></th>'] + [
        f'<th style="padding:0;width:4px;text-align:center">{_HOUR_LABELS.get(h, "")}</th>'
        for h in range(SLOTS_PER_DAY)
    ]
    headers = (
        "\n                              <thead>"
        "\n                                 <tr>"
        + "".join(_CELL_INDENT + c for c in header_cells)
        + "\n                                 </tr>"
        "\n                              </thead>"
    )

    rows = ""
    for d, day in enumerate(DAYS):
        slots = grid[d] if d < len(grid) else [0] * SLOTS_PER_DAY
        cells = _CELL_INDENT.join(
            f'<td style="width:4px;height:8px;padding:0;background:var({"--vs-blue" if s else "--vs-bg-muted"});border:1px solid var(--vs-border-lighter)"></td>'
            for s in slots
        )
        rows += (
            f"{_ROW_INDENT}<tr>"
            f'{_CELL_INDENT}<td style="font-size:8px;font-weight:bold;padding:0 2px">{day}</td>'
            f"{_CELL_INDENT}{cells}"
            f"{_ROW_INDENT}</tr>"
        )

    return (
        f'<table style="width:100%;border-collapse:collapse;font-size:9px">{headers}'
        f"\n                              <tbody>{rows}"
        "\n                              </tbody>"
        "\n                           </table>"
    )


def build_collab_tags(tags: list[str]) -> str:
    if not tags:
        return ""
    spans = "".join(
        f'<span style="padding:1px 6px;background:var(--vs-bg-muted);border-radius:3px;font-size:9px">{t}</span>'
        for t in tags
    )
    return f'<div style="display:flex;flex-wrap:wrap;gap:3px">{spans}</div>'


def build_badges(badges: list[Badge]) -> str:
    return "".join(
        f"""
                           <div title="{b.title}" style="width:32px;height:32px;flex-shrink:0">
                              {b.svg}
                           </div>"""
        for b in badges
    )


def build_social_links(links: list[SocialLink]) -> str:
    return "".join(
        f'<a href="{link.href}" target="_blank" rel="noopener noreferrer" class="social-link-item">'
        f'<span class="social-link-platform">{link.platform}</span>'
        f'<span class="social-link-name">{link.name}</span></a>'
        for link in links
    )


def _build_reply(c: Comment) -> str:
    if c.reply is None:
        return ""
    r = c.reply
    return f"""
                              <div style="margin-top:8px;margin-left:10px;padding:8px;background:var(--vs-bg-muted);border-left:2px solid var(--vs-border)">
                                 <div style="font-size:10px;margin-bottom:4px">
                                    <a href="{r.author_href}" style="font-weight:600">{r.author_name}</a>
                                    <span style="color:var(--vs-text-light)"> {r.time}</span>
                                 </div>
                                 <div style="font-size:11px">{r.text}</div>
                              </div>"""


def build_comments(comments: list[Comment], username: str) -> str:
    return "".join(
        f"""
                        <div class="profile-comment">
                           <img class="user-avatar comment-avatar" src="{c.avatar_url}" alt="{c.author_name}" style="width:50px;height:50px;object-fit:cover">
                           <div class="comment-content">
                              <div class="comment-meta">
                                 <a class="comment-author-name" href="{c.author_href}">{c.author_name}</a>
                                 <span class="comment-time"> {c.time}</span>
                              </div>
                              <div class="comment-body">{c.body}</div>{_build_reply(c)}
                              <!-- HOST ONLY: Comment actions (Reply/Delete) -->
                              <div class="comment-actions">
                                 <a href="/{username}/comments?reply=cmt_example">Reply</a> · <a href="#" style="color:var(--vs-error)">Delete</a>
                              </div>
                           </div>
                        </div>"""
        for c in comments
    )
