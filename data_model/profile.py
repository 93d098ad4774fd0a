"""
data_model/profile.py — rekord danych profilu wyciągniętych z migawki HTML.

Wartości domyślne pól odpowiadają placeholderom w szablonie profile.html —
brak sekcji w źródle oznacza pozostawienie placeholdera bez zmian.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


# ---------------------------------------------------------------------------
# Elementy list
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Friend:
    href: str
    avatar_url: str
    name: str
    alt: str = ""


@dataclass(slots=True)
class Album:
    href: str
    cover_url: str
    title: str = "Album"
    count: str = "0"


@dataclass(slots=True)
class Group:
    href: str
    cover_url: str
    name: str = "Group"
    members: str = "0"


@dataclass(slots=True)
class Badge:
    title: str
    svg: str             # surowy znacznik <svg>…</svg>


@dataclass(slots=True)
class SocialLink:
    href: str
    platform: str
    name: str


@dataclass(slots=True)
class Reply:
    author_href: str
    author_name: str
    avatar_url: str
    time: str
    text: str


@dataclass(slots=True)
class Comment:
    author_href: str
    author_name: str
    avatar_url: str
    time: str
    body: str
    reply: Reply | None = None


# ---------------------------------------------------------------------------
# Rekord profilu
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ProfileData:
    """
    Komplet pól profilu.

    - collab_grid:  wiersze dni (MO..SU), każdy to lista 24 slotów 0/1
    - interests:    kategoria (Music, Movies, …) → tekst
    - viewer_boops: None gdy oglądający nie boopował
    """

    theme: str = "theme-dark"
    display_name: str = "Username"
    username: str = "username"
    tagline: str = "Headline"
    oshi_mark: str = "X"
    mood: str = "Mood"
    avatar_url: str = ""
    online_status: str = "Last online recently"
    boop_count: str = "0"
    viewer_boops: str | None = None
    background_image: str | None = None

    friends: list[Friend] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)

    collab_grid: list[list[int]] = field(default_factory=list)
    collab_tags: list[str] = field(default_factory=list)
    collab_description: str = ""

    generation: str = ""
    gen_title: str = ""
    friends_count: str = "0"
    comments_count: str = "0"
    affiliation: str = "Affiliation"

    badges: list[Badge] = field(default_factory=list)
    social_links: list[SocialLink] = field(default_factory=list)
    model_type: str = "3d"

    lore: str = ""
    about_me: str = ""
    who_to_meet: str = ""
    interests: dict[str, str] = field(default_factory=dict)
    song_url: str = ""

    comments: list[Comment] = field(default_factory=list)
    comment_total: str = "0"

    def image_urls(self) -> list[str]:
        """Zwraca URL-e obrazków do pobrania (bez duplikatów, w kolejności)."""
        urls: list[str] = []

        def add(url: str | None) -> None:
            if url and url not in urls:
                urls.append(url)

        add(self.avatar_url)
        for f in self.friends:
            add(f.avatar_url)
        for a in self.albums:
            add(a.cover_url)
        for g in self.groups:
            add(g.cover_url)
        for c in self.comments:
            add(c.avatar_url)
            if c.reply:
                add(c.reply.avatar_url)
        add(self.background_image)
        return urls

    def to_dict(self) -> dict:
        return asdict(self)
