"""
assets/shorten.py — skracanie nazw animacji i zmiennych CSS + animacje @property.

Kroki (shorten_bundle):
  1. nazwy animacji → skróty (najdłuższe najpierw, żeby prefiks nie zjadł dłuższej)
  2. zmienne --nazwa → --skrót (j.w.)
  3. usunięcie starych keyframes dryfu/tickerów
  4. @property na początku arkusza
  5. reguły animacji .card-body przed pierwszym @media
  6. nowe keyframes na końcu
  + HTML: inline `animation:` → `transform:translateX(var(--…))`, <marquee> → div+span

Animowane są własności na stabilnym rodzicu (.card-body); elementy HTML tylko
dziedziczą bieżącą wartość, więc ponowny render Reacta nie restartuje animacji.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Mapy skrótów
# ---------------------------------------------------------------------------

ANIM_MAP: dict[str, str] = {
    "modal-reveal-in": "mri",
    "vt-name-flicker": "vnf",
    "vt-name-mask": "vnm",
    "blurb-ticker-left": "btl",
    "blurb-ticker-right": "btr",
    "blurb-drift-a": "bda",
    "blurb-drift-b": "bdb",
    "blurb-drift-c": "bdc",
    "blurb-drift-d": "bdd",
    "glitch-tear-down": "gtd",
    "glitch-rgb-a": "gra",
    "glitch-rgb-b": "grb",
    "glitch-skew-a": "gka",
    "glitch-skew-b": "gkb",
    "glitch-slice-r": "gsr",
    "glitch-slice-l": "gsl",
    "glitch-slice-s": "gss",
    "glitch-blocks-c": "gbc",
    "glitch-blocks-d": "gbd",
}

# Bez prefiksu "--"; kolejność nie ma znaczenia (sortujemy po długości).
VAR_MAP: dict[str, str] = {
    "chamfer-shape": "cs",
    "chamfer-lg": "cl",
    "chamfer-md": "cmd",
    "chamfer-sm": "cm",
    "chamfer": "cf",
    "card-border": "cb",
    "card": "cd",
    "border-w": "bw",
    "avatar-size": "avs",
    "avatar-border": "avb",
    "avatar-offset": "avo",
    "ink-muted": "im",
    "ink": "ik",
    "accent-2": "a2",
    "accent": "ac",
    "glow": "gl",
    "hex": "hx",
    "static-image": "si",
    "static-size": "sz",
    "si-header-h": "sh",
}

# Skrócone nazwy keyframes zastępowanych przez animacje @property
REPLACED_KEYFRAMES = ("bda", "bdb", "bdc", "bdd", "btl", "btr")

# ---------------------------------------------------------------------------
# Animacje @property: 2 tickery (--tl, --tr) + 7 diamentów (--d1..--d7)
# ---------------------------------------------------------------------------

PROPERTY_DECLS = "".join([
    "@property --tl{syntax:'<percentage>';inherits:true;initial-value:0%}",
    "@property --tr{syntax:'<percentage>';inherits:true;initial-value:-50%}",
    *(
        f"@property --d{i}{{syntax:'<length>';inherits:true;initial-value:0px}}"
        for i in range(1, 8)
    ),
])

# Przebiegi dryfu (wartości translateX w kolejnych % klatki)
_DRIFT_A = ((0, -110), (18, -25), (32, -45), (55, 20), (72, 65), (86, 40), (100, 110))
_DRIFT_B = ((0, -55), (22, -5), (38, -28), (58, 18), (78, 45), (100, 55))
_DRIFT_C = ((0, -85), (28, -55), (48, 8), (65, -10), (82, 50), (100, 85))
_DRIFT_D = ((0, -40), (20, 10), (42, -18), (68, 28), (85, 12), (100, 40))

# --dN → (przebieg, czas, opóźnienie, kierunek, animacja w źródle)
DIAMONDS: tuple[tuple[tuple[tuple[int, int], ...], str, str, str, str], ...] = (
    (_DRIFT_A, "7.5s", "-2s", "alternate",         "blurb-drift-a"),
    (_DRIFT_B, "5.5s", "-3s", "alternate-reverse", "blurb-drift-b"),
    (_DRIFT_C, "10s",  "-6s", "alternate",         "blurb-drift-c"),
    (_DRIFT_D, "7s",   "-1s", "alternate-reverse", "blurb-drift-d"),
    (_DRIFT_A, "9s",   "-5s", "alternate-reverse", "blurb-drift-a"),
    (_DRIFT_C, "6s",   "-3s", "alternate",         "blurb-drift-c"),
    (_DRIFT_B, "11s",  "-7s", "alternate",         "blurb-drift-b"),
)


def _drift_keyframes(n: int, steps: tuple[tuple[int, int], ...]) -> str:
    frames = "".join(f"{pct}%{{--d{n}:{px}px}}" for pct, px in steps)
    return f"@keyframes d{n}{{{frames}}}"


NEW_KEYFRAMES = (
    "@keyframes tl{from{--tl:0%}to{--tl:-50%}}"
    "@keyframes tr{from{--tr:-50%}to{--tr:0%}}"
    + "".join(_drift_keyframes(i, d[0]) for i, d in enumerate(DIAMONDS, start=1))
)

# Widok zwykły: tylko tickery (wolniej, jak marquee scrollamount=2)
CARD_BODY_ANIM_BASE = (
    ".card:has(.profile-custom-html)>.card-body{"
    "animation:tl 50s linear infinite,tr 50s linear infinite}"
)

# Widok modalny: wyższa specyficzność, szybsze tickery + dryf diamentów
CARD_BODY_ANIM_MODAL = (
    ".container:has(~ .modal-overlay) .profile-right .card:has(.blurb-content)>.card-body{"
    "animation:tl 32s linear infinite,tr 40s linear infinite,"
    + ",".join(
        f"d{i} {dur} ease-in-out {delay} infinite {direction}"
        for i, (_, dur, delay, direction, _) in enumerate(DIAMONDS, start=1)
    )
    + "}"
)

_MARQUEE_STYLE = (
    "flex:1;overflow:hidden;"
    "-webkit-mask-image:linear-gradient(to right,transparent,white 15%,white 85%,transparent);"
    "mask-image:linear-gradient(to right,transparent,white 15%,white 85%,transparent)"
)


# ---------------------------------------------------------------------------
# CSS
# ---------------------------------------------------------------------------

def _replace_longest_first(text: str, mapping: dict[str, str], prefix: str = "") -> str:
    for old in sorted(mapping, key=len, reverse=True):
        text = text.replace(prefix + old, prefix + mapping[old])
    return text


def shorten_identifiers(
    css: str,
    anim_map: dict[str, str] = ANIM_MAP,
    var_map: dict[str, str] = VAR_MAP,
) -> str:
    css = _replace_longest_first(css, anim_map)
    return _replace_longest_first(css, var_map, prefix="--")


def remove_keyframes(css: str, name: str) -> str:
    """
    Usuwa blok `@keyframes <name>{...}` (zapis zminifikowany), licząc
    zagnieżdżenie klamer. Brak bloku → CSS bez zmian.
    """
    marker = f"@keyframes {name}{{"
    start = css.find(marker)
    if start == -1:
        return css
    depth = 1
    i = start + len(marker)
    while i < len(css) and depth > 0:
        if css[i] == "{":
            depth += 1
        elif css[i] == "}":
            depth -= 1
        i += 1
    return css[:start] + css[i:]


def apply_property_animations(css: str) -> str:
    for name in REPLACED_KEYFRAMES:
        css = remove_keyframes(css, name)
    css = PROPERTY_DECLS + css
    rules = CARD_BODY_ANIM_BASE + CARD_BODY_ANIM_MODAL
    media_idx = css.find("@media")
    if media_idx == -1:
        css += rules
    else:
        css = css[:media_idx] + rules + css[media_idx:]
    return css + NEW_KEYFRAMES


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

def rewrite_inline_animations(html: str) -> str:
    # każdy diament ma unikalny string animacji → własna zmienna --dN
    for i, (_, dur, delay, direction, anim) in enumerate(DIAMONDS, start=1):
        html = html.replace(
            f"animation:{anim} {dur} ease-in-out {delay} infinite {direction}",
            f"transform:translateX(var(--d{i}))",
        )
    html = html.replace("animation:blurb-ticker-left 32s linear infinite", "transform:translateX(var(--tl))")
    html = html.replace("animation:blurb-ticker-right 40s linear infinite", "transform:translateX(var(--tr))")

    span = '<span style="display:inline-block;white-space:nowrap;transform:translateX(var(--{}));">'
    for direction, var in (("left", "tl"), ("right", "tr")):
        html = html.replace(
            f'<marquee direction="{direction}" scrollamount="2" style="{_MARQUEE_STYLE};">',
            f'<div style="{_MARQUEE_STYLE};">' + span.format(var),
        )
    return html.replace("</marquee>", "</span></div>")


# ---------------------------------------------------------------------------
# Legenda
# ---------------------------------------------------------------------------

def build_legend(anim_map: dict[str, str] = ANIM_MAP, var_map: dict[str, str] = VAR_MAP) -> str:
    lines = ["# Shortening Legend", "", "## Animation Names", "| Original | Short |", "|----------|-------|"]
    lines += [f"| {orig} | {short} |" for orig, short in anim_map.items()]
    lines += ["", "## CSS Variables", "| Original | Short |", "|----------|-------|"]
    lines += [f"| --{orig} | --{short} |" for orig, short in var_map.items()]
    lines += [
        "",
        "## @property Custom Properties",
        "| Property | Used By | Pattern |",
        "|----------|---------|----------|",
        "| --tl | Ticker left scroll | 0% → -50% |",
        "| --tr | Ticker right scroll | -50% → 0% |",
    ]
    for i, (_, dur, _, direction, anim) in enumerate(DIAMONDS, start=1):
        glyph = "◇" if i <= 4 else "◆"
        short_dir = "alt-rev" if direction == "alternate-reverse" else "alt"
        lines.append(f"| --d{i} | {glyph} diamond {i} | {anim.removeprefix('blurb-')} ({dur} {short_dir}) |")
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Całość
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ShortenResult:
    css: str
    html: str
    legend: str
    original_css_len: int
    original_html_len: int

    @property
    def css_saved(self) -> int:
        return self.original_css_len - len(self.css)


def shorten_bundle(css: str, html: str) -> ShortenResult:
    new_css = apply_property_animations(shorten_identifiers(css))
    new_html = rewrite_inline_animations(html)
    return ShortenResult(
        css=new_css,
        html=new_html,
        legend=build_legend(),
        original_css_len=len(css),
        original_html_len=len(html),
    )
