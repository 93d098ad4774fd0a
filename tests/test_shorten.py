from __future__ import annotations

from assets.shorten import (
    ANIM_MAP,
    CARD_BODY_ANIM_BASE,
    NEW_KEYFRAMES,
    PROPERTY_DECLS,
    VAR_MAP,
    apply_property_animations,
    build_legend,
    remove_keyframes,
    rewrite_inline_animations,
    shorten_bundle,
    shorten_identifiers,
)


def test_longest_names_replaced_first():
    css = ".a{clip-path:var(--chamfer-shape);width:var(--chamfer);color:var(--card-border);bg:var(--card)}"
    assert shorten_identifiers(css) == ".a{clip-path:var(--cs);width:var(--cf);color:var(--cb);bg:var(--cd)}"


def test_animation_names_shortened():
    css = "@keyframes glitch-rgb-a{}.x{animation:glitch-rgb-a 1s}"
    assert shorten_identifiers(css) == "@keyframes gra{}.x{animation:gra 1s}"


def test_variables_only_with_prefix():
    # "card" jako nazwa klasy zostaje, zmienna --card nie
    assert shorten_identifiers(".card{--card:1}") == ".card{--cd:1}"


def test_remove_keyframes_nested_braces():
    css = "a{b:c}@keyframes bda{0%{left:0}100%{left:1px}}d{e:f}"
    assert remove_keyframes(css, "bda") == "a{b:c}d{e:f}"
    assert remove_keyframes(css, "zzz") == css


def test_property_animations_inserted_before_media():
    css = "@keyframes btl{0%{x:0}}.a{b:c}@media (max-width:600px){.a{b:d}}"
    out = apply_property_animations(css)

    assert out.startswith(PROPERTY_DECLS)
    assert "@keyframes btl{" not in out
    assert out.index(CARD_BODY_ANIM_BASE) < out.index("@media")
    assert out.endswith(NEW_KEYFRAMES)


def test_property_animations_without_media():
    out = apply_property_animations(".a{b:c}")
    assert out.startswith(PROPERTY_DECLS + ".a{b:c}" + CARD_BODY_ANIM_BASE)
    assert out.endswith(NEW_KEYFRAMES)


def test_new_keyframes_cover_all_diamonds():
    for i in range(1, 8):
        assert f"@keyframes d{i}{{" in NEW_KEYFRAMES
        assert f"@property --d{i}{{" in PROPERTY_DECLS
    assert "@keyframes d1{0%{--d1:-110px}" in NEW_KEYFRAMES


def test_rewrite_inline_animations():
    html = (
        '<span style="animation:blurb-drift-a 7.5s ease-in-out -2s infinite alternate">◇</span>'
        '<span style="animation:blurb-drift-a 9s ease-in-out -5s infinite alternate-reverse">◆</span>'
        '<div style="animation:blurb-ticker-left 32s linear infinite">t</div>'
    )
    out = rewrite_inline_animations(html)
    assert "transform:translateX(var(--d1))" in out
    assert "transform:translateX(var(--d5))" in out
    assert "transform:translateX(var(--tl))" in out
    assert "animation:" not in out


def test_rewrite_marquee():
    style = (
        "flex:1;overflow:hidden;"
        "-webkit-mask-image:linear-gradient(to right,transparent,white 15%,white 85%,transparent);"
        "mask-image:linear-gradient(to right,transparent,white 15%,white 85%,transparent)"
    )
    html = f'<marquee direction="right" scrollamount="2" style="{style};">hi</marquee>'
    out = rewrite_inline_animations(html)
    assert "marquee" not in out
    assert out.startswith(f'<div style="{style};"><span ')
    assert "translateX(var(--tr))" in out
    assert out.endswith(">hi</span></div>")


def test_legend():
    legend = build_legend()
    assert legend.startswith("# Shortening Legend\n")
    assert legend.endswith("\n")
    for orig, short in ANIM_MAP.items():
        assert f"| {orig} | {short} |" in legend
    for orig, short in VAR_MAP.items():
        assert f"| --{orig} | --{short} |" in legend
    assert "| --d2 | ◇ diamond 2 | drift-b (5.5s alt-rev) |" in legend
    assert "| --d7 | ◆ diamond 7 | drift-b (11s alt) |" in legend


def test_shorten_bundle():
    css = "@keyframes blurb-drift-a{0%{x:0}}.a{animation:blurb-drift-a 1s;color:var(--accent)}"
    result = shorten_bundle(css, "<p>x</p>")

    assert "@keyframes bda" not in result.css
    assert "var(--ac)" in result.css
    assert result.html == "<p>x</p>"
    assert result.original_css_len == len(css)
    assert result.original_html_len == len("<p>x</p>")
    assert result.css_saved == len(css) - len(result.css)
