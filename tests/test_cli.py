from __future__ import annotations

import json

import pytest

from oshi import _config
from oshi.cli import main
from oshi.commands import update as cmd_update

PHOTOS = (
    '<div class="card"><div class="card-header">Title: Photos</div>'
    '<div class="card-body">X</div></div>'
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("OSHI_PROFILE_DIR", "OSHI_BUDGET", "OSHI_DOWNLOAD_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Konfiguracja
# ---------------------------------------------------------------------------

def test_config_defaults(tmp_path):
    assert _config.get_budget() == 50_000
    assert _config.get_download_timeout() == 30.0
    paths = _config.get_paths(str(tmp_path))
    assert paths.root == tmp_path.resolve()
    assert paths.source == tmp_path.resolve() / ".tools" / "source.html"
    assert paths.images.name == "images"


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("OSHI_BUDGET", "1000")
    monkeypatch.setenv("OSHI_PROFILE_DIR", str(tmp_path))
    assert _config.get_budget() == 1000
    assert _config.get_paths().root == tmp_path.resolve()


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_config_rejects_bad_numbers(monkeypatch, raw):
    monkeypatch.setenv("OSHI_BUDGET", raw)
    with pytest.raises(ValueError, match="OSHI_BUDGET"):
        _config.get_budget()


# ---------------------------------------------------------------------------
# card / extract
# ---------------------------------------------------------------------------

def test_card_prints_block(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<p>x</p>" + PHOTOS, encoding="utf-8")
    main(["card", str(page), "Photos"])
    out = capsys.readouterr().out
    assert 'class="card-body">X<' in out


def test_card_not_found_exits_2(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(PHOTOS, encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["card", str(page), "Videos"])
    assert exc.value.code == 2


def test_card_bad_pattern_exits_1(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(PHOTOS, encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["card", str(page), "("])
    assert exc.value.code == 1


def test_extract_writes_json(profile_dir, tmp_path):
    out = tmp_path / "profile.json"
    main(["extract", str(profile_dir / ".tools" / "source.html"), "--json", str(out)])
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["display_name"] == "Lady"
    assert len(data["comments"]) == 2


def _bracketed_source(profile_dir):
    source = profile_dir / ".tools" / "source.html"
    html = source.read_text(encoding="utf-8")
    html = html.replace('"profile-display-name">Lady<!-- -->', '"profile-display-name">Kira [/b]')
    html = html.replace("“Hello world”", "[vtuber]")
    source.write_text(html, encoding="utf-8")
    return source


def test_extract_prints_bracketed_text_verbatim(profile_dir, capsys):
    source = _bracketed_source(profile_dir)
    main(["extract", str(source), "--show"])
    out = capsys.readouterr().out
    assert "Kira [/b]" in out
    assert "[vtuber]" in out


def test_update_summary_with_bracketed_name(profile_dir, capsys):
    _bracketed_source(profile_dir)
    main(["update", "--profile-dir", str(profile_dir), "--no-images", "--show"])
    assert "Kira [/b]" in capsys.readouterr().out
    assert "Kira [/b]'s Top 8" in (profile_dir / "profile.html").read_text(encoding="utf-8")


def test_extract_missing_file_exits_1(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["extract", str(tmp_path / "nope.html")])
    assert exc.value.code == 1


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------

def test_update_without_images(profile_dir):
    main(["update", "--profile-dir", str(profile_dir), "--no-images"])
    html = (profile_dir / "profile.html").read_text(encoding="utf-8")
    assert "Lady's Top 8" in html
    assert "<b>mine</b>" in html
    assert "https://cdn.example.com/avatar.png" in html
    assert not (profile_dir / "images").exists()


def test_update_localizes_images(profile_dir, monkeypatch):
    requested: list[list[str]] = []

    def fake_download_all(urls, images_dir, timeout=30.0):
        requested.append(urls)
        return {"https://cdn.example.com/avatar.png": "./images/abc.png"}

    monkeypatch.setattr(cmd_update, "download_all", fake_download_all)
    main(["update", "--profile-dir", str(profile_dir)])

    html = (profile_dir / "profile.html").read_text(encoding="utf-8")
    assert requested[0][0] == "https://cdn.example.com/avatar.png"
    assert 'src="./images/abc.png"' in html
    assert "https://cdn.example.com/avatar.png" not in html


def test_update_explicit_source(profile_dir):
    (profile_dir / ".tools" / "source.html").rename(profile_dir / "snapshot.html")
    main(["update", "snapshot.html", "--profile-dir", str(profile_dir), "--no-images"])
    assert "@lady" in (profile_dir / "profile.html").read_text(encoding="utf-8")


def test_update_without_source_only_inlines(profile_dir):
    (profile_dir / ".tools" / "source.html").write_text("  ", encoding="utf-8")
    main(["update", "--profile-dir", str(profile_dir)])
    html = (profile_dir / "profile.html").read_text(encoding="utf-8")
    assert '<div class="blurb-content profile-custom-html"><b>mine</b></div>' in html
    assert "Username's Top 8" in html


def test_update_missing_template_exits_1(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["update", "--profile-dir", str(tmp_path)])
    assert exc.value.code == 1


# ---------------------------------------------------------------------------
# minify / analyze / shorten
# ---------------------------------------------------------------------------

def test_minify_writes_min_files(profile_dir, capsys):
    (profile_dir / "custom.css").write_text("a { color: red; }\n", encoding="utf-8")
    main(["minify", "--profile-dir", str(profile_dir)])
    assert (profile_dir / "custom.min.css").read_text(encoding="utf-8") == "a{color:red}"
    assert (profile_dir / "custom.min.html").read_text(encoding="utf-8") == "<b>mine</b>"
    assert "49988" in capsys.readouterr().out


def test_minify_nothing_to_do(tmp_path, capsys):
    main(["minify", "--profile-dir", str(tmp_path)])
    assert "Nic do minifikacji" in capsys.readouterr().out


def test_analyze_prints_report(tmp_path, capsys):
    css = tmp_path / "custom.css"
    css.write_text("@keyframes glitch-rgb-a{}.x{animation:glitch-rgb-a 1s;color:var(--accent)}", encoding="utf-8")
    main(["analyze", str(css)])
    out = capsys.readouterr().out
    assert "glitch-rgb-a" in out
    assert "Rozmiar" in out


def test_shorten_writes_outputs(tmp_path):
    css = tmp_path / "custom.css"
    html = tmp_path / "custom.html"
    css.write_text(".a{color:var(--accent)}", encoding="utf-8")
    html.write_text("<p>x</p>", encoding="utf-8")
    out_dir = tmp_path / "build"

    main(["shorten", str(css), str(html), "--out-dir", str(out_dir)])

    assert "var(--ac)" in (out_dir / "custom-v3.css").read_text(encoding="utf-8")
    assert (out_dir / "custom-v3.html").read_text(encoding="utf-8") == "<p>x</p>"
    assert (out_dir / "shortening-legend.md").read_text(encoding="utf-8").startswith("# Shortening Legend")
