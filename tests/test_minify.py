from __future__ import annotations

import pytest

from assets.minify import AssetKind, MinifyResult, minify_css, minify_file, minify_html


def test_minify_css():
    css = """
    /* nagłówek */
    .card > .card-body ,
    .card {
        color : red ;
        margin: 0 auto;
    }
    """
    assert minify_css(css) == ".card>.card-body,.card{color:red;margin:0 auto}"


def test_minify_html_keeps_conditional_comments():
    html = "<div>\n  <!-- komentarz -->\n  <p>  hi   there </p>\n</div>\n<!--[if IE]>x<![endif]-->"
    assert minify_html(html) == "<div><p> hi there </p></div><!--[if IE]>x<![endif]-->"


def test_minify_file_reports_budget(tmp_path):
    src = tmp_path / "custom.css"
    dst = tmp_path / "custom.min.css"
    src.write_text("a { color: red; }\n", encoding="utf-8")

    result = minify_file(src, dst, "css", budget=100)

    assert dst.read_text(encoding="utf-8") == "a{color:red}"
    assert result == MinifyResult(AssetKind.CSS, 18, 12, 100)
    assert result.saved == 6
    assert result.remaining == 88


def test_minify_file_empty_source(tmp_path):
    src = tmp_path / "custom.html"
    src.write_text("  \n", encoding="utf-8")
    assert minify_file(src, tmp_path / "out.html", AssetKind.HTML) is None
    assert not (tmp_path / "out.html").exists()


def test_minify_file_unknown_kind(tmp_path):
    src = tmp_path / "x.js"
    src.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError, match="js"):
        minify_file(src, tmp_path / "y.js", "js")
