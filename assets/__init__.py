"""
assets — narzędzia do custom.css / custom.html profilu.

Publiczne API:
  minify_css(css), minify_html(html), minify_file(src, dst, kind, budget)
  analyze_css(css, budget)                -> CssReport
  shorten_bundle(css, html)               -> ShortenResult
"""

from .minify import AssetKind, MinifyResult, minify_css, minify_file, minify_html
from .analyze import CssReport, NameStat, analyze_css
from .shorten import ShortenResult, remove_keyframes, shorten_bundle, shorten_identifiers

__all__ = [
    "AssetKind",
    "MinifyResult",
    "minify_css",
    "minify_file",
    "minify_html",
    "CssReport",
    "NameStat",
    "analyze_css",
    "ShortenResult",
    "remove_keyframes",
    "shorten_bundle",
    "shorten_identifiers",
]
