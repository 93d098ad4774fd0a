"""
templating — podstawianie danych profilu do szablonu i lokalizacja obrazków.

Publiczne API:
  render_profile(template, data, custom_html)    -> str
  inline_custom_html(html, custom_html)          -> str
  download_all(urls, images_dir, batch_size)     -> dict[str, str]
  localize_images(html, url_map)                 -> str
"""

from .render import render_profile, inline_custom_html
from .images import download_all, download_image, localize_images, url_to_filename

__all__ = [
    "render_profile",
    "inline_custom_html",
    "download_all",
    "download_image",
    "localize_images",
    "url_to_filename",
]
