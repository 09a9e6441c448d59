# === FILE: page_auditor/parser/html_parser.py ===
"""HTML inspection for PageAuditor.

The auditor takes one snapshot of the rendered DOM (``page.content()``) and
hands the markup to :func:`parse_html`, which reports the content landmarks
the rating depends on:

* title         : document <title> text or ``""`` if absent.
* has_images    : at least one ``<img>``.
* has_navigation: at least one ``<nav>``.
* has_headings  : at least one ``<h1>``, ``<h2>`` or ``<h3>``.
"""
from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup

from page_auditor.models import PageChecks

__all__: Sequence[str] = ("HEADING_TAGS", "parse_html")

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3")


def parse_html(markup: str) -> PageChecks:
    """Parse rendered HTML markup into :class:`PageChecks`."""
    soup = BeautifulSoup(markup or "", "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    return PageChecks(
        title=title,
        has_images=soup.find("img") is not None,
        has_navigation=soup.find("nav") is not None,
        has_headings=soup.find(list(HEADING_TAGS)) is not None,
    )
