"""Build the "On this page" outline from rendered post HTML."""

from __future__ import annotations

from bs4 import BeautifulSoup

from folio_pages._constants import OUTLINE_FALLBACK_TEMPLATE, OUTLINE_HEADING_TAG

from .models import OutlineEntry


def extract_outline(html: str) -> list[OutlineEntry]:
    """Return one entry per second-level heading, in document order.

    Headings without an ``id`` fall back to ``heading-<index>``, where the
    index counts second-level headings from zero. Entries are flat; deeper
    headings are ignored. HTML with no second-level headings yields an empty
    list.

    >>> extract_outline('<h2 id="intro">Intro</h2><h3>Skip</h3><h2>Next</h2>')
    [OutlineEntry(anchor='intro', text='Intro'), OutlineEntry(anchor='heading-1', text='Next')]
    """
    soup = BeautifulSoup(html, "html.parser")
    entries: list[OutlineEntry] = []
    for index, heading in enumerate(soup.find_all(OUTLINE_HEADING_TAG)):
        anchor = heading.get("id") or OUTLINE_FALLBACK_TEMPLATE.format(index=index)
        text = " ".join(heading.get_text().split())
        entries.append(OutlineEntry(anchor=str(anchor), text=text))
    return entries


__all__ = ["extract_outline"]
