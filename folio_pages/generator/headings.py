"""Heading id assignment and anchor decoration for rendered posts.

Both stages operate in place on a parsed BeautifulSoup tree so the renderer
can run them back to back without re-serialising between steps.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

from folio_pages._constants import HEADING_ANCHOR_CLASS, HEADING_TAGS

_STRIP_PATTERN = re.compile(r"[^\w\- ]")
_SPACE_PATTERN = re.compile(r" ")


def slugify_heading(text: str) -> str:
    """Return a URL fragment for ``text``, keeping Unicode letters.

    >>> slugify_heading("What are Closures?")
    'what-are-closures'
    """
    lowered = " ".join(text.split()).lower()
    slug = _SPACE_PATTERN.sub("-", _STRIP_PATTERN.sub("", lowered))
    return slug or "section"


def unique_slug(base: str, used: set[str]) -> str:
    """Generate a unique slug, appending numeric suffixes when needed."""
    candidate = base
    suffix = 1
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


def assign_heading_ids(soup: BeautifulSoup) -> None:
    """Give every heading without an ``id`` one derived from its text.

    Ids already present anywhere in the document are reserved first, so
    generated ids never shadow author-supplied anchors.
    """
    used: set[str] = {
        str(element["id"]) for element in soup.find_all(id=True)
    }
    for heading in soup.find_all(HEADING_TAGS):
        if heading.get("id"):
            continue
        heading["id"] = unique_slug(slugify_heading(heading.get_text()), used)


def add_heading_anchors(soup: BeautifulSoup) -> None:
    """Prepend a self-referencing anchor link to every heading."""
    for heading in soup.find_all(HEADING_TAGS):
        identifier = heading.get("id")
        if not identifier or _has_anchor(heading):
            continue
        anchor = soup.new_tag(
            "a",
            attrs={
                "aria-hidden": "true",
                "tabindex": "-1",
                "class": [HEADING_ANCHOR_CLASS],
                "href": f"#{identifier}",
            },
        )
        anchor.append(soup.new_tag("span", attrs={"class": ["icon", "icon-link"]}))
        heading.insert(0, anchor)


def _has_anchor(heading: Tag) -> bool:
    return heading.find("a", class_=HEADING_ANCHOR_CLASS) is not None


__all__ = [
    "add_heading_anchors",
    "assign_heading_ids",
    "slugify_heading",
    "unique_slug",
]
