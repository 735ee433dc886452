"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class OutlineEntry:
    """One navigable item in a post's table of contents.

    Attributes
    ----------
    anchor : str
        Fragment identifier of the heading (without ``#``).
    text : str
        Plain-text heading label.
    """

    anchor: str
    text: str

    @property
    def href(self) -> str:
        """Return the in-page link target for the heading."""
        return f"#{self.anchor}"


@dc.dataclass(frozen=True, slots=True)
class PageResult:
    """Rendered HTML document plus the HTTP status it should be served with."""

    status: int
    html: str

    @property
    def found(self) -> bool:
        """Return ``True`` when the page rendered successfully."""
        return self.status == 200


__all__ = ["OutlineEntry", "PageResult"]
