"""A personal blog and portfolio site rendered from markdown files.

This package loads posts from a content directory, renders them to HTML with
heading anchors and highlighted code, derives an on-page outline, and either
serves the pages over HTTP or writes them as a static bundle.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_pages import main
>>> main()  # doctest: +SKIP
>>> from folio_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
