"""Common literal values used across folio_pages.

These constants keep file extensions, slug rules, and anchor formats
centralized so the loader, renderer, outline extractor, and tests can import
the same values without drifting. Intended for internal use within the
folio_pages package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.OUTLINE_FALLBACK_TEMPLATE.format(index=0)
'heading-0'
>>> bool(_constants.SLUG_PATTERN.fullmatch("javascript-closures"))
True
"""

import re

CONTENT_EXTENSIONS = (".md", ".markdown")
SLUG_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")
HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
OUTLINE_HEADING_TAG = "h2"
OUTLINE_FALLBACK_TEMPLATE = "heading-{index}"
HEADING_ANCHOR_CLASS = "heading-anchor"
