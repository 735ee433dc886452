"""Shared fixtures for the folio test-suite.

The fixtures build a throwaway site (config plus a small content directory)
under ``tmp_path`` so tests never depend on the repository's own content.
"""

from __future__ import annotations

import typing as typ

import pytest

from folio_pages.config import load_site_config

from .samples import (
    CLOSURES_POST,
    SITE_YAML,
    TAILWIND_POST,
    UNDATED_POST,
    write_post,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from folio_pages.config import SiteConfig


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Return a directory holding ``site.yaml`` and three sample posts."""
    (tmp_path / "site.yaml").write_text(SITE_YAML, encoding="utf-8")
    content_dir = tmp_path / "content"
    write_post(content_dir, "javascript-closures", CLOSURES_POST)
    write_post(content_dir, "tailwind-css-beginners", TAILWIND_POST)
    write_post(content_dir, "loose-notes", UNDATED_POST)
    return tmp_path


@pytest.fixture
def site(site_root: Path) -> SiteConfig:
    """Return the parsed configuration for :func:`site_root`."""
    return load_site_config(site_root / "site.yaml")
