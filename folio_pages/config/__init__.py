"""Load and validate site configuration YAML for the folio website.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
navigation and listing categories, resolves content/output directories, and
produces typed dataclasses (:class:`SiteConfig`, :class:`HomeConfig`, etc.)
that the page renderer, static builder, and HTTP server consume. The primary
entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.content_dir.name  # doctest: +SKIP
'content'
"""

from .loader import load_site_config
from .models import (
    BlogConfig,
    CategoryRule,
    ContactConfig,
    HomeConfig,
    NavLinkConfig,
    ServiceCardConfig,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "BlogConfig",
    "CategoryRule",
    "ContactConfig",
    "HomeConfig",
    "NavLinkConfig",
    "ServiceCardConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
