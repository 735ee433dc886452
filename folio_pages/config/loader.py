"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_str, _require_mapping, _resolve_path
from .models import SiteConfig, SiteConfigError
from .sections import (
    _build_blog_config,
    _build_chat_config,
    _build_contact_config,
    _build_home_config,
    _build_nav_links,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative ``content_dir`` and ``output_dir``
        values resolve against this file's directory.

    Returns
    -------
    SiteConfig
        Parsed site configuration, including navigation, page copy, content
        and output directories, and widget settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.nav_links[0].href  # doctest: +SKIP
    '/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent

    site_raw = _require_mapping(raw.get("site"), section="site")
    name = _optional_str(site_raw.get("name"))
    if not name:
        msg = "Site configuration requires 'site.name'."
        raise SiteConfigError(msg)

    navigation = _require_mapping(raw.get("navigation"), section="navigation")

    return SiteConfig(
        name=name,
        description=_optional_str(site_raw.get("description")) or "",
        language=_optional_str(site_raw.get("language")) or "en",
        footer_note=_optional_str(site_raw.get("footer_note")) or "",
        content_dir=_resolve_path(
            raw.get("content_dir"), default="content", base_dir=base_dir
        ),
        output_dir=_resolve_path(
            raw.get("output_dir"), default="public", base_dir=base_dir
        ),
        pygments_style=_optional_str(raw.get("pygments_style")) or "monokai",
        nav_links=_build_nav_links(navigation.get("links")),
        home=_build_home_config(raw.get("home")),
        blog=_build_blog_config(raw.get("blog")),
        contact=_build_contact_config(raw.get("contact")),
        chat=_build_chat_config(raw.get("chat")),
    )


__all__ = ["load_site_config"]
