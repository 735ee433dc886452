"""Typed dataclasses describing folio site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from folio_pages.widgets import ChatWidgetConfig, MapWidgetConfig


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Navigation link rendered in the shared header."""

    key: str
    label: str
    href: str


@dc.dataclass(slots=True)
class ServiceCardConfig:
    """Service card shown in the landing page about section."""

    title: str
    description: str
    icon: str | None = None
    href: str | None = None


@dc.dataclass(slots=True)
class HomeConfig:
    """Landing page copy and search box labels."""

    greeting: str
    intro: str
    search_placeholder: str = "Search articles..."
    about_heading: str = "About Me"
    services: list[ServiceCardConfig] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class CategoryRule:
    """Map slug keywords to a listing badge."""

    name: str
    keywords: list[str]
    color: str = "bg-gray-500"


@dc.dataclass(slots=True)
class BlogConfig:
    """Blog listing headings and category badge rules."""

    heading: str = "Latest Articles"
    intro: str = ""
    empty_message: str = "No articles match your search."
    categories: list[CategoryRule] = dc.field(default_factory=list)
    default_category: CategoryRule = dc.field(
        default_factory=lambda: CategoryRule(name="Tutorial", keywords=[])
    )


@dc.dataclass(slots=True)
class ContactConfig:
    """Contact page details and the optional map embed."""

    heading: str = "Contact"
    intro: str = ""
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    map: MapWidgetConfig | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site definition sourced from YAML config."""

    name: str
    description: str
    content_dir: Path
    output_dir: Path
    nav_links: list[NavLinkConfig]
    home: HomeConfig
    language: str = "en"
    pygments_style: str = "monokai"
    blog: BlogConfig = dc.field(default_factory=BlogConfig)
    contact: ContactConfig = dc.field(default_factory=ContactConfig)
    chat: ChatWidgetConfig | None = None
    footer_note: str = ""


__all__ = [
    "BlogConfig",
    "CategoryRule",
    "ContactConfig",
    "HomeConfig",
    "NavLinkConfig",
    "ServiceCardConfig",
    "SiteConfig",
    "SiteConfigError",
]
