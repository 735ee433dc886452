"""Section-specific configuration builders (navigation, pages, widgets)."""

from __future__ import annotations

import typing as typ

from folio_pages.widgets import ChatWidgetConfig, MapWidgetConfig

from .helpers import (
    _default_category_rules,
    _normalize_keywords,
    _optional_str,
    _parse_center,
    _require_mapping,
)
from .models import (
    BlogConfig,
    CategoryRule,
    ContactConfig,
    HomeConfig,
    NavLinkConfig,
    ServiceCardConfig,
    SiteConfigError,
)

DEFAULT_NAV_LINKS = (
    ("home", "Home", "/"),
    ("blog", "Blog", "/blog/"),
    ("contact", "Contact", "/contact/"),
)


def _build_nav_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[NavLinkConfig]:
    """Build header navigation links, defaulting to Home/Blog/Contact."""
    match entries:
        case None:
            return [
                NavLinkConfig(key=key, label=label, href=href)
                for key, label, href in DEFAULT_NAV_LINKS
            ]
        case list() as items:
            iterable = items
        case _:
            msg = "Navigation links must be a list."
            raise SiteConfigError(msg)

    links: list[NavLinkConfig] = []
    for entry in iterable:
        match entry:
            case {"label": label, "href": href, **rest}:
                pass
            case _:
                continue
        if not label or not href:
            msg = "Navigation links require 'label' and 'href'."
            raise SiteConfigError(msg)
        key = _optional_str(rest.get("key")) or str(label).strip().lower()
        links.append(NavLinkConfig(key=key, label=str(label), href=str(href)))
    if not links:
        msg = "Navigation requires at least one link."
        raise SiteConfigError(msg)
    return links


def _build_home_config(payload: typ.Mapping[str, typ.Any] | None) -> HomeConfig:
    """Build the landing page configuration."""
    data = _require_mapping(payload, section="home")
    greeting = _optional_str(data.get("greeting"))
    intro = _optional_str(data.get("intro"))
    if not (greeting and intro):
        msg = "Home configuration requires 'greeting' and 'intro'."
        raise SiteConfigError(msg)
    base = HomeConfig(greeting=greeting, intro=intro)
    return HomeConfig(
        greeting=greeting,
        intro=intro,
        search_placeholder=_optional_str(data.get("search_placeholder"))
        or base.search_placeholder,
        about_heading=_optional_str(data.get("about_heading")) or base.about_heading,
        services=_build_services(data.get("services")),
    )


def _build_services(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[ServiceCardConfig]:
    """Build the landing page service cards."""
    cards: list[ServiceCardConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return cards
    for entry in iterable:
        match entry:
            case {"title": title, "description": description, **rest}:
                pass
            case _:
                continue
        cards.append(
            ServiceCardConfig(
                title=str(title),
                description=str(description),
                icon=_optional_str(rest.get("icon")),
                href=_optional_str(rest.get("href")),
            )
        )
    return cards


def _build_blog_config(payload: typ.Mapping[str, typ.Any] | None) -> BlogConfig:
    """Build the listing configuration, falling back to built-in categories."""
    data = _require_mapping(payload, section="blog")
    base = BlogConfig()
    categories_raw = data.get("categories")
    categories = (
        _default_category_rules()
        if categories_raw is None
        else _build_category_rules(categories_raw)
    )
    default_raw = _require_mapping(
        data.get("default_category"), section="blog.default_category"
    )
    default_category = CategoryRule(
        name=_optional_str(default_raw.get("name")) or base.default_category.name,
        keywords=[],
        color=_optional_str(default_raw.get("color")) or base.default_category.color,
    )
    return BlogConfig(
        heading=_optional_str(data.get("heading")) or base.heading,
        intro=_optional_str(data.get("intro")) or base.intro,
        empty_message=_optional_str(data.get("empty_message")) or base.empty_message,
        categories=categories,
        default_category=default_category,
    )


def _build_category_rules(entries: object) -> list[CategoryRule]:
    """Build slug keyword rules for listing badges."""
    if not isinstance(entries, list):
        msg = "Blog categories must be a list."
        raise SiteConfigError(msg)
    rules: list[CategoryRule] = []
    for entry in entries:
        match entry:
            case {"name": name, "keywords": keywords, **rest}:
                pass
            case _:
                msg = "Blog categories require 'name' and 'keywords'."
                raise SiteConfigError(msg)
        normalized = _normalize_keywords(keywords)
        if not normalized:
            msg = f"Blog category '{name}' requires at least one keyword."
            raise SiteConfigError(msg)
        rules.append(
            CategoryRule(
                name=str(name),
                keywords=normalized,
                color=_optional_str(rest.get("color")) or "bg-gray-500",
            )
        )
    return rules


def _build_contact_config(
    payload: typ.Mapping[str, typ.Any] | None,
) -> ContactConfig:
    """Build the contact page configuration including the map widget."""
    data = _require_mapping(payload, section="contact")
    base = ContactConfig()
    return ContactConfig(
        heading=_optional_str(data.get("heading")) or base.heading,
        intro=_optional_str(data.get("intro")) or base.intro,
        email=_optional_str(data.get("email")),
        phone=_optional_str(data.get("phone")),
        location=_optional_str(data.get("location")),
        map=_build_map_config(data.get("map")),
    )


def _build_map_config(payload: typ.Mapping[str, typ.Any] | None) -> MapWidgetConfig | None:
    """Build the map widget settings; ``None`` when the block is absent."""
    if payload is None:
        return None
    data = _require_mapping(payload, section="contact.map")
    base = MapWidgetConfig()
    center = base.center
    if "center" in data:
        center = _parse_center(data.get("center"))
        if center is None:
            msg = "Map 'center' must be a [longitude, latitude] pair."
            raise SiteConfigError(msg)
    try:
        zoom = int(data.get("zoom", base.zoom))
    except (TypeError, ValueError) as exc:
        msg = "Map 'zoom' must be an integer."
        raise SiteConfigError(msg) from exc
    plugins = data.get("plugins")
    return MapWidgetConfig(
        api_key=_optional_str(data.get("api_key")),
        center=center,
        zoom=zoom,
        version=_optional_str(data.get("version")) or base.version,
        plugins=tuple(str(plugin) for plugin in plugins)
        if isinstance(plugins, list)
        else base.plugins,
        script_url=_optional_str(data.get("script_url")) or base.script_url,
    )


def _build_chat_config(
    payload: typ.Mapping[str, typ.Any] | None,
) -> ChatWidgetConfig | None:
    """Build the chat widget settings; ``None`` when the block is absent."""
    if payload is None:
        return None
    data = _require_mapping(payload, section="chat")
    base = ChatWidgetConfig()
    return ChatWidgetConfig(
        token=_optional_str(data.get("token")),
        base_url=_optional_str(data.get("base_url")) or base.base_url,
        script_path=_optional_str(data.get("script_path")) or base.script_path,
    )


__all__ = [
    "_build_blog_config",
    "_build_chat_config",
    "_build_contact_config",
    "_build_home_config",
    "_build_map_config",
    "_build_nav_links",
]
