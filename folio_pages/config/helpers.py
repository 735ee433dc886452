"""Utility helpers shared by the folio configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import CategoryRule, SiteConfigError

DEFAULT_CATEGORY_RULES: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("React", ("react",), "bg-blue-500"),
    ("CSS", ("css", "tailwind"), "bg-purple-500"),
    ("JavaScript", ("javascript",), "bg-yellow-500"),
    ("Git", ("git",), "bg-orange-500"),
    ("TypeScript", ("typescript",), "bg-blue-600"),
    ("API", ("api",), "bg-green-500"),
    ("Next.js", ("next",), "bg-gray-900"),
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(
    value: object | None, *, section: str
) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    match value:
        case None:
            return {}
        case dict() as data:
            return data
        case _:
            msg = f"'{section}' configuration must be a mapping."
            raise SiteConfigError(msg)


def _resolve_path(value: object | None, *, default: str, base_dir: Path) -> Path:
    """Resolve a configured path relative to the config file directory."""
    path = Path(_optional_str(value) or default).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _normalize_keywords(value: str | list[object] | None) -> list[str]:
    """Normalize keyword definitions into a list of lowercase strings."""
    if isinstance(value, str):
        return [
            segment.strip().lower() for segment in value.split(",") if segment.strip()
        ]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip().lower()
            if text:
                normalized.append(text)
        return normalized
    return []


def _default_category_rules() -> list[CategoryRule]:
    """Return the built-in slug keyword table for listing badges."""
    return [
        CategoryRule(name=name, keywords=list(keywords), color=color)
        for name, keywords, color in DEFAULT_CATEGORY_RULES
    ]


def _parse_center(value: object | None) -> tuple[float, float] | None:
    """Parse a ``[longitude, latitude]`` pair."""
    match value:
        case [lng, lat]:
            try:
                return float(lng), float(lat)
            except (TypeError, ValueError):
                return None
        case _:
            return None


__all__ = [
    "DEFAULT_CATEGORY_RULES",
    "_default_category_rules",
    "_normalize_keywords",
    "_optional_str",
    "_parse_center",
    "_require_mapping",
    "_resolve_path",
]
