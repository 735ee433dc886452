"""Blog listing helpers: summaries, category badges, search, and ordering."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import CategoryRule
    from .content import PostRecord


@dc.dataclass(frozen=True, slots=True)
class PostSummary:
    """Card data for one post on the listing page."""

    slug: str
    title: str
    description: str
    category: str
    category_color: str
    image_url: str | None = None
    published: dt.date | None = None
    tags: tuple[str, ...] = ()

    @property
    def href(self) -> str:
        """Return the route of the full post."""
        return f"/blogpost/{self.slug}/"


def resolve_category(
    slug: str,
    metadata: typ.Mapping[str, typ.Any],
    rules: cabc.Sequence[CategoryRule],
    default: CategoryRule,
) -> CategoryRule:
    """Pick the badge for a post.

    A front-matter ``category`` wins; it reuses the colour of a rule with the
    same name when one exists. Otherwise the first rule with a keyword found
    in the slug applies, and ``default`` covers the rest.
    """
    explicit = metadata.get("category")
    if explicit is not None and str(explicit).strip():
        name = str(explicit).strip()
        for rule in rules:
            if rule.name.lower() == name.lower():
                return rule
        return dc.replace(default, name=name)
    lowered = slug.lower()
    for rule in rules:
        if any(keyword in lowered for keyword in rule.keywords):
            return rule
    return default


def summarize(
    post: PostRecord,
    rules: cabc.Sequence[CategoryRule],
    default: CategoryRule,
) -> PostSummary:
    """Build the listing card for ``post``."""
    category = resolve_category(post.slug, post.metadata, rules, default)
    return PostSummary(
        slug=post.slug,
        title=post.title,
        description=post.description,
        category=category.name,
        category_color=category.color,
        image_url=post.image_url,
        published=post.published,
        tags=tuple(post.tags),
    )


def filter_posts(
    posts: cabc.Iterable[PostSummary], search: str | None
) -> list[PostSummary]:
    """Return posts whose title, description, category or tags match ``search``.

    Matching is a case-insensitive substring test; a blank term keeps every
    post.
    """
    term = (search or "").strip().casefold()
    if not term:
        return list(posts)
    matches: list[PostSummary] = []
    for post in posts:
        haystack = " ".join(
            (post.title, post.description, post.category, *post.tags)
        ).casefold()
        if term in haystack:
            matches.append(post)
    return matches


def sort_posts(posts: cabc.Iterable[PostSummary]) -> list[PostSummary]:
    """Order newest first; undated posts follow, each group by slug."""
    ordered = sorted(posts, key=lambda post: post.slug)
    dated = sorted(
        (post for post in ordered if post.published is not None),
        key=lambda post: typ.cast("dt.date", post.published),
        reverse=True,
    )
    undated = [post for post in ordered if post.published is None]
    return dated + undated


__all__ = [
    "PostSummary",
    "filter_posts",
    "resolve_category",
    "sort_posts",
    "summarize",
]
