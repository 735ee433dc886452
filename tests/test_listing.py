"""Unit tests for listing summaries, category badges, search, and ordering."""

from __future__ import annotations

import datetime as dt

from folio_pages.config import CategoryRule
from folio_pages.config.helpers import _default_category_rules
from folio_pages.content import PostRecord
from folio_pages.listing import (
    PostSummary,
    filter_posts,
    resolve_category,
    sort_posts,
    summarize,
)

DEFAULT = CategoryRule(name="Tutorial", keywords=[], color="bg-gray-500")


def _summary(slug: str, published: dt.date | None = None, **kwargs: str) -> PostSummary:
    return PostSummary(
        slug=slug,
        title=kwargs.get("title", slug),
        description=kwargs.get("description", ""),
        category=kwargs.get("category", "Tutorial"),
        category_color="bg-gray-500",
        published=published,
    )


def test_slug_keywords_pick_category() -> None:
    rules = _default_category_rules()
    assert resolve_category("mastering-react-components", {}, rules, DEFAULT).name == (
        "React"
    )
    assert resolve_category("introduction-to-nextjs", {}, rules, DEFAULT).name == (
        "Next.js"
    )
    assert resolve_category("power-of-flexbox", {}, rules, DEFAULT) == DEFAULT


def test_front_matter_category_wins() -> None:
    rules = _default_category_rules()
    chosen = resolve_category("javascript-closures", {"category": "git"}, rules, DEFAULT)
    assert chosen.name == "Git"
    assert chosen.color == "bg-orange-500"


def test_unknown_front_matter_category_uses_default_colour() -> None:
    chosen = resolve_category("anything", {"category": "Career"}, [], DEFAULT)
    assert chosen.name == "Career"
    assert chosen.color == DEFAULT.color


def test_summarize_copies_card_fields() -> None:
    post = PostRecord(
        slug="advanced-git-tips",
        title="Advanced Git Tips",
        description="Rebase like a pro.",
        body="",
        image_url="cover.png",
        metadata={"tags": ["git", "cli"]},
        published=dt.date(2024, 3, 18),
    )
    summary = summarize(post, _default_category_rules(), DEFAULT)
    assert summary.category == "Git"
    assert summary.href == "/blogpost/advanced-git-tips/"
    assert summary.image_url == "cover.png"
    assert summary.tags == ("git", "cli")


def test_filter_matches_any_card_field_case_insensitively() -> None:
    posts = [
        _summary("a", title="Flexbox Layouts"),
        _summary("b", description="All about GRID"),
        _summary("c", category="CSS"),
        _summary("d", title="Unrelated"),
    ]
    assert [post.slug for post in filter_posts(posts, "grid")] == ["b"]
    assert [post.slug for post in filter_posts(posts, "css")] == ["c"]
    assert [post.slug for post in filter_posts(posts, "  ")] == ["a", "b", "c", "d"]
    assert filter_posts(posts, "missing") == []


def test_sort_puts_newest_first_and_undated_last() -> None:
    posts = [
        _summary("z-undated"),
        _summary("old", dt.date(2023, 1, 1)),
        _summary("a-undated"),
        _summary("new", dt.date(2024, 6, 1)),
    ]
    assert [post.slug for post in sort_posts(posts)] == [
        "new",
        "old",
        "a-undated",
        "z-undated",
    ]
